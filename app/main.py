# app/main.py
import uvicorn

from app.api import create_app
from app.utils.logging import get_logger
from app.utils.settings import HOST, PORT

logger = get_logger(__name__)

app = create_app()

if __name__ == "__main__":
    logger.info(f"Server listening on port {PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
