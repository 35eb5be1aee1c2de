# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

PRODUCTS_FILE = os.getenv("PRODUCTS_FILE", "./products.json")
CARTS_FILE = os.getenv("CARTS_FILE", "./carrito.json")

# "count" -> liczba rekordow + 1, "max" -> najwyzsze id + 1
ID_POLICY = os.getenv("ID_POLICY", "count")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
