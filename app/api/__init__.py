# app/api/__init__.py
from pathlib import Path

from fastapi import FastAPI

from app.api.routers import carts, health, products
from app.domain.id_policy import IdPolicy
from app.services.cart_store import CartStore
from app.services.product_catalog import ProductCatalog
from app.utils.logging import get_logger
from app.utils.settings import CARTS_FILE, ID_POLICY, PRODUCTS_FILE

logger = get_logger(__name__)


def create_app(
    products_file: str | Path | None = None,
    carts_file: str | Path | None = None,
    id_policy: IdPolicy | str | None = None,
) -> FastAPI:
    app = FastAPI(
        title="Product & Cart Service",
        version="1.0.0",
    )

    policy = IdPolicy(id_policy or ID_POLICY)
    products_path = products_file or PRODUCTS_FILE
    carts_path = carts_file or CARTS_FILE

    logger.info(f"Products stored in {products_path}, carts in {carts_path} (id policy: {policy.value})")

    #jedna instancja na aplikacje, wstrzykiwana przez Depends
    app.state.catalog = ProductCatalog(products_path, id_policy=policy)
    app.state.cart_store = CartStore(carts_path, id_policy=policy)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(carts.router)

    return app
