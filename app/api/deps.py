# app/api/deps.py
from fastapi import Request

from app.services.cart_store import CartStore
from app.services.product_catalog import ProductCatalog


#serwisy tworzone w create_app i trzymane w app.state
def get_catalog(request: Request) -> ProductCatalog:
    return request.app.state.catalog


def get_cart_store(request: Request) -> CartStore:
    return request.app.state.cart_store
