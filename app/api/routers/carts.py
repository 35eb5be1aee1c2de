#app/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_cart_store
from app.domain.schemas import (
    CartItemOut,
    CartOut,
    ErrorOut,
    MessageOut,
    QuantityIn,
)
from app.services.cart_store import CartStore

router = APIRouter(prefix="/api/carts", tags=["carts"])


@router.post("", response_model=CartOut)
def create_cart(store: CartStore = Depends(get_cart_store)):
    return store.create()


@router.get(
    "/{cid}",
    response_model=List[CartItemOut],
    responses={404: {"model": ErrorOut}},
)
def get_cart_items(cid: int, store: CartStore = Depends(get_cart_store)):
    cart = store.get_by_id(cid)
    if cart is None:
        return JSONResponse(status_code=404, content={"error": "Cart not found"})
    return cart.get("items", [])


@router.post("/{cid}/product/{pid}", response_model=MessageOut)
def add_product_to_cart(
    cid: int,
    pid: int,
    payload: QuantityIn | None = Body(None),
    store: CartStore = Depends(get_cart_store),
):
    # brak body / brak quantity / 0 -> 1
    quantity = (payload.quantity if payload else None) or 1
    store.add_item(cid, pid, quantity)
    return {"message": "Product added to cart successfully"}
