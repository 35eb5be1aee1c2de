# app/api/routers/products.py
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response
from fastapi.responses import JSONResponse

from app.api.deps import get_catalog
from app.domain.schemas import ErrorOut, MessageOut
from app.services.product_catalog import ProductCatalog

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
def list_products(catalog: ProductCatalog = Depends(get_catalog)) -> List[Dict[str, Any]]:
    return catalog.list()


@router.get("/{pid}", responses={404: {"model": ErrorOut}})
def get_product(pid: int, catalog: ProductCatalog = Depends(get_catalog)):
    product = catalog.get_by_id(pid)
    if product is None:
        return JSONResponse(status_code=404, content={"error": "Product not found"})
    return product


@router.post("")
def create_product(
    payload: Dict[str, Any] = Body(...),
    catalog: ProductCatalog = Depends(get_catalog),
):
    """
    Dodaje produkt. Przy powtorzonym `code` nic nie zapisuje
    i zwraca 200 z pustym body.
    """
    product = catalog.add(payload)
    if product is None:
        return Response(status_code=200)
    return product


@router.put("/{pid}", response_model=MessageOut)
def update_product(
    pid: int,
    payload: Dict[str, Any] = Body(...),
    catalog: ProductCatalog = Depends(get_catalog),
):
    catalog.update(pid, payload)
    return {"message": "Product updated successfully"}


@router.delete("/{pid}", response_model=MessageOut)
def delete_product(pid: int, catalog: ProductCatalog = Depends(get_catalog)):
    catalog.delete(pid)
    return {"message": "Product deleted successfully"}
