# app/services/cart_store.py
from pathlib import Path
from typing import Any, Dict, List

from app.domain.id_policy import IdPolicy
from app.repos.json_file_repo import JsonFileRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartStore:
    """
    Koszyki w pliku JSON: {id, items: [{productId, quantity}]}.
    Ta sama polityka co ProductCatalog: odczyt przed operacja, zapis po zmianie.
    productId nie jest sprawdzany w katalogu produktow.
    """

    def __init__(self, path: str | Path, id_policy: IdPolicy = IdPolicy.COUNT):
        self.repo = JsonFileRepo(path)
        self.id_policy = IdPolicy(id_policy)
        self.carts: List[Dict[str, Any]] = []
        self.next_id = 1
        self.load()

    def load(self) -> None:
        records = self.repo.load()
        if records is None:
            return
        for cart in records:
            # starsze pliki trzymaja pozycje pod kluczem "products"
            if "items" not in cart:
                cart["items"] = cart.pop("products", [])
        self.carts = records
        self.next_id = self.id_policy.next_id(records)

    def persist(self) -> bool:
        return self.repo.save(self.carts)

    def get_by_id(self, cart_id: int) -> Dict[str, Any] | None:
        self.load()
        cart = next((c for c in self.carts if c.get("id") == cart_id), None)
        if cart is None:
            logger.warning(f"Cart {cart_id} not found")
        return cart

    def create(self) -> Dict[str, Any]:
        self.load()

        cart = {"id": self.next_id, "items": []}
        self.next_id += 1

        self.carts.append(cart)
        self.persist()

        logger.info(f"Cart {cart['id']} created")
        return cart

    def add_item(self, cart_id: int, product_id: int, quantity: int = 1) -> Dict[str, Any] | None:
        cart = self.get_by_id(cart_id)
        if cart is None:
            return None

        items = cart.setdefault("items", [])
        existing = next((i for i in items if i.get("productId") == product_id), None)

        if existing is not None:
            existing["quantity"] += quantity
        else:
            items.append({"productId": product_id, "quantity": quantity})

        self.persist()

        logger.info(f"Product {product_id} (x{quantity}) added to cart {cart_id}")
        return cart
