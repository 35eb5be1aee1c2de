# app/services/product_catalog.py
from pathlib import Path
from typing import Any, Dict, List

from app.domain.id_policy import IdPolicy
from app.repos.json_file_repo import JsonFileRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductCatalog:
    """
    Katalog produktow trzymany w pliku JSON.

    Kazda operacja najpierw czyta plik od nowa (pamiec to tylko cache),
    komendy zapisuja cala liste z powrotem (write-through).
    Bledy (duplikat kodu, brak produktu, I/O) sa logowane, operacja jest no-op.
    """

    def __init__(self, path: str | Path, id_policy: IdPolicy = IdPolicy.COUNT):
        self.repo = JsonFileRepo(path)
        self.id_policy = IdPolicy(id_policy)
        self.products: List[Dict[str, Any]] = []
        self.next_id = 1
        self.load()

    def load(self) -> None:
        records = self.repo.load()
        if records is None:
            #zostaje ostatni poprawnie wczytany stan
            return
        self.products = records
        self.next_id = self.id_policy.next_id(records)

    def persist(self) -> bool:
        return self.repo.save(self.products)

    def _find_index(self, product_id: int) -> int | None:
        for index, product in enumerate(self.products):
            if product.get("id") == product_id:
                return index
        return None

    #query
    def list(self) -> List[Dict[str, Any]]:
        self.load()
        return self.products

    def get_by_id(self, product_id: int) -> Dict[str, Any] | None:
        self.load()
        index = self._find_index(product_id)
        if index is None:
            logger.warning(f"Product {product_id} not found")
            return None
        return self.products[index]

    #commands
    def add(self, data: Dict[str, Any]) -> Dict[str, Any] | None:
        self.load()

        code = data.get("code")
        if any(p.get("code") == code for p in self.products):
            logger.warning(f"Product with code {code} already exists")
            return None

        fields = {k: v for k, v in data.items() if k != "id"}
        product = {"id": self.next_id, **fields}
        self.next_id += 1

        self.products.append(product)
        self.persist()

        logger.info(f"Product {product['id']} created with code {code}")
        return product

    def update(self, product_id: int, data: Dict[str, Any]) -> Dict[str, Any] | None:
        self.load()
        index = self._find_index(product_id)
        if index is None:
            logger.warning(f"Product {product_id} not found, nothing to update")
            return None

        # nowe pola zastepuja stare w calosci, id zostaje
        fields = {k: v for k, v in data.items() if k != "id"}
        product = {"id": product_id, **fields}
        self.products[index] = product
        self.persist()

        logger.info(f"Product {product_id} updated")
        return product

    def delete(self, product_id: int) -> bool:
        self.load()
        index = self._find_index(product_id)
        if index is None:
            logger.warning(f"Product {product_id} not found, nothing to delete")
            return False

        del self.products[index]
        self.persist()

        logger.info(f"Product {product_id} deleted")
        return True
