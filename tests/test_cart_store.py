"""
Tests for CartStore
"""
import logging

from app.domain.id_policy import IdPolicy
from app.services.cart_store import CartStore

from conftest import read_json


class TestCreate:
    def test_create_empty_cart(self, cart_store, carts_path):
        cart = cart_store.create()

        assert cart == {"id": 1, "items": []}
        assert read_json(carts_path) == [cart]

    def test_sequential_ids(self, cart_store):
        assert [cart_store.create()["id"] for _ in range(3)] == [1, 2, 3]


class TestGetById:
    def test_found(self, cart_store):
        cart_store.create()

        assert cart_store.get_by_id(1) == {"id": 1, "items": []}

    def test_not_found(self, cart_store, caplog):
        with caplog.at_level(logging.WARNING):
            assert cart_store.get_by_id(9) is None

        assert "Cart 9 not found" in caplog.text


class TestAddItem:
    def test_append_new_item(self, cart_store, carts_path):
        cart_store.create()

        cart = cart_store.add_item(1, 5, 3)

        assert cart["items"] == [{"productId": 5, "quantity": 3}]
        assert read_json(carts_path) == [{"id": 1, "items": [{"productId": 5, "quantity": 3}]}]

    def test_default_quantity_is_one(self, cart_store):
        cart_store.create()

        cart = cart_store.add_item(1, 5)

        assert cart["items"] == [{"productId": 5, "quantity": 1}]

    def test_same_product_accumulates(self, cart_store, carts_path):
        cart_store.create()

        cart_store.add_item(1, 7, 2)
        cart_store.add_item(1, 7, 3)

        assert read_json(carts_path)[0]["items"] == [{"productId": 7, "quantity": 5}]

    def test_items_keep_insertion_order(self, cart_store):
        cart_store.create()
        cart_store.add_item(1, 3)
        cart_store.add_item(1, 1)
        cart_store.add_item(1, 3)

        assert [i["productId"] for i in cart_store.get_by_id(1)["items"]] == [3, 1]

    def test_unknown_cart_is_noop(self, cart_store, carts_path):
        cart_store.create()
        before = read_json(carts_path)

        assert cart_store.add_item(2, 5, 1) is None
        assert read_json(carts_path) == before

    def test_only_target_cart_changes(self, cart_store):
        cart_store.create()
        cart_store.create()

        cart_store.add_item(2, 4, 1)

        assert cart_store.get_by_id(1)["items"] == []
        assert cart_store.get_by_id(2)["items"] == [{"productId": 4, "quantity": 1}]


class TestStorage:
    def test_round_trip(self, cart_store, carts_path):
        cart_store.create()
        cart_store.create()
        cart_store.add_item(1, 5, 2)
        cart_store.add_item(2, 6, 1)
        cart_store.persist()

        fresh = CartStore(carts_path)

        assert fresh.carts == cart_store.carts

    def test_count_policy_after_external_removal(self, carts_path):
        carts_path.write_text('[{"id":2,"items":[]},{"id":3,"items":[]}]', encoding="utf-8")

        assert CartStore(carts_path, id_policy=IdPolicy.COUNT).create()["id"] == 3
        assert CartStore(carts_path, id_policy=IdPolicy.MAX).next_id == 4

    def test_legacy_products_key_is_read_as_items(self, carts_path):
        carts_path.write_text('[{"id":1,"products":[{"productId":4,"quantity":2}]}]', encoding="utf-8")

        store = CartStore(carts_path)
        store.add_item(1, 4, 1)

        assert store.get_by_id(1) == {"id": 1, "items": [{"productId": 4, "quantity": 3}]}
        assert read_json(carts_path) == [{"id": 1, "items": [{"productId": 4, "quantity": 3}]}]
