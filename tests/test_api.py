"""Tests for the JSON API through the Flask test client."""

import json

import pytest


def _add(client, product_id):
    return client.post("/api/cart", json={"product_id": product_id})


class TestCatalogEndpoints:
    def test_list_products(self, client):
        response = client.get("/api/products?page_size=2")

        assert response.status_code == 200
        body = response.get_json()
        assert body["total"] == 4
        assert len(body["items"]) == 2

    def test_search_and_stock_filter(self, client):
        body = client.get("/api/products?q=root&in_stock=1").get_json()

        assert body["items"] == []

    def test_get_product(self, client):
        response = client.get("/api/products/moringa")

        assert response.status_code == 200
        assert response.get_json()["price"] == "24.90"

    def test_get_unknown_product(self, client):
        response = client.get("/api/products/unknown")

        assert response.status_code == 404
        assert "error" in response.get_json()


class TestImpactEndpoints:
    def test_impact_defaults(self, client):
        body = client.get("/api/impact").get_json()

        assert body["families_supported"] == 2847

    def test_supply_chain(self, client):
        assert client.get("/api/supply-chain").get_json() == []
        assert client.get("/api/supply-chain/missing").status_code == 404


class TestCartEndpoints:
    def test_empty_cart(self, client):
        body = client.get("/api/cart").get_json()

        assert body["items"] == []
        assert body["total_items"] == 0
        assert body["total_price"] == "0.00"
        assert body["currency"] == "EUR"

    def test_add_merges_and_persists_across_requests(self, client):
        _add(client, "chaga")
        _add(client, "reishi")
        _add(client, "chaga")

        body = client.get("/api/cart").get_json()

        assert [(i["product"]["id"], i["quantity"]) for i in body["items"]] == [("chaga", 2), ("reishi", 1)]
        assert body["total_items"] == 3
        assert body["total_price"] == "25.50"

    def test_add_requires_product_id(self, client):
        response = client.post("/api/cart", json={})

        assert response.status_code == 400

    @pytest.mark.parametrize("body", [["chaga"], 7, "chaga", None])
    def test_add_rejects_non_object_body(self, client, body):
        response = client.post("/api/cart", json=body)

        assert response.status_code == 400
        assert "error" in response.get_json()

    @pytest.mark.parametrize("body", [[3], 3, "3"])
    def test_update_rejects_non_object_body(self, client, body):
        _add(client, "chaga")
        response = client.patch("/api/cart/chaga", json=body)

        assert response.status_code == 400
        assert "error" in response.get_json()
        assert client.get("/api/cart").get_json()["total_items"] == 1

    def test_add_unknown_product(self, client):
        response = _add(client, "nope")

        assert response.status_code == 404
        assert client.get("/api/cart").get_json()["items"] == []

    def test_update_quantity(self, client):
        _add(client, "chaga")
        response = client.patch("/api/cart/chaga", json={"quantity": 3})

        assert response.status_code == 200
        assert response.get_json()["total_items"] == 3

    def test_update_to_zero_removes_line(self, client):
        _add(client, "chaga")
        _add(client, "reishi")
        body = client.patch("/api/cart/chaga", json={"quantity": 0}).get_json()

        assert [i["product"]["id"] for i in body["items"]] == ["reishi"]

    def test_update_rejects_non_integer(self, client):
        _add(client, "chaga")

        assert client.patch("/api/cart/chaga", json={"quantity": "2"}).status_code == 400
        assert client.patch("/api/cart/chaga", json={"quantity": 1.5}).status_code == 400
        assert client.patch("/api/cart/chaga", json={}).status_code == 400

    def test_remove_is_idempotent(self, client):
        _add(client, "chaga")

        first = client.delete("/api/cart/chaga")
        second = client.delete("/api/cart/chaga")

        assert first.status_code == second.status_code == 200
        assert second.get_json()["items"] == []

    def test_clear(self, client):
        _add(client, "chaga")
        _add(client, "moringa")
        body = client.delete("/api/cart").get_json()

        assert body["items"] == []
        assert body["total_price"] == "0.00"

    def test_cart_is_scoped_to_session(self, app, client):
        _add(client, "chaga")
        other = app.test_client()

        assert other.get("/api/cart").get_json()["total_items"] == 0

    def test_corrupt_session_value_resets_cart(self, client):
        with client.session_transaction() as sess:
            sess["cart-storage"] = "{broken"

        body = client.get("/api/cart").get_json()

        assert body["items"] == []

    def test_session_holds_serialized_cart(self, client):
        _add(client, "reishi")

        with client.session_transaction() as sess:
            stored = json.loads(sess["cart-storage"])

        assert stored["version"] == 1
        assert stored["state"]["items"][0]["product"]["id"] == "reishi"
