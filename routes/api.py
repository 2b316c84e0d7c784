"""JSON API for the storefront: catalog, impact figures and the session cart."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request, session

from storefront.cart import CartStore, SessionStorage
from storefront.utils.validators import parse_quantity, require_text


api_bp = Blueprint("storefront_api", __name__, url_prefix="/api")


def _components() -> Dict[str, Any]:
    return current_app.extensions["storefront_components"]


def _config():
    return current_app.config["STOREFRONT_CONFIG"]


def _cart() -> CartStore:
    return CartStore(SessionStorage(session), storage_key=_config().cart_storage_key)


def _cart_payload(cart: CartStore) -> Dict[str, Any]:
    payload = cart.to_dict()
    payload["currency"] = _config().currency
    return payload


# -- catalog -----------------------------------------------------------------


@api_bp.get("/products")
def list_products():
    catalog = _components()["catalog"]
    result = catalog.list_products(
        query=request.args.get("q"),
        category=request.args.get("category"),
        in_stock_only=request.args.get("in_stock") in {"1", "true"},
        page=request.args.get("page", 1),
        page_size=request.args.get("page_size", 12),
    )
    return jsonify(result)


@api_bp.get("/products/<product_id>")
def get_product(product_id: str):
    product = _components()["catalog"].get_product(product_id)
    if product is None:
        return jsonify({"error": "Product not found"}), 404
    return jsonify(product)


# -- impact ------------------------------------------------------------------


@api_bp.get("/supply-chain")
def list_supply_chain():
    return jsonify(_components()["impact"].list_supply_chain_steps())


@api_bp.get("/supply-chain/<step_id>")
def get_supply_chain_step(step_id: str):
    step = _components()["impact"].get_supply_chain_step(step_id)
    if step is None:
        return jsonify({"error": "Supply chain step not found"}), 404
    return jsonify(step)


@api_bp.get("/impact")
def get_impact():
    return jsonify(_components()["impact"].get_impact_metrics())


# -- cart --------------------------------------------------------------------


@api_bp.get("/cart")
def get_cart():
    return jsonify(_cart_payload(_cart()))


@api_bp.post("/cart")
def add_to_cart():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "request body must be a JSON object"}), 400
    try:
        product_id = require_text(payload.get("product_id"), "product_id")
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    product = _components()["catalog"].get_product_snapshot(product_id)
    if product is None:
        return jsonify({"error": "Product not found"}), 404

    cart = _cart()
    cart.add_item(product)
    return jsonify(_cart_payload(cart))


@api_bp.patch("/cart/<product_id>")
def update_cart_item(product_id: str):
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "request body must be a JSON object"}), 400
    try:
        quantity = parse_quantity(payload.get("quantity"))
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    cart = _cart()
    cart.update_quantity(product_id, quantity)
    return jsonify(_cart_payload(cart))


@api_bp.delete("/cart/<product_id>")
def remove_cart_item(product_id: str):
    cart = _cart()
    cart.remove_item(product_id)
    return jsonify(_cart_payload(cart))


@api_bp.delete("/cart")
def clear_cart():
    cart = _cart()
    cart.clear_cart()
    return jsonify(_cart_payload(cart))
