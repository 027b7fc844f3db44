"""Flask application exposing the order endpoints.

    POST /api/orders                  place an order
    GET  /api/orders/<order_number>   one order with its items
    GET  /api/orders?email=...        a customer's orders, newest first
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from flask import Blueprint, Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from storefront.application.dto import OrderDTO
from storefront.application.list_customer_orders import ListCustomerOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.schemas import parse_lookup_email, parse_place_order
from storefront.application.show_order import ShowOrderHandler
from storefront.config import Settings
from storefront.domain.exceptions import DomainException
from storefront.domain.repository.unit_of_work import Store
from storefront.infrastructure import bootstrap
from storefront.infrastructure.web import messages
from storefront.infrastructure.web.errors import error_body, unexpected_error_body
from storefront.logging_config import configure_logging

orders = Blueprint("orders", __name__, url_prefix="/api/orders")


@dataclass(frozen=True)
class Services:
    settings: Settings
    place_order: PlaceOrderHandler
    show_order: ShowOrderHandler
    list_orders: ListCustomerOrdersHandler


def create_app(settings: Settings | None = None, store: Store | None = None) -> Flask:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    store = store or bootstrap.open_store(settings)

    app = Flask(__name__)
    app.json.ensure_ascii = False  # type: ignore[attr-defined]
    app.extensions["storefront"] = Services(
        settings=settings,
        place_order=bootstrap.place_order_handler(store, settings),
        show_order=bootstrap.show_order_handler(store),
        list_orders=bootstrap.list_customer_orders_handler(store),
    )
    app.register_blueprint(orders)
    app.register_error_handler(DomainException, _domain_error)
    app.register_error_handler(Exception, _unexpected_error)
    return app


def _services() -> Services:
    return current_app.extensions["storefront"]


def _locale() -> str:
    settings = _services().settings
    return request.accept_languages.best_match(
        messages.SUPPORTED_LOCALES, default=settings.default_locale
    )


# --- Routes -------------------------------------------------------------------


@orders.post("")
def place_order():
    command = parse_place_order(request.get_json(silent=True))
    dto = _services().place_order.handle(command)
    body = {"message": messages.order_created(_locale()), "order": order_json(dto)}
    return jsonify(body), 201


@orders.get("/<order_number>")
def show_order(order_number: str):
    dto = _services().show_order.handle(order_number)
    return jsonify(order_json(dto))


@orders.get("")
def list_orders():
    email = parse_lookup_email(request.args.get("email"))
    dtos = _services().list_orders.handle(email)
    return jsonify([order_json(dto) for dto in dtos])


# --- Error handlers -----------------------------------------------------------


def _domain_error(exc: DomainException):
    show_detail = not _services().settings.is_production
    body, status = error_body(exc, _locale(), show_detail)
    return jsonify(body), status


def _unexpected_error(exc: Exception):
    if isinstance(exc, HTTPException):
        return exc
    show_detail = not _services().settings.is_production
    body, status = unexpected_error_body(exc, _locale(), show_detail)
    return jsonify(body), status


# --- Serialization ------------------------------------------------------------


def order_json(dto: OrderDTO) -> dict:
    return {
        "id": dto.id,
        "order_number": dto.order_number,
        "customer_name": dto.customer_name,
        "customer_email": dto.customer_email,
        "customer_phone": dto.customer_phone,
        "shipping_address": dto.shipping_address,
        "total_amount": _number(dto.total_amount),
        "payment_method": dto.payment_method,
        "shipping_method": dto.shipping_method,
        "notes": dto.notes,
        "status": dto.status,
        "created_at": dto.created_at.isoformat(),
        "items": [
            {
                "id": item.id,
                "product_id": item.product_id,
                "quantity": item.quantity,
                "price_at_purchase": _number(item.price_at_purchase),
                "product_name": item.product_name,
                "product_image": item.product_image,
            }
            for item in dto.items
        ],
    }


def _number(value: Decimal) -> int | float:
    return int(value) if value == value.to_integral_value() else float(value)
