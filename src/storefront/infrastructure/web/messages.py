"""User-facing message catalogues.

Vietnamese is the shop's primary language; English is offered to
clients that ask for it via ``Accept-Language``.  Each error code maps
to a short title and a message template formatted with the exception's
``params``.
"""

from __future__ import annotations

SUPPORTED_LOCALES = ("vi", "en")
FALLBACK_LOCALE = "vi"

MESSAGES: dict[str, dict[str, tuple[str, str]]] = {
    "vi": {
        "validation_error": (
            "Dữ liệu không hợp lệ",
            "Vui lòng kiểm tra lại thông tin đặt hàng.",
        ),
        "empty_cart": (
            "Giỏ hàng trống",
            "Vui lòng thêm sản phẩm vào giỏ hàng trước khi đặt hàng.",
        ),
        "products_not_found": (
            "Sản phẩm không tồn tại",
            "Sản phẩm với ID {product_ids} không còn tồn tại trong hệ thống. "
            "Vui lòng làm mới giỏ hàng và thử lại.",
        ),
        "product_unavailable": (
            "Sản phẩm không khả dụng",
            'Sản phẩm "{product_name}" hiện không còn được bán. Vui lòng xóa khỏi giỏ hàng.',
        ),
        "insufficient_stock": (
            "Không đủ hàng trong kho",
            'Sản phẩm "{product_name}" chỉ còn {available} sản phẩm trong kho.',
        ),
        "integrity_violation": (
            "Lỗi dữ liệu sản phẩm",
            "Một số sản phẩm trong giỏ hàng không còn tồn tại. "
            "Vui lòng làm mới trang và thử lại.",
        ),
        "duplicate_order_number": (
            "Lỗi tạo đơn hàng",
            "Đã xảy ra lỗi khi tạo mã đơn hàng. Vui lòng thử lại.",
        ),
        "not_found": (
            "Không tìm thấy",
            "Không tìm thấy đơn hàng.",
        ),
        "persistence_failure": (
            "Lỗi tạo đơn hàng",
            "Đã xảy ra lỗi không mong muốn. Vui lòng thử lại sau.",
        ),
        "domain_error": (
            "Yêu cầu không hợp lệ",
            "Không thể xử lý yêu cầu.",
        ),
    },
    "en": {
        "validation_error": (
            "Invalid data",
            "Please check your order details.",
        ),
        "empty_cart": (
            "Cart is empty",
            "Please add products to your cart before placing an order.",
        ),
        "products_not_found": (
            "Product not found",
            "Products with ID {product_ids} no longer exist. "
            "Please refresh your cart and try again.",
        ),
        "product_unavailable": (
            "Product unavailable",
            'Product "{product_name}" is no longer sold. Please remove it from your cart.',
        ),
        "insufficient_stock": (
            "Not enough stock",
            'Only {available} of "{product_name}" left in stock.',
        ),
        "integrity_violation": (
            "Product data error",
            "Some products in your cart no longer exist. "
            "Please refresh the page and try again.",
        ),
        "duplicate_order_number": (
            "Order creation failed",
            "Something went wrong while creating your order number. Please try again.",
        ),
        "not_found": (
            "Not found",
            "The order could not be found.",
        ),
        "persistence_failure": (
            "Order creation failed",
            "An unexpected error occurred. Please try again later.",
        ),
        "domain_error": (
            "Invalid request",
            "The request could not be processed.",
        ),
    },
}

ORDER_CREATED = {
    "vi": "Đặt hàng thành công",
    "en": "Order created successfully",
}


def render(code: str, params: dict, locale: str) -> tuple[str, str]:
    """Return ``(title, message)`` for an error code in *locale*."""
    catalogue = MESSAGES.get(locale, MESSAGES[FALLBACK_LOCALE])
    title, template = catalogue.get(code, catalogue["domain_error"])
    return title, template.format(**params)


def order_created(locale: str) -> str:
    return ORDER_CREATED.get(locale, ORDER_CREATED[FALLBACK_LOCALE])
