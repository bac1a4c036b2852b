"""Build the payloads sent to the submission webhooks"""

import re
from datetime import datetime, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo

from ..models.cart import Cart
from ..models.checkout import (
    CheckoutRequest,
    ContactRequest,
    InquiryRequest,
    OrderPayload,
    PaymentMethod,
)
from ..models.product import Product

ORDER_TIMESTAMP_FORMAT = "%m/%d/%Y, %H:%M:%S"


def mask_card_number(card_number: Optional[str]) -> str:
    """Keep only the last four digits"""
    digits = re.sub(r"\D", "", card_number or "")
    return f"****-****-****-{digits[-4:]}"


def summarize_items(cart: Cart) -> str:
    return ", ".join(f"{item.name} (Qty: {item.quantity})" for item in cart.items)


def build_order_payload(
    request: CheckoutRequest,
    cart: Cart,
    tz_name: str,
    now: Optional[datetime] = None,
) -> OrderPayload:
    """Build the order row from the checkout form and the cart"""
    now = now or datetime.now(timezone.utc)
    customer = request.customer

    if request.payment_method == PaymentMethod.CARD:
        card_number = mask_card_number(request.card_number)
    else:
        card_number = "QR Code Payment"

    return OrderPayload(
        timestamp=now.astimezone(ZoneInfo(tz_name)).strftime(ORDER_TIMESTAMP_FORMAT),
        order_id=f"ORDER-{int(now.timestamp() * 1000)}",
        first_name=customer.first_name,
        last_name=customer.last_name,
        company=customer.company,
        country=customer.country,
        address=customer.address,
        city=customer.city,
        state=customer.state,
        postcode=customer.postcode,
        phone=customer.phone,
        email=customer.email,
        notes=customer.notes,
        items=summarize_items(cart),
        total=cart.total,
        payment_method=request.payment_method,
        card_number=card_number,
    )


def build_contact_payload(request: ContactRequest, now: Optional[datetime] = None) -> dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    return {
        "timestamp": now.isoformat(),
        "name": request.name,
        "email": request.email,
        "message": request.message,
    }


def build_inquiry_payload(
    request: InquiryRequest,
    product: Product,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    return {
        "timestamp": now.isoformat(),
        "productTitle": product.name,
        "productId": product.id,
        "name": request.name,
        "email": request.email,
        "location": request.location,
        "message": request.message,
        "newsletter": "Yes" if request.newsletter else "No",
    }
