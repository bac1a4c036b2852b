"""Checkout API routes for the print store"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..core.config import Settings
from ..core.dependencies import get_app_settings, get_cart_db, get_order_db, get_relay
from ..database.carts import CartDatabase
from ..database.orders import OrderDatabase
from ..models.cart import ClearCart
from ..models.checkout import CheckoutRequest, CheckoutResponse, Order
from ..services.relay import WebhookRelay
from ..services.submissions import build_order_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])

SUCCESS_MESSAGE = "Thank you for your purchase. You will receive a confirmation email shortly."


@router.post("", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest,
    settings: Settings = Depends(get_app_settings),
    cart_db: CartDatabase = Depends(get_cart_db),
    order_db: OrderDatabase = Depends(get_order_db),
    relay: WebhookRelay = Depends(get_relay),
):
    """
    Submit an order to the orders sheet.

    When the webhook does not confirm delivery, the order still succeeds if
    mask_order_failures is set (the storefront's historical behaviour);
    otherwise the cart is kept and 502 is returned. The response always
    reports the real delivery outcome in ``delivered``.
    """
    cart = cart_db.get_cart(request.cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")

    if not cart.items:
        raise HTTPException(status_code=400, detail="Cart is empty")

    payload = build_order_payload(request, cart, settings.order_timezone)
    payload = payload.model_copy(
        update={"order_id": order_db.reserve_order_id(payload.order_id)}
    )
    result = await relay.submit(
        settings.order_webhook_url,
        payload.model_dump(by_alias=True, mode="json"),
    )

    if not result.delivered:
        logger.error(f"Order {payload.order_id} not delivered: {result.error}")
        if not settings.mask_order_failures:
            raise HTTPException(
                status_code=502,
                detail=f"Failed to submit order: {result.error}",
            )

    order = order_db.record_order(payload, delivered=result.delivered)
    cart_db.dispatch(request.cart_id, ClearCart())

    logger.info(
        f"Order {order.order_id} placed: ${payload.total} - "
        f"{'delivered' if result.delivered else 'not delivered'}"
    )

    return CheckoutResponse(
        success=True,
        delivered=result.delivered,
        order=order,
        message=SUCCESS_MESSAGE,
    )


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(
    order_id: str,
    order_db: OrderDatabase = Depends(get_order_db),
):
    """Get order details"""
    order = order_db.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.get("/orders", response_model=list[Order])
async def list_orders(
    limit: int = 50,
    order_db: OrderDatabase = Depends(get_order_db),
):
    """List recent orders"""
    return order_db.list_orders(limit=limit)
