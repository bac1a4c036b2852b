"""Order storage for the print store"""

from datetime import datetime, timezone
from typing import Optional

from ..models.checkout import Order, OrderPayload


class OrderDatabase:
    """In-memory record of orders submitted through checkout"""

    def __init__(self):
        self.orders: dict[str, Order] = {}
        self._reserved: set[str] = set()

    def reserve_order_id(self, order_id: str) -> str:
        """Claim an order ID, suffixing it (-2, -3, ...) when already taken"""
        candidate = order_id
        n = 1
        while candidate in self._reserved:
            n += 1
            candidate = f"{order_id}-{n}"
        self._reserved.add(candidate)
        return candidate

    def record_order(self, payload: OrderPayload, delivered: bool) -> Order:
        """Record an order and whether the webhook confirmed it"""
        if payload.order_id in self.orders:
            payload = payload.model_copy(
                update={"order_id": self.reserve_order_id(payload.order_id)}
            )
        self._reserved.add(payload.order_id)

        order = Order(
            order_id=payload.order_id,
            payload=payload,
            delivered=delivered,
            created_at=datetime.now(timezone.utc),
        )
        self.orders[order.order_id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def list_orders(self, limit: int = 50) -> list[Order]:
        """List recent orders"""
        orders = list(self.orders.values())
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders[:limit]
