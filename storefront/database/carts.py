"""Cart storage for the print store"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from ..models.cart import Cart, CartAction
from ..services.cart_reducer import reduce_cart


class CartDatabase:
    """In-memory cart storage; carts live until checkout or restart"""

    def __init__(self):
        self.carts: dict[str, Cart] = {}

    def create_cart(self) -> Cart:
        """Create a new cart"""
        now = datetime.now(timezone.utc)
        cart = Cart(
            cart_id=str(uuid.uuid4()),
            items=[],
            created_at=now,
            updated_at=now,
        )
        self.carts[cart.cart_id] = cart
        return cart

    def get_cart(self, cart_id: str) -> Optional[Cart]:
        """Get a cart by ID"""
        return self.carts.get(cart_id)

    def dispatch(self, cart_id: str, action: CartAction) -> Optional[Cart]:
        """Apply a cart action; None if the cart does not exist"""
        cart = self.get_cart(cart_id)
        if not cart:
            return None

        updated = reduce_cart(cart, action)
        self.carts[cart_id] = updated
        return updated

    def delete_cart(self, cart_id: str) -> bool:
        """Delete a cart"""
        if cart_id in self.carts:
            del self.carts[cart_id]
            return True
        return False
