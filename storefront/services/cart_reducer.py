"""Cart state transitions"""

from datetime import datetime, timezone

from ..models.cart import (
    AddItem,
    Cart,
    CartAction,
    CartItem,
    ClearCart,
    RemoveItem,
    UpdateQuantity,
)


def cart_total(items: list[CartItem]) -> float:
    """Sum of unit price x quantity, rounded to cents"""
    return round(sum(item.unit_price * item.quantity for item in items), 2)


def reduce_cart(cart: Cart, action: CartAction) -> Cart:
    """
    Apply one action and return the new cart.

    The input cart is left untouched. Line items keep insertion order and
    the total is recomputed after every transition.
    """
    items = [item.model_copy() for item in cart.items]

    if isinstance(action, AddItem):
        existing = next((i for i in items if i.product_id == action.item.id), None)
        if existing:
            existing.quantity += 1
        else:
            items.append(
                CartItem(
                    product_id=action.item.id,
                    name=action.item.name,
                    unit_price=action.item.price,
                    image=action.item.image,
                    quantity=1,
                )
            )

    elif isinstance(action, UpdateQuantity):
        if action.quantity <= 0:
            items = [i for i in items if i.product_id != action.id]
        else:
            for item in items:
                if item.product_id == action.id:
                    item.quantity = action.quantity

    elif isinstance(action, RemoveItem):
        items = [i for i in items if i.product_id != action.id]

    elif isinstance(action, ClearCart):
        items = []

    else:
        raise ValueError(f"Unknown cart action: {action!r}")

    return cart.model_copy(
        update={
            "items": items,
            "total": cart_total(items),
            "updated_at": datetime.now(timezone.utc),
        }
    )
