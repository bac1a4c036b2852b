from datetime import datetime, timezone

import pytest

from storefront.database.carts import CartDatabase
from storefront.models.cart import (
    AddItem,
    Cart,
    CartProduct,
    ClearCart,
    RemoveItem,
    UpdateQuantity,
)
from storefront.services.cart_reducer import reduce_cart

TIGER = CartProduct(id="3", name="Bengal Tiger Portrait", price=420, image="/images/products/3.jpg")
WHALE = CartProduct(id="4", name="Humpback Whale Breach", price=380.5, image="/images/products/4.jpg")


@pytest.fixture
def empty_cart():
    now = datetime.now(timezone.utc)
    return Cart(cart_id="c-1", created_at=now, updated_at=now)


def _apply(cart, *actions):
    for action in actions:
        cart = reduce_cart(cart, action)
    return cart


def test_add_same_product_twice_increments_quantity(empty_cart):
    cart = _apply(empty_cart, AddItem(item=TIGER), AddItem(item=TIGER))

    assert len(cart.items) == 1
    assert cart.items[0].quantity == 2
    assert cart.total == 840


def test_items_keep_insertion_order(empty_cart):
    cart = _apply(empty_cart, AddItem(item=WHALE), AddItem(item=TIGER), AddItem(item=WHALE))

    assert [i.product_id for i in cart.items] == ["4", "3"]
    assert cart.total == round(380.5 * 2 + 420, 2)


def test_update_quantity_sets_value(empty_cart):
    cart = _apply(empty_cart, AddItem(item=TIGER), UpdateQuantity(id="3", quantity=5))

    assert cart.items[0].quantity == 5
    assert cart.total == 2100


@pytest.mark.parametrize("quantity", [0, -1])
def test_update_quantity_to_zero_removes_item(empty_cart, quantity):
    cart = _apply(
        empty_cart,
        AddItem(item=TIGER),
        AddItem(item=WHALE),
        UpdateQuantity(id="3", quantity=quantity),
    )

    assert [i.product_id for i in cart.items] == ["4"]
    assert cart.total == 380.5


def test_update_unknown_item_is_a_no_op(empty_cart):
    cart = _apply(empty_cart, AddItem(item=TIGER), UpdateQuantity(id="missing", quantity=3))

    assert [(i.product_id, i.quantity) for i in cart.items] == [("3", 1)]


def test_remove_item(empty_cart):
    cart = _apply(empty_cart, AddItem(item=TIGER), AddItem(item=WHALE), RemoveItem(id="4"))

    assert [i.product_id for i in cart.items] == ["3"]
    assert cart.total == 420


def test_clear_cart_always_empties(empty_cart):
    assert _apply(empty_cart, ClearCart()).total == 0

    cart = _apply(empty_cart, AddItem(item=TIGER), AddItem(item=WHALE), ClearCart())
    assert cart.items == []
    assert cart.total == 0


def test_reducer_does_not_mutate_input(empty_cart):
    cart = _apply(empty_cart, AddItem(item=TIGER))
    reduce_cart(cart, AddItem(item=TIGER))

    assert cart.items[0].quantity == 1
    assert empty_cart.items == []


def test_cart_database_dispatch():
    db = CartDatabase()
    cart = db.create_cart()

    updated = db.dispatch(cart.cart_id, AddItem(item=TIGER))
    assert updated.total == 420
    assert db.get_cart(cart.cart_id).items[0].product_id == "3"

    assert db.dispatch("unknown", ClearCart()) is None
    assert db.delete_cart(cart.cart_id) is True
    assert db.get_cart(cart.cart_id) is None
