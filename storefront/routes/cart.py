"""Cart API routes for the print store"""

from fastapi import APIRouter, HTTPException, Depends

from ..models.cart import (
    AddItem,
    AddToCartRequest,
    CartActionRequest,
    CartProduct,
    CartResponse,
    ClearCart,
    RemoveItem,
    UpdateCartItemRequest,
    UpdateQuantity,
)
from ..models.product import CatalogName
from ..database.carts import CartDatabase
from ..services.catalog import CatalogRegistry
from ..core.dependencies import get_cart_db, get_catalogs

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def _require_cart(cart_db: CartDatabase, cart_id: str) -> None:
    if not cart_db.get_cart(cart_id):
        raise HTTPException(status_code=404, detail="Cart not found")


def _catalog_item(catalogs: CatalogRegistry, product_id: str) -> CartProduct:
    """Cart line for a print, priced from the current catalog snapshot"""
    product = catalogs.get(CatalogName.PRINTS).get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    return CartProduct(
        id=product.id,
        name=product.name,
        price=product.price,
        image=product.image,
    )


@router.post("", response_model=CartResponse)
async def create_cart(cart_db: CartDatabase = Depends(get_cart_db)):
    """Create a new shopping cart"""
    cart = cart_db.create_cart()
    return CartResponse(cart=cart, message="Cart created")


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(
    cart_id: str,
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """Get cart by ID"""
    cart = cart_db.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")
    return CartResponse(cart=cart)


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(
    cart_id: str,
    request: AddToCartRequest,
    cart_db: CartDatabase = Depends(get_cart_db),
    catalogs: CatalogRegistry = Depends(get_catalogs),
):
    """Add one print to the cart"""
    _require_cart(cart_db, cart_id)

    item = _catalog_item(catalogs, request.product_id)
    cart = cart_db.dispatch(cart_id, AddItem(item=item))
    return CartResponse(cart=cart, message=f"Added {item.name} to cart")


@router.put("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    cart_id: str,
    product_id: str,
    request: UpdateCartItemRequest,
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """Update item quantity in cart; zero or less removes the item"""
    cart = cart_db.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")

    if not any(item.product_id == product_id for item in cart.items):
        raise HTTPException(status_code=404, detail="Item not in cart")

    cart = cart_db.dispatch(cart_id, UpdateQuantity(id=product_id, quantity=request.quantity))
    return CartResponse(cart=cart, message="Cart updated")


@router.delete("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    cart_id: str,
    product_id: str,
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """Remove an item from the cart"""
    _require_cart(cart_db, cart_id)

    cart = cart_db.dispatch(cart_id, RemoveItem(id=product_id))
    return CartResponse(cart=cart, message="Item removed")


@router.delete("/{cart_id}", response_model=CartResponse)
async def clear_cart(
    cart_id: str,
    cart_db: CartDatabase = Depends(get_cart_db),
):
    """Clear all items from cart"""
    _require_cart(cart_db, cart_id)

    cart = cart_db.dispatch(cart_id, ClearCart())
    return CartResponse(cart=cart, message="Cart cleared")


@router.post("/{cart_id}/actions", response_model=CartResponse)
async def apply_cart_action(
    cart_id: str,
    request: CartActionRequest,
    cart_db: CartDatabase = Depends(get_cart_db),
    catalogs: CatalogRegistry = Depends(get_catalogs),
):
    """
    Apply a raw cart action (ADD_ITEM, UPDATE_QUANTITY, REMOVE_ITEM, CLEAR_CART).

    ADD_ITEM only uses the item id; name, price and image come from the
    prints catalog.
    """
    _require_cart(cart_db, cart_id)

    action = request.action
    if isinstance(action, AddItem):
        action = AddItem(item=_catalog_item(catalogs, action.item.id))

    cart = cart_db.dispatch(cart_id, action)
    return CartResponse(cart=cart, message=action.type)
