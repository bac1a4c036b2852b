"""Cart models for the print store"""

from pydantic import BaseModel, Field
from typing import Annotated, Literal, Optional, Union
from datetime import datetime


class CartItem(BaseModel):
    """Line item in a shopping cart"""
    product_id: str
    name: str
    unit_price: float = Field(ge=0)
    image: str
    quantity: int = Field(ge=1)


class Cart(BaseModel):
    """Shopping cart"""
    cart_id: str
    items: list[CartItem] = []
    total: float = 0.0
    currency: str = "USD"
    created_at: datetime
    updated_at: datetime


class CartProduct(BaseModel):
    """Product fields copied into the cart on ADD_ITEM"""
    id: str
    name: str
    price: float = Field(ge=0)
    image: str


class AddItem(BaseModel):
    type: Literal["ADD_ITEM"] = "ADD_ITEM"
    item: CartProduct


class UpdateQuantity(BaseModel):
    type: Literal["UPDATE_QUANTITY"] = "UPDATE_QUANTITY"
    id: str
    quantity: int


class RemoveItem(BaseModel):
    type: Literal["REMOVE_ITEM"] = "REMOVE_ITEM"
    id: str


class ClearCart(BaseModel):
    type: Literal["CLEAR_CART"] = "CLEAR_CART"


CartAction = Annotated[
    Union[AddItem, UpdateQuantity, RemoveItem, ClearCart],
    Field(discriminator="type"),
]


class AddToCartRequest(BaseModel):
    """Request to add a print to the cart"""
    product_id: str


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity (0 or less removes the item)"""
    quantity: int


class CartActionRequest(BaseModel):
    """Raw cart action"""
    action: CartAction


class CartResponse(BaseModel):
    """Cart API response"""
    cart: Cart
    message: Optional[str] = None
