# Storefront Models

from .product import (
    Product,
    SheetRow,
    CatalogName,
    CatalogSource,
    CatalogState,
    CatalogResponse,
)
from .cart import (
    Cart,
    CartItem,
    CartProduct,
    CartAction,
    AddItem,
    UpdateQuantity,
    RemoveItem,
    ClearCart,
    AddToCartRequest,
    UpdateCartItemRequest,
    CartActionRequest,
    CartResponse,
)
from .checkout import (
    Order,
    OrderPayload,
    PaymentMethod,
    CustomerDetails,
    CheckoutRequest,
    CheckoutResponse,
    SubmissionResult,
    ContactRequest,
    InquiryRequest,
    SubmissionResponse,
)

__all__ = [
    "Product",
    "SheetRow",
    "CatalogName",
    "CatalogSource",
    "CatalogState",
    "CatalogResponse",
    "Cart",
    "CartItem",
    "CartProduct",
    "CartAction",
    "AddItem",
    "UpdateQuantity",
    "RemoveItem",
    "ClearCart",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartActionRequest",
    "CartResponse",
    "Order",
    "OrderPayload",
    "PaymentMethod",
    "CustomerDetails",
    "CheckoutRequest",
    "CheckoutResponse",
    "SubmissionResult",
    "ContactRequest",
    "InquiryRequest",
    "SubmissionResponse",
]
