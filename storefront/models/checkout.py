"""Checkout and submission models for the print store"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime
from enum import Enum


class PaymentMethod(str, Enum):
    CARD = "card"
    QR = "qr"


class CustomerDetails(BaseModel):
    """Billing details collected at checkout"""
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    company: str = ""
    country: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    postcode: str = ""
    phone: str = ""
    email: EmailStr
    notes: str = ""


class CheckoutRequest(BaseModel):
    """Request to checkout"""
    cart_id: str
    customer: CustomerDetails
    payment_method: PaymentMethod = PaymentMethod.CARD
    card_number: Optional[str] = None


class OrderPayload(BaseModel):
    """Row appended to the orders sheet by the order webhook"""
    timestamp: str
    type: str = "Store Order"
    order_id: str = Field(alias="orderId")
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    company: str = ""
    country: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    postcode: str = ""
    phone: str = ""
    email: str
    notes: str = ""
    items: str
    total: float
    payment_method: PaymentMethod = Field(alias="paymentMethod")
    card_number: str = Field(alias="cardNumber")

    class Config:
        populate_by_name = True


class SubmissionResult(BaseModel):
    """Outcome of relaying a payload to a webhook"""
    delivered: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


class Order(BaseModel):
    """Recorded order"""
    order_id: str
    payload: OrderPayload
    delivered: bool
    created_at: datetime


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    delivered: bool
    order: Optional[Order] = None
    message: Optional[str] = None


class ContactRequest(BaseModel):
    """Contact form submission"""
    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = ""
    message: str = Field(min_length=1)


class InquiryRequest(BaseModel):
    """Limited-edition print inquiry"""
    name: str = Field(min_length=1)
    email: EmailStr
    location: str = ""
    message: str = ""
    newsletter: bool = False


class SubmissionResponse(BaseModel):
    """Response from a contact or inquiry submission"""
    success: bool
    delivered: bool
    message: str
