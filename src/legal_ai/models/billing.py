"""
Billing records: Stripe data mirrored into the backend views.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    price_id: str
    name: str
    description: str = ""
    mode: str = "subscription"  # "payment" | "subscription"


class Subscription(BaseModel):
    """stripe_user_subscriptions row"""
    customer_id: Optional[str] = None
    subscription_id: Optional[str] = None
    subscription_status: Optional[str] = None
    price_id: Optional[str] = None
    current_period_start: Optional[int] = None
    current_period_end: Optional[int] = None
    cancel_at_period_end: Optional[bool] = None
    payment_method_brand: Optional[str] = None
    payment_method_last4: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.subscription_status in ("active", "trialing")


class Order(BaseModel):
    """stripe_user_orders row"""
    order_id: Optional[int] = None
    checkout_session_id: Optional[str] = None
    payment_intent_id: Optional[str] = None
    amount_subtotal: Optional[int] = None
    amount_total: Optional[int] = None
    currency: Optional[str] = None
    payment_status: Optional[str] = None
    order_status: Optional[str] = None
    order_date: Optional[str] = None


class CheckoutSession(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = Field(default=None, alias="sessionId")
    url: Optional[str] = None
