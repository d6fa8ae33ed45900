"""
Billing: Stripe subscription and order lookups, checkout sessions.

Lookups degrade to "no subscription" / "no orders" when the backend is
unavailable; only checkout creation reports failure to the caller.
"""

import logging
from typing import Optional

from legal_ai.errors import CheckoutError
from legal_ai.i18n import translate
from legal_ai.models.billing import CheckoutSession, Order, Product, Subscription
from legal_ai.transport.http import HttpClient

logger = logging.getLogger(__name__)

PRODUCTS: dict[str, Product] = {
    "PURCHASE_SALE": Product(
        price_id="price_1RT566QLnd69H9mmQFvvCeoy",
        name="Купле продажа",
        description="Доступ к шаблонам договоров купли-продажи",
        mode="subscription",
    ),
}


def get_product_by_price_id(price_id: Optional[str]) -> Optional[Product]:
    for product in PRODUCTS.values():
        if product.price_id == price_id:
            return product
    return None


def plan_name(subscription: Optional[Subscription], locale: str = "ru") -> str:
    if subscription is None or not subscription.price_id:
        return translate(locale, "noActiveSubscription")
    product = get_product_by_price_id(subscription.price_id)
    return product.name if product else translate(locale, "unknownPlan")


class BillingAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def get_subscription(self) -> Optional[Subscription]:
        if not self._http.configured:
            return None
        try:
            rows = await self._http.select("stripe_user_subscriptions")
        except Exception as e:
            logger.error("Error fetching subscription: %s", e)
            return None
        return Subscription.model_validate(rows[0]) if rows else None

    async def has_active_subscription(self) -> bool:
        subscription = await self.get_subscription()
        return subscription is not None and subscription.is_active

    async def get_orders(self) -> list[Order]:
        if not self._http.configured:
            return []
        try:
            rows = await self._http.select("stripe_user_orders", order="order_date", descending=True)
        except Exception as e:
            logger.error("Error fetching orders: %s", e)
            return []
        return [Order.model_validate(row) for row in rows]

    async def create_checkout_session(
        self, price_id: str, mode: str, success_url: str, cancel_url: str,
    ) -> CheckoutSession:
        try:
            data = await self._http.invoke("stripe-checkout", {
                "price_id": price_id,
                "success_url": success_url,
                "cancel_url": cancel_url,
                "mode": mode,
            })
        except Exception as e:
            logger.error("Error creating checkout session: %s", e)
            raise CheckoutError("Failed to create checkout session") from e
        return CheckoutSession.model_validate(data or {})
