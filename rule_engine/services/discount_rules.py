"""
Discount Rules
The fixed set of qualifying rules every order is scored against

Each rule is a pure function (order, as_of) -> discount fraction. as_of is
the reference "today"; only the expiry rule reads it. Rules never see each
other's output and never raise for a well-formed order.

Author: TM3
Date: 2025-11-20
"""
from dataclasses import dataclass
from datetime import date
from typing import Callable, Tuple

from rule_engine.domain.order import Order

SPECIAL_DISCOUNT_DATE = date(2023, 3, 23)
EXPIRY_WINDOW_DAYS = 30


def quantity_discount(order: Order, as_of: date) -> float:
    """6-9 units: 5%, 10-14 units: 7%, more than 15 units: 10%"""
    quantity = order.quantity
    if 6 <= quantity <= 9:
        return 0.05
    if 10 <= quantity <= 14:
        return 0.07
    # exactly 15 gets nothing here
    if quantity > 15:
        return 0.10
    return 0.0


def visa_card_discount(order: Order, as_of: date) -> float:
    """5% for Visa payments"""
    if order.payment_method.lower() == "visa":
        return 0.05
    return 0.0


def app_channel_discount(order: Order, as_of: date) -> float:
    """App orders: 5% up to 5 units, 10% up to 10, 15% up to 15"""
    if order.channel.lower() != "app":
        return 0.0

    quantity = order.quantity
    if 1 <= quantity <= 5:
        return 0.05
    if 6 <= quantity <= 10:
        return 0.10
    if 11 <= quantity <= 15:
        return 0.15
    return 0.0


def days_remaining_discount(order: Order, as_of: date) -> float:
    """
    1% per day left before expiry, within the last 30 days

    Already expired products give a negative value; it is not clamped.
    """
    days_remaining = (order.expiry_date - as_of).days
    if days_remaining <= EXPIRY_WINDOW_DAYS:
        return 0.01 * days_remaining
    return 0.0


def special_date_discount(order: Order, as_of: date) -> float:
    """50% for orders placed on the special date"""
    if order.order_date.date() == SPECIAL_DISCOUNT_DATE:
        return 0.5
    return 0.0


def product_name_discount(order: Order, as_of: date) -> float:
    """Cheese: 10%, otherwise wine: 5%"""
    product_name = order.product_name.lower()
    if "cheese" in product_name:
        return 0.1
    if "wine" in product_name:
        return 0.05
    return 0.0


@dataclass(frozen=True)
class DiscountRule:
    """A named discount rule"""
    name: str
    evaluate: Callable[[Order, date], float]

    def __call__(self, order: Order, as_of: date) -> float:
        return self.evaluate(order, as_of)


DISCOUNT_RULES: Tuple[DiscountRule, ...] = (
    DiscountRule("quantity", quantity_discount),
    DiscountRule("visa_card", visa_card_discount),
    DiscountRule("app_channel", app_channel_discount),
    DiscountRule("days_remaining", days_remaining_discount),
    DiscountRule("special_date", special_date_discount),
    DiscountRule("product_name", product_name_discount),
)
