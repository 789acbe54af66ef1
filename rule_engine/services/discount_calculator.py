"""
Discount Calculator - combines rule outputs into the final order discount

Policy: average of the two highest rule outputs (a single output is used as
is, no outputs means 0.0), rounded once at the end, half-up to 2 decimals.

Example:
    rules give [0.15, 0.10, 0.07, 0.05, 0.0, 0.0]
    -> (0.15 + 0.10) / 2 = 0.125 -> 0.13

Author: TM3
Date: 2025-11-20
"""
import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Sequence

from rule_engine.domain.order import Order
from rule_engine.services.discount_rules import DISCOUNT_RULES, DiscountRule

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal('0.01')


def round_half_up(value: float) -> float:
    """
    Round to 2 decimals, halves away from zero

    Goes through the shortest decimal text of the float so 0.025 becomes
    0.03 instead of following its binary approximation.
    """
    return float(Decimal(repr(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def top_two_average(discounts: Sequence[float]) -> float:
    """Average of the two largest values, the single value, or 0.0"""
    ranked = sorted(discounts, reverse=True)
    if len(ranked) >= 2:
        combined = (ranked[0] + ranked[1]) / 2
    elif len(ranked) == 1:
        combined = ranked[0]
    else:
        combined = 0.0
    return round_half_up(combined)


def evaluate_rules(
    order: Order,
    rules: Sequence[DiscountRule] = DISCOUNT_RULES,
    as_of: Optional[date] = None
) -> Dict[str, float]:
    """
    Run every rule against the order

    Returns:
        Rule name -> discount fraction, in rule order
    """
    if as_of is None:
        as_of = date.today()
    return {rule.name: rule(order, as_of) for rule in rules}


def calculate_discount(
    order: Order,
    rules: Sequence[DiscountRule] = DISCOUNT_RULES,
    as_of: Optional[date] = None
) -> float:
    """
    Compute the final discount for an order

    Args:
        order: Parsed order
        rules: Rules to apply (the fixed rule set by default)
        as_of: Reference date for the expiry rule (default: today)

    Returns:
        Discount fraction with at most 2 decimals
    """
    breakdown = evaluate_rules(order, rules, as_of)
    discount = top_two_average(list(breakdown.values()))

    logger.debug(f"{order.product_name} ({order.order_date.isoformat()}): {breakdown} -> {discount}")
    return discount


def apply_discount(
    order: Order,
    rules: Sequence[DiscountRule] = DISCOUNT_RULES,
    as_of: Optional[date] = None
) -> Order:
    """Return a copy of the order carrying its final discount"""
    return order.with_discount(calculate_discount(order, rules, as_of))


def apply_discounts(
    orders: Sequence[Order],
    rules: Sequence[DiscountRule] = DISCOUNT_RULES,
    as_of: Optional[date] = None
) -> List[Order]:
    """Annotate every order, preserving input order"""
    if as_of is None:
        as_of = date.today()
    return [apply_discount(order, rules, as_of) for order in orders]
