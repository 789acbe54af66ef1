"""
Pytest fixtures and configuration for the discount rule engine tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2025-11-20
"""
import pytest
from datetime import datetime, date
from decimal import Decimal

from rule_engine.domain.order import Order

INPUT_HEADER = "timestamp,product_name,expiry_date,quantity,unit_price,channel,payment_method"


@pytest.fixture
def as_of():
    """
    Fixed reference date for the expiry rule

    Tests never depend on the wall clock.
    """
    return date(2023, 4, 1)


@pytest.fixture
def make_order():
    """
    Provides a factory for neutral orders

    Defaults trigger no rule at all (as of 2023-04-01); override the fields
    a test is about.
    """
    def _make_order(**overrides):
        data = {
            "order_date": datetime(2023, 4, 18, 18, 18, 40),
            "product_name": "Bread",
            "expiry_date": date(2024, 12, 31),
            "quantity": 1,
            "unit_price": Decimal("9.50"),
            "channel": "Store",
            "payment_method": "Cash",
        }
        data.update(overrides)
        return Order(**data)

    return _make_order


@pytest.fixture
def sample_records():
    """
    Provides raw input lines, header included
    """
    return [
        INPUT_HEADER,
        "2023-01-12T21:47:04Z,Milk,2024-12-31,8,53.2,Store,Cash",
        "2023-02-05T11:03:51Z,Cheese Wheel,2024-12-31,12,94.99,App,Visa",
        "2023-03-23T07:15:02Z,Bread,2024-12-31,1,9.5,Store,Cash",
        "2023-06-14T16:08:27Z,Bread,2024-12-31,2,9.5,Store,Cash",
    ]


@pytest.fixture
def input_file(tmp_path, sample_records):
    """
    Provides a transactions file on disk
    """
    path = tmp_path / "TRX1000.csv"
    path.write_text("\n".join(sample_records) + "\n", encoding="utf-8")
    return path
