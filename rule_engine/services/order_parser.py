"""
Order Parser
Turns raw comma-separated transaction lines into Order domain models

Input lines carry 7 fields:
    order_date, product_name, expiry_date, quantity, unit_price, channel, payment_method

Author: TM3
Date: 2025-11-20
"""
import re
from datetime import datetime, date
from decimal import Decimal
from typing import List, Optional

from pydantic import ValidationError

from rule_engine.core.exceptions import ParseError
from rule_engine.domain.order import Order, OUTPUT_DELIMITER

INPUT_DELIMITER = ","
INPUT_FIELD_COUNT = 7
OUTPUT_FIELD_COUNT = 8

# 2023-04-18T18:18:40Z, 2023-04-18T18:18:40.123+02:00, 2023-04-18T18:18
DATETIME_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,9})?)?(Z|[+-]\d{2}:\d{2})?$"
)
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def parse_order_date(value: str) -> datetime:
    """
    Parse an ISO-8601 date-time

    Any UTC offset is dropped: the order date is kept as the local
    date-time written in the file.
    """
    if not DATETIME_PATTERN.match(value):
        raise ValueError(f"invalid date-time: {value!r}")

    # fromisoformat accepts at most microseconds
    match = re.search(r"\.(\d+)", value)
    if match and len(match.group(1)) > 6:
        value = value.replace(match.group(0), "." + match.group(1)[:6], 1)

    return datetime.fromisoformat(value).replace(tzinfo=None)


def parse_expiry_date(value: str) -> date:
    """Parse a YYYY-MM-DD calendar date"""
    if not DATE_PATTERN.match(value):
        raise ValueError(f"invalid date: {value!r}")
    return date.fromisoformat(value)


def parse_quantity(value: str) -> int:
    """Parse a base-10 integer"""
    if not INTEGER_PATTERN.match(value):
        raise ValueError(f"invalid integer: {value!r}")
    return int(value)


def parse_unit_price(value: str) -> Decimal:
    """Parse a decimal number (no NaN/Infinity)"""
    if not DECIMAL_PATTERN.match(value):
        raise ValueError(f"invalid decimal: {value!r}")
    return Decimal(value)


FIELD_PARSERS = (
    ('order_date', parse_order_date),
    ('product_name', str),
    ('expiry_date', parse_expiry_date),
    ('quantity', parse_quantity),
    ('unit_price', parse_unit_price),
    ('channel', str),
    ('payment_method', str),
)


def _build_order(fields: List[str], record: str, line_number: Optional[int], **extra) -> Order:
    """Parse the 7 order fields and validate them through the domain model"""
    values = {}
    for (name, parser), raw in zip(FIELD_PARSERS, fields):
        try:
            values[name] = parser(raw)
        except ValueError as e:
            raise ParseError(f"{name}: {e}", record=record, field=name, line_number=line_number) from e

    values.update(extra)

    try:
        return Order(**values)
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error['loc'][0]) if error.get('loc') else None
        raise ParseError(
            f"{field}: {error['msg']}", record=record, field=field, line_number=line_number
        ) from e


def parse_order(record: str, line_number: Optional[int] = None) -> Order:
    """
    Parse one raw transaction line into an Order

    Args:
        record: Comma-separated line with exactly 7 fields
        line_number: Position of the line in its file, used in error messages

    Returns:
        Order with discount 0.0

    Raises:
        ParseError: Wrong field count or a field that does not parse
    """
    record = record.rstrip("\r\n")
    fields = record.split(INPUT_DELIMITER)

    if len(fields) != INPUT_FIELD_COUNT:
        raise ParseError(
            f"expected {INPUT_FIELD_COUNT} fields, got {len(fields)}",
            record=record,
            line_number=line_number
        )

    return _build_order(fields, record, line_number)


def parse_processed_order(record: str, line_number: Optional[int] = None) -> Order:
    """
    Parse one line of processed output back into an Order

    Output lines carry the 7 order fields plus the discount, joined by ", ".
    """
    record = record.rstrip("\r\n")
    fields = record.split(OUTPUT_DELIMITER)

    if len(fields) != OUTPUT_FIELD_COUNT:
        raise ParseError(
            f"expected {OUTPUT_FIELD_COUNT} fields, got {len(fields)}",
            record=record,
            line_number=line_number
        )

    try:
        discount = float(fields[-1])
    except ValueError as e:
        raise ParseError(
            f"discount: invalid number: {fields[-1]!r}",
            record=record,
            field='discount',
            line_number=line_number
        ) from e

    return _build_order(fields[:-1], record, line_number, discount=discount)
