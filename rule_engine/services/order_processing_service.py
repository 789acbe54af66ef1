"""
Order Processing Service
Runs a batch of raw transaction lines through parsing and discount scoring

Author: TM3
Date: 2025-11-20
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional

from rule_engine.core.exceptions import ParseError
from rule_engine.domain.order import Order
from rule_engine.services.discount_calculator import apply_discounts
from rule_engine.services.discount_rules import DISCOUNT_RULES
from rule_engine.services.order_parser import parse_order

logger = logging.getLogger(__name__)

ERROR_POLICIES = ('abort', 'skip')


@dataclass
class RejectedRecord:
    """A line that could not be parsed (skip policy only)"""
    line_number: int
    record: str
    reason: str


@dataclass
class ProcessingResult:
    """Outcome of one batch run"""
    orders: List[Order] = field(default_factory=list)
    rejected: List[RejectedRecord] = field(default_factory=list)

    @property
    def qualified_count(self) -> int:
        """Orders whose final discount is above zero"""
        return sum(1 for order in self.orders if order.qualifies_for_discount)


class OrderProcessingService:
    """
    Service for scoring a batch of orders

    Handles:
    - Dropping the header line
    - Parsing each line into an Order
    - Applying the discount rules and the combiner
    - Malformed records, according to the error policy:
        abort: the first ParseError stops the batch
        skip: the record is logged and reported, processing continues
    """

    def __init__(self, error_policy: str = 'abort', as_of: Optional[date] = None):
        if error_policy not in ERROR_POLICIES:
            raise ValueError(f"Unknown error policy: {error_policy}")
        self.error_policy = error_policy
        self.as_of = as_of
        self.rules = DISCOUNT_RULES

    def process_records(self, records: Iterable[str]) -> ProcessingResult:
        """
        Parse and score every order line

        Args:
            records: Raw lines, the first one being the header

        Returns:
            ProcessingResult with annotated orders in input order

        Raises:
            ParseError: A malformed line under the abort policy
        """
        as_of = self.as_of or date.today()
        result = ProcessingResult()

        lines = iter(records)
        header = next(lines, None)
        if header is None:
            logger.warning("Input is empty, no header found")
            return result

        parsed = []
        # Header is line 1
        for line_number, record in enumerate(lines, start=2):
            try:
                parsed.append(parse_order(record, line_number=line_number))
            except ParseError as e:
                if self.error_policy == 'abort':
                    raise
                logger.warning(f"Skipping malformed record: {e}")
                result.rejected.append(RejectedRecord(line_number, record.rstrip("\r\n"), str(e)))

        result.orders = apply_discounts(parsed, self.rules, as_of)

        logger.info(
            f"Processed {len(result.orders)} orders "
            f"({result.qualified_count} qualified, {len(result.rejected)} rejected)"
        )
        return result
