#!/usr/bin/env python3
"""
Order Discount Batch

Reads the transactions file, scores every order against the discount rules
and writes the processed orders with their final discount.

Usage:
    rule-engine [--input data/TRX1000.csv] [--output data/processed_orders.csv]
                [--as-of 2023-04-01] [--on-error abort|skip] [--verbose]

Author: TM3
Date: 2025-11-20
"""
import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

from rule_engine.core.config import settings
from rule_engine.core.exceptions import IOUnavailableError, ParseError
from rule_engine.core.logging_config import setup_logging
from rule_engine.repositories.order_file_repository import OrderFileRepository
from rule_engine.services.order_processing_service import ERROR_POLICIES, OrderProcessingService

logger = logging.getLogger(__name__)


def parse_as_of(value: str) -> date:
    """argparse type for YYYY-MM-DD dates"""
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date (expected YYYY-MM-DD): {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Apply discount rules to a batch of orders'
    )
    parser.add_argument(
        '--input',
        type=str,
        default=settings.INPUT_PATH,
        help=f'Transactions CSV file (default: {settings.INPUT_PATH})'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=settings.OUTPUT_PATH,
        help=f'Processed orders file (default: {settings.OUTPUT_PATH})'
    )
    parser.add_argument(
        '--as-of',
        type=parse_as_of,
        default=None,
        help='Reference date for the expiry rule (default: today)'
    )
    parser.add_argument(
        '--on-error',
        choices=ERROR_POLICIES,
        default=settings.ERROR_POLICY,
        help=f'Malformed record policy (default: {settings.ERROR_POLICY})'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log the per-rule breakdown of every order'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    setup_logging('DEBUG' if args.verbose else settings.LOG_LEVEL, settings.LOG_FILE)

    repository = OrderFileRepository()
    service = OrderProcessingService(error_policy=args.on_error, as_of=args.as_of)

    try:
        records = repository.read_records(args.input)
        result = service.process_records(records)
        repository.write_orders(args.output, result.orders)
    except ParseError as e:
        logger.error(f"Malformed record: {e}")
        return 1
    except IOUnavailableError as e:
        logger.error(str(e))
        return 1

    if result.rejected:
        lines = ", ".join(str(rejected.line_number) for rejected in result.rejected)
        logger.warning(f"{len(result.rejected)} malformed records skipped (lines {lines})")

    print(f"Number of orders qualified for discounts: {result.qualified_count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
