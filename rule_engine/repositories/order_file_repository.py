"""
Order File Repository
Reads raw transaction lines and writes processed orders as flat files

Author: TM3
Date: 2025-11-20
"""
import logging
from pathlib import Path
from typing import Iterable, List, Union

from rule_engine.core.exceptions import IOUnavailableError
from rule_engine.domain.order import Order, OUTPUT_HEADER

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class OrderFileRepository:
    """
    Repository for order records stored in text files

    All I/O errors surface as IOUnavailableError; nothing is retried.
    """

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    def read_records(self, path: PathLike) -> List[str]:
        """
        Read every line of a transactions file, header included

        Args:
            path: Source file

        Returns:
            Lines without their line terminators
        """
        path = Path(path)
        logger.info(f"Reading orders from {path}")

        try:
            with open(path, 'r', encoding=self.encoding) as f:
                records = [line.rstrip("\r\n") for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise IOUnavailableError(f"Cannot read {path}: {e}", path=str(path)) from e

        logger.info(f"Read {len(records)} lines from {path.name}")
        return records

    def write_orders(self, path: PathLike, orders: Iterable[Order]) -> int:
        """
        Write processed orders, header first

        Args:
            path: Destination file (parent directories are created)
            orders: Annotated orders

        Returns:
            Number of order lines written
        """
        path = Path(path)
        written = 0

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding=self.encoding) as f:
                f.write(OUTPUT_HEADER + "\n")
                for order in orders:
                    f.write(order.to_line() + "\n")
                    written += 1
        except OSError as e:
            raise IOUnavailableError(f"Cannot write {path}: {e}", path=str(path)) from e

        logger.info(f"Wrote {written} orders to {path}")
        return written
