"""
Domain Layer - Business Entities

Pydantic models representing the records flowing through the discount job.

Author: TM3
Date: 2025-11-20
"""
from rule_engine.domain.order import Order, OUTPUT_HEADER, OUTPUT_DELIMITER

__all__ = ['Order', 'OUTPUT_HEADER', 'OUTPUT_DELIMITER']
