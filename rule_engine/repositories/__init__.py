"""
Repository Layer - Data Access

Reads and writes the flat order files the batch job works on.

Author: TM3
Date: 2025-11-20
"""
from rule_engine.repositories.order_file_repository import OrderFileRepository

__all__ = ['OrderFileRepository']
