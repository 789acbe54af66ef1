"""
Service Layer - Business Logic

Parsing, discount rules, discount combination and batch processing.
"""
from rule_engine.services.order_parser import parse_order, parse_processed_order
from rule_engine.services.discount_rules import DISCOUNT_RULES, DiscountRule
from rule_engine.services.discount_calculator import calculate_discount, apply_discount, evaluate_rules
from rule_engine.services.order_processing_service import OrderProcessingService, ProcessingResult

__all__ = [
    'parse_order',
    'parse_processed_order',
    'DISCOUNT_RULES',
    'DiscountRule',
    'calculate_discount',
    'apply_discount',
    'evaluate_rules',
    'OrderProcessingService',
    'ProcessingResult',
]
