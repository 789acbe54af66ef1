"""
Core - configuration, logging and error types
"""
from rule_engine.core.exceptions import ParseError, MalformedRecordError, IOUnavailableError

__all__ = ['ParseError', 'MalformedRecordError', 'IOUnavailableError']
