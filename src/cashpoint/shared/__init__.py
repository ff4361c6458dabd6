# src/cashpoint/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from cashpoint.shared.validators import (
    is_whole_amount,
    parse_stock_spec,
    validate_api_key,
    validate_currency_code,
)
from cashpoint.shared.logging_conf import setup_logging

__all__ = [
    "is_whole_amount",
    "parse_stock_spec",
    "validate_api_key",
    "validate_currency_code",
    "setup_logging",
]
