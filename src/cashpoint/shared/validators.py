# src/cashpoint/shared/validators.py
"""
Input Validation Utilities - Configuration and Data Validation

This module provides validation functions for the terminal.
It validates currency codes, withdrawal amounts, API keys and starting
stock definitions to prevent errors from invalid configuration or input.

Files that USE this module:
- cashpoint.config.settings (uses validation functions in Settings field validators)
- cashpoint.domain.models (Money validates its currency code)
- cashpoint.domain.inventory (allocation rejects non-whole amounts)

Files that this module USES:
- None (pure utility functions)
"""
import re
from decimal import Decimal
from typing import List, Tuple


def validate_currency_code(code: str) -> bool:
    """
    Validate ISO-4217 style currency code format.

    Args:
        code: Currency code to validate (e.g. "PLN")

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False
    return bool(re.match(r'^[A-Z]{3}$', code))


def is_whole_amount(amount: Decimal) -> bool:
    """
    Check that an amount is a positive number of whole currency units.

    Args:
        amount: Decimal amount to check

    Returns:
        True for positive whole amounts, False for zero, negative,
        fractional or non-finite values
    """
    if not amount.is_finite():
        return False
    return amount > 0 and amount == amount.to_integral_value()


def validate_api_key(api_key: str, min_length: int = 10) -> bool:
    """
    Validate API key format.

    Args:
        api_key: API key to validate
        min_length: Minimum length requirement

    Returns:
        True if valid, False otherwise
    """
    if not api_key:
        return False

    return len(api_key) >= min_length and not api_key.isspace()


def parse_stock_spec(spec: str) -> List[Tuple[int, int]]:
    """
    Parse a starting stock definition into (face value, count) pairs.

    Format is a comma-separated list of ``face:count`` entries,
    e.g. ``"500:5,200:5,100:5"``. Whitespace around entries is ignored.
    An empty string means an empty cassette.

    Args:
        spec: Stock definition string

    Returns:
        List of (face value, count) tuples in the order given

    Raises:
        ValueError: If an entry is malformed, a count is negative
                    or a face value is repeated
    """
    pairs: List[Tuple[int, int]] = []
    seen = set()
    for entry in spec.split(","):
        entry = entry.strip()
        if not entry:
            continue
        match = re.match(r'^(\d+)\s*:\s*(-?\d+)$', entry)
        if not match:
            raise ValueError(f"Malformed stock entry: {entry!r} (expected face:count)")
        face, count = int(match.group(1)), int(match.group(2))
        if count < 0:
            raise ValueError(f"Negative note count for {face}: {count}")
        if face in seen:
            raise ValueError(f"Duplicate denomination in stock: {face}")
        seen.add(face)
        pairs.append((face, count))
    return pairs
