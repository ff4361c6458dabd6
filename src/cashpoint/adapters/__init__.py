# src/cashpoint/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Custodian (account authority API)
- Formatting (output)
"""

__all__ = []
