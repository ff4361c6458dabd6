# src/cashpoint/adapters/custodian/__init__.py
"""
Custodian Adapters - External Account Authority Clients

This package contains clients for the service that authorizes card holders
and charges their accounts. All clients implement the Custodian interface.
"""

from cashpoint.adapters.custodian.base import Custodian
from cashpoint.adapters.custodian.http_custodian import HttpCustodian

__all__ = [
    "Custodian",
    "HttpCustodian",
]
