# src/cashpoint/adapters/custodian/http_custodian.py
"""
HTTP Custodian Client - REST Account Authority

This module implements a Custodian that talks to the card issuer's REST API.
Authorization and charge requests are sent as JSON; HTTP status codes are
mapped onto the domain's custodian errors so the terminal never sees a
requests exception.

Files that USE this module:
- cashpoint.app (builds the terminal's custodian from settings)
- tests.test_http_custodian (unit tests)

Files that this module USES:
- cashpoint.adapters.custodian.base (Custodian interface)
- cashpoint.config (settings for URL, API key and timeout)
- cashpoint.domain.errors (AuthorizationError, AccountError, CustodianUnavailableError)
"""
import logging
from typing import Any, Dict, Optional

import requests

from cashpoint.adapters.custodian.base import Custodian
from cashpoint.config import settings
from cashpoint.domain.errors import AccountError, AuthorizationError, CustodianUnavailableError
from cashpoint.domain.models import Card, Money, PinCode

log = logging.getLogger(__name__)

AUTH_REJECT_STATUSES = (401, 403)
CHARGE_REJECT_STATUSES = (402, 409, 422)


def _amount_text(amount: Money) -> str:
    """
    Plain decimal text for the wire, e.g. "3000" for 3000.0 or 3E+3.
    """
    if amount.is_whole():
        return str(int(amount.amount))
    return format(amount.amount.normalize(), "f")


class HttpCustodian(Custodian):
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize the custodian client.

        Args:
            base_url: Optional API root (defaults to settings.custodian_url)
            api_key: Optional bearer token (defaults to settings.custodian_api_key)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)

        Raises:
            ValueError: If no base URL is configured
        """
        self.base_url = (base_url or settings.custodian_url).rstrip("/")
        if not self.base_url:
            raise ValueError("Custodian URL not configured. Set CUSTODIAN_URL in environment.")
        self.api_key = api_key if api_key is not None else settings.custodian_api_key
        self.timeout = timeout or settings.http_timeout_seconds

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _post(self, path: str, payload: Dict[str, Any]) -> requests.Response:
        """
        POST a JSON payload and return the response.

        Transport failures and server errors are raised as
        CustodianUnavailableError; other statuses are left to the caller.
        """
        url = f"{self.base_url}{path}"
        try:
            resp = requests.post(url, json=payload, headers=self._headers(), timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log.warning("Custodian timeout after %d seconds: %s", self.timeout, url)
            raise CustodianUnavailableError(f"Custodian timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            log.warning("Custodian request failed (network/connection error): %s", e)
            raise CustodianUnavailableError(f"Custodian request failed: {e}") from e

        if resp.status_code >= 500:
            log.warning("Custodian returned %d (server error) for %s", resp.status_code, path)
            raise CustodianUnavailableError(f"Custodian returned {resp.status_code} (server error)")
        return resp

    @staticmethod
    def _reason(resp: requests.Response) -> str:
        """Best-effort error message from a JSON error body."""
        try:
            data = resp.json()
        except ValueError:
            return f"HTTP {resp.status_code}"
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return f"HTTP {resp.status_code}"

    def _raise_unexpected(self, resp: requests.Response, path: str) -> None:
        """Only a 2xx answer counts as approval; redirects are not followed for POST."""
        try:
            resp.raise_for_status()
        except requests.exceptions.HTTPError as e:
            log.error("Custodian HTTP error on %s: %s", path, e)
            raise CustodianUnavailableError(f"Custodian HTTP error: {e}") from e
        if not 200 <= resp.status_code < 300:
            log.error("Custodian returned unexpected status %d on %s", resp.status_code, path)
            raise CustodianUnavailableError(f"Custodian returned unexpected status {resp.status_code}")

    def authorize(self, pin: PinCode, card: Card) -> None:
        """
        Ask the custodian to accept the card/PIN pair.

        Raises:
            AuthorizationError: If the custodian rejects the credentials (401/403)
            CustodianUnavailableError: On network failures or unexpected statuses
        """
        resp = self._post("/authorizations", {"card": card.number, "pin": pin.as_string()})
        if resp.status_code in AUTH_REJECT_STATUSES:
            log.info("Custodian rejected authorization for %s", card.masked())
            raise AuthorizationError(self._reason(resp))
        self._raise_unexpected(resp, "/authorizations")
        log.debug("Custodian authorized %s", card.masked())

    def charge(self, card: Card, amount: Money) -> None:
        """
        Ask the custodian to debit the card's account.

        Raises:
            AccountError: If the account cannot cover the charge (402/409/422)
            CustodianUnavailableError: On network failures or unexpected statuses
        """
        payload = {"card": card.number, "amount": _amount_text(amount), "currency": amount.currency}
        resp = self._post("/charges", payload)
        if resp.status_code in CHARGE_REJECT_STATUSES:
            log.info("Custodian rejected charge of %s for %s", amount, card.masked())
            raise AccountError(self._reason(resp))
        self._raise_unexpected(resp, "/charges")
        log.debug("Custodian charged %s to %s", amount, card.masked())
