"""
Account store exceptions.

Adapters normalize whatever their SDK raises into AccountStoreError so
callers can map `provider_code` without knowing which SDK is behind the
interface.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError

# Provider codes the adapters emit for failures that carry no SDK code
NETWORK_REQUEST_FAILED = "network_request_failed"
POPUP_CLOSED_BY_USER = "popup_closed_by_user"
POPUP_BLOCKED = "popup_blocked"


class AccountStoreError(ExternalServiceError):
    """Raised when the account & profile store rejects or fails a request."""

    def __init__(
        self,
        message: str,
        provider_code: Optional[str] = None,
        status: Optional[int] = None,
    ):
        super().__init__(
            message,
            service="account_store",
            code="ACCOUNT_STORE_ERROR",
            details={"provider_code": provider_code, "status": status},
        )
        self.provider_code = provider_code
        self.status = status


class AccountStoreUnavailableError(AccountStoreError):
    """Raised when the store cannot be reached at all."""

    def __init__(self, message: str = "Account store unreachable"):
        super().__init__(message, provider_code=NETWORK_REQUEST_FAILED)


class CredentialExchangeError(AccountStoreError):
    """Raised by federated credential providers when the exchange fails."""

    def __init__(self, message: str, provider_code: Optional[str] = None):
        super().__init__(message, provider_code=provider_code)
