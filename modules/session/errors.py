"""
Provider error code mapping.

Each session action has its own table because the same provider code
means different things to the user depending on what they were doing.
"""

from modules.accounts.exceptions import (
    AccountStoreError,
    NETWORK_REQUEST_FAILED,
    POPUP_BLOCKED,
    POPUP_CLOSED_BY_USER,
)

from .models import AuthErrorCategory

SIGN_IN_ERRORS: dict[str, AuthErrorCategory] = {
    "invalid_credentials": AuthErrorCategory.INVALID_CREDENTIALS,
    "invalid_grant": AuthErrorCategory.INVALID_CREDENTIALS,
    "user_not_found": AuthErrorCategory.ACCOUNT_NOT_FOUND,
    "over_request_rate_limit": AuthErrorCategory.RATE_LIMITED,
    NETWORK_REQUEST_FAILED: AuthErrorCategory.NETWORK,
    "user_banned": AuthErrorCategory.ACCOUNT_DISABLED,
    "email_address_invalid": AuthErrorCategory.INVALID_EMAIL,
}

REGISTER_ERRORS: dict[str, AuthErrorCategory] = {
    "email_exists": AuthErrorCategory.EMAIL_IN_USE,
    "user_already_exists": AuthErrorCategory.EMAIL_IN_USE,
    "email_address_invalid": AuthErrorCategory.INVALID_EMAIL,
    "weak_password": AuthErrorCategory.WEAK_PASSWORD,
    "over_request_rate_limit": AuthErrorCategory.RATE_LIMITED,
    "over_email_send_rate_limit": AuthErrorCategory.RATE_LIMITED,
    NETWORK_REQUEST_FAILED: AuthErrorCategory.NETWORK,
    "signup_disabled": AuthErrorCategory.OPERATION_NOT_ALLOWED,
    "email_provider_disabled": AuthErrorCategory.OPERATION_NOT_ALLOWED,
}

FEDERATED_ERRORS: dict[str, AuthErrorCategory] = {
    POPUP_CLOSED_BY_USER: AuthErrorCategory.CANCELLED,
    POPUP_BLOCKED: AuthErrorCategory.POPUP_BLOCKED,
    NETWORK_REQUEST_FAILED: AuthErrorCategory.NETWORK,
    "over_request_rate_limit": AuthErrorCategory.RATE_LIMITED,
}


def map_provider_error(
    error: AccountStoreError,
    table: dict[str, AuthErrorCategory],
) -> AuthErrorCategory:
    """
    Map a store failure to a user-facing category.

    Unknown codes map to UNKNOWN; an HTTP 429 without a known code is
    still reported as rate limiting.
    """
    if error.provider_code and error.provider_code in table:
        return table[error.provider_code]
    if error.status == 429:
        return AuthErrorCategory.RATE_LIMITED
    return AuthErrorCategory.UNKNOWN
