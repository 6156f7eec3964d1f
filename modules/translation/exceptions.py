"""
Translation module exceptions.
"""

from shared.exceptions import ExternalServiceError


class TranslationFailedError(ExternalServiceError):
    """Raised for any upstream translation failure."""

    def __init__(self, reason: str):
        super().__init__(
            f"Translation failed: {reason}",
            service="translate",
            code="TRANSLATION_FAILED",
            details={"reason": reason},
        )
        self.reason = reason
