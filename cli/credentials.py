"""Federated credential provider for the terminal client."""

from typing import Optional

from modules.accounts.exceptions import POPUP_CLOSED_BY_USER, CredentialExchangeError
from modules.accounts.interfaces import IFederatedCredentialProvider
from modules.accounts.models import FederatedCredential


class TokenCredentialProvider(IFederatedCredentialProvider):
    """
    Uses a Google ID token obtained out of band (e.g. pasted by the user).

    A missing token is treated like a closed sign-in popup.
    """

    def __init__(self, id_token: Optional[str], nonce: Optional[str] = None):
        self._id_token = id_token
        self._nonce = nonce

    async def obtain_credential(self) -> FederatedCredential:
        if not self._id_token:
            raise CredentialExchangeError(
                "No Google ID token supplied", provider_code=POPUP_CLOSED_BY_USER
            )
        return FederatedCredential(provider="google", id_token=self._id_token, nonce=self._nonce)
