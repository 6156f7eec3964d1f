"""
Account store data models.

These models describe what the identity provider hands back to the
session coordinator.
"""

from typing import Optional
from pydantic import BaseModel, Field


class IdentityUser(BaseModel):
    """An authenticated identity as reported by the identity provider."""

    uid: str = Field(..., description="Identity provider user ID")
    email: Optional[str] = Field(None, description="Email on the identity")
    display_name: Optional[str] = Field(None, description="Display name, if set")
    photo_url: Optional[str] = Field(None, description="Provider avatar URL")

    model_config = {"frozen": True}


class FederatedCredential(BaseModel):
    """
    Credential obtained from a federated identity exchange.

    How it is obtained (browser popup, native redirect, device flow) is
    up to the credential provider; the store only needs the tokens.
    """

    provider: str = Field(default="google", description="Federated provider name")
    id_token: str = Field(..., min_length=1, description="OpenID Connect ID token")
    access_token: Optional[str] = Field(None, description="OAuth access token")
    nonce: Optional[str] = Field(None, description="Nonce used for the ID token")


class ServerTimestamp:
    """Sentinel asking the store to stamp a field with its own clock."""

    _instance: Optional["ServerTimestamp"] = None

    def __new__(cls) -> "ServerTimestamp":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = ServerTimestamp()
