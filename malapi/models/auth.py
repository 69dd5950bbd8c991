"""OAuth2 models."""

from __future__ import annotations

from .common import MALModel


class OAuthRequest(MALModel):
    """Authorization URL to send the user to, with the verifier to keep.

    The verifier is needed again to exchange the returned code.
    """

    url: str
    code_verifier: str
    state: str | None = None


class TokenResponse(MALModel):
    token_type: str
    expires_in: int
    access_token: str
    refresh_token: str
