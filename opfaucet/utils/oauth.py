from typing import Optional
from urllib.parse import urlencode
import httpx
import logging
from opfaucet.config import settings
from opfaucet.models.schemas import SessionInfo

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://github.com/login/oauth/authorize"
ACCESS_TOKEN_URL = "https://github.com/login/oauth/access_token"
USER_URL = "https://api.github.com/user"

# Read-only profile access is all the faucet needs to tell users apart
SCOPE = "read:user"

SUPPORTED_PROVIDERS = ("github",)

class OAuthError(Exception):
    """Raised when the provider refuses the code or returns an unusable profile."""

def json_object(resp: httpx.Response) -> dict:
    """
    Decode a provider response that must be a JSON object.
    """
    try:
        content = resp.json()
    except ValueError:
        raise OAuthError(f"GitHub returned a non-JSON response ({resp.status_code})")
    if not isinstance(content, dict):
        raise OAuthError("GitHub returned an unexpected response")
    return content

class GithubOAuthClient:
    def __init__(self, client: httpx.AsyncClient, client_id: Optional[str] = None, client_secret: Optional[str] = None, redirect_url: Optional[str] = None):
        self.client = client
        self.client_id = client_id if client_id is not None else settings.GITHUB_CLIENT_ID
        self.client_secret = client_secret if client_secret is not None else settings.GITHUB_CLIENT_SECRET
        self.redirect_url = redirect_url or settings.OAUTH_REDIRECT_URL

    def authorize_url(self, state: str) -> str:
        query = urlencode({
            "client_id": self.client_id,
            "redirect_uri": self.redirect_url,
            "scope": SCOPE,
            "state": state,
        })
        return f"{AUTHORIZE_URL}?{query}"

    async def exchange_code(self, code: str) -> str:
        """
        Trade an authorization code for an access token.
        """
        resp = await self.client.post(
            ACCESS_TOKEN_URL,
            data={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "code": code,
                "redirect_uri": self.redirect_url,
            },
            headers={"Accept": "application/json"},
        )
        resp.raise_for_status()
        content = json_object(resp)
        access_token = content.get("access_token")
        if not access_token:
            raise OAuthError(content.get("error_description") or content.get("error") or "No access token returned")
        return access_token

    async def fetch_session(self, access_token: str) -> SessionInfo:
        resp = await self.client.get(
            USER_URL,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/vnd.github+json",
            },
        )
        resp.raise_for_status()
        login = json_object(resp).get("login")
        if not isinstance(login, str) or not login:
            raise OAuthError("GitHub profile has no login")
        return SessionInfo(github_name=login)

    async def sign_in(self, code: str) -> SessionInfo:
        access_token = await self.exchange_code(code)
        session = await self.fetch_session(access_token)
        logger.info(f"GitHub sign-in completed for @{session.github_name}")
        return session
