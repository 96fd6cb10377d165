from fastapi import APIRouter, Cookie, Depends, HTTPException, Response
from fastapi.responses import RedirectResponse
from typing import Optional
import httpx
import logging
import secrets
from opfaucet.config import settings
from opfaucet.models.schemas import SessionInfo
from opfaucet.utils.auth import create_session_token, get_session
from opfaucet.utils.oauth import SUPPORTED_PROVIDERS, GithubOAuthClient, OAuthError

logger = logging.getLogger(__name__)

router = APIRouter()

STATE_COOKIE_NAME = "faucet_oauth_state"

async def get_oauth_client():
    async with httpx.AsyncClient() as client:
        yield GithubOAuthClient(client)

def check_provider(provider: str):
    if provider not in SUPPORTED_PROVIDERS:
        raise HTTPException(status_code=400, detail=f"Unsupported sign-in provider: {provider}")

@router.get("/signin/{provider}")
async def sign_in(provider: str, oauth: GithubOAuthClient = Depends(get_oauth_client)):
    check_provider(provider)
    state = secrets.token_urlsafe(16)
    response = RedirectResponse(oauth.authorize_url(state))
    response.set_cookie(STATE_COOKIE_NAME, state, max_age=600, httponly=True, samesite="lax")
    return response

@router.get("/callback/{provider}")
async def callback(
    provider: str,
    code: Optional[str] = None,
    state: Optional[str] = None,
    error: Optional[str] = None,
    error_description: Optional[str] = None,
    faucet_oauth_state: Optional[str] = Cookie(default=None, alias=STATE_COOKIE_NAME),
    oauth: GithubOAuthClient = Depends(get_oauth_client),
):
    check_provider(provider)
    if not faucet_oauth_state or not state or not secrets.compare_digest(faucet_oauth_state, state):
        raise HTTPException(status_code=400, detail="Invalid OAuth state")

    # GitHub redirects back without a code when the user declines
    if error or not code:
        reason = error_description or error or "no authorization code returned"
        logger.warning(f"GitHub sign-in was not completed: {reason}")
        raise HTTPException(status_code=502, detail=f"GitHub sign-in failed: {reason}")

    try:
        session = await oauth.sign_in(code)
    except (OAuthError, httpx.HTTPError) as e:
        logger.warning(f"GitHub sign-in failed: {str(e)}")
        raise HTTPException(status_code=502, detail=f"GitHub sign-in failed: {str(e)}")

    response = RedirectResponse("/", status_code=303)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        create_session_token(session),
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=not settings.DEBUG,
    )
    response.delete_cookie(STATE_COOKIE_NAME)
    return response

@router.get("/session", response_model=Optional[SessionInfo])
async def read_session(session: Optional[SessionInfo] = Depends(get_session)):
    return session

@router.post("/signout")
async def sign_out(response: Response, session: Optional[SessionInfo] = Depends(get_session)):
    if session is not None:
        logger.info(f"Signing out @{session.github_name}")
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"signedIn": False}
