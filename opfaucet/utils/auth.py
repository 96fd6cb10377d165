from fastapi import Cookie, HTTPException, status
from jose import JWTError, jwt
from datetime import datetime, timedelta
from typing import Optional
from pydantic import ValidationError
from opfaucet.config import settings
from opfaucet.models.schemas import SessionInfo
import logging

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

def create_session_token(session: SessionInfo) -> str:
    """
    Create a signed session token carrying the GitHub login.
    """
    expire = datetime.utcnow() + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)
    to_encode = {"sub": session.github_name, "exp": expire}
    return jwt.encode(to_encode, settings.SESSION_SECRET_KEY, algorithm=ALGORITHM)

def read_session_token(token: Optional[str]) -> Optional[SessionInfo]:
    """
    Decode a session token. Missing, expired or tampered tokens mean no session.
    """
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.SESSION_SECRET_KEY, algorithms=[ALGORITHM])
        return SessionInfo(github_name=payload.get("sub") or "")
    except (JWTError, ValidationError) as e:
        logger.info(f"Ignoring invalid session token: {str(e)}")
        return None

async def get_session(
    faucet_session: Optional[str] = Cookie(default=None, alias=settings.SESSION_COOKIE_NAME),
) -> Optional[SessionInfo]:
    return read_session_token(faucet_session)

async def require_session(
    faucet_session: Optional[str] = Cookie(default=None, alias=settings.SESSION_COOKIE_NAME),
) -> SessionInfo:
    """
    Session of the caller, or 401 when signed out.
    """
    session = read_session_token(faucet_session)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sign in with Github to claim tokens",
        )
    return session
