from typing import List, Optional
from fastapi.middleware.cors import CORSMiddleware
from opfaucet.config.settings import ALLOWED_ORIGINS

def setup_cors(app, origins: Optional[List[str]] = None):
    """
    Let the faucet frontend read page state and post claims with its session cookie.

    Credentialed requests cannot target a wildcard origin, so "*" disables the cookie.
    """
    origins = [origin.strip().rstrip("/") for origin in (origins if origins is not None else ALLOWED_ORIGINS) if origin.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )
