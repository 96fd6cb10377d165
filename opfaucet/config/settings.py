import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Claim backend
FAUCET_API_URL = os.getenv("FAUCET_API_URL", "http://localhost:3000").rstrip("/")
CLAIM_PATH = os.getenv("CLAIM_PATH", "/api/claim/claim")

# "strict" accepts checksum-cased addresses only,
# "checksum_or_lowercase" also accepts single-case hex addresses
ADDRESS_POLICY = os.getenv("ADDRESS_POLICY", "strict").lower()

# Session cookie
SESSION_SECRET_KEY = os.getenv("SESSION_SECRET_KEY", "your-secret-key")  # Replace with a secure key in production
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "faucet_session")
SESSION_EXPIRE_MINUTES = int(os.getenv("SESSION_EXPIRE_MINUTES", "1440"))

# GitHub OAuth app
GITHUB_CLIENT_ID = os.getenv("GITHUB_CLIENT_ID", "")
GITHUB_CLIENT_SECRET = os.getenv("GITHUB_CLIENT_SECRET", "")
OAUTH_REDIRECT_URL = os.getenv("OAUTH_REDIRECT_URL", "http://localhost:8000/auth/callback/github")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")

# Validate settings
if not FAUCET_API_URL.startswith(("http://", "https://")):
    raise ValueError(f"Invalid FAUCET_API_URL: {FAUCET_API_URL}")
if not CLAIM_PATH.startswith("/"):
    raise ValueError(f"Invalid CLAIM_PATH: {CLAIM_PATH}. It must start with '/'")
if ADDRESS_POLICY not in ("strict", "checksum_or_lowercase"):
    raise ValueError(
        f"Invalid ADDRESS_POLICY: {ADDRESS_POLICY}. Use 'strict' or 'checksum_or_lowercase'"
    )
if SESSION_EXPIRE_MINUTES <= 0:
    raise ValueError(f"SESSION_EXPIRE_MINUTES must be positive, got {SESSION_EXPIRE_MINUTES}")
