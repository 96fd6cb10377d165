from fastapi import FastAPI
from datetime import datetime
import logging
from opfaucet.config import settings
from opfaucet.middleware.cors import setup_cors
from opfaucet.routes import auth, claim, page

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Optimism Kovan Faucet")

setup_cors(app)

# Mount routes
app.include_router(page.router)
app.include_router(claim.router, prefix="/claim")
app.include_router(auth.router, prefix="/auth")

if settings.SESSION_SECRET_KEY == "your-secret-key":
    logger.warning("SESSION_SECRET_KEY is not set, session cookies are signed with the default key")

@app.get("/health")
async def health_check():
    return {"status": "ok", "timestamp": datetime.utcnow().isoformat()}

def run():
    import uvicorn
    uvicorn.run("opfaucet.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)

if __name__ == "__main__":
    run()
