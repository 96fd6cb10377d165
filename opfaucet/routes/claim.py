from fastapi import APIRouter, Depends, HTTPException, status
import httpx
import logging
from opfaucet.config import settings
from opfaucet.models.schemas import ClaimRequest, PageView, SessionInfo
from opfaucet.services.claim import ClaimSubmitter
from opfaucet.services.page import ClaimUnavailable, FaucetPage
from opfaucet.utils.auth import require_session

logger = logging.getLogger(__name__)

router = APIRouter()

# Claim backend client for one request
async def get_claim_submitter():
    async with httpx.AsyncClient(base_url=settings.FAUCET_API_URL) as client:
        yield ClaimSubmitter(client)

@router.post("", response_model=PageView)
async def claim(
    request: ClaimRequest,
    session: SessionInfo = Depends(require_session),
    submitter: ClaimSubmitter = Depends(get_claim_submitter),
):
    page = FaucetPage(session=session)
    page.set_address(request.address)

    try:
        await page.claim(submitter)
    except ClaimUnavailable as e:
        code = status.HTTP_400_BAD_REQUEST if e.authenticated else status.HTTP_401_UNAUTHORIZED
        raise HTTPException(status_code=code, detail=e.reason)
    except Exception as e:
        logger.exception(f"Unexpected error while claiming for @{session.github_name}")
        raise HTTPException(status_code=500, detail=f"Failed to process claim: {str(e)}")

    return page.view()
