from typing import Optional, TYPE_CHECKING
import httpx
import logging
from opfaucet.config import settings
from opfaucet.models.schemas import ClaimRequest

if TYPE_CHECKING:
    from opfaucet.services.page import FaucetPage

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Tokens dispersed—check balances shortly!"
FALLBACK_ERROR_MESSAGE = "Unable to process claim, please try again later."

def extract_error_message(resp: httpx.Response) -> Optional[str]:
    """
    Server supplied error text of a failed claim, if the body carries one.
    """
    try:
        content = resp.json()
    except ValueError:
        return None
    if not isinstance(content, dict):
        return None
    error = content.get("error")
    if isinstance(error, str) and error:
        return error
    return None

class ClaimSubmitter:
    """
    Sends one claim to the faucet backend per call.

    The address is assumed to be validated already. There is no retry and no
    guard against overlapping calls; the page keeps its claim control disabled
    while loading instead.
    """

    def __init__(self, client: httpx.AsyncClient, claim_path: Optional[str] = None):
        self.client = client
        self.claim_path = claim_path or settings.CLAIM_PATH

    async def submit(self, page: "FaucetPage"):
        page.loading = True
        try:
            payload = ClaimRequest(address=page.address)
            try:
                resp = await self.client.post(self.claim_path, json=payload.model_dump())
            except httpx.HTTPError as e:
                logger.error(f"Claim request for {payload.address} failed without a response: {str(e)}")
                page.notify_error(FALLBACK_ERROR_MESSAGE)
                return

            if resp.is_success:
                logger.info(f"✅ Claim accepted for {payload.address}")
                page.notify_success(SUCCESS_MESSAGE)
                return

            message = extract_error_message(resp)
            if message is None:
                logger.warning(
                    f"Claim for {payload.address} failed with status {resp.status_code} "
                    f"and no error message: {resp.text[:200]!r}"
                )
                message = FALLBACK_ERROR_MESSAGE
            else:
                logger.info(f"Claim for {payload.address} rejected ({resp.status_code}): {message}")
            page.notify_error(message)
        finally:
            page.loading = False
