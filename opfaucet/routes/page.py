from fastapi import APIRouter, Depends
from typing import Optional
from opfaucet.models.schemas import AddressCheck, PageView, SessionInfo
from opfaucet.services.page import FaucetPage
from opfaucet.utils.auth import get_session

router = APIRouter()

@router.get("/", response_model=PageView)
async def get_page(session: Optional[SessionInfo] = Depends(get_session)):
    return FaucetPage(session=session).view()

@router.get("/address/validate", response_model=AddressCheck)
async def validate_address(address: str = ""):
    """Validity and claim control label for the address typed so far."""
    page = FaucetPage()
    page.set_address(address)
    return AddressCheck(address=address, valid=page.address_valid, label=page.claim_label)
