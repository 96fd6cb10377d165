from pydantic import BaseModel, Field
from typing import Optional, List, Literal

class SessionInfo(BaseModel):
    github_name: str = Field(..., min_length=1, description="GitHub login shown on the sign-out control")

class ClaimRequest(BaseModel):
    address: str = Field(..., description="Ethereum address receiving the tokens")

class Notification(BaseModel):
    level: Literal["success", "error"]
    message: str

class AddressCheck(BaseModel):
    address: str
    valid: bool
    label: str

class ClaimControl(BaseModel):
    enabled: bool
    label: str

class PageView(BaseModel):
    title: str
    description: str
    session: Optional[SessionInfo] = None
    address: str = ""
    address_valid: bool = False
    loading: bool = False
    # Only set while unauthenticated
    sign_in_label: Optional[str] = None
    # Only set while authenticated
    claim: Optional[ClaimControl] = None
    sign_out_label: Optional[str] = None
    notifications: List[Notification] = []
