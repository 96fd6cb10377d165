from typing import List, Optional, TYPE_CHECKING
import logging
from opfaucet.config import settings
from opfaucet.models.schemas import ClaimControl, Notification, PageView, SessionInfo
from opfaucet.utils.address import address_label, is_valid_address

if TYPE_CHECKING:
    from opfaucet.services.claim import ClaimSubmitter

logger = logging.getLogger(__name__)

TITLE = "Optimism Kovan faucet"
DESCRIPTION = "Fund your wallet with ETH and DAI on the Optimism Kovan network."
SIGN_IN_LABEL = "Sign In with Github"

class ClaimUnavailable(Exception):
    """Raised when the claim control is disabled for the current state."""

    def __init__(self, reason: str, authenticated: bool = True):
        super().__init__(reason)
        self.reason = reason
        self.authenticated = authenticated

class FaucetPage:
    """
    UI state of the faucet page: session, address input, loading flag and
    the notifications surfaced so far.

    Two flags drive what is reachable. Without a session only the sign-in
    control exists; with one, the address input and claim control appear and
    the claim control stays disabled while the address is invalid or a claim
    is in flight.
    """

    def __init__(self, session: Optional[SessionInfo] = None, address_policy: Optional[str] = None):
        self.session = session
        self.address_policy = address_policy or settings.ADDRESS_POLICY
        self.address = ""
        self.loading = False
        self.notifications: List[Notification] = []

    @property
    def is_authenticated(self) -> bool:
        return self.session is not None

    def sign_in(self, session: SessionInfo):
        self.session = session

    def sign_out(self):
        if self.session is None:
            return
        logger.info(f"Signing out @{self.session.github_name}")
        self.session = None

    def set_address(self, value: str):
        self.address = value

    @property
    def address_valid(self) -> bool:
        return is_valid_address(self.address, self.address_policy)

    @property
    def claim_enabled(self) -> bool:
        return self.is_authenticated and self.address_valid and not self.loading

    @property
    def claim_label(self) -> str:
        return address_label(self.address, self.address_valid, self.loading)

    def notify_success(self, message: str):
        self.notifications.append(Notification(level="success", message=message))

    def notify_error(self, message: str):
        self.notifications.append(Notification(level="error", message=message))

    async def claim(self, submitter: "ClaimSubmitter"):
        """
        Click on the claim control. Refused whenever the control is disabled.
        """
        if not self.is_authenticated:
            raise ClaimUnavailable("Sign in with Github to claim tokens", authenticated=False)
        if self.loading:
            raise ClaimUnavailable("A claim is already in progress")
        if not self.address_valid:
            raise ClaimUnavailable("Invalid address")
        await submitter.submit(self)

    def view(self) -> PageView:
        if not self.is_authenticated:
            return PageView(
                title=TITLE,
                description=DESCRIPTION,
                sign_in_label=SIGN_IN_LABEL,
                notifications=list(self.notifications),
            )

        return PageView(
            title=TITLE,
            description=DESCRIPTION,
            session=self.session,
            address=self.address,
            address_valid=self.address_valid,
            loading=self.loading,
            claim=ClaimControl(enabled=self.claim_enabled, label=self.claim_label),
            sign_out_label=f"Sign out @{self.session.github_name}",
            notifications=list(self.notifications),
        )
