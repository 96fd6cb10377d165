from dataclasses import dataclass
from typing import Any, Optional
from eth_utils import is_hex_address
from web3 import Web3
import logging

logger = logging.getLogger(__name__)

STRICT = "strict"
CHECKSUM_OR_LOWERCASE = "checksum_or_lowercase"

@dataclass(frozen=True)
class AddressResult:
    """
    Outcome of parsing a user supplied address.
    Holds the checksummed address on success, or the reason it was rejected.
    """
    address: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.address is not None

def is_single_case_hex_address(address: str) -> bool:
    """0x-prefixed 40 hex digits written entirely in lower or upper case."""
    if not address.startswith("0x") or not is_hex_address(address):
        return False
    digits = address[2:]
    return digits == digits.lower() or digits == digits.upper()

def parse_address(address: Any, policy: str = STRICT) -> AddressResult:
    """
    Parse an address with the given checksum policy.

    Never raises: anything the web3 helpers throw is returned as an error result.
    """
    try:
        if not isinstance(address, str) or not address:
            return AddressResult(error="Address is empty")

        if policy == STRICT:
            if not Web3.is_checksum_address(address):
                return AddressResult(error="Address is not checksum-cased")
        elif policy == CHECKSUM_OR_LOWERCASE:
            # Mixed case must carry a valid checksum, single case skips it
            if not Web3.is_checksum_address(address) and not is_single_case_hex_address(address):
                return AddressResult(error="Address is malformed or fails checksum")
        else:
            return AddressResult(error=f"Unknown address policy: {policy}")

        return AddressResult(address=Web3.to_checksum_address(address))
    except Exception as e:
        logger.debug(f"Address parsing failed for {address!r}: {str(e)}")
        return AddressResult(error=str(e))

def is_valid_address(address: Any, policy: str = STRICT) -> bool:
    """
    Check if a provided address is valid for the claim form.
    """
    return parse_address(address, policy).ok

def address_label(address: str, valid: bool, loading: bool = False) -> str:
    """Text of the claim control for the current input."""
    if not valid:
        return "Enter Valid Address" if address == "" else "Invalid Address"
    return "Claiming..." if loading else "Claim"
