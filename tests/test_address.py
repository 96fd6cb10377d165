"""Tests for address validation."""

import pytest

from opfaucet.utils.address import (
    CHECKSUM_OR_LOWERCASE,
    STRICT,
    address_label,
    is_single_case_hex_address,
    is_valid_address,
    parse_address,
)

CHECKSUMMED = "0xAb5801a7D398351b8bE11C439e05C5B3259aeC9B"
LOWERCASE = "0xab5801a7d398351b8be11c439e05c5b3259aec9b"
UPPERCASE = "0xAB5801A7D398351B8BE11C439E05C5B3259AEC9B"
# First letter flipped to lowercase, breaking the checksum
BAD_CHECKSUM = "0xab5801a7D398351b8bE11C439e05C5B3259aeC9B"


def test_checksummed_address_is_valid():
    assert is_valid_address(CHECKSUMMED) is True


def test_empty_string_is_invalid():
    assert is_valid_address("") is False


@pytest.mark.parametrize("value", [
    "not-an-address",
    "0x123",
    BAD_CHECKSUM,
    LOWERCASE,
    UPPERCASE,
    "0xZb5801a7D398351b8bE11C439e05C5B3259aeC9B",
    CHECKSUMMED[2:],
    CHECKSUMMED + "00",
    " " + CHECKSUMMED,
])
def test_strict_policy_rejects(value):
    assert is_valid_address(value, STRICT) is False


@pytest.mark.parametrize("value", [CHECKSUMMED, LOWERCASE, UPPERCASE])
def test_lenient_policy_accepts_single_case(value):
    assert is_valid_address(value, CHECKSUM_OR_LOWERCASE) is True


@pytest.mark.parametrize("value", [BAD_CHECKSUM, "0x123", "", LOWERCASE[2:], "not-an-address"])
def test_lenient_policy_still_rejects(value):
    assert is_valid_address(value, CHECKSUM_OR_LOWERCASE) is False


@pytest.mark.parametrize("value", [None, 42, b"0xab", ["0x"], {"address": CHECKSUMMED}])
def test_non_string_input_never_raises(value):
    assert is_valid_address(value) is False
    assert is_valid_address(value, CHECKSUM_OR_LOWERCASE) is False


def test_unknown_policy_is_an_error_result():
    result = parse_address(CHECKSUMMED, "whatever")
    assert not result.ok
    assert "whatever" in result.error


def test_parse_returns_checksummed_address():
    result = parse_address(LOWERCASE, CHECKSUM_OR_LOWERCASE)
    assert result.ok
    assert result.address == CHECKSUMMED
    assert result.error is None


def test_parse_reports_reason():
    result = parse_address(BAD_CHECKSUM)
    assert not result.ok
    assert result.address is None
    assert result.error


def test_parse_swallows_library_errors(monkeypatch):
    from opfaucet.utils import address as address_module

    def boom(value):
        raise ValueError("parser exploded")

    monkeypatch.setattr(address_module.Web3, "is_checksum_address", boom)
    result = parse_address(CHECKSUMMED)
    assert not result.ok
    assert result.error == "parser exploded"
    assert is_valid_address(CHECKSUMMED) is False


def test_validation_is_idempotent():
    for value in [CHECKSUMMED, LOWERCASE, "", "0x123"]:
        assert is_valid_address(value) == is_valid_address(value)


@pytest.mark.parametrize("address, valid, loading, expected", [
    ("", False, False, "Enter Valid Address"),
    ("0x12", False, False, "Invalid Address"),
    (CHECKSUMMED, True, False, "Claim"),
    (CHECKSUMMED, True, True, "Claiming..."),
])
def test_address_label(address, valid, loading, expected):
    assert address_label(address, valid, loading) == expected


def test_lenient_policy_checks_mixed_case_checksum_itself():
    # Only one letter differs from the checksummed form
    assert BAD_CHECKSUM.lower() == CHECKSUMMED.lower()
    assert is_valid_address(BAD_CHECKSUM, CHECKSUM_OR_LOWERCASE) is False
    assert parse_address(BAD_CHECKSUM, CHECKSUM_OR_LOWERCASE).error == "Address is malformed or fails checksum"


@pytest.mark.parametrize("value, expected", [
    (LOWERCASE, True),
    (UPPERCASE, True),
    ("0x" + "1" * 40, True),
    (CHECKSUMMED, False),
    (BAD_CHECKSUM, False),
    (LOWERCASE[2:], False),
    ("0x123", False),
])
def test_is_single_case_hex_address(value, expected):
    assert is_single_case_hex_address(value) is expected
