"""Shared type definitions for token and pool models."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.
                  If False (default), returns normalized form without validation.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        ValueError: If validate=True and address is not a valid Ethereum address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address.

    Args:
        address: String to validate

    Returns:
        True if valid Ethereum address format
    """
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def _normalize_if_str(value: Any) -> Any:
    # Non-strings fall through to the pattern check and fail there
    if isinstance(value, str):
        return normalize_address(value)
    return value


# Ethereum address, lowercased before the format check
Address = Annotated[
    str,
    BeforeValidator(_normalize_if_str),
    Field(pattern=r"^0x[a-f0-9]{40}$"),
]

__all__ = ["Address", "normalize_address", "is_valid_address"]
