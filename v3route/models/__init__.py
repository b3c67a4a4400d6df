"""Shared pydantic types."""

from v3route.models.types import Address, is_valid_address, normalize_address

__all__ = ["Address", "is_valid_address", "normalize_address"]
