"""
Account addresses.

Addresses are 8 bytes wide. Hex input shorter than that is left-padded
with zeros; the canonical text form is 16 lowercase hex digits.
"""

from dataclasses import dataclass
from typing import Union

from .errors import InvalidAddressError


ADDRESS_LENGTH = 8


@dataclass(frozen=True)
class Address:
    """An 8-byte account address."""
    value: bytes

    def __post_init__(self):
        if len(self.value) != ADDRESS_LENGTH:
            raise InvalidAddressError(self.value.hex(), f"must be {ADDRESS_LENGTH} bytes")

    @classmethod
    def from_hex(cls, text: Union[str, 'Address']) -> 'Address':
        """Parse a hex address, with or without the `0x` prefix."""
        if isinstance(text, Address):
            return text

        digits = text.strip()
        if digits[:2] in ('0x', '0X'):
            digits = digits[2:]

        if not digits:
            raise InvalidAddressError(text, "no hex digits")
        if len(digits) > ADDRESS_LENGTH * 2:
            raise InvalidAddressError(text, f"longer than {ADDRESS_LENGTH} bytes")
        try:
            value = bytes.fromhex(digits.rjust(ADDRESS_LENGTH * 2, '0'))
        except ValueError:
            raise InvalidAddressError(text, "not a hex value") from None
        return cls(value)

    def literal(self) -> str:
        """The `0x`-prefixed literal used in place of an import location."""
        return f"0x{self}"

    def __str__(self) -> str:
        return self.value.hex()
