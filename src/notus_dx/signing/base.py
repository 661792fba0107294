"""Base interface for UserOperation signers.

Signing flow:
1. Request a quote (swap, transfer, cross-chain swap, liquidity)
2. The EOA that controls the smart wallet signs the quote id
3. The signature is submitted with the quote id for execution
"""

from abc import ABC, abstractmethod

from notus_dx.client.exceptions import NotusError


class SignerError(NotusError):
    """Raised when a quote cannot be signed."""


class Signer(ABC):
    """Abstract base class for EOA signers.

    Implementations should NEVER expose raw private keys.
    """

    @property
    @abstractmethod
    def address(self) -> str:
        """Checksummed EOA address."""
        raise NotImplementedError()

    @abstractmethod
    async def sign_quote(self, quote_id: str) -> str:
        """Sign a quote id and return a 0x-prefixed hex signature."""
        raise NotImplementedError()


def quote_message_bytes(quote_id: str) -> bytes:
    """Bytes that get signed for a quote id.

    Hex quote ids are signed as raw bytes; anything else as UTF-8 text.
    """
    if quote_id.startswith("0x"):
        try:
            return bytes.fromhex(quote_id[2:])
        except ValueError:
            pass
    return quote_id.encode("utf-8")
