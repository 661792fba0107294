"""Local signing backend.

Holds an EOA private key in memory and signs quote ids as EIP-191 personal
messages. Suitable for scripts, testnets and demos.

WARNING: The private key lives in process memory.
"""

import logging

from eth_account import Account
from eth_account.messages import encode_defunct

from notus_dx.signing.base import Signer, SignerError, quote_message_bytes

logger = logging.getLogger(__name__)


class LocalAccountSigner(Signer):
    """Signer backed by an ``eth_account`` local account."""

    def __init__(self, private_key: str):
        try:
            self._account = Account.from_key(private_key)
        except (ValueError, TypeError) as e:
            raise SignerError(f"Invalid private key: {e}") from e

    @classmethod
    def create(cls) -> "LocalAccountSigner":
        """Signer with a freshly generated key (testing only)."""
        account = Account.create()
        return cls("0x" + bytes(account.key).hex())

    @property
    def address(self) -> str:
        return self._account.address

    async def sign_quote(self, quote_id: str) -> str:
        message = encode_defunct(primitive=quote_message_bytes(quote_id))
        signed = self._account.sign_message(message)
        logger.debug(f"Signed quote {quote_id[:10]}... with {self.address[:10]}...")
        return "0x" + bytes(signed.signature).hex()


def recover_quote_signer(quote_id: str, signature: str) -> str:
    """Address that produced ``signature`` over ``quote_id``."""
    message = encode_defunct(primitive=quote_message_bytes(quote_id))
    return Account.recover_message(message, signature=signature)
