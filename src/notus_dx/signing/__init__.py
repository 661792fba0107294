"""EOA signers for UserOperation quotes."""

from notus_dx.signing.base import Signer, SignerError
from notus_dx.signing.local import LocalAccountSigner, recover_quote_signer

__all__ = ["LocalAccountSigner", "Signer", "SignerError", "recover_quote_signer"]
