"""Tests for quote signing."""

import pytest

from notus_dx.client.exceptions import NotusError
from notus_dx.signing import LocalAccountSigner, SignerError, recover_quote_signer
from notus_dx.signing.base import quote_message_bytes

# Well-known development key (Hardhat account #0)
DEV_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
DEV_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


class TestQuoteMessage:
    """Tests for the bytes that get signed."""

    def test_hex_quote_id_is_decoded(self):
        assert quote_message_bytes("0x0102ff") == b"\x01\x02\xff"

    def test_plain_quote_id_is_utf8(self):
        assert quote_message_bytes("quote-123") == b"quote-123"

    def test_invalid_hex_falls_back_to_text(self):
        assert quote_message_bytes("0xnothex") == b"0xnothex"


class TestLocalAccountSigner:
    """Tests for the eth_account backed signer."""

    def test_address_from_key(self):
        assert LocalAccountSigner(DEV_KEY).address == DEV_ADDRESS

    def test_invalid_key(self):
        with pytest.raises(SignerError):
            LocalAccountSigner("0x1234")

    def test_invalid_key_is_a_client_error(self):
        with pytest.raises(NotusError):
            LocalAccountSigner("0x1234")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quote_id", ["0x" + "cd" * 32, "quote-abc"])
    async def test_signature_recovers_to_signer(self, quote_id):
        signer = LocalAccountSigner(DEV_KEY)

        signature = await signer.sign_quote(quote_id)

        assert signature.startswith("0x")
        assert len(signature) == 2 + 65 * 2
        assert recover_quote_signer(quote_id, signature) == DEV_ADDRESS

    @pytest.mark.asyncio
    async def test_signatures_are_deterministic(self):
        signer = LocalAccountSigner(DEV_KEY)

        assert await signer.sign_quote("0xabcd") == await signer.sign_quote("0xabcd")
