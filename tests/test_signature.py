"""Tests for webhook signature computation and verification."""

import base64
import hashlib
import hmac

import pytest

from notus_dx.webhooks.signature import (
    compute_signature,
    decode_secret,
    extract_signatures,
    sign_payload,
    timestamp_age,
    verify_signature,
)
from notus_dx.webhooks.verifier import RejectionReason, WebhookRejected, WebhookVerifier

from conftest import WEBHOOK_SECRET

BODY = b'{"event_type":"swap.completed","data":{},"timestamp":"2026-10-19T12:00:00Z","id":"evt_1"}'
TS = "1760875200"


class TestSecretDecoding:
    """Tests for the whsec_ secret format."""

    def test_prefix_is_stripped(self):
        assert decode_secret(WEBHOOK_SECRET) == b"notus-dx-test-webhook-secret"

    def test_prefix_is_optional(self):
        bare = WEBHOOK_SECRET[len("whsec_"):]
        assert decode_secret(bare) == decode_secret(WEBHOOK_SECRET)

    def test_invalid_base64_raises(self):
        with pytest.raises(ValueError):
            decode_secret("whsec_not*base64!")


class TestComputeSignature:
    """Tests for HMAC computation."""

    def test_matches_manual_hmac(self):
        """Signature is base64(HMAC-SHA256(key, "<ts>.<body>"))."""
        key = b"notus-dx-test-webhook-secret"
        expected = base64.b64encode(
            hmac.new(key, TS.encode() + b"." + BODY, hashlib.sha256).digest()
        ).decode()

        assert compute_signature(TS, BODY, WEBHOOK_SECRET) == expected

    def test_str_and_bytes_body_agree(self):
        assert compute_signature(TS, BODY.decode(), WEBHOOK_SECRET) == compute_signature(
            TS, BODY, WEBHOOK_SECRET
        )

    def test_sign_payload_has_version_prefix(self):
        header = sign_payload(TS, BODY, WEBHOOK_SECRET)
        assert header.startswith("v1,")
        assert header[3:] == compute_signature(TS, BODY, WEBHOOK_SECRET)


class TestVerifySignature:
    """Tests for constant-time verification."""

    @pytest.mark.parametrize(
        "body",
        [BODY, b"", b"{}", '{"emoji": "✓"}'.encode()],
    )
    def test_valid_signature_verifies(self, body):
        signature = compute_signature(TS, body, WEBHOOK_SECRET)
        assert verify_signature(body, signature, WEBHOOK_SECRET, TS) is True

    def test_different_secret_fails(self):
        other = "whsec_" + base64.b64encode(b"some-other-secret").decode()
        signature = compute_signature(TS, BODY, other)
        assert verify_signature(BODY, signature, WEBHOOK_SECRET, TS) is False

    def test_different_body_fails(self):
        signature = compute_signature(TS, BODY, WEBHOOK_SECRET)
        tampered = BODY.replace(b"swap.completed", b"kyc.completed")
        assert verify_signature(tampered, signature, WEBHOOK_SECRET, TS) is False

    def test_different_timestamp_fails(self):
        signature = compute_signature(TS, BODY, WEBHOOK_SECRET)
        assert verify_signature(BODY, signature, WEBHOOK_SECRET, "1760875201") is False

    def test_reserialized_body_fails(self):
        """Whitespace changes break the signature; the raw bytes are what count."""
        signature = compute_signature(TS, BODY, WEBHOOK_SECRET)
        assert verify_signature(BODY.replace(b",", b", "), signature, WEBHOOK_SECRET, TS) is False

    def test_malformed_secret_fails_closed(self):
        assert verify_signature(BODY, "anything", "whsec_***", TS) is False

    def test_non_ascii_signature_fails_closed(self):
        assert verify_signature(BODY, "signé", WEBHOOK_SECRET, TS) is False


class TestSignatureHeader:
    """Tests for parsing the svix-signature header."""

    def test_single_entry(self):
        assert extract_signatures("v1,abc=") == ["abc="]

    def test_multiple_entries(self):
        assert extract_signatures("v1,abc= v1,def=") == ["abc=", "def="]

    def test_empty_header(self):
        assert extract_signatures("") == []


class TestTimestamp:
    """Tests for the replay window."""

    def test_age_is_absolute(self):
        assert timestamp_age("1000", now=1300) == 300
        assert timestamp_age("1300", now=1000) == 300

    def test_boundary_is_accepted(self):
        """A delivery exactly at the tolerance passes; one second later is stale."""
        headers = {
            "svix-id": "msg_1",
            "svix-timestamp": "1000",
            "svix-signature": sign_payload("1000", BODY, WEBHOOK_SECRET),
        }

        WebhookVerifier(WEBHOOK_SECRET, clock=lambda: 1300).verify(headers, BODY)
        with pytest.raises(WebhookRejected) as exc_info:
            WebhookVerifier(WEBHOOK_SECRET, clock=lambda: 1301).verify(headers, BODY)

        assert exc_info.value.reason == RejectionReason.STALE_TIMESTAMP

    def test_non_integer_raises(self):
        with pytest.raises(ValueError):
            timestamp_age("yesterday", now=1000)
