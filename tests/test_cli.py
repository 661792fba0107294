"""Tests for the notus-dx command line and operation logging."""

import argparse
import json
import logging

import httpx
import pytest

from notus_dx import cli
from notus_dx.client.exceptions import NotusAPIError
from notus_dx.signing import SignerError
from notus_dx.utils.timing import redact, safe_dumps, timed_operation
from notus_dx.webhooks.verifier import WebhookVerifier

from conftest import WEBHOOK_SECRET, RecordingTransport, make_settings


class TestSignWebhook:
    """Tests for producing signed test deliveries."""

    def test_headers_verify(self):
        body = '{"event_type":"swap.completed","data":{},"timestamp":"t","id":"evt_1"}'

        headers = cli.signed_webhook_headers(body, WEBHOOK_SECRET, timestamp="1000", event_id="msg_1")
        delivery = WebhookVerifier(WEBHOOK_SECRET, clock=lambda: 1000).verify(headers, body.encode())

        assert delivery.delivery_id == "msg_1"
        assert delivery.event.event_type == "swap.completed"

    def test_main_prints_headers(self, capsys):
        code = cli.main(["sign-webhook", "{}", "--timestamp", "1000"], settings=make_settings())

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["headers"]["svix-timestamp"] == "1000"
        assert output["headers"]["svix-signature"].startswith("v1,")
        assert output["headers"]["svix-id"].startswith("msg_")

    def test_main_without_secret(self, capsys):
        code = cli.main(["sign-webhook", "{}"], settings=make_settings(webhook_secret=None))

        assert code == 1
        assert "WEBHOOK_SECRET" in capsys.readouterr().err

    def test_main_with_malformed_secret(self, capsys):
        code = cli.main(["sign-webhook", "{}"], settings=make_settings(webhook_secret="whsec_***"))

        assert code == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestApiCommands:
    """Tests for API-backed subcommands."""

    @pytest.mark.asyncio
    async def test_wallet_not_registered(self):
        transport = RecordingTransport(lambda request: httpx.Response(404, json={}))
        args = argparse.Namespace(command="wallet", eoa="0x" + "1" * 40, register=False)

        result = await cli.run_api_command(args, make_settings(), transport=transport)

        assert result == {"registered": False}

    @pytest.mark.asyncio
    async def test_history_passes_take(self):
        transport = RecordingTransport(lambda request: httpx.Response(200, json={"transactions": []}))
        args = argparse.Namespace(command="history", address="0xabc", take=3)

        result = await cli.run_api_command(args, make_settings(), transport=transport)

        assert result == {"transactions": []}
        assert transport.requests[0].url.params["take"] == "3"

    @pytest.mark.asyncio
    async def test_register_rejects_bad_address(self):
        transport = RecordingTransport(lambda request: httpx.Response(404, json={}))
        args = argparse.Namespace(command="wallet", eoa="not-an-address", register=True)

        with pytest.raises(ValueError):
            await cli.run_api_command(args, make_settings(), transport=transport)

        assert all(request.method == "GET" for request in transport.requests)

    def test_main_reports_invalid_input(self, monkeypatch, capsys):
        async def invalid(args, settings, transport=None):
            raise ValueError("not-an-address is not a valid address")

        monkeypatch.setattr(cli, "run_api_command", invalid)

        code = cli.main(["wallet", "not-an-address", "--register"], settings=make_settings())

        assert code == 1
        assert "not a valid address" in capsys.readouterr().err

    def test_main_reports_signer_errors(self, monkeypatch, capsys):
        async def unsigned(args, settings, transport=None):
            raise SignerError("Invalid private key")

        monkeypatch.setattr(cli, "run_api_command", unsigned)

        code = cli.main(["history", "0xabc"], settings=make_settings())

        assert code == 1
        assert "Invalid private key" in capsys.readouterr().err

    def test_parser_requires_command(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestTimedOperation:
    """Tests for operation timing logs."""

    @pytest.mark.asyncio
    async def test_success_logged(self, caplog):
        async def ok():
            return 42

        with caplog.at_level(logging.INFO, logger="notus_dx.utils.timing"):
            assert await timed_operation("wallet.get", ok) == 42

        assert "[wallet.get] ok ms=" in caplog.text
        assert "status=200" in caplog.text

    @pytest.mark.asyncio
    async def test_api_error_logged_and_raised(self, caplog):
        async def fail():
            raise NotusAPIError(404, "Wallet not found")

        with caplog.at_level(logging.INFO, logger="notus_dx.utils.timing"):
            with pytest.raises(NotusAPIError):
                await timed_operation("wallet.get", fail)

        assert "[wallet.get] error" in caplog.text
        assert "status=404" in caplog.text


class TestRedaction:
    """Tests for safe printing."""

    def test_nested_keys_redacted(self):
        value = {
            "apiKey": "k",
            "nested": [{"webhookSecret": "s", "name": "n"}],
            "accessToken": "t",
            "amount": "1",
        }

        assert redact(value) == {
            "apiKey": "[REDACTED]",
            "nested": [{"webhookSecret": "[REDACTED]", "name": "n"}],
            "accessToken": "[REDACTED]",
            "amount": "1",
        }

    def test_safe_dumps_is_json(self):
        assert json.loads(safe_dumps({"secret": "x"})) == {"secret": "[REDACTED]"}
