"""Tests for request contract serialization."""

import pytest
from pydantic import ValidationError

from notus_dx.contracts import (
    DocumentCategory,
    KYCCreateSessionParams,
    PaymentMethodDetails,
    RampDepositQuoteParams,
    RampWithdrawQuoteParams,
    SmartWallet,
    SwapParams,
    UpdateWebhookParams,
)
from notus_dx.contracts.kyc import BankAccount, FiatCurrency
from notus_dx.contracts.wallet import RegisterWalletRequest


class TestApiModel:
    """Snake_case fields serialize to camelCase without None values."""

    def test_swap_params(self):
        params = SwapParams(
            pay_gas_fee_token="0xusdc",
            token_in="0xusdc",
            token_out="0xwmatic",
            amount_in="5",
            wallet_address="0xwallet",
            to_address="0xwallet",
            signer_address="0xeoa",
            chain_id_in=137,
            chain_id_out=137,
        )

        assert params.to_api() == {
            "payGasFeeToken": "0xusdc",
            "tokenIn": "0xusdc",
            "tokenOut": "0xwmatic",
            "amountIn": "5",
            "walletAddress": "0xwallet",
            "toAddress": "0xwallet",
            "signerAddress": "0xeoa",
            "chainIdIn": 137,
            "chainIdOut": 137,
            "gasFeePaymentMethod": "ADD_TO_AMOUNT",
        }

    def test_kyc_session_params(self):
        params = KYCCreateSessionParams(
            first_name="Ada",
            last_name="Lovelace",
            birth_date="1990-12-10",
            document_id="AB123",
            document_category=DocumentCategory.PASSPORT,
            document_country="BR",
        )

        data = params.to_api()

        assert data["firstName"] == "Ada"
        assert data["documentCategory"] == "PASSPORT"
        assert data["livenessRequired"] is False
        assert "email" not in data

    def test_kyc_country_length(self):
        with pytest.raises(ValidationError):
            KYCCreateSessionParams(
                first_name="A",
                last_name="B",
                birth_date="1990-01-01",
                document_id="X",
                document_category="PASSPORT",
                document_country="BRAZIL",
            )

    def test_nested_withdraw_params(self):
        params = RampWithdrawQuoteParams(
            individual_id="ind_1",
            amount_to_send_in_crypto_currency="100",
            crypto_currency_to_send=FiatCurrency.USDC,
            payment_method_to_receive_details=PaymentMethodDetails(
                type="BANK_TRANSFER",
                bank_account=BankAccount(
                    account_number="123", routing_number="456", bank_name="Bank"
                ),
            ),
            chain_id=137,
        )

        data = params.to_api()

        assert data["paymentMethodToReceiveDetails"] == {
            "type": "BANK_TRANSFER",
            "bankAccount": {"accountNumber": "123", "routingNumber": "456", "bankName": "Bank"},
        }

    def test_deposit_quote_params(self):
        params = RampDepositQuoteParams(
            payment_method_to_send="PIX",
            receive_crypto_currency="BRZ",
            amount_to_send_in_fiat_currency="50",
            individual_id="ind_1",
            wallet_address="0xwallet",
            chain_id=137,
        )

        assert params.to_api()["receiveCryptoCurrency"] == "BRZ"

    def test_partial_update(self):
        assert UpdateWebhookParams(events=["kyc.completed"]).to_api() == {"events": ["kyc.completed"]}

    def test_response_parsed_by_alias(self):
        wallet = SmartWallet.model_validate(
            {"accountAbstraction": "0xaa", "externallyOwnedAccount": "0xeoa", "extra": 1}
        )

        assert wallet.account_abstraction == "0xaa"
        assert wallet.registered_at is None


class TestRegisterWalletRequest:
    """Tests for EOA validation."""

    def test_rejects_short_address(self):
        with pytest.raises(ValidationError):
            RegisterWalletRequest(externally_owned_account="0x1234", factory="0x" + "0" * 40)

    def test_accepts_lowercase_address(self):
        request = RegisterWalletRequest(
            externally_owned_account="0x" + "ab" * 20, factory="0x" + "0" * 40
        )

        assert request.to_api()["salt"] == "0"
