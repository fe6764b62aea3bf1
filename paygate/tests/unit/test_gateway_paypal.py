# LarpManager - https://larpmanager.com
# Copyright (C) 2025 Scanagatta Mauro
#
# This file is part of LarpManager and is dual-licensed:
#
# 1. Under the terms of the GNU Affero General Public License (AGPL) version 3,
#    as published by the Free Software Foundation. You may use, modify, and
#    distribute this file under those terms.
#
# 2. Under a commercial license, allowing use in closed-source or proprietary
#    environments without the obligations of the AGPL.
#
# If you have obtained this file under the AGPL, and you make it available over
# a network, you must also make the complete source code available under the same license.
#
# For more information or to purchase a commercial license, contact:
# commercial@larpmanager.com
#
# SPDX-License-Identifier: AGPL-3.0-or-later OR Proprietary

from decimal import Decimal
from unittest.mock import Mock

import pytest
from django.test import RequestFactory

from paygate.cache.transactions import CacheTransactionStore
from paygate.gateways.paypal import PayPalGateway
from paygate.gateways.results import VerificationStatus
from paygate.tests.unit.base import PAYPAL_MERCHANT, BaseTestCase, StubTransport
from paygate.utils.exceptions import (
    AmountMismatchError,
    DuplicateTransactionError,
    GatewayRejectedError,
    MerchantMismatchError,
    MissingFieldsError,
    PaymentConfigurationError,
    UnexpectedStatusError,
)


class TestPayPalFields(BaseTestCase):
    """Test PayPal payment form fields"""

    def test_fields(self):
        """Test fields sent to the PayPal payment page"""
        gateway = self.paypal()

        fields = gateway.fields()

        assert fields == {
            "cmd": "_xclick",
            "business": PAYPAL_MERCHANT,
            "amount": "10.00",
            "currency_code": "EUR",
            "custom": "42",
            "notify_url": "https://shop.test/paypal/ipn",
            "item_name": "Ticket",
            "no_note": "1",
            "no_shipping": "1",
            "return": "https://shop.test/ok",
            "cancel_return": "https://shop.test/ko",
            "charset": "utf-8",
        }

    def test_fields_optional_logo_and_return_text(self):
        """Test logo and return button text are added only when configured"""
        gateway = self.paypal()
        gateway.url_logo = "https://shop.test/logo.png"
        gateway.return_text = "Back to the shop"

        fields = gateway.fields()

        assert fields["cpp_logo_image"] == "https://shop.test/logo.png"
        assert fields["image_url"] == "https://shop.test/logo.png"
        assert fields["cbt"] == "Back to the shop"

    def test_item_name_truncated(self):
        """Test product description is truncated to 125 characters"""
        gateway = self.paypal()
        gateway.product_description = "x" * 200

        assert len(gateway.fields()["item_name"]) == 125

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [("10.005", "10.01"), (Decimal("1e16"), "10000000000000000.00"), (Decimal("1E+1"), "10.00")],
    )
    def test_amount_format(self, amount, expected):
        """Test amount is sent with two decimals, rounded half up and without exponent"""
        gateway = self.paypal()
        gateway.amount = amount

        assert gateway.fields()["amount"] == expected

    def test_fields_require_amount(self):
        """Test fields cannot be built without an amount"""
        gateway = PayPalGateway("Test Shop", transport=StubTransport())
        gateway.merchant_id = PAYPAL_MERCHANT

        with pytest.raises(PaymentConfigurationError):
            gateway.fields()

    def test_payment_urls(self, settings):
        """Test production and sandbox payment urls"""
        assert PayPalGateway().url_payment == "https://www.paypal.com/cgi-bin/webscr"
        assert PayPalGateway(sandbox=True).url_payment == "https://www.sandbox.paypal.com/cgi-bin/webscr"

        settings.PAYPAL_SANDBOX_URL = "https://paypal.test/webscr"
        assert PayPalGateway(sandbox=True).url_payment == "https://paypal.test/webscr"


class TestPayPalNotification(BaseTestCase):
    """Test PayPal IPN verification"""

    def test_verified_payment(self):
        """Test completed payment verified by PayPal returns the fee"""
        transport = StubTransport(200, "VERIFIED")
        gateway = self.paypal(transport=transport)

        result = gateway.verify_notification(self.paypal_notification())

        assert result.status == VerificationStatus.VERIFIED
        assert not result.is_refund
        assert result.fee == Decimal("0.64")
        assert result.amount == Decimal("10.00")
        assert result.transaction_id == "61E67681CH3238416"
        assert len(transport.calls) == 1

    def test_validation_post(self):
        """Test the notification is posted back with cmd=_notify-validate"""
        transport = StubTransport()
        gateway = self.paypal(transport=transport)
        data = self.paypal_notification()

        gateway.verify_notification(data)

        url, fields = transport.calls[0]
        assert url == "https://www.paypal.com/cgi-bin/webscr"
        assert next(iter(fields)) == "cmd"
        assert fields["cmd"] == "_notify-validate"
        for key, value in data.items():
            assert fields[key] == value

    def test_merchant_mismatch_before_network(self, mailoutbox):
        """Test notification for another account fails without calling PayPal"""
        transport = StubTransport()
        gateway = self.paypal(transport=transport)

        with pytest.raises(MerchantMismatchError) as exc_info:
            gateway.verify_notification(self.paypal_notification(receiver_email="other@x.com"))

        assert exc_info.value.received == "other@x.com"
        assert transport.calls == []
        assert len(mailoutbox) == 1

    def test_unexpected_status(self):
        """Test pending payments are rejected with the raw status"""
        transport = StubTransport()
        gateway = self.paypal(transport=transport)

        with pytest.raises(UnexpectedStatusError) as exc_info:
            gateway.verify_notification(self.paypal_notification(payment_status="Pending"))

        assert exc_info.value.status == "Pending"
        assert transport.calls == []

    def test_missing_status(self):
        """Test notification without payment_status is rejected"""
        data = self.paypal_notification()
        del data["payment_status"]

        with pytest.raises(UnexpectedStatusError) as exc_info:
            self.paypal().verify_notification(data)

        assert exc_info.value.status == ""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"mc_gross": "9.99"},
            {"mc_gross": "not a number"},
            {"mc_currency": "USD"},
        ],
    )
    def test_amount_mismatch(self, overrides):
        """Test wrong amount or currency fails before calling PayPal"""
        transport = StubTransport()
        gateway = self.paypal(transport=transport)

        with pytest.raises(AmountMismatchError):
            gateway.verify_notification(self.paypal_notification(**overrides))

        assert transport.calls == []

    def test_currency_case_insensitive(self):
        """Test currency comparison ignores case"""
        result = self.paypal().verify_notification(self.paypal_notification(mc_currency="eur"))

        assert result.status == VerificationStatus.VERIFIED

    @pytest.mark.parametrize(("status", "body"), [(200, "INVALID"), (500, "VERIFIED"), (200, "")])
    def test_gateway_rejected(self, status, body, mailoutbox):
        """Test notifications not confirmed by PayPal are rejected"""
        gateway = self.paypal(transport=StubTransport(status, body))

        with pytest.raises(GatewayRejectedError) as exc_info:
            gateway.verify_notification(self.paypal_notification())

        assert exc_info.value.status == status
        assert exc_info.value.body == body
        assert len(mailoutbox) == 1

    def test_verified_case_insensitive(self):
        """Test PayPal answer is compared ignoring case"""
        gateway = self.paypal(transport=StubTransport(200, "verified"))

        assert gateway.verify_notification(self.paypal_notification()).fee == Decimal("0.64")

    @pytest.mark.parametrize("fee", [None, "", "n/a"])
    def test_missing_fee_defaults_to_zero(self, fee):
        """Test fee defaults to 0 when mc_fee is absent or not a number"""
        data = self.paypal_notification()
        if fee is None:
            del data["mc_fee"]
        else:
            data["mc_fee"] = fee

        result = self.paypal().verify_notification(data)

        assert result.fee == Decimal(0)

    @pytest.mark.parametrize("status", ["Refunded", "reversed"])
    def test_refund(self, status):
        """Test refunds are reported after amount and authenticity checks"""
        transport = StubTransport()
        gateway = self.paypal(transport=transport)

        result = gateway.verify_notification(
            self.paypal_notification(payment_status=status, mc_gross="-10.00", mc_fee="-0.34"),
        )

        assert result.status == VerificationStatus.REFUNDED
        assert result.is_refund
        assert result.amount == Decimal("-10.00")
        assert result.currency == "EUR"
        assert result.fee == Decimal("-0.34")
        assert len(transport.calls) == 1

    def test_refund_requires_negative_gross(self):
        """Test refund with a positive gross is an amount mismatch"""
        with pytest.raises(AmountMismatchError):
            self.paypal().verify_notification(self.paypal_notification(payment_status="Refunded"))

    def test_refund_rejected_by_paypal(self):
        """Test refund detection does not skip the PayPal validation"""
        gateway = self.paypal(transport=StubTransport(200, "INVALID"))

        with pytest.raises(GatewayRejectedError):
            gateway.verify_notification(self.paypal_notification(payment_status="Refunded", mc_gross="-10.00"))

    def test_payload_from_request(self):
        """Test notification defaults to the POST data of the request"""
        request = RequestFactory().post("/paypal/ipn", self.paypal_notification())

        result = self.paypal().verify_notification(request=request)

        assert result.status == VerificationStatus.VERIFIED

    def test_payload_from_query_dict(self):
        """Test POST data given directly keeps single values in the result"""
        request = RequestFactory().post("/paypal/ipn", self.paypal_notification())

        result = self.paypal().verify_notification(request.POST)

        assert result.data["txn_id"] == "61E67681CH3238416"
        assert result.data["mc_gross"] == "10.00"


class TestPayPalDuplicates(BaseTestCase):
    """Test PayPal transaction id uniqueness"""

    def test_duplicate_transaction(self, mailoutbox):
        """Test the same transaction id cannot be verified twice"""
        gateway = self.paypal(txn_store=CacheTransactionStore())
        gateway.verify_notification(self.paypal_notification())

        with pytest.raises(DuplicateTransactionError) as exc_info:
            gateway.verify_notification(self.paypal_notification())

        assert exc_info.value.txn_id == "61E67681CH3238416"
        assert len(mailoutbox) == 1

    def test_claim_preferred(self):
        """Test a store offering claim is used instead of exists and store"""
        store = Mock()
        store.claim.side_effect = [True, False]
        gateway = self.paypal(txn_store=store)

        gateway.verify_notification(self.paypal_notification())
        with pytest.raises(DuplicateTransactionError):
            gateway.verify_notification(self.paypal_notification())

        assert store.claim.call_count == 2
        store.claim.assert_called_with("61E67681CH3238416")
        store.exists.assert_not_called()
        store.store.assert_not_called()

    def test_callbacks(self):
        """Test store lookup happens before recording the id"""
        seen = []

        class ListStore:
            def exists(self, txn_id):
                return txn_id in seen

            def store(self, txn_id):
                seen.append(txn_id)

        gateway = self.paypal(txn_store=ListStore())
        gateway.verify_notification(self.paypal_notification(txn_id="A"))
        gateway.verify_notification(self.paypal_notification(txn_id="B"))

        assert seen == ["A", "B"]

    def test_refund_skips_duplicate_check(self):
        """Test refunds do not consume the transaction id"""
        store = CacheTransactionStore()
        gateway = self.paypal(txn_store=store)

        gateway.verify_notification(self.paypal_notification(payment_status="Refunded", mc_gross="-10.00"))

        assert not store.exists("61E67681CH3238416")

    def test_missing_txn_id(self):
        """Test txn_id is mandatory when duplicates are checked"""
        data = self.paypal_notification()
        del data["txn_id"]

        with pytest.raises(MissingFieldsError):
            self.paypal(txn_store=CacheTransactionStore()).verify_notification(data)

    def test_no_store_no_check(self):
        """Test without a store the same notification is accepted twice"""
        gateway = self.paypal()

        gateway.verify_notification(self.paypal_notification())
        result = gateway.verify_notification(self.paypal_notification())

        assert result.status == VerificationStatus.VERIFIED

    def test_partial_store_rejected(self):
        """Test a store with only one of the two callbacks is refused"""

        class LookupOnly:
            def exists(self, txn_id):
                return False

        with pytest.raises(PaymentConfigurationError):
            self.paypal(txn_store=LookupOnly())

        gateway = self.paypal()
        with pytest.raises(PaymentConfigurationError):
            gateway.txn_store = LookupOnly()
