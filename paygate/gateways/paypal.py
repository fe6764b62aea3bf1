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

"""PayPal Payments Standard ("buy now" forms) with IPN notification verification."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Protocol

from paygate.gateways.base import PaymentGateway
from paygate.gateways.results import VerificationResult, VerificationStatus
from paygate.gateways.transport import RequestsTransport
from paygate.utils.common import format_amount, round_amount, to_decimal
from paygate.utils.exceptions import (
    AmountMismatchError,
    DuplicateTransactionError,
    GatewayRejectedError,
    MerchantMismatchError,
    MissingFieldsError,
    PaymentConfigurationError,
    UnexpectedStatusError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from paygate.gateways.transport import HttpTransport

logger = logging.getLogger(__name__)

NOTIFY_VALIDATE = "_notify-validate"
VERIFIED_BODY = "VERIFIED"
EXPECTED_SUCCESS_STATUS = 200

ST_PP_COMPLETED = "completed"
REFUND_STATUSES = ("refunded", "reversed")


class TransactionStore(Protocol):
    """Lookup and record of already processed PayPal transaction ids.

    An optional claim(txn_id) -> bool, recording the id and returning False
    when it was already there, replaces exists() and store() when present.
    """

    def exists(self, txn_id: str) -> bool: ...

    def store(self, txn_id: str) -> None: ...


class PayPalGateway(PaymentGateway):
    """PayPal "buy now" payments.

    The merchant_id is the email of the PayPal business account. Configure
    a txn_store to reject notifications replaying an already processed
    transaction; without it no duplicate check is done. A store that also
    offers claim(), such as CacheTransactionStore, is used atomically.
    """

    slug = "paypal"

    url_setting = "PAYPAL_URL"
    sandbox_url_setting = "PAYPAL_SANDBOX_URL"
    default_url = "https://www.paypal.com/cgi-bin/webscr"
    default_sandbox_url = "https://www.sandbox.paypal.com/cgi-bin/webscr"

    TRANSACTION_PAYMENT = "_xclick"
    TRANSACTION_SUBSCRIPTION = "_xclick-subscriptions"
    TRANSACTION_AUTO_BILLING = "_xclick-auto-billing"
    TRANSACTION_DONATION = "_donations"

    def __init__(
        self,
        merchant_name: str = "",
        buyer_name: str = "",
        *,
        sandbox: bool = False,
        transport: HttpTransport | None = None,
        txn_store: TransactionStore | None = None,
    ) -> None:
        """Initialize PayPal gateway.

        Args:
            merchant_name: Name of the shop
            buyer_name: Name of the buyer
            sandbox: Whether to use the PayPal sandbox, where no real money is used
            transport: HTTP collaborator used to validate notifications with PayPal
            txn_store: Store of processed transaction ids

        """
        super().__init__(merchant_name, buyer_name, sandbox=sandbox)
        self.transaction_type = self.TRANSACTION_PAYMENT
        # Logo shown on the payment page
        self.url_logo = ""
        # Text of the button shown to the buyer once the payment is done
        self.return_text = ""
        self.transport: HttpTransport = transport or RequestsTransport()
        self.txn_store = txn_store

    @property
    def txn_store(self) -> TransactionStore | None:
        return self._txn_store

    @txn_store.setter
    def txn_store(self, store: TransactionStore | None) -> None:
        if store is not None:
            missing = [name for name in ("exists", "store") if not callable(getattr(store, name, None))]
            if missing:
                msg = f"txn_store must provide both exists() and store(), missing {', '.join(missing)}"
                raise PaymentConfigurationError(msg)
        self._txn_store = store

    def fields(self) -> dict[str, str]:
        self.check_configured()
        fields = {
            "cmd": self.transaction_type,
            "business": self.merchant_id,
            "amount": format_amount(self.amount),
            "currency_code": self.currency,
            "custom": "" if self.order is None else str(self.order),
            "notify_url": self.url_notification,
            "item_name": self.product_description[:125],
            # Do not ask for notes or a shipping address
            "no_note": "1",
            "no_shipping": "1",
            "return": self.url_success,
            "cancel_return": self.url_error,
            "charset": "utf-8",
        }

        if self.url_logo:
            fields["cpp_logo_image"] = self.url_logo
            fields["image_url"] = self.url_logo
        if self.return_text:
            fields["cbt"] = self.return_text

        return fields

    def _verify(self, data: Mapping[str, Any]) -> VerificationResult:
        # Payment must have been sent to our account
        receiver_email = data.get("receiver_email")
        if receiver_email != self.merchant_id:
            raise MerchantMismatchError(self.merchant_id, receiver_email)

        status = str(data.get("payment_status") or "")
        refund = status.lower() in REFUND_STATUSES
        if not refund and status.lower() != ST_PP_COMPLETED:
            raise UnexpectedStatusError(status)

        # Refunds carry the negated gross amount of the amount sent in the form
        expected_gross = -round_amount(self.amount) if refund else round_amount(self.amount)
        received_currency = str(data.get("mc_currency") or "")
        try:
            gross = to_decimal(data.get("mc_gross"))
        except ValueError as err:
            raise AmountMismatchError(expected_gross, self.currency, data.get("mc_gross"), received_currency) from err
        if gross != expected_gross or received_currency.upper() != str(self.currency).upper():
            raise AmountMismatchError(expected_gross, self.currency, gross, received_currency)

        self._validate_with_paypal(data)

        fee = self._read_fee(data)
        outcome = {
            "fee": fee,
            "amount": gross,
            "currency": received_currency.upper(),
            "order": data.get("custom") or None,
            "transaction_id": data.get("txn_id") or None,
            "data": dict(data),
        }

        # Financial checks passed: report the refund to the caller
        if refund:
            return VerificationResult(VerificationStatus.REFUNDED, **outcome)

        self._check_duplicate(data.get("txn_id"))

        return VerificationResult(VerificationStatus.VERIFIED, **outcome)

    def _validate_with_paypal(self, data: Mapping[str, Any]) -> None:
        """Post the notification back to PayPal, which answers VERIFIED or INVALID.

        Raises:
            GatewayRejectedError: If PayPal does not confirm the notification
            GatewayUnavailableError: If PayPal cannot be reached

        """
        validation_data = {"cmd": NOTIFY_VALIDATE}
        validation_data.update({key: value for key, value in data.items() if key != "cmd"})

        response = self.transport.post(self.url_payment, validation_data)
        if response.status != EXPECTED_SUCCESS_STATUS or response.body.strip().upper() != VERIFIED_BODY:
            raise GatewayRejectedError(response.status, response.body)

    @staticmethod
    def _read_fee(data: Mapping[str, Any]) -> Decimal:
        raw_fee = data.get("mc_fee")
        try:
            return to_decimal(raw_fee)
        except ValueError:
            logger.warning("PayPal notification without a valid mc_fee (%r), using 0", raw_fee)
            return Decimal(0)

    def _check_duplicate(self, txn_id: str | None) -> None:
        """Check uniqueness of the PayPal transaction id, then store it.

        Stores providing claim() are asked to record the id atomically, so two
        concurrent deliveries of the same notification cannot both pass.

        Raises:
            MissingFieldsError: If the notification has no txn_id
            DuplicateTransactionError: If the id was already processed

        """
        if self.txn_store is None:
            return

        if not txn_id:
            raise MissingFieldsError(["txn_id"])
        claim = getattr(self.txn_store, "claim", None)
        if callable(claim):
            if not claim(txn_id):
                raise DuplicateTransactionError(txn_id)
            return

        if self.txn_store.exists(txn_id):
            raise DuplicateTransactionError(txn_id)
        self.txn_store.store(txn_id)
