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

"""Redsys virtual POS using the HMAC-SHA256 signature scheme."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from paygate.gateways.base import PaymentGateway
from paygate.gateways.redsys_codes import REDSYS_RESPONSE_CODES, describe_response
from paygate.gateways.results import FlatPercentageFee, VerificationResult, VerificationStatus, fee_policy
from paygate.gateways.signature import (
    SIGNATURE_VERSION,
    create_merchant_signature,
    decode_parameters,
    encode_parameters,
    signatures_match,
)
from paygate.utils.common import CURRENCY_TO_CENTS_MULTIPLIER, format_amount, round_amount, to_decimal
from paygate.utils.currency import resolve_alpha, resolve_numeric
from paygate.utils.exceptions import (
    AmountMismatchError,
    GatewayDeniedError,
    MissingFieldsError,
    SignatureMismatchError,
    UnexpectedTransactionTypeError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from decimal import Decimal

    from paygate.gateways.results import FeePolicy

logger = logging.getLogger(__name__)

MIN_ORDER_LENGTH = 4
MAX_SUCCESSFUL_RESPONSE_CODE = 99
# Authorized refunds and confirmations
CONFIRMATION_RESPONSE_CODE = 900


def get_parameter(parameters: Mapping[str, Any], name: str) -> Any:
    """Read a notification parameter, matching its name case-insensitively."""
    if name in parameters:
        return parameters[name]
    lowered = name.lower()
    for key, value in parameters.items():
        if key.lower() == lowered:
            return value
    return None


class BaseRedsysGateway(PaymentGateway):
    """Configuration and checks shared by both Redsys signature schemes."""

    url_setting = "REDSYS_URL"
    sandbox_url_setting = "REDSYS_SANDBOX_URL"
    default_url = "https://sis.redsys.es/sis/realizarPago"
    default_sandbox_url = "https://sis-t.redsys.es:25443/sis/realizarPago"

    # 0 authorization, 1 pre-authorization, 2 confirmation, 3 automatic refund,
    # 5 recurring, 6 successive, 7 pre-authentication, 8 its confirmation,
    # 9 pre-authorization cancel
    TRANSACTION_PAYMENT = "0"
    TRANSACTION_PAYMENT_AUTH = "1"
    TRANSACTION_REFUND = "3"
    TRANSACTION_SUBSCRIPTION = "5"

    LANG_MAP: ClassVar[dict] = {
        "es": "001",
        "en": "002",
        "ca": "003",
        "fr": "004",
        "de": "005",
        "nl": "006",
        "it": "007",
        "sv": "008",
        "pt": "009",
        "pl": "011",
        "gl": "012",
        "eu": "013",
        "da": "208",
    }

    def __init__(self, merchant_name: str = "", buyer_name: str = "", *, sandbox: bool = False) -> None:
        """Initialize the virtual POS with a single payment on terminal 001.

        Args:
            merchant_name: Name of the shop shown on the payment page
            buyer_name: Name of the cardholder
            sandbox: Whether to use the Redsys test environment

        """
        super().__init__(merchant_name, buyer_name, sandbox=sandbox)
        self.terminal = "001"
        self.secret_key = ""
        # Auto detect
        self.language = "000"
        self.transaction_type = self.TRANSACTION_PAYMENT
        self.error_codes: Mapping[Any, str] = REDSYS_RESPONSE_CODES

    def currency_code(self) -> str:
        """Return the numeric code of the configured currency.

        Raises:
            UnknownCurrencyError: If the alpha code is not supported

        """
        return resolve_numeric(self.currency)

    def is_euro(self) -> bool:
        return resolve_alpha(self.currency) == "EUR"

    def formatted_amount(self) -> str:
        """Amount with two decimals; for Euros the last two digits are the decimals."""
        amount = format_amount(self.amount)
        if self.is_euro():
            amount = amount.replace(".", "")
        return amount

    def padded_order(self) -> str:
        """Order identifier left padded with zeros to the minimum length."""
        order = "" if self.order is None else str(self.order)
        return order.rjust(MIN_ORDER_LENGTH, "0")

    def consumer_language(self) -> str:
        return self.LANG_MAP.get(self.language, self.language)

    def check_response(self, response: Any, error_code: Any = None) -> int:
        """Check that the response code means an authorized transaction.

        0000 to 0099 are authorized payments and pre-authorizations,
        0900 authorized refunds and confirmations.

        Raises:
            GatewayDeniedError: For any other code

        """
        try:
            code = int(str(response).strip())
        except (TypeError, ValueError):
            code = None

        if code is not None and (0 <= code <= MAX_SUCCESSFUL_RESPONSE_CODE or code == CONFIRMATION_RESPONSE_CODE):
            return code

        description = describe_response(response, self.error_codes)
        if error_code:
            description = f"{description}; {error_code}: {describe_response(error_code, self.error_codes)}"
        raise GatewayDeniedError(response, description)


class RedsysGateway(BaseRedsysGateway):
    """Redsys virtual POS signing requests with HMAC-SHA256 over 3DES derived keys."""

    slug = "redsys"

    PAYMENT_METHOD_CARD = None
    PAYMENT_METHOD_BIZUM = "z"

    def __init__(self, merchant_name: str = "", buyer_name: str = "", *, sandbox: bool = False) -> None:
        super().__init__(merchant_name, buyer_name, sandbox=sandbox)
        self.payment_method: str | None = self.PAYMENT_METHOD_CARD
        self._fee: FeePolicy = FlatPercentageFee()

    @property
    def fee(self) -> FeePolicy:
        """Fee applied to the operation: a rate of the total or a custom calculator."""
        return self._fee

    @fee.setter
    def fee(self, value: Any) -> None:
        self._fee = fee_policy(value)

    def merchant_parameters(self) -> dict[str, Any]:
        """Build the merchant parameters structure sent to Redsys.

        Raises:
            PaymentConfigurationError: If amount is not set
            UnknownCurrencyError: If the currency is not supported

        """
        self.check_configured()
        currency = self.currency_code()

        parameters = {
            "DS_MERCHANT_AMOUNT": self.formatted_amount(),
            "DS_MERCHANT_ORDER": self.padded_order(),
            "DS_MERCHANT_MERCHANTCODE": self.merchant_id,
            "DS_MERCHANT_CURRENCY": currency,
            "DS_MERCHANT_TRANSACTIONTYPE": self.transaction_type,
            "DS_MERCHANT_TERMINAL": self.terminal,
            "DS_MERCHANT_MERCHANTURL": self.url_notification,
        }

        # Optional descriptive fields, truncated to the Redsys limits
        if self.merchant_name:
            parameters["DS_MERCHANT_MERCHANTNAME"] = self.merchant_name[:25]
        if self.product_description:
            parameters["DS_MERCHANT_PRODUCTDESCRIPTION"] = self.product_description[:125]
        if self.buyer_name:
            parameters["DS_MERCHANT_TITULAR"] = self.buyer_name[:60]
        if self.language:
            parameters["DS_MERCHANT_CONSUMERLANGUAGE"] = self.consumer_language()
        if self.payment_method is not None:
            parameters["DS_MERCHANT_PAYMETHODS"] = self.payment_method

        parameters["DS_MERCHANT_URLOK"] = self.url_success or ""
        parameters["DS_MERCHANT_URLKO"] = self.url_error or ""
        return parameters

    def fields(self) -> dict[str, str]:
        parameters = self.merchant_parameters()
        logger.debug("Redsys request for order %s", parameters["DS_MERCHANT_ORDER"])
        encoded_parameters = encode_parameters(parameters)
        signature = create_merchant_signature(self.secret_key, parameters["DS_MERCHANT_ORDER"], encoded_parameters)
        return {
            "Ds_SignatureVersion": SIGNATURE_VERSION,
            "Ds_MerchantParameters": encoded_parameters,
            "Ds_Signature": signature,
        }

    def _verify(self, data: Mapping[str, Any]) -> VerificationResult:
        missing = [name for name in ("Ds_MerchantParameters", "Ds_Signature") if not data.get(name)]
        if missing:
            raise MissingFieldsError(missing)

        merchant_parameters = str(data["Ds_MerchantParameters"])
        received_signature = str(data["Ds_Signature"])
        parameters = decode_parameters(merchant_parameters)

        # The signing key is derived from the order in the notification itself
        order = get_parameter(parameters, "Ds_Order")
        if not order:
            raise MissingFieldsError(["Ds_Order"])

        expected_signature = create_merchant_signature(self.secret_key, str(order), merchant_parameters)
        if not signatures_match(received_signature, expected_signature):
            raise SignatureMismatchError(received_signature, expected_signature)

        # Only trust the parameters once the signature is verified
        self.check_response(get_parameter(parameters, "Ds_Response"), get_parameter(parameters, "Ds_ErrorCode"))

        amount, currency = self._received_amount(parameters)
        fee = self.fee.compute(amount)

        outcome = {
            "fee": fee,
            "amount": amount,
            "currency": currency,
            "order": str(order),
            "transaction_id": get_parameter(parameters, "Ds_AuthorisationCode"),
            "data": parameters,
        }

        transaction_type = str(get_parameter(parameters, "Ds_TransactionType") or "").strip()
        if transaction_type == self.TRANSACTION_REFUND:
            return VerificationResult(VerificationStatus.REFUNDED, **outcome)
        if transaction_type != self.TRANSACTION_PAYMENT:
            raise UnexpectedTransactionTypeError(transaction_type, self.TRANSACTION_PAYMENT)

        return VerificationResult(VerificationStatus.VERIFIED, **outcome)

    def _received_amount(self, parameters: Mapping[str, Any]) -> tuple[Decimal, str]:
        """Read amount and currency of the notification and match them with the configured ones.

        Currencies are compared by numeric code, so codes missing from the
        currency table still verify and are returned as they are.

        Raises:
            AmountMismatchError: If they differ or cannot be read

        """
        raw_amount = get_parameter(parameters, "Ds_Amount")
        raw_currency = get_parameter(parameters, "Ds_Currency")
        expected_code = int(self.currency_code())
        try:
            received_code = int(str(raw_currency).strip())
            amount = to_decimal(raw_amount)
        except ValueError as err:
            raise AmountMismatchError(self.amount, self.currency, raw_amount, raw_currency) from err

        currency = resolve_alpha(str(received_code))
        # For Euros the last two digits are the decimals
        if currency == "EUR":
            amount /= CURRENCY_TO_CENTS_MULTIPLIER

        if received_code != expected_code or amount != round_amount(self.amount):
            raise AmountMismatchError(self.amount, self.currency, amount, currency)

        return amount, currency
