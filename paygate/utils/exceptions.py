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

"""Errors raised while building payment requests and verifying gateway notifications."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable
    from decimal import Decimal


class PaymentError(Exception):
    """Base class for every payment gateway error."""


class PaymentConfigurationError(PaymentError, ValueError):
    """Raised when a gateway is used before being configured correctly."""


class UnknownCurrencyError(PaymentConfigurationError):
    """Exception raised when a currency is not in the currency table.

    Attributes:
        currency: The alpha or numeric code that could not be resolved

    """

    def __init__(self, currency: Any, message: str | None = None) -> None:
        """Initialize with the unresolved currency code and an optional message."""
        if message is None:
            message = f"Unrecognized currency '{currency}', please use its ISO 4217 numeric code instead"
        super().__init__(message)
        self.currency = currency


class PaymentVerificationError(PaymentError):
    """Base class for notifications that must not be trusted."""


class MerchantMismatchError(PaymentVerificationError):
    """Exception raised when a notification was addressed to another merchant.

    Attributes:
        expected (str): Configured merchant identifier
        received (str): Merchant identifier found in the notification

    """

    def __init__(self, expected: str, received: str | None) -> None:
        """Initialize with the configured and the received merchant."""
        super().__init__(f"receiver_email '{received}' != '{expected}'")
        self.expected = expected
        self.received = received


class UnexpectedStatusError(PaymentVerificationError):
    """Exception raised when the payment status is neither completed nor refunded."""

    def __init__(self, status: str) -> None:
        """Initialize with the raw status."""
        super().__init__(f"Unexpected payment_status '{status}'")
        self.status = status


class AmountMismatchError(PaymentVerificationError):
    """Exception raised when amount or currency differ from the configured ones.

    Attributes:
        expected_amount: Amount configured on the gateway
        expected_currency: Currency configured on the gateway
        received_amount: Amount read from the notification
        received_currency: Currency read from the notification

    """

    def __init__(
        self,
        expected_amount: Decimal | None,
        expected_currency: str | None,
        received_amount: Any,
        received_currency: Any,
    ) -> None:
        """Initialize with both sides of the comparison."""
        super().__init__(
            f"Invalid amount or currency, received {received_amount} {received_currency} "
            f"expected {expected_amount} {expected_currency}",
        )
        self.expected_amount = expected_amount
        self.expected_currency = expected_currency
        self.received_amount = received_amount
        self.received_currency = received_currency


class MissingFieldsError(PaymentVerificationError):
    """Exception raised when a notification lacks mandatory fields."""

    def __init__(self, fields: Iterable[str]) -> None:
        """Initialize with the names of the missing fields."""
        self.fields = tuple(fields)
        super().__init__(f"Missing notification fields: {', '.join(self.fields)}")


class MalformedNotificationError(PaymentVerificationError):
    """Exception raised when the notification payload cannot be decoded."""


class SignatureMismatchError(PaymentVerificationError):
    """Exception raised when the notification signature is not authentic.

    Attributes:
        received (str): Signature sent by the gateway
        expected (str): Signature computed locally

    """

    def __init__(self, received: str, expected: str) -> None:
        """Initialize with received and expected signatures."""
        super().__init__(f"Invalid signature, received '{received}', expected '{expected}'")
        self.received = received
        self.expected = expected


class GatewayDeniedError(PaymentVerificationError):
    """Exception raised when the gateway reports that the payment was not authorized.

    Attributes:
        code: Response code sent by the gateway
        description (str): Human readable explanation of the code

    """

    def __init__(self, code: Any, description: str) -> None:
        """Initialize with the response code and its description."""
        super().__init__(f"Invalid Ds_Response '{code}' ({description})")
        self.code = code
        self.description = description


class GatewayRejectedError(PaymentVerificationError):
    """Exception raised when the gateway does not confirm a notification as its own."""

    def __init__(self, status: int, body: str) -> None:
        """Initialize with HTTP status and response body."""
        super().__init__(f"Invalid gateway response #{status}: {body}")
        self.status = status
        self.body = body


class GatewayUnavailableError(PaymentVerificationError):
    """Exception raised when the gateway could not be reached for verification."""


class DuplicateTransactionError(PaymentVerificationError):
    """Exception raised when a transaction id has already been processed."""

    def __init__(self, txn_id: str) -> None:
        """Initialize with the duplicated transaction id."""
        super().__init__(f"Duplicated transaction id (txn_id) '{txn_id}'")
        self.txn_id = txn_id


class UnexpectedTransactionTypeError(PaymentVerificationError):
    """Exception raised when the notification reports an unsupported transaction type."""

    def __init__(self, received: str, expected: str) -> None:
        """Initialize with received and expected transaction types."""
        super().__init__(f"Invalid transaction type, received '{received}', expected '{expected}'")
        self.received = received
        self.expected = expected
