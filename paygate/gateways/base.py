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

"""Common lifecycle shared by every payment gateway adapter.

A gateway is configured by the caller (amount, currency, order, merchant
credentials and callback URLs), produces the fields to be posted to the
payment page, and later verifies the server to server notification sent
back by the gateway.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Any, ClassVar

from django.conf import settings as conf_settings

from paygate.utils.common import to_decimal
from paygate.utils.exceptions import (
    DuplicateTransactionError,
    GatewayRejectedError,
    MerchantMismatchError,
    MissingFieldsError,
    PaymentConfigurationError,
    PaymentVerificationError,
    SignatureMismatchError,
)
from paygate.utils.tasks import notify_admins

if TYPE_CHECKING:
    from collections.abc import Mapping

    from django.http import HttpRequest

    from paygate.gateways.results import VerificationResult

logger = logging.getLogger(__name__)

# Failures that point to fraud or misconfiguration rather than a declined card
SECURITY_ERRORS = (MerchantMismatchError, SignatureMismatchError, GatewayRejectedError, DuplicateTransactionError)


class PaymentGateway(ABC):
    """Base class of the gateway adapters."""

    slug: ClassVar[str] = ""

    # Setting names for production and test payment page
    url_setting: ClassVar[str] = ""
    sandbox_url_setting: ClassVar[str] = ""
    default_url: ClassVar[str] = ""
    default_sandbox_url: ClassVar[str] = ""

    def __init__(self, merchant_name: str = "", buyer_name: str = "", *, sandbox: bool = False) -> None:
        """Initialize gateway with merchant display name and buyer name.

        Args:
            merchant_name: Name of the shop shown to the buyer
            buyer_name: Name of the buyer
            sandbox: Whether to use the test environment of the gateway

        """
        self._amount: Decimal | None = None
        self.currency: str = "EUR"
        self.order: str | int | None = None
        self.merchant_id: str = ""
        self.merchant_name = merchant_name
        self.transaction_type: str = ""
        self.buyer_name = buyer_name
        self.product_description: str = ""
        self.language: str = ""
        self.url_notification: str = ""
        self.url_success: str = ""
        self.url_error: str = ""
        self.sandbox = sandbox
        self.url_payment = self.payment_url(sandbox=sandbox)

    @classmethod
    def payment_url(cls, *, sandbox: bool = False) -> str:
        """Return the payment page url, overridable from settings."""
        if sandbox:
            return getattr(conf_settings, cls.sandbox_url_setting, cls.default_sandbox_url)
        return getattr(conf_settings, cls.url_setting, cls.default_url)

    @property
    def amount(self) -> Decimal | None:
        return self._amount

    @amount.setter
    def amount(self, value: Any) -> None:
        if value is None:
            self._amount = None
            return
        try:
            self._amount = to_decimal(value)
        except ValueError as err:
            raise PaymentConfigurationError(str(err)) from err

    def check_configured(self) -> None:
        """Ensure amount and currency are set.

        Raises:
            PaymentConfigurationError: If amount or currency is missing

        """
        if self._amount is None:
            msg = f"{type(self).__name__}: amount must be set"
            raise PaymentConfigurationError(msg)
        if not self.currency:
            msg = f"{type(self).__name__}: currency must be set"
            raise PaymentConfigurationError(msg)

    @abstractmethod
    def fields(self) -> dict[str, str]:
        """Get the fields to be posted to the payment page of the gateway.

        Raises:
            PaymentConfigurationError: If the gateway is not configured correctly

        """

    @abstractmethod
    def _verify(self, data: Mapping[str, Any]) -> VerificationResult:
        """Verify a notification payload, raising on any anomaly."""

    def verify_notification(
        self,
        post_data: Mapping[str, Any] | None = None,
        request: HttpRequest | None = None,
    ) -> VerificationResult:
        """Check that the payment notification received is correct and authentic.

        Args:
            post_data: Fields posted by the gateway; defaults to request.POST
            request: Django request carrying the notification

        Returns:
            VerificationResult: verified payment or refund, with the gateway fee

        Raises:
            PaymentConfigurationError: If the gateway is not configured
            PaymentVerificationError: If the notification must not be trusted

        """
        data = self._notification_data(post_data, request)
        self.check_configured()

        logger.info("Verifying %s notification for order %s", self.slug, self.order)
        try:
            result = self._verify(data)
        except PaymentVerificationError as err:
            self._report_failure(err, data)
            raise

        logger.info(
            "Verified %s notification for order %s: %s (fee %s)",
            self.slug,
            self.order,
            result.status.label,
            result.fee,
        )
        return result

    @staticmethod
    def _notification_data(post_data: Mapping[str, Any] | None, request: HttpRequest | None) -> Mapping[str, Any]:
        if post_data is None and request is not None:
            post_data = request.POST
        if post_data is not None:
            # QueryDict, keep the last value of each field
            if callable(getattr(post_data, "dict", None)):
                return post_data.dict()
            return post_data
        msg = "post_data or request"
        raise MissingFieldsError([msg])

    def _report_failure(self, err: PaymentVerificationError, data: Mapping[str, Any]) -> None:
        if isinstance(err, SignatureMismatchError):
            logger.error("%s notification for order %s: %s", self.slug, self.order, err)
        else:
            logger.warning("%s notification for order %s: %s", self.slug, self.order, err)

        if not isinstance(err, SECURITY_ERRORS):
            return

        try:
            notify_admins(f"{self.slug} notification rejected", f"{err}\nData: {dict(data)}")
        except Exception:
            logger.exception("Unable to notify admins about %s", type(err).__name__)
