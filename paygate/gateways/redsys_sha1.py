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

"""Redsys virtual POS using the legacy SHA1 signature.

The legacy scheme has no fee computation, refund detection or duplicate
transaction check; use RedsysGateway where those are needed.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from paygate.gateways.redsys import BaseRedsysGateway
from paygate.gateways.results import VerificationResult, VerificationStatus
from paygate.gateways.signature import hexdigests_match, sha1_signature
from paygate.utils.common import round_amount
from paygate.utils.currency import resolve_alpha
from paygate.utils.exceptions import MissingFieldsError, SignatureMismatchError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class RedsysSHA1Gateway(BaseRedsysGateway):
    slug = "redsys_sha1"

    def fields(self) -> dict[str, str]:
        """Get the flat Ds_Merchant_* fields signed with SHA1.

        Raises:
            PaymentConfigurationError: If amount is not set
            UnknownCurrencyError: If the currency is not supported

        """
        self.check_configured()
        currency = self.currency_code()
        amount = self.formatted_amount()
        order = self.padded_order()
        logger.debug("Redsys SHA1 request for order %s", order)

        signature = sha1_signature(
            amount,
            order,
            self.merchant_id,
            currency,
            self.transaction_type,
            self.url_notification,
            self.secret_key,
        )

        return {
            "Ds_Merchant_Amount": amount,
            "Ds_Merchant_Currency": currency,
            "Ds_Merchant_Order": order,
            "Ds_Merchant_MerchantCode": self.merchant_id,
            "Ds_Merchant_Terminal": self.terminal,
            "Ds_Merchant_TransactionType": self.transaction_type,
            "Ds_Merchant_Titular": self.buyer_name[:60],
            "Ds_Merchant_MerchantName": self.merchant_name[:25],
            "Ds_Merchant_ProductDescription": self.product_description[:125],
            "Ds_Merchant_ConsumerLanguage": self.consumer_language(),
            "Ds_Merchant_MerchantURL": self.url_notification,
            "Ds_Merchant_UrlOK": self.url_success,
            "Ds_Merchant_UrlKO": self.url_error,
            "Ds_Merchant_MerchantSignature": signature,
        }

    def notification_signature(self, response: str) -> str:
        """Signature expected for a notification carrying the given response code."""
        return sha1_signature(
            self.formatted_amount(),
            self.padded_order(),
            self.merchant_id,
            self.currency_code(),
            response,
            self.secret_key,
        )

    def _verify(self, data: Mapping[str, Any]) -> VerificationResult:
        missing = [name for name in ("Ds_Signature", "Ds_Response") if data.get(name) in (None, "")]
        if missing:
            raise MissingFieldsError(missing)

        response = str(data["Ds_Response"])
        received_signature = str(data["Ds_Signature"])
        expected_signature = self.notification_signature(response)
        if not hexdigests_match(received_signature, expected_signature):
            raise SignatureMismatchError(received_signature, expected_signature)

        self.check_response(response, data.get("Ds_ErrorCode"))

        return VerificationResult(
            VerificationStatus.VERIFIED,
            fee=Decimal(0),
            amount=round_amount(self.amount),
            currency=resolve_alpha(self.currency),
            order=self.padded_order(),
            transaction_id=data.get("Ds_AuthorisationCode"),
            data=dict(data),
        )
