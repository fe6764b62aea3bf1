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

"""Base test case for unit tests with common methods"""

from decimal import Decimal

from paygate.gateways.paypal import PayPalGateway
from paygate.gateways.redsys import RedsysGateway
from paygate.gateways.redsys_sha1 import RedsysSHA1Gateway
from paygate.gateways.signature import create_merchant_signature, encode_parameters, sha1_signature
from paygate.gateways.transport import TransportResponse

# Public test key of the Redsys integration environment
REDSYS_SECRET_KEY = "sq7HjrUOBfKmC576ILgskD5srU870gJ7"
REDSYS_MERCHANT_CODE = "999008881"
SHA1_SECRET_KEY = "qwertyasdf0123456789"
PAYPAL_MERCHANT = "m@x.com"


class StubTransport:
    """Transport recording posts and answering with a fixed response"""

    def __init__(self, status=200, body="VERIFIED"):
        self.response = TransportResponse(status, body)
        self.calls = []

    def post(self, url, fields):
        self.calls.append((url, dict(fields)))
        return self.response


class BaseTestCase:
    """Base test case with common gateway and notification builders"""

    def paypal(self, transport=None, **kwargs):
        """Get a PayPal gateway configured for 10.00 EUR"""
        gateway = PayPalGateway("Test Shop", transport=transport or StubTransport(), **kwargs)
        gateway.amount = Decimal("10.00")
        gateway.currency = "EUR"
        gateway.order = "42"
        gateway.merchant_id = PAYPAL_MERCHANT
        gateway.url_notification = "https://shop.test/paypal/ipn"
        gateway.url_success = "https://shop.test/ok"
        gateway.url_error = "https://shop.test/ko"
        gateway.product_description = "Ticket"
        return gateway

    def paypal_notification(self, **overrides):
        """Get a completed IPN matching the gateway from paypal()"""
        data = {
            "receiver_email": PAYPAL_MERCHANT,
            "payment_status": "Completed",
            "mc_gross": "10.00",
            "mc_currency": "EUR",
            "mc_fee": "0.64",
            "txn_id": "61E67681CH3238416",
            "custom": "42",
        }
        data.update(overrides)
        return data

    def redsys(self, **kwargs):
        """Get a Redsys HMAC gateway configured for 10.00 EUR"""
        gateway = RedsysGateway("Test Shop", "Mario Rossi", **kwargs)
        self._configure_redsys(gateway)
        return gateway

    def redsys_sha1(self, **kwargs):
        """Get a legacy Redsys SHA1 gateway configured for 10.00 EUR"""
        gateway = RedsysSHA1Gateway("Test Shop", "Mario Rossi", **kwargs)
        self._configure_redsys(gateway)
        gateway.secret_key = SHA1_SECRET_KEY
        return gateway

    @staticmethod
    def _configure_redsys(gateway):
        gateway.amount = Decimal("10.00")
        gateway.currency = "EUR"
        gateway.order = 42
        gateway.merchant_id = REDSYS_MERCHANT_CODE
        gateway.secret_key = REDSYS_SECRET_KEY
        gateway.url_notification = "https://shop.test/redsys/notify"
        gateway.url_success = "https://shop.test/ok"
        gateway.url_error = "https://shop.test/ko"
        gateway.product_description = "Ticket"

    def redsys_notification(self, secret_key=REDSYS_SECRET_KEY, urlsafe=True, **overrides):
        """Get a signed Redsys notification, as posted by the gateway"""
        parameters = {
            "Ds_Date": "16/10/2026",
            "Ds_Hour": "12:00",
            "Ds_Amount": "1000",
            "Ds_Currency": "978",
            "Ds_Order": "0042",
            "Ds_MerchantCode": REDSYS_MERCHANT_CODE,
            "Ds_Terminal": "1",
            "Ds_Response": "0000",
            "Ds_TransactionType": "0",
            "Ds_SecurePayment": "1",
            "Ds_AuthorisationCode": "123456",
        }
        parameters.update(overrides)
        encoded_parameters = encode_parameters(parameters)
        signature = create_merchant_signature(secret_key, parameters["Ds_Order"], encoded_parameters)
        if urlsafe:
            signature = signature.replace("+", "-").replace("/", "_")
        return {
            "Ds_SignatureVersion": "HMAC_SHA256_V1",
            "Ds_MerchantParameters": encoded_parameters,
            "Ds_Signature": signature,
        }

    def redsys_sha1_notification(self, response="0000", secret_key=SHA1_SECRET_KEY, **overrides):
        """Get a legacy notification signed over the configured amount, order and currency"""
        data = {
            "Ds_Amount": "1000",
            "Ds_Currency": "978",
            "Ds_Order": "0042",
            "Ds_MerchantCode": REDSYS_MERCHANT_CODE,
            "Ds_Response": response,
            "Ds_Signature": sha1_signature("1000", "0042", REDSYS_MERCHANT_CODE, "978", response, secret_key),
        }
        data.update(overrides)
        return data
