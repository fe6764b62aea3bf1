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

"""Message construction and keyed hashes used by the Redsys signature schemes."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
from typing import Any

from Crypto.Cipher import DES3

from paygate.utils.exceptions import MalformedNotificationError, PaymentConfigurationError

SIGNATURE_VERSION = "HMAC_SHA256_V1"

DES3_BLOCK_SIZE = 8

# Redsys may send the URL-safe Base64 alphabet (- and _ instead of + and /)
URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def _b64decode(value: str) -> bytes:
    """Decode standard or URL-safe Base64, tolerating missing padding."""
    normalized = value.strip().translate(URLSAFE_TO_STANDARD)
    normalized += "=" * (-len(normalized) % 4)
    return base64.b64decode(normalized, validate=True)


def encode_parameters(parameters: dict[str, Any]) -> str:
    """Encode merchant parameters in json + base64."""
    return base64.b64encode(json.dumps(parameters).encode()).decode()


def decode_parameters(merchant_parameters: str) -> dict:
    """Given the Ds_MerchantParameters from Redsys, decode it and load the json.

    :param merchant_parameters: Base 64 encoded json structure returned by Redsys
    :return merchant_parameters: Json structure with all parameters.
    """
    if not isinstance(merchant_parameters, str):
        msg = f"merchant_parameters must be str, got {type(merchant_parameters)}"
        raise TypeError(msg)

    try:
        parameters = json.loads(_b64decode(merchant_parameters).decode())
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        msg = f"Failed to decode Redsys parameters: {e}"
        raise MalformedNotificationError(msg) from e

    if not isinstance(parameters, dict):
        msg = f"Redsys parameters must be a json object, got {type(parameters).__name__}"
        raise MalformedNotificationError(msg)
    return parameters


def encrypt_order(secret_key: str, order: str) -> bytes:
    """Create a unique key for every request using Triple DES encryption.

    The order is zero padded to a multiple of the 3DES block size and
    encrypted in CBC mode with a zero initialization vector under the
    Base64 decoded merchant secret.
    """
    if not isinstance(order, str):
        msg = f"order must be str, got {type(order)}"
        raise TypeError(msg)
    try:
        decoded_secret_key = base64.b64decode(secret_key, validate=True)
        initialization_vector = b"\0" * DES3_BLOCK_SIZE
        triple_des_cipher = DES3.new(decoded_secret_key, DES3.MODE_CBC, iv=initialization_vector)
    except (binascii.Error, TypeError, ValueError) as e:
        msg = "Invalid Redsys secret key"
        raise PaymentConfigurationError(msg) from e

    encoded_order = order.encode()
    padded_length = -(-len(encoded_order) // DES3_BLOCK_SIZE) * DES3_BLOCK_SIZE
    padded_order = encoded_order.ljust(max(padded_length, DES3_BLOCK_SIZE), b"\0")
    return triple_des_cipher.encrypt(padded_order)


def sign_hmac256(encrypted_order: bytes, merchant_parameters: bytes) -> str:
    """Use the encrypted_order to sign merchant data using HMAC SHA256 and encode with Base64.

    :param encrypted_order: Encrypted Ds_Merchant_Order
    :param merchant_parameters: Redsys already encoded parameters
    :return Generated signature as a base64 encoded string.
    """
    if not isinstance(encrypted_order, bytes):
        msg = f"encrypted_order must be bytes, got {type(encrypted_order)}"
        raise TypeError(msg)
    if not isinstance(merchant_parameters, bytes):
        msg = f"merchant_parameters must be bytes, got {type(merchant_parameters)}"
        raise TypeError(msg)
    hmac_signature = hmac.new(encrypted_order, merchant_parameters, hashlib.sha256).digest()
    return base64.b64encode(hmac_signature).decode()


def create_merchant_signature(secret_key: str, order: str, merchant_parameters: str) -> str:
    """Sign already encoded merchant parameters with the key derived from order."""
    encrypted_order = encrypt_order(secret_key, order)
    return sign_hmac256(encrypted_order, merchant_parameters.encode())


def normalize_signature(signature: str) -> str:
    """Convert a Base64 signature to the standard alphabet."""
    return signature.strip().translate(URLSAFE_TO_STANDARD)


def signatures_match(received: str, expected: str) -> bool:
    """Compare two Base64 signatures in constant time, whatever alphabet they use."""
    return hmac.compare_digest(normalize_signature(received).encode(), normalize_signature(expected).encode())


def hexdigests_match(received: str, expected: str) -> bool:
    """Compare two hex digests in constant time, ignoring case."""
    return hmac.compare_digest(received.strip().upper().encode(), expected.strip().upper().encode())


def sha1_signature(*parts: Any) -> str:
    """Compute the legacy Redsys signature: upper case SHA1 of the concatenated parts."""
    message = "".join("" if part is None else str(part) for part in parts)
    return hashlib.sha1(message.encode()).hexdigest().upper()  # noqa: S324
