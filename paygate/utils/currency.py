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

"""ISO 4217 currency codes understood by the Redsys virtual POS."""

from __future__ import annotations

from paygate.utils.exceptions import UnknownCurrencyError

CURRENCY_CODES: dict[str, int] = {
    "EUR": 978,
    "USD": 840,
    "GBP": 426,
    "JPY": 392,
    "CNY": 156,
}

CURRENCY_NAMES: dict[int, str] = {code: name for name, code in CURRENCY_CODES.items()}


def is_numeric_currency(currency: str | int) -> bool:
    """Check if currency is already given as an ISO 4217 numeric code."""
    return str(currency).strip().isdigit()


def code_for(currency: str) -> int:
    """Return the numeric code of an alpha currency code (case-insensitive).

    Raises:
        UnknownCurrencyError: If the currency is not in the table

    """
    try:
        return CURRENCY_CODES[str(currency).strip().upper()]
    except KeyError as err:
        raise UnknownCurrencyError(currency) from err


def alpha_for(code: str | int) -> str:
    """Return the alpha code of a numeric currency code.

    Raises:
        UnknownCurrencyError: If the code is not numeric or not in the table

    """
    try:
        return CURRENCY_NAMES[int(code)]
    except (KeyError, TypeError, ValueError) as err:
        raise UnknownCurrencyError(code, f"Unrecognized numeric currency code '{code}'") from err


def resolve_numeric(currency: str | int) -> str:
    """Convert currency to the numeric code sent to the gateway."""
    if is_numeric_currency(currency):
        return str(currency).strip()
    return str(code_for(currency))


def resolve_alpha(currency: str | int) -> str:
    """Convert currency to its alpha code, keeping unknown numeric codes as they are."""
    if not is_numeric_currency(currency):
        return str(currency).strip().upper()
    try:
        return alpha_for(currency)
    except UnknownCurrencyError:
        return str(currency).strip()
