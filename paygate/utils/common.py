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

from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

# Payment gateways typically require amounts in smallest currency unit (cents for EUR/USD)
CURRENCY_TO_CENTS_MULTIPLIER = 100
CENT = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """Convert a monetary value to Decimal.

    Floats go through their shortest repr, so 10.1 becomes Decimal("10.1")
    and not its binary approximation.

    Raises:
        ValueError: If value is empty or not a number

    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or value is None:
        msg = f"invalid amount: {value!r}"
        raise ValueError(msg)
    try:
        result = Decimal(repr(value)) if isinstance(value, float) else Decimal(str(value).strip())
    except InvalidOperation as err:
        msg = f"invalid amount: {value!r}"
        raise ValueError(msg) from err
    if not result.is_finite():
        msg = f"invalid amount: {value!r}"
        raise ValueError(msg)
    return result


def ceil_precision(value: Any, precision: int) -> Decimal:
    """Round value up to the given number of decimals, never down.

    Args:
        value: Amount to round (Decimal, int, float or numeric string)
        precision: Number of decimal digits to keep

    Returns:
        Decimal: Smallest value with `precision` decimals that is >= value

    Example:
        >>> ceil_precision(10.001, 2)
        Decimal('10.01')

    """
    exponent = Decimal(1).scaleb(-precision)
    return to_decimal(value).quantize(exponent, rounding=ROUND_CEILING)


def round_amount(amount: Any) -> Decimal:
    """Round amount to the cent, halves away from zero."""
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(amount: Any) -> str:
    """Format amount with two decimals, no thousands separator and no exponent."""
    return f"{round_amount(amount):f}"
