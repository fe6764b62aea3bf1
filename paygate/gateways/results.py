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

"""Outcome of a notification verification and the fee policies used to compute it."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from django.db import models

from paygate.utils.common import ceil_precision, to_decimal
from paygate.utils.exceptions import PaymentConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


class VerificationStatus(models.TextChoices):
    VERIFIED = "v", "Verified"
    REFUNDED = "r", "Refunded"


@dataclass(frozen=True)
class VerificationResult:
    """Authentic notification, either a payment or a refund.

    Refunds are a normal outcome: callers must check `is_refund` and record
    the money going back in their own ledgers.
    """

    status: VerificationStatus
    fee: Decimal = Decimal(0)
    amount: Decimal | None = None
    currency: str | None = None
    order: str | None = None
    transaction_id: str | None = None
    data: Mapping[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_refund(self) -> bool:
        return self.status == VerificationStatus.REFUNDED


@dataclass(frozen=True)
class FlatPercentageFee:
    """Fee charged as a fixed rate of the amount (0.015 for 1.5%)."""

    rate: Decimal = Decimal(0)

    def compute(self, amount: Decimal) -> Decimal:
        return ceil_precision(to_decimal(amount) * to_decimal(self.rate), 2)


@dataclass(frozen=True)
class CustomFee:
    """Fee computed by an integrator supplied function of the amount."""

    calculator: Callable[[Decimal], Any]

    def compute(self, amount: Decimal) -> Decimal:
        return to_decimal(self.calculator(amount))


FeePolicy = FlatPercentageFee | CustomFee


def fee_policy(value: Any) -> FeePolicy:
    """Turn a rate or a callable into a fee policy.

    Args:
        value: FeePolicy instance, numeric rate or callable receiving the amount

    Returns:
        FeePolicy: the matching policy

    Raises:
        PaymentConfigurationError: If value is neither a number nor a callable

    """
    if isinstance(value, (FlatPercentageFee, CustomFee)):
        return value
    if callable(value):
        return CustomFee(value)
    try:
        return FlatPercentageFee(to_decimal(value))
    except ValueError as err:
        msg = f"fee must be a number or a callable, got {value!r}"
        raise PaymentConfigurationError(msg) from err
