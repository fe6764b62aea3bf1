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

import logging

from django.conf import settings as conf_settings
from django.core.cache import cache

logger = logging.getLogger(__name__)


def get_transaction_cache_key(gateway: str, txn_id: str) -> str:
    """Generate cache key for a processed gateway transaction.

    Args:
        gateway: Slug of the gateway that issued the transaction
        txn_id: Transaction id sent by the gateway

    Returns:
        Cache key string

    """
    return f"paygate_txn_{gateway}_{txn_id}"


class CacheTransactionStore:
    """Store of processed transaction ids kept in the Django cache.

    exists() and store() are two separate cache calls. claim() relies on
    cache.add to check and record the id at once, and PayPalGateway uses it
    whenever the store offers it.
    """

    def __init__(self, gateway: str = "paypal", timeout: int | None = None) -> None:
        self.gateway = gateway
        # None keeps ids until evicted by the cache backend
        self.timeout = timeout if timeout is not None else getattr(conf_settings, "PAYGATE_TXN_TIMEOUT", None)

    def exists(self, txn_id: str) -> bool:
        return cache.get(get_transaction_cache_key(self.gateway, txn_id)) is not None

    def store(self, txn_id: str) -> None:
        logger.debug("Storing %s transaction %s", self.gateway, txn_id)
        cache.set(get_transaction_cache_key(self.gateway, txn_id), 1, timeout=self.timeout)

    def claim(self, txn_id: str) -> bool:
        """Record txn_id if not already present.

        Returns:
            bool: True if the id was recorded now, False if it was already there

        """
        return cache.add(get_transaction_cache_key(self.gateway, txn_id), 1, timeout=self.timeout)
