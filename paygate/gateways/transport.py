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
from typing import TYPE_CHECKING, NamedTuple, Protocol

import requests
from django.conf import settings as conf_settings

from paygate.utils.exceptions import GatewayUnavailableError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class TransportResponse(NamedTuple):
    status: int
    body: str


class HttpTransport(Protocol):
    """Perform a form encoded POST and return status and body."""

    def post(self, url: str, fields: Mapping[str, str]) -> TransportResponse: ...


class RequestsTransport:
    """HTTP transport backed by requests, with a single attempt and no retries."""

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def post(self, url: str, fields: Mapping[str, str]) -> TransportResponse:
        """Post fields to url.

        Raises:
            GatewayUnavailableError: If the request could not be completed

        """
        timeout = self.timeout or getattr(conf_settings, "PAYMENT_GATEWAY_TIMEOUT", DEFAULT_TIMEOUT)
        try:
            response = requests.post(
                url,
                data=dict(fields),
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=timeout,
            )
        except requests.RequestException as e:
            logger.warning("POST to %s failed: %s", url, e)
            msg = f"Unable to reach {url}: {e}"
            raise GatewayUnavailableError(msg) from e

        return TransportResponse(response.status_code, response.text)
