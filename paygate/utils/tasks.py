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
import traceback

from django.conf import settings as conf_settings
from django.core.mail import send_mail

logger = logging.getLogger(__name__)


def notify_admins(subject: str, message_text: str = "", exception: Exception | None = None) -> None:
    """Send notification email to system administrators.

    Args:
        subject (str): Notification subject
        message_text (str): Notification message
        exception (Exception, optional): Exception to include in notification

    Side effects:
        Sends notification emails to all configured ADMINS

    """
    if not getattr(conf_settings, "PAYGATE_NOTIFY_ADMINS", True):
        return

    # Ensure message_text is a string to prevent type errors during concatenation
    message_text = str(message_text)

    if exception:
        traceback_text = "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))
        message_text += "\n" + traceback_text

    for admin in getattr(conf_settings, "ADMINS", []):
        # Both ("name", "email") pairs and plain addresses are accepted
        email = admin[1] if isinstance(admin, (list, tuple)) else admin
        logger.debug("Notify %s: %s", email, subject)
        send_mail(subject, message_text, conf_settings.DEFAULT_FROM_EMAIL, [email])
