"""
Tracking number generation.

Format: ``<prefix><6 base-36 chars>-<last 6 digits of epoch ms>``,
e.g. ``FM-K3Z9QA-482913``.

Uniqueness is not checked: two orders shipped within the same
millisecond window can collide with probability 36^-6.
"""

import secrets
import string
import time
from typing import Optional

from django.conf import settings

BASE36_ALPHABET = string.digits + string.ascii_uppercase
RANDOM_PART_LENGTH = 6
TIME_PART_LENGTH = 6


def generate_tracking_number(
    *,
    prefix: Optional[str] = None,
    now_ms: Optional[int] = None
) -> str:
    """
    Build a new tracking number.

    Args:
        prefix: Overrides the ``TRACKING_NUMBER_PREFIX`` setting
        now_ms: Epoch milliseconds to use instead of the current time

    Returns:
        Tracking number string
    """
    if prefix is None:
        prefix = getattr(settings, 'TRACKING_NUMBER_PREFIX', 'FM-')
    if now_ms is None:
        now_ms = int(time.time() * 1000)

    random_part = ''.join(
        secrets.choice(BASE36_ALPHABET) for _ in range(RANDOM_PART_LENGTH)
    )
    time_part = str(now_ms)[-TIME_PART_LENGTH:].rjust(TIME_PART_LENGTH, '0')
    return f"{prefix}{random_part}-{time_part}"
