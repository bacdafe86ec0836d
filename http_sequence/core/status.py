"""
Status classification for the summary badge.
"""

from __future__ import annotations

from ..contracts.base import Tier


def classify(status_code: int) -> Tier:
    """
    Map an HTTP status code to a severity tier.

    Total over all integers: anything outside 4xx/5xx+ (including the
    -1 sentinel) is SUCCESS.
    """
    if 400 <= status_code < 500:
        return Tier.WARNING
    if status_code >= 500:
        return Tier.DANGER
    return Tier.SUCCESS
