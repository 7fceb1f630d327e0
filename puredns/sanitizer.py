"""Normalisation of candidate domain names."""

from __future__ import annotations

import re

_VALID_DOMAIN = re.compile(r"[a-z0-9._-]*")


def default_sanitizer(domain: str) -> str:
    """Lowercase a domain and strip a leading '*.'.

    Returns an empty string if the domain holds characters other than
    lowercase letters, digits, '-', '_' and '.'.
    """
    domain = domain.lower().removeprefix("*.")
    if _VALID_DOMAIN.fullmatch(domain) is None:
        return ""
    return domain