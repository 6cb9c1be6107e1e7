"""Signature identifiers built by joining values with slashes."""

from __future__ import annotations

from typing import Any


def concat(uid: str, *args: Any) -> str:
    """Return ``uid`` with each value appended as ``/<value>``."""
    for value in args:
        uid = f"{uid}/{value}"
    return uid