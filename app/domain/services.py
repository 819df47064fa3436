# app/domain/services.py
from __future__ import annotations

import hmac
import re

from app.domain.errors import ValidationError

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")

DEFAULT_POST_STATUS = "draft"


def secure_compare(a: str, b: str) -> bool:
    """
    Constant-time comparison for secrets.
    Accepts strings; falls back to bytes if needed.
    """
    try:
        # hmac.compare_digest supports str only when both are ASCII
        return hmac.compare_digest(a, b)
    except TypeError:
        return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def slugify(title: str) -> str:
    """
    "Hello, World!" -> "hello-world". Non-ASCII letters are dropped.
    """
    return _NON_SLUG_CHARS.sub("-", title.lower()).strip("-")


def require(**fields: str | None) -> None:
    """Raise ValidationError naming the first missing or empty field."""
    for name, value in fields.items():
        if not value:
            raise ValidationError(f"{name} is required")
