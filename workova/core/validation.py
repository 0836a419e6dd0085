"""
Field checks shared by the marketplace services.

Each helper returns the cleaned value or raises ValidationFailedException /
ModerationRejectedException naming the offending field.
"""
import math
from typing import Optional

from workova.core.categories import get_category
from workova.core.exceptions import ModerationRejectedException, ValidationFailedException
from workova.core.moderation import moderate


def require_text(field: str, value: Optional[str], label: str) -> str:
    """Trimmed text, which must not be empty."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationFailedException(field, f"{label} is required.")
    return cleaned


def require_positive(field: str, value: Optional[float], label: str) -> float:
    """A finite number above zero. NaN and infinity are rejected."""
    if value is None or not math.isfinite(value) or value <= 0:
        raise ValidationFailedException(field, f"{label} must be a number greater than zero.")
    return value


def require_category(field: str, category_id: Optional[str]) -> str:
    if not category_id or get_category(category_id) is None:
        raise ValidationFailedException(field, f"Unknown category '{category_id}'.")
    return category_id


def ensure_clean(field: str, text: str) -> None:
    """Run the moderation gate; the rejection reason is passed through as-is."""
    result = moderate(text)
    if not result.is_clean:
        raise ModerationRejectedException(field, result.reason)
