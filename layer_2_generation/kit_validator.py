"""
Structural gate for generated brand kits
"""
from collections.abc import Mapping
from typing import Any

from models.brand_kit import TAGLINE_COUNT


def is_valid_brand_kit(candidate: Any) -> bool:
    """
    Decide whether a parsed generator response can be used as a brand kit

    Only `taglines` is checked: it must exist, be a list (or tuple) and
    hold at least five entries. Every other field is best effort and the
    renderer copes with it being missing.

    Args:
        candidate: Whatever came out of JSON parsing (may be None)

    Returns:
        True if the kit is acceptable, False if the fallback should be used
    """
    if not isinstance(candidate, Mapping):
        return False

    taglines = candidate.get("taglines")
    if not isinstance(taglines, (list, tuple)):
        return False

    return len(taglines) >= TAGLINE_COUNT
