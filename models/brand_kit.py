"""
Brand kit shape

A brand kit travels as a plain JSON-style dict (it is returned to the
webhook caller as-is), so this module only publishes the constants that
describe its shape. Only `taglines` is enforced; see
layer_2_generation.kit_validator.
"""
from typing import Any, Dict, List

BrandKit = Dict[str, Any]

TAGLINE_COUNT = 5
SLOGAN_COUNT = 5
TAGLINE_MAX_WORDS = 8
SLOGAN_MAX_WORDS = 12

# Rendered in this order, whether or not the kit has them
VIDEO_KEYS: List[str] = [
    "runway_30",
    "pika_30",
    "capcut_30",
    "runway_60",
    "pika_60",
    "capcut_60",
]
MIN_SCENE_PROMPTS = 4
MAX_SCENE_PROMPTS = 6

CARD_SIDES = ("one", "two")
CARD_LAYOUTS = ("minimal", "modern", "classic", "bold")
FLYER_ORIENTATIONS = ("portrait", "landscape")

DEFAULT_FLYER_SIZES = ["8.5x11 in", "5.5x8.5 in", "11x17 in"]
DEFAULT_BLEED_NOTE = "Add 0.125 in bleed on all sides"

TOP_LEVEL_KEYS = (
    "taglines",
    "slogans",
    "palette",
    "business_card",
    "flyer",
    "smart_page",
    "seo",
    "contact_keywords",
    "videos",
)
