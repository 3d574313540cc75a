"""
Deterministic brand kit used when the AI path is unavailable or fails

Nothing here touches the network. The kit is rebuilt on every call, so
callers can mutate the result freely.
"""
from typing import List

from models.brand_kit import BrandKit, DEFAULT_BLEED_NOTE, DEFAULT_FLYER_SIZES
from models.intake import Intake

DEFAULT_SEO_KEYWORDS = "custom shirts Phoenix, embroidery AZ"
DEFAULT_CONTACT_KEYWORDS = "custom shirts, embroidery, logo mugs"
DEFAULT_META_DESCRIPTION = (
    "We create personalized apparel and promotional items to help your brand stand out."
)
LONG_FORM_SCRIPT = "Longer version with story arc and benefits."


def split_keywords(text: str) -> List[str]:
    """Split a comma-separated string and trim each piece (order kept)"""
    return [part.strip() for part in text.split(",")]


def _long_form_video() -> dict:
    return {
        "script": LONG_FORM_SCRIPT,
        "scene_prompts": ["Scene 1", "Scene 2", "Scene 3", "Scene 4"],
    }


def fallback_brand_kit(intake: Intake) -> BrandKit:
    """
    Build the static brand kit, personalized only where the intake allows

    Business name goes into the meta title; SEO/contact keywords and the
    meta description come from the intake when given.
    """
    return {
        "taglines": [
            "Stand Out. Get Chosen.",
            "Make Your Brand Unmissable.",
            "Built To Win Attention.",
            "From Idea To Impact.",
            "Look Sharp. Sell More.",
        ],
        "slogans": [
            "Custom merch that turns heads and drives sales.",
            "Your brand, beautifully designed for everyday wins.",
            "Premium looks, practical prices, real results.",
            "Designs that connect customers to your story.",
            "Fast, modern branding that means business.",
        ],
        "palette": [
            {"name": "Navy Blue", "hex": "#0A2A66"},
            {"name": "Gold", "hex": "#E4B343"},
            {"name": "Soft White", "hex": "#F7F8FA"},
        ],
        "business_card": {
            "sides": "two",
            "layout": "modern",
            "front": {
                "elements": ["logo top-left", "name & role", "phone", "email"],
                "fonts": ["Inter Semibold", "Inter Regular"],
                "colors": ["#0A2A66", "#E4B343"],
            },
            "back": {
                "elements": ["big QR code center", "CTA: Scan for quote"],
                "fonts": ["Inter Bold"],
                "colors": ["#0A2A66", "#F7F8FA"],
            },
        },
        "flyer": {
            "recommended_sizes": list(DEFAULT_FLYER_SIZES),
            "orientation": "portrait",
            "layout_notes": [
                "Top: hero product or happy customer",
                "Middle: 3 key benefits with icons",
                "Bottom: bold CTA with QR and phone",
            ],
            "bleed_note": DEFAULT_BLEED_NOTE,
        },
        "smart_page": {
            "background_hex": "#0A2A66",
            "fonts": ["Inter", "DM Sans"],
            "mobile_readability_notes": [
                "High contrast (#FFFFFF on #0A2A66)",
                "Buttons full-width with 44px min height",
            ],
        },
        "seo": {
            "keywords": split_keywords(intake.seo_keywords or DEFAULT_SEO_KEYWORDS),
            "meta_title": f"{intake.business_name or 'Your Business'} - Custom Merch & Printing",
            "meta_description": intake.seo_meta_desc or DEFAULT_META_DESCRIPTION,
        },
        "contact_keywords": split_keywords(intake.contact_keywords or DEFAULT_CONTACT_KEYWORDS),
        "videos": {
            "runway_30": {
                "script": (
                    "VO: Your brand deserves more than clip art. We create custom merch "
                    "that stands out and sells. CTA: Scan the QR for a fast quote."
                ),
                "scene_prompts": [
                    "Close-up of custom shirts",
                    "Smiling customer receiving tote",
                    "Phone scanning QR code",
                ],
            },
            "pika_30": {
                "script": (
                    "VO: Tired of bland branding? Upgrade your look with fast, modern merch. "
                    "CTA: Tap to start now."
                ),
                "scene_prompts": [
                    "Logo build motion",
                    "Embroidery machine in action",
                    "QR with CTA overlay",
                ],
            },
            "capcut_30": {
                "script": (
                    "VO: Make your brand unmissable with quality designs and quick turnaround. "
                    "CTA: Message us today."
                ),
                "scene_prompts": [
                    "Merch lineup",
                    "Before/after refresh",
                    "Staff helping a customer",
                ],
            },
            "runway_60": _long_form_video(),
            "pika_60": _long_form_video(),
            "capcut_60": _long_form_video(),
        },
    }
