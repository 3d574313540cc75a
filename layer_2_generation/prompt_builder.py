"""
Prompt construction for the AI-backed brand kit path
"""
from models.brand_kit import (
    CARD_LAYOUTS,
    CARD_SIDES,
    DEFAULT_BLEED_NOTE,
    DEFAULT_FLYER_SIZES,
    FLYER_ORIENTATIONS,
    MAX_SCENE_PROMPTS,
    MIN_SCENE_PROMPTS,
    SLOGAN_COUNT,
    SLOGAN_MAX_WORDS,
    TAGLINE_COUNT,
    TAGLINE_MAX_WORDS,
    VIDEO_KEYS,
)
from models.intake import Intake

SYSTEM_PROMPT = "You are an expert brand strategist and creative director."


def _choices(values) -> str:
    return " | ".join(f'"{value}"' for value in values)


def _output_shape() -> str:
    """JSON skeleton the model must follow"""
    sizes = ", ".join(f'"{size}"' for size in DEFAULT_FLYER_SIZES)
    video_lines = ",\n".join(
        f'    "{key}": {{"script": string, "scene_prompts": [string]}}' for key in VIDEO_KEYS
    )
    return f"""{{
  "taglines": [{TAGLINE_COUNT} strings],
  "slogans": [{SLOGAN_COUNT} strings],
  "palette": [{{"name": string, "hex": string}}],
  "business_card": {{
    "sides": {_choices(CARD_SIDES)},
    "layout": {_choices(CARD_LAYOUTS)},
    "front": {{"elements": [string], "fonts": [string], "colors": [string]}},
    "back":  {{"elements": [string], "fonts": [string], "colors": [string]}}
  }},
  "flyer": {{
    "recommended_sizes": [{sizes}],
    "orientation": {_choices(FLYER_ORIENTATIONS)},
    "layout_notes": [string],
    "bleed_note": "{DEFAULT_BLEED_NOTE}"
  }},
  "smart_page": {{
    "background_hex": string,
    "fonts": [string],
    "mobile_readability_notes": [string]
  }},
  "seo": {{
    "keywords": [string],
    "meta_title": string,
    "meta_description": string
  }},
  "contact_keywords": [string],
  "videos": {{
{video_lines}
  }}
}}"""


def _extra_context(intake: Intake) -> str:
    """Optional lines for what the customer already has"""
    lines = []
    if intake.tagline:
        lines.append(f"Current tagline: {intake.tagline}")
    if intake.slogan:
        lines.append(f"Current slogan: {intake.slogan}")
    for idx, (desc, link) in enumerate(intake.reference_videos(), 1):
        lines.append(f"Reference video {idx}: {desc} {link}".rstrip())
    socials = intake.social_links()
    if socials:
        lines.append("Social profiles: " + ", ".join(f"{label} {url}" for label, url in socials.items()))
    if not lines:
        return ""
    return "\n" + "\n".join(lines)


def build_brand_kit_prompt(intake: Intake) -> str:
    """
    Build the instruction text sent as the user message

    Args:
        intake: Normalized intake

    Returns:
        Prompt string with the business details, the JSON shape and the rules
    """
    prompt = f"""You are a senior brand strategist. Create a concise, sales-minded brand kit.

Return ONLY valid JSON with this shape:
{_output_shape()}

Business: {intake.business_name}
What it does: {intake.business_desc}
USP: {intake.usp}
Products/Services: {intake.products_services}
Audience: {intake.target_audience}
Brand style: {intake.style_theme}
Preferred colors: {intake.preferred_colors}
Website: {intake.website_url}
Reviews: {intake.reviews}
SEO keywords: {intake.seo_keywords}{_extra_context(intake)}

Rules:
- Taglines ≤ {TAGLINE_MAX_WORDS} words; Slogans ≤ {SLOGAN_MAX_WORDS} words; exactly {TAGLINE_COUNT} of each.
- Include HEX color codes.
- Card: specify QR placement + side with CTA.
- Flyer: include 0.125in bleed note.
- Smart page: high contrast for mobile.
- SEO: include city names if present.
- Video: all {len(VIDEO_KEYS)} keys, {MIN_SCENE_PROMPTS}–{MAX_SCENE_PROMPTS} scenes each with strong CTA."""

    return prompt
