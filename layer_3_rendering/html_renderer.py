"""
HTML rendering for brand kits

Turns a brand kit dict into one self-contained HTML document (inline
styles only, so it survives email clients). Every field is optional:
missing or wrongly typed values render as empty lists/strings.
"""
import html
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Iterable, List, Optional

from models.brand_kit import BrandKit, DEFAULT_BLEED_NOTE, VIDEO_KEYS

HEX_COLOR = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')

FOOTER_TIP = (
    "Tip: Use HEX codes and layout notes directly in Canva or your design tool. "
    "Ensure 0.125 in bleed for print."
)


def esc(value: Any) -> str:
    """Escape &, < and > (None renders as empty)"""
    if value is None:
        return ""
    return html.escape(str(value), quote=False)


def _mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _items(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def _list_items(values: Iterable[Any]) -> str:
    return "".join(f"<li>{esc(value)}</li>" for value in values)


def _joined(values: Any) -> str:
    return ", ".join(esc(value) for value in _items(values))


def _swatches(palette: Any) -> str:
    blocks = []
    for color in _items(palette):
        color = _mapping(color)
        hex_value = str(color.get("hex") or "")
        # Only well-formed colors go into the style attribute
        background = hex_value if HEX_COLOR.match(hex_value) else "transparent"
        blocks.append(f"""
    <div style="display:inline-block;margin:6px 10px 6px 0;">
      <div style="width:32px;height:32px;border-radius:6px;border:1px solid #ddd;background:{background}"></div>
      <div style="font-size:12px;color:#444;">{esc(color.get("name"))}<br>{esc(hex_value)}</div>
    </div>""")
    return "".join(blocks)


def _card_face(title: str, face: Any) -> str:
    face = _mapping(face)
    return (
        f"<h3>{title}</h3><ul>{_list_items(_items(face.get('elements')))}</ul>\n"
        f"  <p><strong>Fonts:</strong> {_joined(face.get('fonts'))}</p>\n"
        f"  <p><strong>Colors:</strong> {_joined(face.get('colors'))}</p>"
    )


def video_heading(key: str) -> str:
    """runway_30 -> RUNWAY 30"""
    return key.replace("_", " ", 1).upper()


def _videos(videos: Any) -> str:
    videos = _mapping(videos)
    sections = []
    for key in VIDEO_KEYS:
        video = _mapping(videos.get(key))
        sections.append(f"""
    <h3 style="margin-top:18px;">{video_heading(key)}</h3>
    <p><strong>Script:</strong> {esc(video.get("script"))}</p>
    <ol>{_list_items(_items(video.get("scene_prompts")))}</ol>
  """)
    return "".join(sections)


def render_brand_kit_html(kit: Optional[BrandKit], generated_at: Optional[datetime] = None) -> str:
    """
    Render a brand kit as an HTML document

    Args:
        kit: Brand kit from either generation path (None renders an empty kit)
        generated_at: Timestamp shown under the title (defaults to now)

    Returns:
        Complete HTML document as a string
    """
    kit = _mapping(kit)
    generated_at = generated_at or datetime.now()

    card = _mapping(kit.get("business_card"))
    flyer = _mapping(kit.get("flyer"))
    smart_page = _mapping(kit.get("smart_page"))
    seo = _mapping(kit.get("seo"))

    return f"""<!doctype html>
<html><head><meta charset="utf-8"><title>Brand Kit</title></head>
<body style="font-family:Inter,Arial,sans-serif;line-height:1.6;color:#111;padding:24px;max-width:920px;margin:0 auto;">
  <h1 style="margin:0 0 8px 0;">Brand Kit</h1>
  <p style="margin-top:0;color:#555;">Generated {esc(generated_at.strftime("%Y-%m-%d %H:%M:%S"))}</p>

  <h2>Taglines (5)</h2><ul>{_list_items(_items(kit.get("taglines")))}</ul>
  <h2>Slogans (5)</h2><ul>{_list_items(_items(kit.get("slogans")))}</ul>

  <h2>Color Palette</h2><div>{_swatches(kit.get("palette"))}</div>

  <h2>Business Card</h2>
  <p><strong>Sides:</strong> {esc(card.get("sides"))} | <strong>Layout:</strong> {esc(card.get("layout"))}</p>
  {_card_face("Front", card.get("front"))}
  {_card_face("Back", card.get("back"))}

  <h2>Flyer</h2>
  <p><strong>Recommended sizes:</strong> {_joined(flyer.get("recommended_sizes"))}</p>
  <p><strong>Orientation:</strong> {esc(flyer.get("orientation"))}</p>
  <ul>{_list_items(_items(flyer.get("layout_notes")))}</ul>
  <p style="color:#900;"><strong>Print Note:</strong> {esc(flyer.get("bleed_note") or DEFAULT_BLEED_NOTE)}</p>

  <h2>Smart Page</h2>
  <p><strong>Background:</strong> {esc(smart_page.get("background_hex"))} | <strong>Fonts:</strong> {_joined(smart_page.get("fonts"))}</p>
  <ul>{_list_items(_items(smart_page.get("mobile_readability_notes")))}</ul>

  <h2>SEO</h2>
  <p><strong>Meta Title:</strong> {esc(seo.get("meta_title"))}</p>
  <p><strong>Meta Description:</strong> {esc(seo.get("meta_description"))}</p>
  <p><strong>Keywords:</strong> {_joined(seo.get("keywords"))}</p>

  <h2>Contact Keywords</h2>
  <p>{_joined(kit.get("contact_keywords"))}</p>

  <h2>Video Scripts</h2>
  {_videos(kit.get("videos"))}

  <hr style="margin:28px 0;">
  <p style="color:#777;font-size:12px;">{esc(FOOTER_TIP)}</p>
</body></html>"""
