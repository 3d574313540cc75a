"""
Unit tests for Layer 3: HTML rendering
"""
import sys
import os
from datetime import datetime

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from layer_1_intake.normalizer import normalize_intake
from layer_2_generation.fallback import fallback_brand_kit
from layer_3_rendering.html_renderer import render_brand_kit_html, esc, video_heading
from models.brand_kit import VIDEO_KEYS

SECTION_HEADINGS = [
    "<h1 style=\"margin:0 0 8px 0;\">Brand Kit</h1>",
    "<h2>Taglines (5)</h2>",
    "<h2>Slogans (5)</h2>",
    "<h2>Color Palette</h2>",
    "<h2>Business Card</h2>",
    "<h2>Flyer</h2>",
    "<h2>Smart Page</h2>",
    "<h2>SEO</h2>",
    "<h2>Contact Keywords</h2>",
    "<h2>Video Scripts</h2>",
]


class TestEscape:
    """Test text escaping"""

    def test_escapes_markup_characters(self):
        assert esc("<b>Tom & Jerry</b>") == "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;"

    def test_none_and_non_strings(self):
        assert esc(None) == ""
        assert esc(5) == "5"

    def test_quotes_untouched(self):
        assert esc('"quoted"') == '"quoted"'


class TestRenderBrandKitHtml:
    """Test brand kit rendering"""

    def test_renders_fallback_kit(self):
        kit = fallback_brand_kit(normalize_intake({"business_name": "Acme Prints"}))
        doc = render_brand_kit_html(kit)

        assert doc.startswith("<!doctype html>")
        assert doc.rstrip().endswith("</body></html>")
        assert "<li>Stand Out. Get Chosen.</li>" in doc
        assert "Acme Prints - Custom Merch &amp; Printing" in doc
        assert "background:#0A2A66" in doc
        assert "name &amp; role" in doc

    def test_script_tags_are_escaped(self):
        kit = fallback_brand_kit(normalize_intake({}))
        kit["taglines"][0] = "<script>alert('x')</script>"
        doc = render_brand_kit_html(kit)

        assert "<script>" not in doc
        assert "&lt;script&gt;alert('x')&lt;/script&gt;" in doc

    def test_empty_kit_still_renders_all_sections(self):
        for kit in ({}, None):
            doc = render_brand_kit_html(kit)
            for heading in SECTION_HEADINGS:
                assert heading in doc
            assert "Add 0.125 in bleed on all sides" in doc

    def test_empty_nested_objects(self):
        kit = {
            "taglines": [],
            "business_card": {"front": {}, "back": None},
            "flyer": {},
            "smart_page": {},
            "seo": {},
            "videos": {},
        }
        doc = render_brand_kit_html(kit)

        for heading in SECTION_HEADINGS:
            assert heading in doc

    def test_wrong_types_degrade_to_empty(self):
        kit = {
            "taglines": "not a list",
            "palette": ["red", {"name": "Blue", "hex": "#00F"}],
            "business_card": "two sided",
            "seo": {"keywords": "a, b"},
            "videos": {"runway_30": ["oops"]},
        }
        doc = render_brand_kit_html(kit)

        assert "not a list" not in doc
        assert "two sided" not in doc
        assert "background:#00F" in doc
        assert "<h3 style=\"margin-top:18px;\">RUNWAY 30</h3>" in doc

    def test_bad_hex_not_placed_in_style(self):
        kit = {"palette": [{"name": "Evil", "hex": "red;background-image:url(x)"}]}
        doc = render_brand_kit_html(kit)

        assert "background:transparent" in doc
        assert "background:red;" not in doc
        assert "red;background-image:url(x)" in doc

    def test_videos_render_in_fixed_order(self):
        kit = {"videos": {"capcut_60": {"script": "Last one", "scene_prompts": ["A"]}}}
        doc = render_brand_kit_html(kit)

        positions = [doc.index(video_heading(key)) for key in VIDEO_KEYS]
        assert positions == sorted(positions)
        assert "Last one" in doc
        assert "<ol><li>A</li></ol>" in doc

    def test_video_heading(self):
        assert video_heading("runway_30") == "RUNWAY 30"
        assert video_heading("capcut_60") == "CAPCUT 60"

    def test_generated_timestamp(self):
        doc = render_brand_kit_html({}, generated_at=datetime(2025, 3, 4, 5, 6, 7))
        assert "Generated 2025-03-04 05:06:07" in doc

    def test_custom_bleed_note(self):
        doc = render_brand_kit_html({"flyer": {"bleed_note": "Bleed 3mm"}})
        assert "<strong>Print Note:</strong> Bleed 3mm" in doc
