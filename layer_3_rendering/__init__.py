"""
Layer 3: Rendering
- HTML Renderer (brand kit -> single inline-styled HTML document)
"""
from .html_renderer import render_brand_kit_html, esc, video_heading

__all__ = [
    'render_brand_kit_html',
    'esc',
    'video_heading',
]
