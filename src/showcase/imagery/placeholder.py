# src/showcase/imagery/placeholder.py

from typing import Optional
from urllib.parse import quote

from showcase.imagery.palette import font_for, language_gradient

IMAGE_WIDTH = 800
IMAGE_HEIGHT = 500

_SVG_TEMPLATE = """<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">
  <defs>
    <linearGradient id="bg" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" style="stop-color:{start}" />
      <stop offset="100%" style="stop-color:{end}" />
    </linearGradient>
    <filter id="shadow" x="-20%" y="-20%" width="140%" height="140%">
      <feDropShadow dx="0" dy="4" stdDeviation="8" flood-opacity="0.3"/>
    </filter>
  </defs>
  <rect width="{width}" height="{height}" fill="url(#bg)" />
  <text
    x="{center_x}"
    y="{center_y}"
    text-anchor="middle"
    font-family="'{font}', system-ui, sans-serif"
    font-size="56"
    font-weight="600"
    fill="white"
    filter="url(#shadow)"
  >{title}</text>
</svg>"""


def escape_svg_text(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def placeholder_svg(title: str, language: Optional[str], repo_name: str) -> str:
    start, end = language_gradient(language)
    return _SVG_TEMPLATE.format(
        width=IMAGE_WIDTH,
        height=IMAGE_HEIGHT,
        center_x=IMAGE_WIDTH // 2,
        center_y=IMAGE_HEIGHT // 2 + 10,
        start=start,
        end=end,
        font=font_for(repo_name),
        title=escape_svg_text(title),
    )


def placeholder_image(title: str, language: Optional[str], repo_name: str) -> str:
    """
    Inline SVG data URI (percent-encoded, not base64)
    """
    encoded = quote(placeholder_svg(title, language, repo_name), safe="-_.!~*'()")
    return f"data:image/svg+xml,{encoded}"
