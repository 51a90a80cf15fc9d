# src/showcase/imagery/palette.py
"""
Deterministic color / font / style selection for generated project imagery.

Every choice is a pure function of the repository name, language or tag
list, so rebuilding the site always yields identical visuals. The only
entropy source is ``string_hash``, which reproduces the 32-bit JavaScript
rolling hash bit for bit.
"""

import math
from typing import Dict, List, Optional, Sequence, Tuple

from showcase.models import ProjectColors

DEFAULT_COLOR = "#6e7681"

# language -> (gradient start, gradient end)
LANGUAGE_GRADIENTS: Dict[str, Tuple[str, str]] = {
    # Blues & Cyans
    "TypeScript": ("#007ACC", "#0058a3"),
    "Go": ("#00ADD8", "#008db0"),
    # Yellows & Oranges
    "JavaScript": ("#F0DB4F", "#d4c244"),
    "Java": ("#ED8B00", "#c97500"),
    "Astro": ("#FF5D01", "#cc4a01"),
    # Greens & Python
    "Python": ("#4B8BBE", "#306998"),
    "Vue": ("#42b883", "#35495e"),
    "Shell": ("#4EAA25", "#3d8a1d"),
    # Reds & Pinks
    "HTML": ("#E44D26", "#F16529"),
    "Ruby": ("#CC342D", "#a32925"),
    "C++": ("#f34b7d", "#c23c64"),
    "Swift": ("#F05138", "#c8412d"),
    # Purples
    "CSS": ("#264de4", "#2965f1"),
    "PHP": ("#777BB4", "#5f6396"),
    "Kotlin": ("#7F52FF", "#C711E1"),
    # Earthy
    "Rust": ("#CE422B", "#a33622"),
    "C": ("#A8B9CC", "#5C6BC0"),
}
DEFAULT_GRADIENT: Tuple[str, str] = (DEFAULT_COLOR, "#4a4f54")

TECH_COLORS: Dict[str, str] = {
    # Languages
    "TypeScript": "#3178C6",
    "JavaScript": "#F7DF1E",
    "Python": "#3776AB",
    "Go": "#00ADD8",
    "Rust": "#CE422B",
    "Java": "#ED8B00",
    "Kotlin": "#7F52FF",
    "Swift": "#F05138",
    "Ruby": "#CC342D",
    "PHP": "#777BB4",
    "C": "#A8B9CC",
    "C++": "#F34B7D",
    "C#": "#239120",
    "Dart": "#0175C2",
    "Shell": "#4EAA25",
    "HTML": "#E34F26",
    "CSS": "#1572B6",
    "SQL": "#336791",
    # Frontend frameworks
    "React": "#61DAFB",
    "React Native": "#61DAFB",
    "Next.js": "#000000",
    "Vue": "#42B883",
    "Nuxt": "#00DC82",
    "Svelte": "#FF3E00",
    "Angular": "#DD0031",
    "Astro": "#FF5D01",
    "Tailwind": "#06B6D4",
    "Tailwind CSS": "#06B6D4",
    "Sass": "#CC6699",
    "Three.js": "#049EF4",
    "GSAP": "#88CE02",
    "Vite": "#646CFF",
    # Backend frameworks
    "Node.js": "#68A063",
    "Express": "#404D59",
    "NestJS": "#E0234E",
    "Deno": "#70FFAF",
    "Bun": "#FBF0DF",
    "FastAPI": "#009688",
    "Django": "#092E20",
    "Flask": "#3BABC3",
    "Spring": "#6DB33F",
    "Rails": "#CC0000",
    "Laravel": "#FF2D20",
    "GraphQL": "#E10098",
    # Databases
    "PostgreSQL": "#336791",
    "MySQL": "#4479A1",
    "SQLite": "#003B57",
    "MongoDB": "#47A248",
    "Redis": "#DC382D",
    "Supabase": "#3ECF8E",
    "Firebase": "#FFCA28",
    "Prisma": "#2D3748",
    # Cloud & tooling
    "Docker": "#2496ED",
    "Kubernetes": "#326CE5",
    "AWS": "#FF9900",
    "GCP": "#4285F4",
    "Azure": "#0078D4",
    "Vercel": "#000000",
    "Netlify": "#00C7B7",
    "Terraform": "#7B42BC",
    "GitHub Actions": "#2088FF",
    "CLI": "#4D4D4D",
    # AI / ML
    "OpenAI": "#412991",
    "LangChain": "#1C3C3C",
    "TensorFlow": "#FF6F00",
    "PyTorch": "#EE4C2C",
    "Hugging Face": "#FFD21E",
    "scikit-learn": "#F7931E",
    "AI Agents": "#8B5CF6",
    "MCP": "#D97757",
    # Mobile
    "Flutter": "#02569B",
    "Expo": "#000020",
    "Android": "#3DDC84",
    "iOS": "#000000",
}
_TECH_COLOR_INDEX: Dict[str, str] = {name.lower(): color for name, color in TECH_COLORS.items()}

DISPLAY_FONTS = (
    "Playfair Display",
    "Poppins",
    "Space Grotesk",
    "Outfit",
    "DM Sans",
)

PROJECT_STYLES = (
    "mesh",
    "radial",
    "geometric",
    "waves",
    "grid",
    "noise",
)

# 직접 고른 hue (hash 결과보다 우선)
HUE_OVERRIDES: Dict[str, int] = {
    "learnex-course-tutor": 210,
    "stratos-investment-assistant": 160,
    "prizm-photo-album": 285,
    "jetflux-cc-sdk": 25,
}

GOLDEN_ANGLE = 137.508
MAX_STACK_COLORS = 4


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def string_hash(value: str) -> int:
    """
    ``h = (h << 5) - h + charCode`` over UTF-16 code units, wrapped to a
    signed 32-bit integer after every step; returns ``abs(h)``.
    """
    encoded = value.encode("utf-16-le")
    h = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        h = _to_int32((h << 5) - h + code_unit)
    return abs(h)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def font_for(repo_name: str) -> str:
    return DISPLAY_FONTS[string_hash(repo_name) % len(DISPLAY_FONTS)]


def language_gradient(language: Optional[str]) -> Tuple[str, str]:
    if not language:
        return DEFAULT_GRADIENT
    return LANGUAGE_GRADIENTS.get(language, DEFAULT_GRADIENT)


def tech_color(name: Optional[str]) -> Optional[str]:
    if not name:
        return None
    return _TECH_COLOR_INDEX.get(name.strip().lower())


def _language_color(language: Optional[str]) -> Optional[str]:
    if not language:
        return None
    color = tech_color(language)
    if color:
        return color
    if language in LANGUAGE_GRADIENTS:
        return LANGUAGE_GRADIENTS[language][0]
    return None


def stack_colors(tags: Sequence[str], language: Optional[str] = None) -> List[str]:
    """
    Up to four distinct colors for the project's stack, in tag order.
    The language color is prepended when the tags yield fewer than two.
    """
    colors: List[str] = []
    for tag in tags:
        color = tech_color(tag)
        if color and color not in colors:
            colors.append(color)
        if len(colors) >= MAX_STACK_COLORS:
            break

    if len(colors) < 2:
        lang_color = _language_color(language)
        if lang_color and lang_color not in colors:
            colors.insert(0, lang_color)

    return colors or [DEFAULT_COLOR]


def stack_gradient(tags: Sequence[str], language: Optional[str] = None) -> str:
    colors = stack_colors(tags, language)
    if len(colors) == 1:
        return f"radial-gradient(circle at 30% 30%, {colors[0]} 0%, transparent 70%)"

    step = 60 / (len(colors) - 1)
    stops = [f"{color} {_round_half_up(i * step)}%" for i, color in enumerate(colors)]
    stops.append("transparent 85%")
    return f"radial-gradient(circle at 30% 30%, {', '.join(stops)})"


def unique_hue(repo_name: str) -> int:
    if repo_name in HUE_OVERRIDES:
        return HUE_OVERRIDES[repo_name]
    return _round_half_up((string_hash(repo_name) * GOLDEN_ANGLE) % 360)


def unique_project_colors(repo_name: str) -> ProjectColors:
    hue = unique_hue(repo_name)
    return ProjectColors(
        primary=f"hsl({hue}, 70%, 55%)",
        secondary=f"hsl({(hue + 35) % 360}, 65%, 50%)",
        accent=f"hsl({(hue + 180) % 360}, 75%, 60%)",
    )


def project_style(repo_name: str) -> str:
    return PROJECT_STYLES[string_hash(repo_name) % len(PROJECT_STYLES)]
