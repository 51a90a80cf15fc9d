# src/showcase/sources/github/readme.py
"""
README text mining heuristics.

Everything here is pure: empty or odd markdown yields None / [] rather than
an exception.
"""

import re
from typing import Iterator, List, Optional, Sequence, Tuple

DESCRIPTION_MAX_LENGTH = 200
DESCRIPTION_MIN_CUT = 150
MIN_SECTION_CONTENT = 30
MAX_TECH_STACK = 6

DESCRIPTION_SECTIONS = (
    "about",
    "overview",
    "description",
    "what is",
    "introduction",
    "summary",
)

TECH_STACK_SECTIONS = (
    "tech stack",
    "built with",
    "technologies",
    "stack",
    "tools",
)

HEADING_RE = re.compile(r"^(#{1,6})\s+(.*?)\s*#*\s*$")
FENCE_PREFIXES = ("```", "~~~")

SKIP_PREFIXES = ("#", "![", "[!", "<", "|") + FENCE_PREFIXES
META_PREFIXES = ("deploy:", "build:", "status:", "license:", "version:")
BARE_LINK_RE = re.compile(r"^\[[^\]]*\]\([^)]*\)$")
BARE_URL_RE = re.compile(r"^<?https?://\S+>?$")
RULE_RE = re.compile(r"^([-*_])(\s*\1){2,}$")

# 우선순위 순서 (앞의 패턴이 먼저 매칭되면 그 결과 사용)
_LABELS = r"(?:live demo|demo|try it|live|visit|website|app)"
_URL = r"(https?://[^\s<>()\[\]]+)"
LIVE_URL_PATTERNS = (
    re.compile(r"\[[^\]]*?\b" + _LABELS + r"\b[^\]]*\]\(\s*" + _URL + r"\s*\)", re.IGNORECASE),
    re.compile(r"\b" + _LABELS + r"\b[*_]*\s*[:\-–][*_]*\s*<?" + _URL, re.IGNORECASE),
    re.compile(r"https?://[\w.-]+\.vercel\.app[^\s<>()\[\]]*", re.IGNORECASE),
    re.compile(r"https?://[\w.-]+\.netlify\.app[^\s<>()\[\]]*", re.IGNORECASE),
    re.compile(r"https?://[\w.-]+\.up\.railway\.app[^\s<>()\[\]]*", re.IGNORECASE),
    re.compile(r"https?://[\w.-]+\.herokuapp\.com[^\s<>()\[\]]*", re.IGNORECASE),
    re.compile(r"https?://[\w-]+\.github\.io/[^\s<>()\[\]]+", re.IGNORECASE),
    re.compile(r"\bfrontend\b[*_]*\s*:[*_]*\s*<?" + _URL, re.IGNORECASE),
)
TRAILING_PUNCTUATION = ".,;:!?'\"`*_"

# canonical name -> pattern, table order == output order
TECH_PATTERNS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = tuple(
    (name, re.compile(pattern, re.IGNORECASE))
    for name, pattern in (
        ("TypeScript", r"\btypescript\b"),
        ("JavaScript", r"\bjavascript\b"),
        ("Python", r"\bpython\b"),
        ("Go", r"\bgolang\b"),
        ("Rust", r"\brust\b"),
        ("Java", r"\bjava\b"),
        ("Kotlin", r"\bkotlin\b"),
        ("Swift", r"\bswift\b"),
        ("React Native", r"\breact[\s-]native\b"),
        ("React", r"\breact(?:\.js|js)?\b(?![\s-]native)"),
        ("Next.js", r"\bnext\.?js\b"),
        ("Vue", r"\bvue(?:\.?js)?\b"),
        ("Svelte", r"\bsvelte(?:kit)?\b"),
        ("Angular", r"\bangular\b"),
        ("Astro", r"\bastro\b"),
        ("Node.js", r"\bnode(?:\.?js)?\b"),
        ("Express", r"\bexpress(?:\.?js)?\b"),
        ("FastAPI", r"\bfastapi\b"),
        ("Django", r"\bdjango\b"),
        ("Flask", r"\bflask\b"),
        ("Tailwind CSS", r"\btailwind(?:\s*css)?\b"),
        ("PostgreSQL", r"\bpostgres(?:ql)?\b"),
        ("MongoDB", r"\bmongo(?:db)?\b"),
        ("MySQL", r"\bmysql\b"),
        ("SQLite", r"\bsqlite\b"),
        ("Redis", r"\bredis\b"),
        ("Supabase", r"\bsupabase\b"),
        ("Firebase", r"\bfirebase\b"),
        ("Prisma", r"\bprisma\b"),
        ("GraphQL", r"\bgraphql\b"),
        ("Docker", r"\bdocker\b"),
        ("Kubernetes", r"\bkubernetes\b|\bk8s\b"),
        ("AWS", r"\baws\b"),
        ("Vercel", r"\bvercel\b"),
        ("OpenAI", r"\bopenai\b"),
        ("LangChain", r"\blangchain\b"),
        ("TensorFlow", r"\btensorflow\b"),
        ("PyTorch", r"\bpytorch\b"),
        ("Three.js", r"\bthree\.?js\b"),
        ("GSAP", r"\bgsap\b"),
    )
)


def iter_sections(readme: str) -> Iterator[Tuple[int, str, str]]:
    """
    Yield ``(level, heading, body)`` for every ATX heading. The body runs
    until the next heading of equal or higher level, so it includes nested
    subsections. Lines inside code fences are never treated as headings.
    """
    lines = (readme or "").splitlines()
    headings = []
    in_fence = False
    for idx, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith(FENCE_PREFIXES):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        match = HEADING_RE.match(stripped)
        if match:
            headings.append((idx, len(match.group(1)), match.group(2)))

    for pos, (idx, level, title) in enumerate(headings):
        end = len(lines)
        for next_idx, next_level, _ in headings[pos + 1:]:
            if next_level <= level:
                end = next_idx
                break
        yield level, title, "\n".join(lines[idx + 1:end]).strip()


def extract_section(readme: str, keywords: Sequence[str]) -> Optional[str]:
    """
    Body of the first heading whose text contains one of ``keywords``
    """
    for _, title, body in iter_sections(readme):
        heading = title.lower()
        if body and any(keyword in heading for keyword in keywords):
            return body
    return None


def is_skippable_line(line: str) -> bool:
    stripped = line.strip()
    if not stripped:
        return True
    if stripped.startswith(SKIP_PREFIXES):
        return True

    lower = stripped.lower()
    if "shields.io" in lower or "badge" in lower:
        return True
    if lower.startswith(META_PREFIXES):
        return True

    return bool(
        BARE_LINK_RE.match(stripped)
        or BARE_URL_RE.match(stripped)
        or RULE_RE.match(stripped)
    )


def first_paragraph(text: str) -> Optional[str]:
    """
    First contiguous run of non-skippable lines, joined with spaces
    """
    parts: List[str] = []
    in_fence = False
    for line in (text or "").splitlines():
        stripped = line.strip()
        if stripped.startswith(FENCE_PREFIXES):
            in_fence = not in_fence
            if parts:
                break
            continue
        if in_fence or is_skippable_line(stripped):
            if parts:
                break
            continue
        parts.append(stripped)

    paragraph = " ".join(parts).strip()
    return paragraph or None


def truncate_description(
    text: str,
    limit: int = DESCRIPTION_MAX_LENGTH,
    min_cut: int = DESCRIPTION_MIN_CUT,
) -> str:
    cleaned = text.strip()
    if len(cleaned) <= limit:
        return cleaned

    truncated = cleaned[:limit]
    last_space = truncated.rfind(" ")
    cut = last_space if last_space >= min_cut else limit
    return truncated[:cut] + "..."


def extract_description(readme: Optional[str]) -> Optional[str]:
    """
    README에서 프로젝트 설명 추출

    1) about / overview / ... 섹션의 첫 문단 (30자 초과)
    2) 없으면 문서 첫 문단 (제목, 배지, 이미지, HTML 등은 건너뜀)
    """
    if not readme or not readme.strip():
        return None

    for _, title, body in iter_sections(readme):
        heading = title.lower()
        if not any(keyword in heading for keyword in DESCRIPTION_SECTIONS):
            continue
        paragraph = first_paragraph(body)
        if paragraph and len(paragraph) > MIN_SECTION_CONTENT:
            return truncate_description(paragraph)

    paragraph = first_paragraph(readme)
    if not paragraph:
        return None
    return truncate_description(paragraph)


def extract_live_url(readme: Optional[str]) -> Optional[str]:
    if not readme:
        return None

    for pattern in LIVE_URL_PATTERNS:
        match = pattern.search(readme)
        if not match:
            continue
        url = match.group(1) if pattern.groups else match.group(0)
        return url.rstrip(TRAILING_PUNCTUATION)
    return None


def extract_tech_stack(readme: Optional[str], limit: int = MAX_TECH_STACK) -> List[str]:
    """
    Tech stack 섹션(없으면 README 전체)에서 기술 이름 추출, 최대 ``limit``개
    """
    if not readme or not readme.strip():
        return []

    haystack = extract_section(readme, TECH_STACK_SECTIONS) or readme
    found: List[str] = []
    for name, pattern in TECH_PATTERNS:
        if len(found) >= limit:
            break
        if pattern.search(haystack):
            found.append(name)
    return found
