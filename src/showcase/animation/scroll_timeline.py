# src/showcase/animation/scroll_timeline.py
"""
Declarative scroll-driven animation timelines.

The browser animation library does the actual work; this module only
describes what each page section does as the user scrolls (pinning, scrub,
tween order) and serialises it with the option names the library expects
(``pinSpacing``, ``anticipatePin``, ``toggleActions``, ``snapTo`` ...).
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MOBILE_MAX_WIDTH = 768
CARD_WIDTH = 350
CARD_GAP = 32
TRACK_EXTRA_SCROLL = 200
PLAY_ONCE = "play none none none"


class _ConfigModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Snap(_ConfigModel):
    snap_to: float
    duration: float
    ease: str


class ScrollTriggerConfig(_ConfigModel):
    trigger: str
    start: str = "top top"
    end: Optional[str] = None
    pin: bool = False
    pin_spacing: Optional[bool] = None
    scrub: Optional[float] = None
    anticipate_pin: Optional[int] = None
    toggle_actions: Optional[str] = None
    snap: Optional[Snap] = None


class Tween(_ConfigModel):
    target: str
    start_values: Dict[str, float]
    end_values: Dict[str, float]
    duration: float
    position: float = 0.0
    stagger: Optional[float] = None
    ease: Optional[str] = None

    @property
    def end_time(self) -> float:
        return self.position + self.duration


class Timeline(_ConfigModel):
    name: str
    scroll_trigger: ScrollTriggerConfig
    tweens: List[Tween] = Field(default_factory=list)
    # True면 selector에 매칭되는 요소마다 timeline을 따로 만듦
    per_element: bool = False

    @property
    def total_duration(self) -> float:
        return max((tween.end_time for tween in self.tweens), default=0.0)

    def sample(self, progress: float) -> Dict[str, Dict[str, float]]:
        """
        Linear state of every target at ``progress`` (clamped to [0, 1]).
        Easing is left to the browser; a tween that has not started yet
        does not override values set by an earlier one on the same target.
        """
        progress = min(max(progress, 0.0), 1.0)
        time = progress * self.total_duration

        state: Dict[str, Dict[str, float]] = {}
        for tween in sorted(self.tweens, key=lambda t: t.position):
            target_state = state.setdefault(tween.target, {})
            if tween.duration <= 0:
                local = 1.0 if time >= tween.position else 0.0
            else:
                local = min(max((time - tween.position) / tween.duration, 0.0), 1.0)

            for prop, end in tween.end_values.items():
                if local == 0.0 and prop in target_state:
                    continue
                start = tween.start_values.get(prop, end)
                target_state[prop] = start + (end - start) * local
        return state


def is_mobile_viewport(width: int) -> bool:
    return width <= MOBILE_MAX_WIDTH


def horizontal_track_width(card_count: int, card_width: int = CARD_WIDTH, gap: int = CARD_GAP) -> int:
    """
    Distance the card track travels so the last card ends where the first began
    """
    if card_count < 2:
        return 0
    return (card_width + gap) * (card_count - 1)


def _fade_up(target: str, duration: float, position: float = 0.0, offset: float = 30, **kwargs) -> Tween:
    return Tween(
        target=target,
        start_values={"opacity": 0, "y": offset},
        end_values={"opacity": 1, "y": 0},
        duration=duration,
        position=position,
        **kwargs,
    )


def _reveal(name: str, tween: Tween, trigger: str, start: str, per_element: bool = False) -> Timeline:
    return Timeline(
        name=name,
        scroll_trigger=ScrollTriggerConfig(trigger=trigger, start=start, toggle_actions=PLAY_ONCE),
        tweens=[tween],
        per_element=per_element,
    )


def _pinned(trigger: str, end: str, scrub: float, pin_spacing: Optional[bool] = None, **kwargs) -> ScrollTriggerConfig:
    return ScrollTriggerConfig(
        trigger=trigger,
        pin=True,
        pin_spacing=pin_spacing,
        start="top top",
        end=end,
        scrub=scrub,
        anticipate_pin=1,
        **kwargs,
    )


def logo_splash_timeline() -> Timeline:
    # 첫 화면: 스크롤하면 로고가 사라짐
    return Timeline(
        name="logo-splash",
        scroll_trigger=_pinned(".logo-splash", end="+=80%", scrub=0.5, pin_spacing=True),
        tweens=[
            Tween(
                target=".logo-projets",
                start_values={"opacity": 1, "scale": 1, "y": 0},
                end_values={"opacity": 0, "scale": 0.9, "y": -30},
                duration=0.6,
                position=0.3,
            ),
            Tween(
                target=".logo-tagline",
                start_values={"opacity": 1, "y": 0},
                end_values={"opacity": 0, "y": -20},
                duration=0.4,
                position=0.2,
            ),
            Tween(
                target=".logo-scroll-indicator",
                start_values={"opacity": 1, "y": 0},
                end_values={"opacity": 0, "y": 20},
                duration=0.3,
                position=0.0,
            ),
        ],
    )


def intro_splash_timeline() -> Timeline:
    return Timeline(
        name="intro-splash",
        scroll_trigger=_pinned(".intro-splash", end="+=100%", scrub=0.5, pin_spacing=True),
        tweens=[
            _fade_up(".intro-greeting", 0.2, 0.0),
            _fade_up(".line-1", 0.2, 0.15),
            _fade_up(".line-2", 0.2, 0.3),
            _fade_up(".line-3", 0.2, 0.45),
            _fade_up(".intro-splash .scroll-indicator", 0.15, 0.6),
        ],
    )


def what_i_do_timelines(card_count: int, is_mobile: bool) -> List[Timeline]:
    timelines = [_reveal("what-title", _fade_up(".what-title", 0.5), ".what-i-do", "top 80%")]

    if is_mobile:
        timelines.append(
            _reveal(
                "focus-cards",
                _fade_up(".focus-card", 0.6, stagger=0.15, ease="power2.out"),
                ".what-i-do",
                "top 95%",
            )
        )
        return timelines

    if card_count < 2:
        if card_count == 1:
            timelines.append(_reveal("focus-cards", _fade_up(".focus-card", 0.5), ".what-i-do", "top 80%"))
        return timelines

    track_width = horizontal_track_width(card_count)
    timelines.append(
        Timeline(
            name="focus-track",
            scroll_trigger=_pinned(
                ".what-i-do",
                end=f"+={track_width + TRACK_EXTRA_SCROLL}",
                scrub=1,
                snap=Snap(snap_to=1 / (card_count - 1), duration=0.3, ease="power1.inOut"),
            ),
            tweens=[
                Tween(
                    target=".focus-cards-track",
                    start_values={"x": 0},
                    end_values={"x": -track_width},
                    duration=1,
                    ease="none",
                )
            ],
        )
    )
    timelines.append(
        _reveal("focus-cards", _fade_up(".focus-card", 0.5, stagger=0.1), ".what-i-do", "top 80%")
    )
    return timelines


def approach_timelines(is_mobile: bool) -> List[Timeline]:
    quote = Tween(
        target=".quote-block",
        start_values={"opacity": 0, "y": 40, "scale": 0.9},
        end_values={"opacity": 1, "y": 0, "scale": 1},
        duration=0.8 if is_mobile else 0.6,
    )

    if is_mobile:
        return [
            _reveal("approach-quote", quote, ".my-approach", "top 70%"),
            _reveal(
                "approach-description",
                _fade_up(".approach-description", 0.6),
                ".approach-description",
                "top 85%",
            ),
        ]

    return [
        Timeline(
            name="approach",
            scroll_trigger=_pinned(".my-approach", end="+=150%", scrub=1),
            tweens=[quote, _fade_up(".approach-description", 0.4, 0.4)],
        )
    ]


def hero_timelines(is_mobile: bool) -> List[Timeline]:
    timelines = [_reveal("hero-content", _fade_up(".hero-content", 0.8, offset=40), ".hero", "top 70%")]

    if not is_mobile:
        # blob은 느리게 움직여서 깊이감
        timelines.append(
            Timeline(
                name="hero-parallax",
                scroll_trigger=ScrollTriggerConfig(trigger=".hero", start="top bottom", end="bottom top", scrub=1),
                tweens=[
                    Tween(
                        target=".hero .blob",
                        start_values={"y": 0},
                        end_values={"y": -100},
                        duration=1,
                        ease="none",
                    )
                ],
            )
        )
    return timelines


def content_timelines() -> List[Timeline]:
    return [
        _reveal("scroll-transition", _fade_up(".transition-content", 0.6), ".scroll-transition", "top 80%"),
        _reveal(
            "section-headers",
            _fade_up(".section-header", 0.8),
            ".section-header",
            "top 85%",
            per_element=True,
        ),
        _reveal(
            "project-cards",
            _fade_up(".project-card", 0.5, stagger=0.08),
            ".featured-projets .project-grid",
            "top 95%",
        ),
        _reveal(
            "skills",
            Tween(
                target=".skill-badge",
                start_values={"opacity": 0, "scale": 0.8},
                end_values={"opacity": 1, "scale": 1},
                duration=0.4,
                stagger=0.05,
            ),
            ".skills-grid",
            "top 85%",
        ),
        _reveal("cta", _fade_up(".cta-content", 0.8), ".cta-section", "top 80%"),
    ]


def build_scroll_timelines(card_count: int, is_mobile: bool) -> List[Timeline]:
    """
    Full page configuration, top to bottom. Mobile drops pinning and
    horizontal scroll in favour of plain fade-ins.
    """
    timelines = [logo_splash_timeline(), intro_splash_timeline()]
    timelines.extend(what_i_do_timelines(card_count, is_mobile))
    timelines.extend(approach_timelines(is_mobile))
    timelines.extend(hero_timelines(is_mobile))
    timelines.extend(content_timelines())
    return timelines
