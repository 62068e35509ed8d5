"""
Gender classifier cascade.

Stages, first decisive stage wins:
1. Event evidence (events contested by only one division)
2. Avatar color signal (injectable; default reads ColorSwatches)
3. Embedded-data signal (gender literal in page scripts)
Default: male.
"""
import logging
import re
from typing import Callable, Iterable, Sequence

from athlete_sync.events import FEMALE_EVENTS, MALE_EVENTS
from athlete_sync.extraction.constants import COLOR_CHANNEL_MIN, COLOR_DOMINANCE_MARGIN
from athlete_sync.extraction.page import ColorSwatch
from athlete_sync.models import Gender

logger = logging.getLogger('athlete_sync.gender')

AvatarSignal = Callable[[], Gender | None]

DEFAULT_GENDER: Gender = 'male'

_RGB_RE = re.compile(r'rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)')
_HEX_RE = re.compile(r'#([0-9a-f]{6}|[0-9a-f]{3})\b', re.IGNORECASE)
_FEMALE_HINT_RE = re.compile(r'\b(?:pink|hotpink|deeppink|crimson|red)\b|#e91e63|#f06292|#ec4899', re.IGNORECASE)
_MALE_HINT_RE = re.compile(r'\b(?:blue|navy|royalblue|dodgerblue)\b|#2196f3|#1e88e5|#3b82f6', re.IGNORECASE)
_SCRIPT_FEMALE_RE = re.compile(r'["\']?gender["\']?\s*:\s*["\'](?:f|female|w|women|girls)["\']', re.IGNORECASE)


def parse_color(value: str) -> tuple[int, int, int] | None:
    """Parse ``rgb()``/``rgba()`` or hex notation into an RGB triple."""
    if not value:
        return None
    m = _RGB_RE.search(value)
    if m:
        return int(m.group(1)), int(m.group(2)), int(m.group(3))
    m = _HEX_RE.search(value)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    return None


def classify_color(rgb: tuple[int, int, int]) -> Gender | None:
    """Red-dominant -> female default avatar, blue-dominant -> male."""
    r, g, b = rgb
    if r > COLOR_CHANNEL_MIN and r - g > COLOR_DOMINANCE_MARGIN and r - b > COLOR_DOMINANCE_MARGIN:
        return 'female'
    if b > COLOR_CHANNEL_MIN and b - r > COLOR_DOMINANCE_MARGIN and b - g > COLOR_DOMINANCE_MARGIN:
        return 'male'
    return None


def classify_swatch(swatch: ColorSwatch) -> Gender | None:
    rgb = parse_color(swatch.color)
    if rgb is not None:
        verdict = classify_color(rgb)
        if verdict is not None:
            return verdict

    # Failsafe: raw style text hints
    if _FEMALE_HINT_RE.search(swatch.style):
        return 'female'
    if _MALE_HINT_RE.search(swatch.style):
        return 'male'
    return None


def swatch_signal(swatches: Sequence[ColorSwatch]) -> AvatarSignal:
    """Avatar signal provider over swatches in document order."""

    def signal() -> Gender | None:
        for swatch in swatches:
            verdict = classify_swatch(swatch)
            if verdict is not None:
                return verdict
        return None

    return signal


def gender_from_events(events: Iterable[str]) -> Gender | None:
    events = set(events)
    if events & FEMALE_EVENTS:
        return 'female'
    if events & MALE_EVENTS:
        return 'male'
    return None


def gender_from_scripts(scripts: Iterable[str]) -> Gender | None:
    if any(_SCRIPT_FEMALE_RE.search(s) for s in scripts):
        return 'female'
    return None


def classify_gender(
    events: Iterable[str],
    avatar_signal: AvatarSignal | None = None,
    scripts: Iterable[str] = (),
) -> Gender:
    """
    Run the cascade.

    Args:
        events: Event names of the parsed PRs
        avatar_signal: Optional visual signal provider
        scripts: Embedded script texts

    Returns:
        'female' or 'male'
    """
    verdict = gender_from_events(events)
    if verdict is not None:
        logger.debug(f'Gender from events: {verdict}')
        return verdict

    if avatar_signal is not None:
        verdict = avatar_signal()
        if verdict is not None:
            logger.debug(f'Gender from avatar: {verdict}')
            return verdict

    verdict = gender_from_scripts(scripts)
    if verdict is not None:
        logger.debug('Gender from embedded data: female')
        return verdict

    return DEFAULT_GENDER
