"""
Team resolution.

Two stages:
- ``resolve_team`` picks the athlete's current school from profile anchors.
- ``resolve_breadcrumb`` reads state/size/conference from the team page's
  breadcrumb (country -> level -> state -> division -> conference).
"""
import logging
import re
from typing import Iterable

from athlete_sync.extraction.constants import CLUB_KEYWORDS, DEFAULT_CLUB_CONFERENCE
from athlete_sync.models import AnchorCandidate, TeamCandidate, TeamMetadata
from athlete_sync.normalize import normalize_state

logger = logging.getLogger('athlete_sync.team')

_HS_RE = re.compile(r'\bhs\b|high school', re.IGNORECASE)

COUNTRY_MARKERS = frozenset({'united states', 'us'})
LEVEL_TOKENS = frozenset({'high school', 'middle school', 'college', 'club', 'clubs'})

_SIZE_PATTERNS = (
    re.compile(r'^\d[A-Z]$', re.IGNORECASE),
    re.compile(r'^[A-Z]\d$', re.IGNORECASE),
    re.compile(r'^(class|division|group|region|section)\s+\S+$', re.IGNORECASE),
)


def is_high_school(text: str) -> bool:
    return bool(_HS_RE.search(text))


def is_middle_school(text: str) -> bool:
    lower = text.lower()
    return 'middle' in lower or lower.endswith(' ms')


def is_club(text: str) -> bool:
    lower = text.lower()
    return any(keyword in lower for keyword in CLUB_KEYWORDS)


def is_size_code(text: str) -> bool:
    """Check for division notation such as "6A", "D1" or "Class 4"."""
    return any(p.match(text.strip()) for p in _SIZE_PATTERNS)


def resolve_team(candidates: Iterable[AnchorCandidate]) -> TeamCandidate | None:
    """
    Select the athlete's current team.

    Preference order:
    1. A high-school candidate ("HS" token or "high school", not "middle")
    2. Any candidate that is not a middle school
    3. None
    """
    candidates = list(candidates)

    selected = next(
        (c for c in candidates
         if is_high_school(c.text) and 'middle' not in c.text.lower()),
        None,
    )
    if selected is None:
        selected = next((c for c in candidates if not is_middle_school(c.text)), None)
    if selected is None:
        return None

    return TeamCandidate(
        name=selected.text,
        url=selected.href or None,
        is_club=is_club(selected.text),
    )


def resolve_breadcrumb(anchors: Iterable[AnchorCandidate], club: bool = False) -> TeamMetadata:
    """
    Parse the team page breadcrumb into state, size and conference.

    Args:
        anchors: Team page anchors in document order
        club: Team was classified as a club by ``resolve_team``

    Returns:
        TeamMetadata; any field whose anchor is missing is None
    """
    texts = [a.text.strip() for a in anchors]

    start = next(
        (i for i, t in enumerate(texts) if t.lower() in COUNTRY_MARKERS),
        None,
    )
    if start is None:
        logger.debug('No country marker in team page breadcrumb')
        return TeamMetadata()

    crumbs = texts[start + 1:]
    if crumbs and crumbs[0].lower() in LEVEL_TOKENS:
        crumbs = crumbs[1:]

    if not crumbs:
        return TeamMetadata()

    state = normalize_state(crumbs[0])
    rest = crumbs[1:]

    if club:
        conference = next((t for t in rest if not is_high_school(t)), None)
        return TeamMetadata(
            state=state,
            school_size='Club',
            conference=conference or DEFAULT_CLUB_CONFERENCE,
        )

    school_size = None
    conference = None
    for text in rest[:2]:
        if is_size_code(text):
            school_size = school_size or text
        elif conference is None and not is_high_school(text):
            conference = text

    return TeamMetadata(state=state, school_size=school_size, conference=conference)
