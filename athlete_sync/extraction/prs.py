"""
Personal-record stream parser.

A single left-to-right fold over the text stream. Two pieces of rolling
state are threaded through it:

- ``current_event``: last event heading seen
- ``is_high_school``: grade-eligibility flag from the most recent grade cue

When a PR marker ("PB", "PR", "SR") appears under an event while the flag is
set, the mark is read from the neighbouring tokens:

    ... "100 Meters" ... "11.25" "(1.2)" "PR" "Apr 5" "City Invite"
                          mark    wind   ^    date    meet

Callouts that print the marker right under the heading are read forward:

    "100m Hurdles" "PR" "(+0.8)" "14.20" "Apr 12, 2024" "County Meet"

The first valid record per event wins.
"""
import logging
import re
from dataclasses import dataclass, replace
from typing import Sequence

from athlete_sync.events import DEFAULT_VOCABULARY, EventVocabulary
from athlete_sync.extraction.constants import (
    MAX_MARK_LEN,
    PR_MARKERS,
    UNKNOWN_DATE,
    UNKNOWN_MEET,
)
from athlete_sync.models import PersonalRecord

logger = logging.getLogger('athlete_sync.prs')

_WIND_NOISE_RE = re.compile(r'[()c*]')
_WIND_RE = re.compile(r'^[+-]?\d+\.\d$')
_DIGIT_RE = re.compile(r'\d')

_MIDDLE_SCHOOL_RE = re.compile(r'\b[678]th\s+grade\b|\bgrade\s+[678]\b|middle school')
_HIGH_SCHOOL_RE = re.compile(
    r'\b(?:9|10|11|12)th\s+grade\b|\bgrade\s+(?:9|10|11|12)\b'
    r'|\bfreshman\b|\bsophomore\b|\bjunior\b|\bsenior\b'
    r'|varsity|high school|club'
)


@dataclass(frozen=True)
class ParserState:
    """Rolling context for one parse pass."""

    current_event: str | None = None
    is_high_school: bool = True


def grade_cue(token: str) -> bool | None:
    """
    Read a grade-eligibility cue from a token.

    Returns False for middle-school cues, True for high-school cues and
    None when the token says nothing about grade level.
    """
    lower = token.lower()
    if _MIDDLE_SCHOOL_RE.search(lower) or lower.endswith(' ms'):
        return False
    if _HIGH_SCHOOL_RE.search(lower) or lower.endswith(' hs'):
        return True
    return None


def advance(state: ParserState, token: str, vocabulary: EventVocabulary = DEFAULT_VOCABULARY) -> ParserState:
    """Transition the parser state over one token."""
    cue = grade_cue(token)
    if cue is not None and cue != state.is_high_school:
        state = replace(state, is_high_school=cue)

    event = vocabulary.match(token)
    if event is not None and event != state.current_event:
        state = replace(state, current_event=event)

    return state


def is_wind_reading(token: str) -> bool:
    """Signed one-decimal number or NWI, once paren/"c"/"*" noise is stripped."""
    cleaned = _WIND_NOISE_RE.sub('', token).strip()
    return bool(_WIND_RE.match(cleaned)) or cleaned == 'NWI'


def is_valid_mark(mark: str | None) -> bool:
    return (
        bool(mark)
        and bool(_DIGIT_RE.search(mark))
        and 'mi.' not in mark
        and len(mark) < MAX_MARK_LEN
    )


def _at(stream: Sequence[str], i: int) -> str | None:
    return stream[i] if 0 <= i < len(stream) else None


def read_entry(
    stream: Sequence[str],
    i: int,
    vocabulary: EventVocabulary = DEFAULT_VOCABULARY,
) -> tuple[str | None, str, str]:
    """
    Read (mark, date, meet) around the marker at index ``i``.

    The mark is not validated here.
    """
    prev = _at(stream, i - 1)

    # Callout layout: marker directly under its event heading
    if prev is None or vocabulary.match(prev) is not None:
        j = i + 1
        if _at(stream, j) is not None and is_wind_reading(stream[j]):
            j += 1
        mark = _at(stream, j)
        date = _at(stream, j + 1) or UNKNOWN_DATE
        meet = _at(stream, j + 2) or UNKNOWN_MEET
        return mark, date, meet

    mark = prev
    if is_wind_reading(prev):
        before = _at(stream, i - 2)
        if before and _DIGIT_RE.search(before) and vocabulary.match(before) is None:
            mark = before

    date = _at(stream, i + 1) or UNKNOWN_DATE
    meet = _at(stream, i + 2) or UNKNOWN_MEET
    return mark, date, meet


def parse_prs(
    stream: Sequence[str],
    vocabulary: EventVocabulary = DEFAULT_VOCABULARY,
) -> list[PersonalRecord]:
    """
    Extract personal records from a linearized page.

    Args:
        stream: Visible text tokens in document order
        vocabulary: Canonical event names

    Returns:
        At most one PersonalRecord per event, in discovery order
    """
    state = ParserState()
    records: dict[str, PersonalRecord] = {}

    for i, token in enumerate(stream):
        state = advance(state, token, vocabulary)

        if token not in PR_MARKERS:
            continue
        if state.current_event is None or not state.is_high_school:
            continue
        if state.current_event in records:
            continue

        mark, date, meet = read_entry(stream, i, vocabulary)
        if not is_valid_mark(mark):
            logger.debug(f'Dropped {token} candidate {mark!r} for {state.current_event}')
            continue

        records[state.current_event] = PersonalRecord(
            event=state.current_event,
            mark=mark,
            date=date,
            meet=meet,
        )

    return list(records.values())


def wiretap_snippet(
    stream: Sequence[str],
    vocabulary: EventVocabulary = DEFAULT_VOCABULARY,
    width: int = 50,
) -> list[str]:
    """Tokens around the first event heading, for diagnosing empty parses."""
    first = next((i for i, t in enumerate(stream) if vocabulary.match(t)), 0)
    start = max(0, first - 5)
    return list(stream[start:start + width])
