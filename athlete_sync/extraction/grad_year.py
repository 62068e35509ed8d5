"""
Graduation year estimation.

Tier 1 reads an explicit declaration ("Class of 2026"). Tier 2 projects the
year from the season-records table: a row "2023 Outdoor 11" means the
athlete was a junior in 2023 and graduates in 2024.
"""
import re
from typing import Iterable, Sequence

DECLARATION_RE = re.compile(
    r'\b(?:class\s+of|graduates?|grad(?:uation)?\s+year|yog)\b\s*:?\s*(2\d{3})\b',
    re.IGNORECASE,
)
SEASON_RECORDS_RE = re.compile(r'season\s+records', re.IGNORECASE)
SEASON_ROW_RE = re.compile(
    r'^(\d{4})\s+(?:[A-Za-z][A-Za-z &]*?\s+)?(\d{1,2})(?:th)?(?:\s+grade)?$',
    re.IGNORECASE,
)
ROW_MAX_CELLS = 3


def declared_grad_year(page_text: str) -> int | None:
    """Tier 1: explicit graduation-year phrase."""
    m = DECLARATION_RE.search(page_text)
    return int(m.group(1)) if m else None


def _season_row(tokens: Sequence[str]) -> tuple[int, int, int] | None:
    """
    Match a season row at the head of ``tokens``.

    A row is either one token ("2023 Outdoor 11") or spread over up to
    ``ROW_MAX_CELLS`` table cells ("2023", "Outdoor", "11").

    Returns:
        (row_year, grade, tokens consumed), or None
    """
    for width in range(1, min(ROW_MAX_CELLS, len(tokens)) + 1):
        m = SEASON_ROW_RE.match(' '.join(t.strip() for t in tokens[:width]))
        if m:
            return int(m.group(1)), int(m.group(2)), width
    return None


def projected_grad_year(stream: Sequence[str], stop_at: Iterable[str] = ()) -> int | None:
    """
    Tier 2: project from season rows after the "Season Records" heading.

    The block ends at the first token in ``stop_at`` (the page's other
    headings) or at the end of the stream. Only grades 9-12 count. The row
    with the largest season year wins; ties go to the last row seen.
    """
    start = next((i for i, t in enumerate(stream) if SEASON_RECORDS_RE.search(t)), None)
    if start is None:
        return None

    stop_at = {t.strip() for t in stop_at}
    block = list(stream[start + 1:])
    end = next((i for i, t in enumerate(block) if t.strip() in stop_at), len(block))
    block = block[:end]

    best_row_year = None
    best_grad_year = None
    i = 0
    while i < len(block):
        row = _season_row(block[i:])
        if row is None:
            i += 1
            continue
        row_year, grade, width = row
        i += width
        if not 9 <= grade <= 12:
            continue
        if best_row_year is None or row_year >= best_row_year:
            best_row_year = row_year
            best_grad_year = row_year + (12 - grade)

    return best_grad_year


def estimate_grad_year(
    page_text: str,
    stream: Sequence[str],
    headings: Iterable[str] = (),
) -> int | None:
    """Declared year if present, else the season-row projection."""
    declared = declared_grad_year(page_text)
    if declared is not None:
        return declared
    return projected_grad_year(stream, stop_at=headings)
