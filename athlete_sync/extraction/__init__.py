"""Extraction pipeline: page adapter and pure resolvers."""

from athlete_sync.extraction.gender import classify_gender, swatch_signal
from athlete_sync.extraction.grad_year import estimate_grad_year
from athlete_sync.extraction.identity import resolve_identity
from athlete_sync.extraction.page import ColorSwatch, PageSnapshot, build_snapshot
from athlete_sync.extraction.prs import ParserState, advance, parse_prs
from athlete_sync.extraction.team import resolve_breadcrumb, resolve_team

__all__ = [
    'ColorSwatch',
    'PageSnapshot',
    'ParserState',
    'advance',
    'build_snapshot',
    'classify_gender',
    'estimate_grad_year',
    'parse_prs',
    'resolve_breadcrumb',
    'resolve_identity',
    'resolve_team',
    'swatch_signal',
]
