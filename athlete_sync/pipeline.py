"""
Extraction pipeline over page snapshots.

Pure functions of the snapshot and the injected vocabulary: the same
snapshot always yields the same record.
"""
import logging

from athlete_sync.events import DEFAULT_VOCABULARY, EventVocabulary
from athlete_sync.extraction.gender import AvatarSignal, classify_gender, swatch_signal
from athlete_sync.extraction.grad_year import estimate_grad_year
from athlete_sync.extraction.identity import resolve_identity
from athlete_sync.extraction.page import PageSnapshot
from athlete_sync.extraction.prs import parse_prs, wiretap_snippet
from athlete_sync.extraction.team import resolve_breadcrumb, resolve_team
from athlete_sync.models import AthleteRecord, TeamMetadata

logger = logging.getLogger('athlete_sync.pipeline')


def extract_athlete(
    snapshot: PageSnapshot,
    vocabulary: EventVocabulary = DEFAULT_VOCABULARY,
    avatar_signal: AvatarSignal | None = None,
) -> AthleteRecord:
    """
    Build the primary record from a profile page snapshot.

    Args:
        snapshot: Filtered, linearized profile page
        vocabulary: Canonical event names
        avatar_signal: Visual gender signal; defaults to the snapshot's
            color swatches

    Returns:
        AthleteRecord (team metadata not yet merged)
    """
    first_name, last_name = resolve_identity(snapshot.heading, snapshot.title)
    team = resolve_team(snapshot.profile_anchors)
    prs = parse_prs(snapshot.stream, vocabulary)

    if not prs:
        logger.debug(f'No PRs found; stream near first event: {wiretap_snippet(snapshot.stream, vocabulary)}')

    if avatar_signal is None:
        avatar_signal = swatch_signal(snapshot.swatches)

    gender = classify_gender(
        (pr.event for pr in prs),
        avatar_signal=avatar_signal,
        scripts=snapshot.scripts,
    )

    return AthleteRecord(
        first_name=first_name,
        last_name=last_name,
        school_name=team.name if team else None,
        prs=prs,
        gender=gender,
        team_url=team.url if team else None,
        grad_year=estimate_grad_year(snapshot.page_text, snapshot.stream, snapshot.headings),
        is_club=team.is_club if team else False,
    )


def extract_team_metadata(snapshot: PageSnapshot, club: bool = False) -> TeamMetadata:
    """Read state/size/conference from a team page snapshot."""
    return resolve_breadcrumb(snapshot.anchors, club=club)
