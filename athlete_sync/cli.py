"""
CLI entrypoints for athlete_sync.

Usage:
    python -m athlete_sync.cli sync https://www.athletic.net/athlete/123/track-and-field
    python -m athlete_sync.cli parse profile.html --team-html team.html
"""
import argparse
import logging
import sys
from pathlib import Path

from athlete_sync.errors import SyncError
from athlete_sync.extraction.page import build_snapshot
from athlete_sync.models import FinalRecord, TeamMetadata
from athlete_sync.pipeline import extract_athlete, extract_team_metadata
from athlete_sync.scraper import AthleteSyncer, make_renderer

logger = logging.getLogger('athlete_sync')


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def run_sync(url: str, renderer: str | None = None, timeout_s: float | None = None) -> FinalRecord:
    """Scrape a live profile."""
    page_renderer = make_renderer(renderer)
    try:
        return AthleteSyncer(renderer=page_renderer).sync(url, timeout_s=timeout_s)
    finally:
        page_renderer.close()


def run_parse(profile_html: str, team_html: str | None = None, url: str = '') -> FinalRecord:
    """Extract from saved pages without any network access."""
    profile = build_snapshot(Path(profile_html).read_text(encoding='utf-8'), url)
    athlete = extract_athlete(profile)

    team = TeamMetadata()
    if team_html:
        team_snapshot = build_snapshot(Path(team_html).read_text(encoding='utf-8'), athlete.team_url or '')
        team = extract_team_metadata(team_snapshot, club=athlete.is_club)

    return FinalRecord.merge(athlete, team, source_url=url or None)


def main(argv=None):
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog='athlete-sync',
        description='Athlete profile scraper',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    subparsers = parser.add_subparsers(dest='command', required=True)

    # Sync command
    sync_parser = subparsers.add_parser('sync', help='Scrape a live athlete profile')
    sync_parser.add_argument('url', help='Athlete profile URL')
    sync_parser.add_argument('--renderer', choices=['playwright', 'http'], help='Page renderer')
    sync_parser.add_argument('--timeout', type=float, help='Overall time limit in seconds')

    # Parse command
    parse_parser = subparsers.add_parser('parse', help='Extract from a saved profile page')
    parse_parser.add_argument('profile_html', help='Saved profile page')
    parse_parser.add_argument('--team-html', help='Saved team page')
    parse_parser.add_argument('--url', default='', help='Original profile URL')

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.command == 'sync':
            record = run_sync(args.url, renderer=args.renderer, timeout_s=args.timeout)
        else:
            record = run_parse(args.profile_html, team_html=args.team_html, url=args.url)
    except SyncError as e:
        logger.error(f'{type(e).__name__}: {e}')
        sys.exit(1)

    print(record.model_dump_json(by_alias=True, indent=2))
    sys.exit(0 if record.prs else 1)


if __name__ == '__main__':
    main()
