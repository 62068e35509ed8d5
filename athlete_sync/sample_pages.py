"""
Generate realistic sample profile and team pages for testing.

Creates pages with:
- Identity heading and team link
- Decoy feed and blurred teaser blocks carrying PR-shaped text
- Per-event result tables with PR markers and wind readings
- Season-records table for grad-year projection
- Breadcrumb navigation on the team page
"""

from html import escape
from typing import Sequence

# (event, mark, wind or None, date, meet)
SAMPLE_RESULTS: list[tuple[str, str, str | None, str, str]] = [
    ('100 Meters', '11.25', '(1.2)', 'Apr 5, 2024', 'City Invite'),
    ('200 Meters', '23.10', None, 'May 1, 2024', 'Regional'),
    ('Long Jump', '21\' 4"', '+1.8', 'Apr 20, 2024', 'County Meet'),
    ('1600 Meters', '4:25.31', None, 'Mar 30, 2024', 'Arcadia Invitational'),
]

SAMPLE_SEASON_ROWS: list[str] = ['2024 Outdoor 11', '2023 Outdoor 10', '2022 Outdoor 9']


def _results_block(results: Sequence[tuple[str, str, str | None, str, str]]) -> str:
    parts = ['<div class="results">']
    for event, mark, wind, date, meet in results:
        wind_cell = f'<td>{escape(wind)}</td>' if wind else ''
        parts.append(
            f'<h4>{escape(event)}</h4>'
            '<table><tr>'
            f'<td>{escape(mark)}</td>{wind_cell}<td>PR</td>'
            f'<td>{escape(date)}</td><td>{escape(meet)}</td>'
            '</tr></table>'
        )
    parts.append('</div>')
    return ''.join(parts)


def generate_profile_html(
    name: str = 'Jane Doe',
    school: str | None = 'Lincoln HS',
    school_href: str = '/team/1234/track-and-field',
    results: Sequence[tuple[str, str, str | None, str, str]] | None = None,
    season_rows: Sequence[str] | None = None,
    declared_grad_year: int | None = None,
    avatar_color: str | None = None,
    gender_literal: str | None = None,
    grade_label: str | None = None,
    include_decoys: bool = True,
) -> str:
    """
    Generate an athlete profile page.

    Args:
        name: Athlete name for the h1 and title
        school: Team link text (None for no team link)
        school_href: Team link href
        results: Event result rows; defaults to SAMPLE_RESULTS
        season_rows: "Season Records" rows; defaults to SAMPLE_SEASON_ROWS
        declared_grad_year: Adds a "Class of YYYY" line
        avatar_color: Inline background color of the avatar
        gender_literal: Value of a "gender" field in an embedded script
        grade_label: Grade cue printed before the results (e.g. "8th Grade")
        include_decoys: Add feed and blurred teaser blocks

    Returns:
        HTML document
    """
    if results is None:
        results = SAMPLE_RESULTS
    if season_rows is None:
        season_rows = SAMPLE_SEASON_ROWS

    avatar_style = f' style="background-color: {avatar_color}"' if avatar_color else ''
    team_link = f'<h2><a href="{escape(school_href)}">{escape(school)}</a></h2>' if school else ''
    grad_line = f'<p>Class of {declared_grad_year}</p>' if declared_grad_year else ''
    grade_line = f'<h3>{escape(grade_label)}</h3>' if grade_label else ''

    decoys = ''
    if include_decoys:
        decoys = (
            '<div class="activity-feed"><span>100 Meters</span><span>9.58</span>'
            '<span>PR</span><span>Aug 16</span><span>Feed Teaser</span></div>'
            '<div class="premium" style="filter: blur(4px)"><span>200 Meters</span>'
            '<span>19.19</span><span>PR</span></div>'
        )

    rows = ''.join(
        '<tr>' + ''.join(f'<td>{escape(cell)}</td>' for cell in r.split()) + '</tr>'
        for r in season_rows
    )
    season_block = f'<div><h3>Season Records</h3><table>{rows}</table></div>' if season_rows else ''
    script = (
        f'<script>window.__ATHLETE__ = {{"id": 1, "gender": "{gender_literal}"}};</script>'
        if gender_literal else ''
    )

    return (
        '<!DOCTYPE html><html><head>'
        f'<title>{escape(name)} - {escape(school or "Unattached")} - Track &amp; Field</title>'
        '</head><body>'
        '<header class="profile-header"><div class="card">'
        f'<div class="avatar"{avatar_style}></div>'
        f'<div class="identity"><h1>{escape(name)}</h1>{team_link}</div>'
        '</div></header>'
        f'{grad_line}{decoys}{grade_line}{_results_block(results)}{season_block}{script}'
        '</body></html>'
    )


def generate_team_html(
    breadcrumb: Sequence[str] = ('United States', 'High School', 'CA', '4A', 'Bay League'),
    team_name: str = 'Lincoln HS',
) -> str:
    """Generate a team page with a breadcrumb navigation bar."""
    crumbs = ''.join(f'<a href="#">{escape(c)}</a>' for c in breadcrumb)
    return (
        '<!DOCTYPE html><html><head><title>Team</title></head><body>'
        '<nav><a href="/">Home</a><a href="/rankings">Rankings</a></nav>'
        f'<div class="breadcrumb">{crumbs}</div>'
        f'<h1>{escape(team_name)}</h1>'
        '</body></html>'
    )
