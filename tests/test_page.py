"""
Tests for the page adapter (noise filter, linearizer, snapshot).
"""
from bs4 import BeautifulSoup

from athlete_sync.extraction.page import (
    build_snapshot,
    collect_inline_swatches,
    linearize,
    remove_noise,
)
from athlete_sync.sample_pages import generate_profile_html, generate_team_html

HTML = """
<html><head><title>T</title><style>.x{}</style></head><body>
  <div>  Alpha <span>Beta</span> </div>
  <!-- hidden comment -->
  <div class="news-feed"><p>100 Meters</p><p>9.58</p><p>PR</p></div>
  <section id="feedColumn"><p>Decoy</p></section>
  <div class="training-log"><p>Ran 5 mi.</p></div>
  <div style="filter: blur(3px)"><p>Teaser</p></div>
  <p>Gamma</p>
  <script>var leak = "PR";</script>
</body></html>
"""


class TestNoiseFilter:
    """Tests for decoy removal."""

    def test_removes_decoys(self):
        soup = BeautifulSoup(HTML, 'lxml')
        remove_noise(soup)
        assert linearize(soup.body) == ('Alpha', 'Beta', 'Gamma')

    def test_idempotent(self):
        soup = BeautifulSoup(HTML, 'lxml')
        remove_noise(soup)
        once = str(soup)
        remove_noise(soup)
        assert str(soup) == once

    def test_browser_tagged_blur(self):
        soup = BeautifulSoup('<div data-noise="blur"><p>1:59.00</p></div><p>kept</p>', 'lxml')
        remove_noise(soup)
        assert linearize(soup) == ('kept',)

    def test_nested_noise(self):
        soup = BeautifulSoup('<div class="feed"><div class="news"><p>x</p></div></div><p>y</p>', 'lxml')
        remove_noise(soup)
        assert linearize(soup) == ('y',)


class TestLinearizer:
    """Tests for document-order text emission."""

    def test_preorder_trimmed(self):
        soup = BeautifulSoup('<div> a <b> b </b> c <i><u>d</u></i></div>', 'lxml')
        assert linearize(soup) == ('a', 'b', 'c', 'd')

    def test_skips_invisible(self):
        soup = BeautifulSoup(HTML, 'lxml')
        stream = linearize(soup)
        assert 'var leak = "PR";' not in stream
        assert 'hidden comment' not in stream
        assert '.x{}' not in stream

    def test_stable(self):
        assert linearize(BeautifulSoup(HTML, 'lxml')) == linearize(BeautifulSoup(HTML, 'lxml'))


class TestSnapshot:
    """Tests for snapshot building."""

    def test_profile_snapshot(self):
        snap = build_snapshot(generate_profile_html(), 'https://www.athletic.net/athlete/1/track-and-field')
        assert snap.heading == 'Jane Doe'
        assert snap.title.startswith('Jane Doe - Lincoln HS')
        assert '9.58' not in snap.stream
        assert '19.19' not in snap.stream
        assert [a.text for a in snap.profile_anchors] == ['Lincoln HS']
        assert snap.profile_anchors[0].href == 'https://www.athletic.net/team/1234/track-and-field'

    def test_scripts_collected(self):
        snap = build_snapshot(generate_profile_html(gender_literal='F'))
        assert any('"gender": "F"' in s for s in snap.scripts)

    def test_inline_swatches(self):
        soup = BeautifulSoup(generate_profile_html(avatar_color='rgb(233, 30, 99)'), 'lxml')
        swatches = collect_inline_swatches(soup)
        assert swatches[0].color == 'rgb(233, 30, 99)'

    def test_supplied_swatches_kept(self):
        snap = build_snapshot(generate_profile_html(avatar_color='#e91e63'), swatches=())
        assert snap.swatches == ()

    def test_team_anchors_in_order(self):
        snap = build_snapshot(generate_team_html())
        assert [a.text for a in snap.anchors] == [
            'Home', 'Rankings', 'United States', 'High School', 'CA', '4A', 'Bay League',
        ]

    def test_repeated_anchors_kept_in_order(self):
        html = (
            '<header><a href="/rankings/CA">CA</a></header>'
            '<nav><a href="/">United States</a><a href="/hs">High School</a>'
            '<a href="/rankings/CA">CA</a><a href="/d/4A">4A</a><a href="/l/1">Bay League</a></nav>'
        )
        snap = build_snapshot(html, 'https://www.athletic.net/team/1/')
        assert [a.text for a in snap.anchors] == ['CA', 'United States', 'High School', 'CA', '4A', 'Bay League']

    def test_profile_anchors_unique(self):
        html = '<h1>Jane Doe</h1><h2><a href="/team/1">Lincoln HS</a></h2><h2><a href="/team/1">Lincoln HS</a></h2>'
        snap = build_snapshot(html, 'https://www.athletic.net/athlete/1/')
        assert [a.text for a in snap.profile_anchors] == ['Lincoln HS']

    def test_heading_tokens(self):
        snap = build_snapshot(generate_profile_html(grade_label='11th Grade'))
        assert 'Jane Doe' in snap.headings
        assert 'Season Records' in snap.headings
        assert '11th Grade' in snap.headings

    def test_season_rows_split_into_cells(self):
        snap = build_snapshot(generate_profile_html(season_rows=['2023 Outdoor 11']))
        i = snap.stream.index('Season Records')
        assert snap.stream[i + 1:i + 4] == ('2023', 'Outdoor', '11')
