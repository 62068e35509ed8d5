"""
Page adapter: noise filter, text linearizer and snapshot builder.

Everything tied to the DOM lives here. The resolvers downstream only see the
plain ``PageSnapshot`` (a string stream plus anchor lists), so they can be
tested without a browser.
"""
import logging
import re
from dataclasses import dataclass, field
from urllib.parse import urljoin

from bs4 import BeautifulSoup, NavigableString, Tag

from athlete_sync.extraction.constants import (
    AVATAR_ANCESTOR_DEPTH,
    HEADING_TAGS,
    INVISIBLE_TAGS,
    NOISE_SELECTORS,
    PROFILE_LINK_SELECTORS,
    TEAM_LINK_SELECTORS,
)
from athlete_sync.models import AnchorCandidate
from athlete_sync.normalize import normalize_whitespace

logger = logging.getLogger('athlete_sync.page')

_BACKGROUND_RE = re.compile(r'background(?:-color)?\s*:\s*([^;]+)', re.IGNORECASE)


@dataclass(frozen=True)
class ColorSwatch:
    """Resolved background color of one element, plus its raw style text."""

    color: str = ''
    style: str = ''


@dataclass(frozen=True)
class PageSnapshot:
    """Everything the extractors read from one rendered page."""

    url: str = ''
    stream: tuple[str, ...] = ()
    heading: str | None = None
    title: str | None = None
    profile_anchors: tuple[AnchorCandidate, ...] = ()
    anchors: tuple[AnchorCandidate, ...] = ()
    headings: tuple[str, ...] = ()
    scripts: tuple[str, ...] = ()
    swatches: tuple[ColorSwatch, ...] = field(default=(), repr=False)

    @property
    def page_text(self) -> str:
        return '\n'.join(self.stream)


def remove_noise(soup: BeautifulSoup | Tag) -> None:
    """Drop feed, training-log and blurred subtrees in place."""
    removed = 0
    for el in soup.select(', '.join(NOISE_SELECTORS)):
        # Descendants of an already removed subtree are gone with it
        if el.decomposed:
            continue
        el.decompose()
        removed += 1
    if removed:
        logger.debug(f'Removed {removed} noise subtrees')


def linearize(root: BeautifulSoup | Tag) -> tuple[str, ...]:
    """
    Emit visible text nodes in document (pre-order) order.

    Each node is trimmed; empty nodes are skipped. Script, style and
    comment content is not visible text.
    """
    stream: list[str] = []
    for node in root.descendants:
        if type(node) is not NavigableString:
            continue
        if node.parent is not None and node.parent.name in INVISIBLE_TAGS:
            continue
        text = node.strip()
        if text:
            stream.append(text)
    return tuple(stream)


def collect_anchors(
    root: BeautifulSoup | Tag,
    selector: str | None,
    base_url: str = '',
    unique: bool = True,
) -> tuple[AnchorCandidate, ...]:
    """
    Collect anchors in document order.

    With ``unique`` a repeated (text, href) pair is kept only once. Positional
    readers such as the breadcrumb need every anchor, repeats included.
    """
    tags = root.select(selector) if selector else root.find_all('a')
    seen: set[tuple[str, str]] = set()
    anchors: list[AnchorCandidate] = []
    for a in tags:
        text = normalize_whitespace(a.get_text(' ', strip=True))
        if not text:
            continue
        href = a.get('href') or ''
        if href and base_url:
            href = urljoin(base_url, href)
        key = (text, href)
        if unique and key in seen:
            continue
        seen.add(key)
        anchors.append(AnchorCandidate(text=text, href=href))
    return tuple(anchors)


def avatar_container(soup: BeautifulSoup) -> BeautifulSoup | Tag:
    """Ancestor of the identity heading that encloses the avatar."""
    heading = soup.find('h1')
    if heading is None:
        return soup
    container = heading
    for _ in range(AVATAR_ANCESTOR_DEPTH):
        if container.parent is None or isinstance(container.parent, BeautifulSoup):
            break
        container = container.parent
    return container


def collect_inline_swatches(soup: BeautifulSoup) -> tuple[ColorSwatch, ...]:
    """Read background colors from inline styles (static rendering)."""
    swatches: list[ColorSwatch] = []
    for el in avatar_container(soup).find_all(True):
        style = el.get('style') or ''
        if not style:
            continue
        m = _BACKGROUND_RE.search(style)
        swatches.append(ColorSwatch(color=m.group(1).strip() if m else '', style=style))
    return tuple(swatches)


def heading_tokens(root: BeautifulSoup | Tag) -> tuple[str, ...]:
    """First stream token of each h1-h6, used to find where a block ends."""
    tokens: list[str] = []
    for h in root.find_all(HEADING_TAGS):
        text = linearize(h)
        if text:
            tokens.append(text[0])
    return tuple(tokens)


def build_snapshot(
    html: str,
    url: str = '',
    swatches: tuple[ColorSwatch, ...] | None = None,
) -> PageSnapshot:
    """
    Filter and linearize one rendered page.

    Args:
        html: Rendered page HTML
        url: Page URL, used to absolutize anchor hrefs
        swatches: Computed-style swatches from a browser; read from inline
            styles when not supplied

    Returns:
        PageSnapshot for the extractors
    """
    soup = BeautifulSoup(html, 'lxml')
    remove_noise(soup)

    heading_tag = soup.find('h1')
    heading = normalize_whitespace(heading_tag.get_text(' ', strip=True)) if heading_tag else ''
    title = normalize_whitespace(soup.title.get_text()) if soup.title else ''

    root = soup.body or soup
    snapshot = PageSnapshot(
        url=url,
        stream=linearize(root),
        heading=heading or None,
        title=title or None,
        profile_anchors=collect_anchors(
            soup, f'{PROFILE_LINK_SELECTORS}, {TEAM_LINK_SELECTORS}', url
        ),
        anchors=collect_anchors(soup, None, url, unique=False),
        headings=heading_tokens(root),
        scripts=tuple(str(s.string) for s in soup.find_all('script') if s.string and s.string.strip()),
        swatches=tuple(swatches) if swatches is not None else collect_inline_swatches(soup),
    )
    logger.debug(f'Snapshot {url or "<html>"}: {len(snapshot.stream)} tokens, {len(snapshot.anchors)} anchors')
    return snapshot
