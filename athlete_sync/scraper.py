"""
Athlete sync - renderers and the request orchestrator.

Source: athletic.net athlete profile pages, plus the team page linked from
the profile for state/division/conference.
"""
import json
import logging
import time
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urlparse

import httpx
from playwright.sync_api import (
    Error as PlaywrightError,
    Route,
    TimeoutError as PlaywrightTimeoutError,
    sync_playwright,
)

from athlete_sync.config import settings
from athlete_sync.errors import (
    InvalidInputError,
    NavigationError,
    NavigationTimeoutError,
    OperationTimeoutError,
    PRMarkerWaitTimeout,
    PrimaryNavigationTimeoutError,
    TeamPageError,
)
from athlete_sync.events import DEFAULT_VOCABULARY, EventVocabulary
from athlete_sync.extraction.constants import AVATAR_ANCESTOR_DEPTH
from athlete_sync.extraction.page import ColorSwatch, build_snapshot
from athlete_sync.models import FinalRecord, TeamMetadata
from athlete_sync.pipeline import extract_athlete, extract_team_metadata

logger = logging.getLogger('athlete_sync')


def log_event(**kv):
    """Emit structured JSON log line."""
    logger.info(json.dumps(kv, separators=(',', ':'), default=str))


def validate_url(url: str | None, domain: str | None = None) -> str:
    """
    Check the request URL before any navigation.

    Raises:
        InvalidInputError: URL missing, not http(s), or outside the domain
    """
    domain = (domain or settings.allowed_domain).lower()
    if not url or not url.strip():
        raise InvalidInputError('Missing URL')

    url = url.strip()
    parsed = urlparse(url)
    host = (parsed.hostname or '').lower()
    if parsed.scheme not in ('http', 'https') or not (host == domain or host.endswith('.' + domain)):
        raise InvalidInputError(f'Invalid URL: expected an {domain} profile link')
    return url


# =============================================================================
# RENDERERS
# =============================================================================


@dataclass(frozen=True)
class RenderedPage:
    """Rendered document handed to the page adapter."""

    url: str
    html: str
    swatches: tuple[ColorSwatch, ...] | None = None


class Renderer(Protocol):
    """Page-rendering collaborator."""

    def navigate(self, url: str, wait_until: str, timeout_ms: int) -> RenderedPage: ...

    def wait_for_markers(self, timeout_ms: int) -> None: ...

    def capture(self) -> RenderedPage: ...

    def close(self) -> None: ...


class HttpRenderer:
    """
    Static renderer: fetches server HTML with httpx, no script execution.

    Avatar swatches fall back to inline styles.
    """

    def __init__(self, client: httpx.Client | None = None):
        self._owns_client = client is None
        self.client = client or httpx.Client(
            follow_redirects=True,
            headers={'User-Agent': settings.user_agent},
        )
        self._last: RenderedPage | None = None

    def navigate(self, url: str, wait_until: str, timeout_ms: int) -> RenderedPage:
        start = time.time()
        try:
            response = self.client.get(url, timeout=timeout_ms / 1000)
        except httpx.TimeoutException as e:
            raise NavigationTimeoutError(f'Timed out loading {url}') from e
        except httpx.HTTPError as e:
            raise NavigationError(f'Failed to load {url}: {e}') from e

        elapsed_ms = int((time.time() - start) * 1000)
        log_event(event='navigate', url=url, status=response.status_code, ms=elapsed_ms)

        if response.status_code >= 400:
            raise NavigationError(f'HTTP {response.status_code} for {url}')

        self._last = RenderedPage(url=str(response.url), html=response.text)
        return self._last

    def wait_for_markers(self, timeout_ms: int) -> None:
        # Server HTML is already complete
        return None

    def capture(self) -> RenderedPage:
        if self._last is None:
            raise NavigationError('No page loaded')
        return self._last

    def close(self) -> None:
        if self._owns_client:
            self.client.close()


_SWATCH_JS = """
(depth) => {
  const heading = document.querySelector('h1');
  let root = heading || document.body;
  for (let i = 0; heading && i < depth; i++) {
    if (!root.parentElement || root.parentElement === document.documentElement) break;
    root = root.parentElement;
  }
  return Array.from(root.querySelectorAll('*')).map(el => ({
    color: getComputedStyle(el).backgroundColor || '',
    style: el.getAttribute('style') || '',
  }));
}
"""


_MARK_BLURRED_JS = """
() => {
  for (const el of document.querySelectorAll('body *')) {
    if ((getComputedStyle(el).filter || '').includes('blur')) el.setAttribute('data-noise', 'blur');
  }
}
"""


class PlaywrightRenderer:
    """
    Headless Chromium renderer.

    Image, media and font requests are aborted during navigation.
    """

    BLOCKED_RESOURCES = frozenset({'image', 'media', 'font'})
    MARKER_SELECTOR = 'text=/^(PR|PB|SR)$/'

    def __init__(self, headless: bool | None = None, ancestor_depth: int = AVATAR_ANCESTOR_DEPTH):
        self.headless = settings.headless if headless is None else headless
        self.ancestor_depth = ancestor_depth
        self._playwright = None
        self._browser = None
        self._page = None

    def _ensure_page(self):
        if self._page is None:
            self._playwright = sync_playwright().start()
            self._browser = self._playwright.chromium.launch(
                headless=self.headless,
                args=['--no-sandbox', '--disable-setuid-sandbox'],
            )
            context = self._browser.new_context(user_agent=settings.user_agent)
            self._page = context.new_page()
            self._page.route('**/*', self._block_heavy)
        return self._page

    def _block_heavy(self, route: Route):
        if route.request.resource_type in self.BLOCKED_RESOURCES:
            route.abort()
        else:
            route.continue_()

    def navigate(self, url: str, wait_until: str, timeout_ms: int) -> RenderedPage:
        page = self._ensure_page()
        start = time.time()
        try:
            response = page.goto(url, wait_until=wait_until, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NavigationTimeoutError(f'Timed out loading {url}') from e
        except PlaywrightError as e:
            raise NavigationError(f'Failed to load {url}: {e}') from e

        elapsed_ms = int((time.time() - start) * 1000)
        status = response.status if response else None
        log_event(event='navigate', url=url, status=status, ms=elapsed_ms)

        if status is not None and status >= 400:
            raise NavigationError(f'HTTP {status} for {url}')
        return self.capture()

    def wait_for_markers(self, timeout_ms: int) -> None:
        try:
            self._ensure_page().wait_for_selector(self.MARKER_SELECTOR, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise PRMarkerWaitTimeout(f'No PR markers after {timeout_ms}ms') from e

    def capture(self) -> RenderedPage:
        page = self._ensure_page()
        # Stylesheet blur is invisible in the serialized HTML; tag it for the noise filter
        page.evaluate(_MARK_BLURRED_JS)
        raw = page.evaluate(_SWATCH_JS, self.ancestor_depth)
        swatches = tuple(
            ColorSwatch(color=s.get('color', ''), style=s.get('style', '')) for s in raw
        )
        return RenderedPage(url=page.url, html=page.content(), swatches=swatches)

    def close(self) -> None:
        if self._browser is not None:
            self._browser.close()
        if self._playwright is not None:
            self._playwright.stop()
        self._page = self._browser = self._playwright = None


def make_renderer(name: str | None = None) -> Renderer:
    """Build a renderer by name ('playwright' or 'http')."""
    name = (name or settings.renderer).lower()
    if name == 'playwright':
        return PlaywrightRenderer()
    if name == 'http':
        return HttpRenderer()
    raise ValueError(f'Unknown renderer: {name}')


# =============================================================================
# ORCHESTRATOR
# =============================================================================


class AthleteSyncer:
    """
    Runs one sync request end to end.

    Primary page failures are fatal; team page failures only null the team
    metadata. The whole call is bounded by ``timeout_s``.
    """

    def __init__(
        self,
        renderer: Renderer | None = None,
        vocabulary: EventVocabulary = DEFAULT_VOCABULARY,
    ):
        self._owns_renderer = renderer is None
        self.renderer = renderer or make_renderer()
        self.vocabulary = vocabulary

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        if self._owns_renderer:
            self.renderer.close()

    @staticmethod
    def _check_deadline(deadline: float) -> float:
        """Milliseconds left before the deadline; raise once it has passed."""
        remaining_ms = (deadline - time.monotonic()) * 1000
        if remaining_ms <= 0:
            raise OperationTimeoutError('Sync exceeded its time limit')
        return remaining_ms

    def _budget_ms(self, deadline: float, limit_ms: int) -> int:
        """Clip a stage timeout to the time left before the deadline."""
        # Playwright reads a zero timeout as "wait forever"
        return max(1, int(min(limit_ms, self._check_deadline(deadline))))

    def sync(self, url: str | None, timeout_s: float | None = None) -> FinalRecord:
        """
        Scrape a profile (and its team page) into a FinalRecord.

        Args:
            url: Athlete profile URL
            timeout_s: Overall ceiling; defaults to settings.overall_timeout_s

        Returns:
            FinalRecord

        Raises:
            InvalidInputError, PrimaryNavigationTimeoutError, NavigationError,
            OperationTimeoutError
        """
        url = validate_url(url)
        deadline = time.monotonic() + (timeout_s or settings.overall_timeout_s)

        try:
            self.renderer.navigate(
                url, settings.wait_until, self._budget_ms(deadline, settings.nav_timeout_ms)
            )
        except NavigationTimeoutError as e:
            self._check_deadline(deadline)
            raise PrimaryNavigationTimeoutError(f'Timed out loading {url}') from e

        try:
            self.renderer.wait_for_markers(self._budget_ms(deadline, settings.marker_wait_ms))
        except PRMarkerWaitTimeout as e:
            logger.warning(f'{e}; extracting from partial page')

        page = self.renderer.capture()
        athlete = extract_athlete(
            build_snapshot(page.html, page.url or url, page.swatches),
            self.vocabulary,
        )
        log_event(
            event='extract',
            url=url,
            prs=len(athlete.prs),
            team=athlete.school_name,
            grad_year=athlete.grad_year,
        )

        team = TeamMetadata()
        if athlete.team_url:
            try:
                team = self._scrape_team(athlete.team_url, athlete.is_club, deadline)
            except TeamPageError as e:
                logger.warning(f'Team page skipped: {e}')

        self._check_deadline(deadline)
        record = FinalRecord.merge(athlete, team, source_url=url)
        log_event(event='sync_done', url=url, prs=len(record.prs), state=record.state)
        return record

    def _scrape_team(self, team_url: str, club: bool, deadline: float) -> TeamMetadata:
        """Fetch and parse the team page; any failure becomes TeamPageError."""
        timeout_ms = self._budget_ms(deadline, settings.team_timeout_ms)
        try:
            page = self.renderer.navigate(team_url, 'domcontentloaded', timeout_ms)
            metadata = extract_team_metadata(build_snapshot(page.html, page.url or team_url), club=club)
        except Exception as e:  # noqa: BLE001
            # A timeout caused by the overall deadline is not a team page failure
            self._check_deadline(deadline)
            raise TeamPageError(str(e)) from e

        log_event(event='team_page', url=team_url, state=metadata.state, size=metadata.school_size)
        return metadata
