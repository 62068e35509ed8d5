"""
Configuration for athlete_sync.
"""
from dataclasses import dataclass
import os

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable settings from environment."""

    allowed_domain: str = os.getenv('ALLOWED_DOMAIN', 'athletic.net')
    user_agent: str = os.getenv(
        'USER_AGENT',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    )
    renderer: str = os.getenv('RENDERER', 'playwright')
    headless: bool = os.getenv('HEADLESS', '1').lower() in ('1', 'true', 'yes')
    wait_until: str = os.getenv('WAIT_UNTIL', 'networkidle')
    nav_timeout_ms: int = int(os.getenv('NAV_TIMEOUT_MS', '20000'))
    marker_wait_ms: int = int(os.getenv('MARKER_WAIT_MS', '8000'))
    team_timeout_ms: int = int(os.getenv('TEAM_TIMEOUT_MS', '15000'))
    overall_timeout_s: float = float(os.getenv('OVERALL_TIMEOUT_S', '60'))


settings = Settings()
