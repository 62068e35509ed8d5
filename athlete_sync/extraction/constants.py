"""
Tuning constants for the extraction heuristics.
"""

# =============================================================================
# NOISE FILTER
# =============================================================================

# Subtrees that carry PR-shaped decoy text (feeds, teasers, blurred paywall)
NOISE_SELECTORS: tuple[str, ...] = (
    '[class*="feed"]',
    '[id*="feed"]',
    '[class*="news"]',
    '[class*="training-log"]',
    '[class*="traininglog"]',
    '[class*="trainingLog"]',
    '[class*="blur"]',
    '[style*="blur("]',
    '[data-noise]',
)

# Tags whose text is never visible
INVISIBLE_TAGS: frozenset[str] = frozenset(
    {'script', 'style', 'noscript', 'template', 'head', 'title'}
)

# Section headings; a heading ends the block before it
HEADING_TAGS: tuple[str, ...] = ('h1', 'h2', 'h3', 'h4', 'h5', 'h6')

# =============================================================================
# ANCHORS
# =============================================================================

PROFILE_LINK_SELECTORS = 'h1 a, h2 a'
TEAM_LINK_SELECTORS = 'a[href*="/team/"], .team-name a, a.team-name'

# =============================================================================
# PR PARSER
# =============================================================================

PR_MARKERS: frozenset[str] = frozenset({'PB', 'PR', 'SR'})

# Marks are short ("10.45", "4:05.22", "6'2\""); anything longer is a label
MAX_MARK_LEN = 15

UNKNOWN_DATE = 'Unknown Date'
UNKNOWN_MEET = 'Unknown Meet'

# =============================================================================
# GENDER
# =============================================================================

# Levels walked up from the identity heading to find the avatar container
AVATAR_ANCESTOR_DEPTH = 4

COLOR_CHANNEL_MIN = 150
COLOR_DOMINANCE_MARGIN = 40

# =============================================================================
# TEAM
# =============================================================================

CLUB_KEYWORDS: tuple[str, ...] = ('club', 'usatf', 'aau', 'athletics')

DEFAULT_CLUB_CONFERENCE = 'Club Circuit'
