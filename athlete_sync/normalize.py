"""
Text and state normalization.

Converts loosely formatted page text to canonical forms.
"""

import re

# =============================================================================
# STATE ABBREVIATIONS -> CANONICAL
# =============================================================================

STATE_NAMES: dict[str, str] = {
    'AL': 'Alabama',
    'AK': 'Alaska',
    'AZ': 'Arizona',
    'AR': 'Arkansas',
    'CA': 'California',
    'CO': 'Colorado',
    'CT': 'Connecticut',
    'DE': 'Delaware',
    'DC': 'District of Columbia',
    'FL': 'Florida',
    'GA': 'Georgia',
    'HI': 'Hawaii',
    'ID': 'Idaho',
    'IL': 'Illinois',
    'IN': 'Indiana',
    'IA': 'Iowa',
    'KS': 'Kansas',
    'KY': 'Kentucky',
    'LA': 'Louisiana',
    'ME': 'Maine',
    'MD': 'Maryland',
    'MA': 'Massachusetts',
    'MI': 'Michigan',
    'MN': 'Minnesota',
    'MS': 'Mississippi',
    'MO': 'Missouri',
    'MT': 'Montana',
    'NE': 'Nebraska',
    'NV': 'Nevada',
    'NH': 'New Hampshire',
    'NJ': 'New Jersey',
    'NM': 'New Mexico',
    'NY': 'New York',
    'NC': 'North Carolina',
    'ND': 'North Dakota',
    'OH': 'Ohio',
    'OK': 'Oklahoma',
    'OR': 'Oregon',
    'PA': 'Pennsylvania',
    'RI': 'Rhode Island',
    'SC': 'South Carolina',
    'SD': 'South Dakota',
    'TN': 'Tennessee',
    'TX': 'Texas',
    'UT': 'Utah',
    'VT': 'Vermont',
    'VA': 'Virginia',
    'WA': 'Washington',
    'WV': 'West Virginia',
    'WI': 'Wisconsin',
    'WY': 'Wyoming',
}

# Build reverse lookup (full name lowercase -> canonical)
_STATE_LOOKUP: dict[str, str] = {}
for _abbr, _name in STATE_NAMES.items():
    _STATE_LOOKUP[_abbr.lower()] = _name
    _STATE_LOOKUP[_name.lower()] = _name


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace (including NBSP) to single spaces."""
    return re.sub(r'\s+', ' ', text.replace('\xa0', ' ')).strip()


def normalize_event_label(text: str) -> str:
    """
    Normalize an event label for loose comparison.

    Lowercases, collapses whitespace and folds "meters" to "meter" so that
    "100 Meter" and "100 meters" compare equal.
    """
    cleaned = normalize_whitespace(text).lower()
    return re.sub(r'\bmeters\b', 'meter', cleaned)


def normalize_state(name: str | None) -> str | None:
    """
    Normalize a state breadcrumb to its full name.

    Args:
        name: Raw breadcrumb text ("CA", "california", "California")

    Returns:
        Canonical state name, or the cleaned original if unknown
    """
    if name is None:
        return None
    cleaned = normalize_whitespace(name)
    if not cleaned:
        return None
    return _STATE_LOOKUP.get(cleaned.lower(), cleaned)
