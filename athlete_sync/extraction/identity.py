"""Identity resolver: first/last name from the heading or page title."""

from athlete_sync.normalize import normalize_whitespace

TITLE_DELIMITER = ' - '


def resolve_identity(heading: str | None, title: str | None) -> tuple[str, str]:
    """
    Split the athlete's full name into (first_name, last_name).

    The heading wins; otherwise the part of the title before the delimiter
    is used. Everything after the first space is the last name.
    """
    full_name = normalize_whitespace(heading or '')
    if not full_name and title:
        full_name = normalize_whitespace(title.split(TITLE_DELIMITER)[0])

    first, _, rest = full_name.partition(' ')
    return first or 'Unknown', rest.strip()
