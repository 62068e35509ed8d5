"""
Event vocabulary.

The vocabulary is an immutable, ordered configuration value injected into
every parse. Order matters: the first entry that matches a token wins.
"""

from typing import Iterable, Iterator

from athlete_sync.normalize import normalize_event_label

DEFAULT_EVENTS: tuple[str, ...] = (
    '60 Meters',
    '100 Meters',
    '200 Meters',
    '400 Meters',
    '800 Meters',
    '1500 Meters',
    '1600 Meters',
    '1 Mile',
    '3000 Meters',
    '3200 Meters',
    '5000 Meters',
    '10,000 Meters',
    '100m Hurdles',
    '110m Hurdles',
    '300m Hurdles',
    '400m Hurdles',
    'Shot Put',
    'Discus',
    'Javelin',
    'Hammer',
    'High Jump',
    'Pole Vault',
    'Long Jump',
    'Triple Jump',
    'Heptathlon',
    'Decathlon',
    '5K',
    '3 Mile',
    '4x100 Relay',
    '4x400 Relay',
    '4x800 Relay',
)

# Events contested by only one division; used as gender evidence
FEMALE_EVENTS: frozenset[str] = frozenset({'100m Hurdles', 'Heptathlon'})
MALE_EVENTS: frozenset[str] = frozenset({'110m Hurdles', 'Decathlon'})

# Tokens at or above this length are sentences, not event headings
MAX_EVENT_TOKEN_LEN = 35


class EventVocabulary:
    """
    Ordered, read-only set of canonical event names.

    Usage:
        vocab = EventVocabulary(['100 Meters', 'Shot Put'])
        vocab.match('100 meter')   # -> '100 Meters'
        vocab.match('Shot Put (4kg)')   # -> 'Shot Put'
    """

    __slots__ = ('_events', '_normalized')

    def __init__(self, events: Iterable[str]):
        events = tuple(events)
        if not events:
            raise ValueError('vocabulary must be non-empty')
        object.__setattr__(self, '_events', events)
        object.__setattr__(
            self, '_normalized', tuple(normalize_event_label(e) for e in events)
        )

    def __setattr__(self, name, value):
        raise AttributeError('EventVocabulary is immutable')

    def __iter__(self) -> Iterator[str]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event: object) -> bool:
        return event in self._events

    def __repr__(self) -> str:
        return f'EventVocabulary({len(self._events)} events)'

    def match(self, token: str) -> str | None:
        """
        Match a stream token to a canonical event.

        A token matches when it equals an entry, starts with an entry, or
        equals it after meter/meters and case normalization. Long tokens
        never match.
        """
        if len(token) >= MAX_EVENT_TOKEN_LEN:
            return None

        folded = normalize_event_label(token)
        for event, normalized in zip(self._events, self._normalized):
            if token == event or token.startswith(event) or folded == normalized:
                return event
        return None


DEFAULT_VOCABULARY = EventVocabulary(DEFAULT_EVENTS)
