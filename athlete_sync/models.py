"""
Pydantic models for athlete sync records.

Records serialize with camelCase aliases (``firstName``, ``schoolSize``, ...)
for the persistence and ranking layers downstream.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

Gender = Literal['male', 'female']


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class AnchorCandidate(_Record):
    """A link scraped from a structural location on the page."""

    text: str
    href: str = ''


class PersonalRecord(_Record):
    """One verified PR. ``mark`` keeps the page's formatting verbatim."""

    event: str
    mark: str
    date: str = 'Unknown Date'
    meet: str = 'Unknown Meet'

    @field_validator('event', 'mark')
    @classmethod
    def nonempty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('event and mark must be non-empty')
        return v.strip()


class TeamCandidate(_Record):
    """The athlete's current team."""

    name: str
    url: str | None = None
    is_club: bool = False


class TeamMetadata(_Record):
    """Location and classification parsed from the team page breadcrumb."""

    state: str | None = None
    school_size: str | None = None
    conference: str | None = None


class AthleteRecord(_Record):
    """Primary record extracted from the profile page."""

    first_name: str = 'Unknown'
    last_name: str = ''
    school_name: str | None = None
    prs: list[PersonalRecord] = []
    gender: Gender = 'male'
    team_url: str | None = None
    grad_year: int | None = None
    is_club: bool = False

    @field_validator('prs')
    @classmethod
    def unique_events(cls, v: list[PersonalRecord]) -> list[PersonalRecord]:
        events = [pr.event for pr in v]
        if len(events) != len(set(events)):
            raise ValueError('at most one PR per event')
        return v

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()


class FinalRecord(AthleteRecord):
    """AthleteRecord merged with TeamMetadata; the handoff object."""

    source_url: str | None = None
    state: str | None = None
    school_size: str | None = None
    conference: str | None = None

    @classmethod
    def merge(
        cls,
        athlete: AthleteRecord,
        team: TeamMetadata | None = None,
        source_url: str | None = None,
    ) -> 'FinalRecord':
        """Combine the two extraction stages into one record."""
        team = team or TeamMetadata()
        return cls(
            **athlete.model_dump(),
            **team.model_dump(),
            source_url=source_url,
        )
