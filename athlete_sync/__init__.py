"""
athlete_sync - athlete profile scraper.

- Ingests an athletic.net athlete profile (and the linked team page)
- Extracts name, school, grad year, gender, verified PRs and team metadata
- Outputs: FinalRecord (pydantic), JSON via CLI or HTTP
"""

__version__ = '1.0.0'

from athlete_sync.events import DEFAULT_VOCABULARY, EventVocabulary
from athlete_sync.models import AthleteRecord, FinalRecord, PersonalRecord, TeamMetadata
from athlete_sync.pipeline import extract_athlete, extract_team_metadata
from athlete_sync.scraper import AthleteSyncer

__all__ = [
    'AthleteSyncer',
    'AthleteRecord',
    'DEFAULT_VOCABULARY',
    'EventVocabulary',
    'FinalRecord',
    'PersonalRecord',
    'TeamMetadata',
    'extract_athlete',
    'extract_team_metadata',
]
