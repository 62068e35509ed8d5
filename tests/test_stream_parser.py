"""
Tests for the personal-record stream parser.
"""
import pytest

from athlete_sync.events import DEFAULT_VOCABULARY, EventVocabulary
from athlete_sync.extraction.prs import (
    ParserState,
    advance,
    grade_cue,
    is_valid_mark,
    is_wind_reading,
    parse_prs,
    read_entry,
    wiretap_snippet,
)


class TestVocabulary:
    """Tests for event matching."""

    def test_default_size(self):
        assert len(DEFAULT_VOCABULARY) == 31

    def test_exact_and_prefix(self):
        assert DEFAULT_VOCABULARY.match('100 Meters') == '100 Meters'
        assert DEFAULT_VOCABULARY.match('Shot Put (12lb)') == 'Shot Put'

    def test_meter_plural_normalization(self):
        assert DEFAULT_VOCABULARY.match('100 meter') == '100 Meters'
        assert DEFAULT_VOCABULARY.match('1600 METERS') == '1600 Meters'

    def test_long_token_rejected(self):
        sentence = '100 Meters was the highlight of an excellent season'
        assert DEFAULT_VOCABULARY.match(sentence) is None

    def test_non_event(self):
        assert DEFAULT_VOCABULARY.match('11.25') is None
        assert DEFAULT_VOCABULARY.match('City Invite') is None

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_VOCABULARY._events = ('x',)

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            EventVocabulary([])


class TestTransitions:
    """Tests for the (state, token) -> state transition."""

    def test_default_state(self):
        state = ParserState()
        assert state.current_event is None
        assert state.is_high_school is True

    def test_event_heading_sets_event(self):
        state = advance(ParserState(), '200 Meters')
        assert state.current_event == '200 Meters'

    def test_event_persists_over_other_tokens(self):
        state = advance(ParserState(), 'Discus')
        state = advance(state, '120\' 3"')
        state = advance(state, 'Apr 1')
        assert state.current_event == 'Discus'

    def test_middle_school_cues(self):
        assert grade_cue('8th Grade') is False
        assert grade_cue('7th grade') is False
        assert grade_cue('Middle School') is False
        assert grade_cue('Lincoln MS') is False

    def test_high_school_cues(self):
        assert grade_cue('9th Grade') is True
        assert grade_cue('12th Grade') is True
        assert grade_cue('Varsity') is True
        assert grade_cue('Lincoln HS') is True
        assert grade_cue('Bay Area Track Club') is True

    def test_no_cue(self):
        assert grade_cue('City Invite') is None
        assert grade_cue('11.25') is None

    def test_eligibility_persists_until_changed(self):
        state = advance(ParserState(), '8th Grade')
        state = advance(state, '100 Meters')
        assert state.is_high_school is False
        state = advance(state, '9th Grade')
        assert state.is_high_school is True

    def test_transition_is_pure(self):
        state = ParserState()
        advance(state, '8th Grade')
        assert state.is_high_school is True


class TestWindAndMarks:
    """Tests for wind disambiguation and mark validation."""

    def test_wind_readings(self):
        assert is_wind_reading('(1.2)')
        assert is_wind_reading('+0.8')
        assert is_wind_reading('-1.5')
        assert is_wind_reading('NWI')
        assert is_wind_reading('(2.1c)')

    def test_not_wind(self):
        assert not is_wind_reading('11.25')
        assert not is_wind_reading('4:05.22')
        assert not is_wind_reading('Apr 5')

    def test_valid_marks(self):
        assert is_valid_mark('10.45')
        assert is_valid_mark('4:05.22')
        assert is_valid_mark('6\'2"')

    def test_invalid_marks(self):
        assert not is_valid_mark(None)
        assert not is_valid_mark('DNF')
        assert not is_valid_mark('3.1 mi.')
        assert not is_valid_mark('Some Very Long Label 2024')

    def test_wind_lookback(self):
        stream = ['100 Meters', '11.25', '(1.2)', 'PR', 'Apr 5', 'City Invite']
        assert read_entry(stream, 3) == ('11.25', 'Apr 5', 'City Invite')

    def test_missing_date_and_meet(self):
        stream = ['200 Meters', '23.10', 'PR']
        assert read_entry(stream, 2) == ('23.10', 'Unknown Date', 'Unknown Meet')


class TestParsePRs:
    """Tests for the full stream parse."""

    def test_ineligible_grade_yields_nothing(self):
        stream = ['8th Grade', '100 Meters', 'PR', '12.90', 'Apr 1', 'Meet A']
        assert parse_prs(stream) == []

    def test_wind_disambiguation(self):
        stream = ['Jane Doe', '100 Meters', '11.25', '(1.2)', 'PR', 'Apr 5', 'City Invite']
        prs = parse_prs(stream)
        assert len(prs) == 1
        assert prs[0].mark == '11.25'
        assert prs[0].date == 'Apr 5'
        assert prs[0].meet == 'City Invite'

    def test_no_wind_path(self):
        stream = ['Jane Doe', '200 Meters', '23.10', 'PR', 'May 1', 'Regional']
        prs = parse_prs(stream)
        assert [(p.event, p.mark, p.date, p.meet) for p in prs] == [
            ('200 Meters', '23.10', 'May 1', 'Regional')
        ]

    def test_callout_layout(self):
        stream = ['Jane Doe', '100m Hurdles', 'PR', '(+0.8)', '14.20', 'Apr 12, 2024', 'County Meet']
        prs = parse_prs(stream)
        assert len(prs) == 1
        assert prs[0].model_dump() == {
            'event': '100m Hurdles',
            'mark': '14.20',
            'date': 'Apr 12, 2024',
            'meet': 'County Meet',
        }

    def test_first_valid_per_event_wins(self):
        stream = [
            '100 Meters', '11.10', 'PR', 'May 10', 'State Meet',
            '100 Meters', '11.40', 'SR', 'Apr 2', 'Dual Meet',
        ]
        prs = parse_prs(stream)
        assert len(prs) == 1
        assert prs[0].mark == '11.10'

    def test_invalid_candidate_does_not_block_later_hit(self):
        stream = [
            '5K', '3.1 mi.', 'PR', 'Sep 1', 'Invite',
            '16:40.2', 'PB', 'Oct 5', 'League Finals',
        ]
        prs = parse_prs(stream)
        assert [p.mark for p in prs] == ['16:40.2']

    def test_marker_without_event_ignored(self):
        assert parse_prs(['12.00', 'PR', 'Apr 1', 'Meet']) == []

    def test_regains_eligibility(self):
        stream = [
            '8th Grade', '800 Meters', '2:20.00', 'PR', 'May 1', 'MS Champs',
            '9th Grade', '800 Meters', '2:05.10', 'PR', 'May 2', 'Frosh Soph Meet',
        ]
        prs = parse_prs(stream)
        assert [p.mark for p in prs] == ['2:05.10']

    def test_events_unique_and_in_vocabulary(self):
        stream = [
            '100 Meters', '11.25', 'PR', 'a', 'b',
            '200 Meters', '23.10', 'PR', 'c', 'd',
            '100 Meters', '11.00', 'PB', 'e', 'f',
            'Long Jump', '21\' 4"', '+1.8', 'PR', 'g', 'h',
        ]
        prs = parse_prs(stream)
        events = [p.event for p in prs]
        assert len(events) == len(set(events))
        assert all(e in DEFAULT_VOCABULARY for e in events)
        assert prs[-1].mark == '21\' 4"'

    def test_synthetic_vocabulary(self):
        vocab = EventVocabulary(['Sprint', 'Throw'])
        stream = ['Sprint', '9.9', 'PR', 'Jan 1', 'Test Meet', '100 Meters', '10.0', 'PR', 'x', 'y']
        prs = parse_prs(stream, vocab)
        assert [p.event for p in prs] == ['Sprint']

    def test_idempotent(self):
        stream = ['100 Meters', '11.25', '(1.2)', 'PR', 'Apr 5', 'City Invite']
        first = [p.model_dump_json() for p in parse_prs(stream)]
        second = [p.model_dump_json() for p in parse_prs(stream)]
        assert first == second


def test_wiretap_snippet_window():
    stream = [f't{i}' for i in range(20)] + ['800 Meters'] + [f'u{i}' for i in range(100)]
    snippet = wiretap_snippet(stream)
    assert len(snippet) == 50
    assert snippet[0] == 't15'
    assert '800 Meters' in snippet
