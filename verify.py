#!/usr/bin/env python
"""Verification script for athlete_sync (offline, no browser)."""

import sys


def main():
    print("=" * 60)
    print("ATHLETE SYNC VERIFICATION")
    print("=" * 60)

    errors = []

    # Test 1: Imports
    print("\n[1/5] Testing imports...")
    try:
        from athlete_sync import DEFAULT_VOCABULARY, extract_athlete, extract_team_metadata
        from athlete_sync.extraction import build_snapshot
        from athlete_sync.models import FinalRecord
        from athlete_sync.sample_pages import generate_profile_html, generate_team_html
        print("  ✓ All imports successful")
    except ImportError as e:
        errors.append(f"Import failed: {e}")
        print(f"  ✗ {e}")
        return 1

    # Test 2: Vocabulary
    print("\n[2/5] Testing event vocabulary...")
    try:
        assert len(DEFAULT_VOCABULARY) == 31, f"Expected 31 events, got {len(DEFAULT_VOCABULARY)}"
        assert DEFAULT_VOCABULARY.match("100 meter") == "100 Meters"
        print(f"  ✓ {len(DEFAULT_VOCABULARY)} events")
    except Exception as e:
        errors.append(f"Vocabulary failed: {e}")
        print(f"  ✗ {e}")

    # Test 3: Profile extraction
    print("\n[3/5] Testing profile extraction...")
    try:
        snapshot = build_snapshot(generate_profile_html(), "https://www.athletic.net/athlete/1/")
        athlete = extract_athlete(snapshot)
        assert athlete.first_name == "Jane", f"Unexpected first name: {athlete.first_name}"
        assert len(athlete.prs) == 4, f"Expected 4 PRs, got {len(athlete.prs)}"
        assert "9.58" not in [pr.mark for pr in athlete.prs], "Decoy feed leaked into PRs"
        print(f"  ✓ {athlete.full_name}: {len(athlete.prs)} PRs, class of {athlete.grad_year}")
    except Exception as e:
        errors.append(f"Profile extraction failed: {e}")
        print(f"  ✗ {e}")
        athlete = None

    # Test 4: Team page
    print("\n[4/5] Testing team page breadcrumb...")
    try:
        team = extract_team_metadata(build_snapshot(generate_team_html()))
        assert team.state == "California", f"Unexpected state: {team.state}"
        print(f"  ✓ {team.state} / {team.school_size} / {team.conference}")
    except Exception as e:
        errors.append(f"Team page failed: {e}")
        print(f"  ✗ {e}")
        team = None

    # Test 5: Final record
    print("\n[5/5] Testing final record...")
    try:
        record = FinalRecord.merge(athlete, team, source_url="https://www.athletic.net/athlete/1/")
        data = record.model_dump(by_alias=True)
        assert data["firstName"] == "Jane"
        assert data["schoolSize"] == "4A"
        print(f"  ✓ FinalRecord with {len(data)} fields")
    except Exception as e:
        errors.append(f"Final record failed: {e}")
        print(f"  ✗ {e}")

    # Summary
    print("\n" + "=" * 60)
    if errors:
        print(f"FAILED: {len(errors)} error(s)")
        for err in errors:
            print(f"  - {err}")
        return 1
    else:
        print("ALL CHECKS PASSED ✓")
        return 0

if __name__ == "__main__":
    sys.exit(main())
