import pytest
from fastapi import HTTPException

from talentgrid.services.matching import build_team, filter_profiles, score_profile
from conftest import make_profile

ADA = make_profile("1", "Ada", "Lovelace", [("Python", 5), ("Rust", 3)])
GRACE = make_profile("2", "Grace", "Hopper", [("COBOL", 5), ("python", 2)])
LINUS = make_profile("3", "Linus", "Torvalds", [("C", 5), ("Rust", 4)], availability="Busy")
ALAN = make_profile("4", "Alan", "Turing", [("Python", 4), ("Rust", 4)])
PROFILES = [ADA, GRACE, LINUS, ALAN]


def ids(items):
    return [p.id for p in items]


def test_filter_by_name_matches_first_or_last_name():
    assert ids(filter_profiles(PROFILES, name="ada")) == ["1"]
    assert ids(filter_profiles(PROFILES, name="HOP")) == ["2"]
    assert ids(filter_profiles(PROFILES, name="a")) == ["1", "2", "3", "4"]


def test_filter_by_skills_requires_every_skill():
    assert ids(filter_profiles(PROFILES, skills=["python", "rust"])) == ["1", "4"]
    assert ids(filter_profiles(PROFILES, skills=["RUST"])) == ["1", "3", "4"]
    assert filter_profiles(PROFILES, skills=["haskell"]) == []


def test_filter_skill_match_is_exact_not_substring():
    assert filter_profiles(PROFILES, skills=["pyth"]) == []


def test_filter_combines_name_and_skills():
    assert ids(filter_profiles(PROFILES, name="t", skills=["rust"])) == ["3", "4"]


def test_filter_without_criteria_returns_everything_in_order():
    assert ids(filter_profiles(PROFILES)) == ["1", "2", "3", "4"]
    assert ids(filter_profiles(PROFILES, name="  ", skills=[])) == ["1", "2", "3", "4"]


def test_score_profile_sums_matching_proficiency():
    score, matching = score_profile(ADA, ["python", "rust", "go"])
    assert score == 8
    assert [s.name for s in matching] == ["Python", "Rust"]


def test_build_team_ranks_by_summed_proficiency():
    team = build_team(PROFILES, ["Python", "Rust"], 3)
    assert ids(team) == ["1", "4", "2"]
    assert [m.score for m in team] == [8, 8, 2]
    assert [s.name for s in team[2].matching_skills] == ["python"]


def test_build_team_skips_unavailable_and_zero_scores():
    team = build_team(PROFILES, ["C"], 5)
    # Linus is the only C programmer but he is Busy
    assert team == []


def test_build_team_truncates_to_team_size():
    assert ids(build_team(PROFILES, ["python"], 1)) == ["1"]


def test_build_team_counts_duplicate_required_skills_once():
    team = build_team(PROFILES, ["rust", "Rust", " RUST "], 5)
    assert [m.score for m in team] == [4, 3]
    assert ids(team) == ["4", "1"]


def test_build_team_keeps_profile_fields():
    member = build_team(PROFILES, ["cobol"], 1)[0]
    assert member.first_name == "Grace"
    assert member.email == "grace@talentgrid.io"
    assert member.score == 5


def test_build_team_rejects_bad_requests():
    for skills, size in [([], 3), (None, 3), (["  "], 3), (["python"], 0), (["python"], None)]:
        with pytest.raises(HTTPException) as exc:
            build_team(PROFILES, skills, size)
        assert exc.value.status_code == 400


def test_build_team_caps_team_size():
    crowd = [make_profile(str(i), "Dev", str(i), [("Python", 1 + i % 5)]) for i in range(15)]
    team = build_team(crowd, ["python"], 50)
    assert len(team) == 10
    assert team[0].score == 5
