from talentgrid.services.leaderboard import leaderboard, most_prolific, newest_members, top_skills
from conftest import make_profile

# 2024-01-01T00:00:00Z, one day apart
DAY = 86_400_000
T0 = 1_704_067_200_000

PROFILES = [
    make_profile("1", "Ada", "Lovelace", [("Python", 5), ("Rust", 3)], created_at=T0),
    make_profile("2", "Grace", "Hopper", [("COBOL", 5), ("python", 2), ("Fortran", 1)], created_at=T0 + 2 * DAY),
    make_profile("3", "Linus", "Torvalds", [("C", 5)], created_at=T0 + DAY),
]


def test_top_skills_counts_case_insensitively_with_first_spelling():
    rows = top_skills(PROFILES)
    assert rows[0].name == "Python"
    assert rows[0].count == 2
    # ties keep first-seen order
    assert [r.name for r in rows[1:]] == ["Rust", "COBOL", "Fortran", "C"]


def test_top_skills_is_capped():
    many = [make_profile(str(i), "U", str(i), [(f"skill{i}", 1)]) for i in range(15)]
    assert len(top_skills(many)) == 10
    assert len(top_skills(many, limit=3)) == 3


def test_most_prolific_orders_by_skill_count():
    rows = most_prolific(PROFILES)
    assert [r.id for r in rows] == ["2", "1", "3"]
    assert [r.value for r in rows] == [3, 2, 1]
    assert rows[0].created_at is None


def test_newest_members_orders_by_created_at_desc():
    rows = newest_members(PROFILES)
    assert [r.id for r in rows] == ["2", "3", "1"]
    assert rows[0].value == "2024-01-03"
    assert rows[0].created_at == T0 + 2 * DAY


def test_leaderboard_dispatch_and_fallback():
    assert leaderboard(PROFILES, "prolific")[0].id == "2"
    assert leaderboard(PROFILES, "NEWEST")[0].id == "2"
    assert leaderboard(PROFILES)[0].name == "Python"
    assert leaderboard(PROFILES, "bogus")[0].name == "Python"


def test_leaderboard_on_empty_collection():
    assert leaderboard([], "skills") == []
    assert leaderboard([], "prolific") == []
    assert leaderboard([], "newest") == []
