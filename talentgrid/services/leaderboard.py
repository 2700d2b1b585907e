# talentgrid/services/leaderboard.py
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Union

from talentgrid.config import LEADERBOARD_SIZE
from talentgrid.schemas import LeaderboardUser, ProfileOut, SkillCount
from talentgrid.utils.text_normalize import normalize

log = logging.getLogger("leaderboard")

KINDS = ("skills", "prolific", "newest")


def _join_date(created_at_ms: int) -> str:
    return datetime.fromtimestamp(created_at_ms / 1000, tz=timezone.utc).strftime("%Y-%m-%d")


def _entry(p: ProfileOut, value: Union[int, str], created_at: Optional[int] = None) -> LeaderboardUser:
    return LeaderboardUser(
        id=p.id,
        first_name=p.first_name,
        last_name=p.last_name,
        photo_url=p.photo_url,
        value=value,
        created_at=created_at,
    )


def top_skills(profiles: Sequence[ProfileOut], limit: int = LEADERBOARD_SIZE) -> List[SkillCount]:
    """Skill popularity. Names are counted case-insensitively and shown with
    the first spelling seen."""
    counts: Dict[str, int] = {}
    display: Dict[str, str] = {}
    for p in profiles:
        for s in p.skills:
            key = normalize(s.name)
            if not key:
                continue
            display.setdefault(key, s.name)
            counts[key] = counts.get(key, 0) + 1

    # dicts keep insertion order, so ties stay in first-seen order
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:limit]
    return [SkillCount(name=display[k], count=c) for k, c in ranked]


def most_prolific(profiles: Sequence[ProfileOut], limit: int = LEADERBOARD_SIZE) -> List[LeaderboardUser]:
    ranked = sorted(profiles, key=lambda p: len(p.skills), reverse=True)[:limit]
    return [_entry(p, len(p.skills)) for p in ranked]


def newest_members(profiles: Sequence[ProfileOut], limit: int = LEADERBOARD_SIZE) -> List[LeaderboardUser]:
    ranked = sorted(profiles, key=lambda p: p.created_at, reverse=True)[:limit]
    return [_entry(p, _join_date(p.created_at), created_at=p.created_at) for p in ranked]


def leaderboard(
    profiles: Sequence[ProfileOut],
    kind: Optional[str] = None,
    limit: int = LEADERBOARD_SIZE,
) -> Union[List[SkillCount], List[LeaderboardUser]]:
    kind_norm = normalize(kind) or "skills"
    if kind_norm not in KINDS:
        log.warning("Unknown leaderboard type %r, falling back to 'skills'", kind)
        kind_norm = "skills"

    if kind_norm == "prolific":
        rows = most_prolific(profiles, limit)
    elif kind_norm == "newest":
        rows = newest_members(profiles, limit)
    else:
        rows = top_skills(profiles, limit)

    log.info("LEADERBOARD type=%s profiles=%d -> %d rows", kind_norm, len(profiles), len(rows))
    return rows
