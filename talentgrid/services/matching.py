# talentgrid/services/matching.py
"""Profile filtering and team assembly over an in-memory list of profiles."""
import logging
from typing import List, Optional, Sequence, Tuple

from fastapi import HTTPException

from talentgrid.config import MAX_TEAM_SIZE
from talentgrid.schemas import ProfileOut, Skill, TeamMember
from talentgrid.utils.text_normalize import normalize, unique_normalized

log = logging.getLogger("teams.matching")

AVAILABLE = "Available"


def _has_skill(profile: ProfileOut, skill_key: str) -> bool:
    return any(normalize(s.name) == skill_key for s in profile.skills)


def filter_profiles(
    profiles: Sequence[ProfileOut],
    *,
    name: Optional[str] = None,
    skills: Optional[Sequence[str]] = None,
) -> List[ProfileOut]:
    """
    - name: case-insensitive substring of first OR last name
    - skills: profile must hold EVERY listed skill (exact name, case-insensitive)
    Input order is preserved.
    """
    name_q = normalize(name)
    required = unique_normalized(skills)

    out: List[ProfileOut] = []
    for p in profiles:
        if name_q and not (
            name_q in (p.first_name or "").lower() or name_q in (p.last_name or "").lower()
        ):
            continue
        if required and not all(_has_skill(p, r) for r in required):
            continue
        out.append(p)

    log.info("FILTER name=%r skills=%s -> %d/%d", name_q, required, len(out), len(profiles))
    return out


def score_profile(profile: ProfileOut, required: Sequence[str]) -> Tuple[int, List[Skill]]:
    """Sum of proficiency over the required skills the profile holds.

    `required` must already be normalized and de-duplicated.
    """
    score = 0
    matching: List[Skill] = []
    for req in required:
        found = next((s for s in profile.skills if normalize(s.name) == req), None)
        if found:
            score += found.proficiency
            matching.append(found)
    return score, matching


def build_team(
    profiles: Sequence[ProfileOut],
    skills: Optional[Sequence[str]],
    team_size: Optional[int],
) -> List[TeamMember]:
    """Top `team_size` available profiles ranked by summed proficiency."""
    required = unique_normalized(skills)
    if not required or not team_size or team_size < 1:
        raise HTTPException(status_code=400, detail="Skills and a valid team size are required")

    size = min(int(team_size), MAX_TEAM_SIZE)

    scored: List[TeamMember] = []
    for p in profiles:
        if p.availability != AVAILABLE:
            continue
        score, matching = score_profile(p, required)
        if score <= 0:
            continue
        scored.append(TeamMember(**p.model_dump(), score=score, matching_skills=matching))
        log.debug("TEAM candidate id=%s score=%d matched=%s", p.id, score, [s.name for s in matching])

    # list.sort is stable: equal scores keep input order
    scored.sort(key=lambda m: m.score, reverse=True)
    team = scored[:size]

    log.info(
        "TEAM skills=%s size=%d candidates=%d -> returning %d",
        required, size, len(scored), len(team),
    )
    return team
