# talentgrid/routes/teams.py
from typing import List

from fastapi import APIRouter, Depends

from talentgrid.deps import get_store
from talentgrid.schemas import ApiResponse, TeamBuildRequest, TeamMember
from talentgrid.services.matching import build_team
from talentgrid.services.profile_store import ProfileStore
from talentgrid.utils.responses import ok

router = APIRouter(tags=["Teams"])


@router.post("/teams/build", response_model=ApiResponse[List[TeamMember]], response_model_exclude_none=True)
def teams_build(body: TeamBuildRequest, store: ProfileStore = Depends(get_store)):
    """Top-N available profiles ranked by summed proficiency over the requested skills."""
    return ok(build_team(store.list(), body.skills, body.team_size))
