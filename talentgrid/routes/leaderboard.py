# talentgrid/routes/leaderboard.py
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query

from talentgrid.deps import get_store
from talentgrid.schemas import ApiResponse, LeaderboardUser, SkillCount
from talentgrid.services.leaderboard import leaderboard
from talentgrid.services.profile_store import ProfileStore
from talentgrid.utils.responses import ok

router = APIRouter(tags=["Leaderboard"])


@router.get(
    "/leaderboard",
    response_model=ApiResponse[Union[List[LeaderboardUser], List[SkillCount]]],
    response_model_exclude_none=True,
)
def get_leaderboard(
    kind: Optional[str] = Query("skills", alias="type", description="skills | prolific | newest"),
    store: ProfileStore = Depends(get_store),
):
    return ok(leaderboard(store.list(), kind))
