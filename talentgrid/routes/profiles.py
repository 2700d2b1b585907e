# talentgrid/routes/profiles.py
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from talentgrid.deps import get_store
from talentgrid.schemas import ApiResponse, ProfileIn, ProfileOut
from talentgrid.services.matching import filter_profiles
from talentgrid.services.profile_store import ProfileStore
from talentgrid.services.profiles import create_profile
from talentgrid.utils.responses import ok
from talentgrid.utils.text_normalize import parse_csv

log = logging.getLogger("routes.profiles")

# NOTE: main.py mounts this router with prefix="/api"
router = APIRouter(tags=["Profiles"])


@router.post("/profiles", response_model=ApiResponse[ProfileOut], response_model_exclude_none=True)
def post_profile(body: ProfileIn, store: ProfileStore = Depends(get_store)):
    return ok(create_profile(store, body))


@router.get("/profiles", response_model=ApiResponse[List[ProfileOut]], response_model_exclude_none=True)
def search_profiles(
    name: Optional[str] = Query(None, description="Substring of first or last name"),
    skills: Optional[str] = Query(None, description="Comma-separated, e.g. 'react,nodejs'"),
    store: ProfileStore = Depends(get_store),
):
    """
    Search profiles:
    - name matches first OR last name (case-insensitive substring)
    - every listed skill must be present on the profile
    """
    profiles = store.list()
    return ok(filter_profiles(profiles, name=name, skills=parse_csv(skills)))


@router.get("/profiles/{profile_id}", response_model=ApiResponse[ProfileOut], response_model_exclude_none=True)
def get_profile(profile_id: str, store: ProfileStore = Depends(get_store)):
    prof = store.get_by_id(profile_id)
    if not prof:
        raise HTTPException(status_code=404, detail="Profile not found")
    return ok(prof)
