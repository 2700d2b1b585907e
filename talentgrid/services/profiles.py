# talentgrid/services/profiles.py
import logging
import time
import uuid
from typing import Any, List, Optional

from email_validator import EmailNotValidError, validate_email
from fastapi import HTTPException

from talentgrid.schemas import ProfileIn, ProfileOut, Skill
from talentgrid.services.avatars import random_avatar_url
from talentgrid.services.profile_store import ProfileStore
from talentgrid.utils.text_normalize import normalize

log = logging.getLogger("profiles.service")


def _now_ms() -> int:
    return int(time.time() * 1000)


def _is_str(v: Any) -> bool:
    return isinstance(v, str) and bool(v.strip())


def _dedupe_skills(skills: Optional[List[Skill]]) -> List[Skill]:
    """Same skill entered twice (any casing) keeps the first entry."""
    seen = set()
    out: List[Skill] = []
    for s in skills or []:
        key = normalize(s.name)
        if key in seen:
            continue
        seen.add(key)
        out.append(s)
    return out


def create_profile(store: ProfileStore, body: ProfileIn, created_at: Optional[int] = None) -> ProfileOut:
    if not (_is_str(body.first_name) and _is_str(body.last_name) and _is_str(body.email)):
        raise HTTPException(status_code=400, detail="First name, last name, and email are required")

    email = body.email.strip()
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise HTTPException(status_code=400, detail="Invalid email address")

    bio = body.bio.strip() if body.bio else None

    profile = ProfileOut(
        id=str(uuid.uuid4()),
        first_name=body.first_name.strip(),
        last_name=body.last_name.strip(),
        email=email,
        photo_url=random_avatar_url(),
        bio=bio or None,
        availability=body.availability or "Available",
        skills=_dedupe_skills(body.skills),
        created_at=created_at or _now_ms(),
    )
    created = store.create(profile)
    log.info("Created profile id=%s availability=%s", created.id, created.availability)
    return created
