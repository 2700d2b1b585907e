# talentgrid/services/profile_store.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from talentgrid.config import PROFILE_LIST_LIMIT
from talentgrid.models import Profile
from talentgrid.schemas import ProfileOut

log = logging.getLogger("profiles.store")


def _to_record(row: Profile) -> ProfileOut:
    return ProfileOut.model_validate(row)


class ProfileStore:
    """
    Storage for profile records.

    Hands out plain ProfileOut records so nothing downstream
    (filters, team builder, leaderboards) depends on the ORM session.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, profile: ProfileOut) -> ProfileOut:
        row = Profile(
            id=profile.id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            email=profile.email,
            photo_url=profile.photo_url,
            bio=profile.bio,
            availability=profile.availability,
            skills=[s.model_dump() for s in profile.skills],
            created_at=profile.created_at,
        )
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        log.info("Stored profile id=%s skills=%d", row.id, len(row.skills or []))
        return _to_record(row)

    def list(self, limit: Optional[int] = None) -> List[ProfileOut]:
        limit = PROFILE_LIST_LIMIT if limit is None else max(0, int(limit))
        rows = self.db.query(Profile).order_by(Profile.seq.asc()).limit(limit).all()
        return [_to_record(r) for r in rows]

    def get_by_id(self, profile_id: str) -> Optional[ProfileOut]:
        row = self.db.query(Profile).filter(Profile.id == profile_id).first()
        return _to_record(row) if row else None
