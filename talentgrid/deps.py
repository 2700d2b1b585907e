# talentgrid/deps.py
from fastapi import Depends
from sqlalchemy.orm import Session

from talentgrid.database import get_db
from talentgrid.services.profile_store import ProfileStore


def get_store(db: Session = Depends(get_db)) -> ProfileStore:
    """Profile store bound to the request's DB session."""
    return ProfileStore(db)
