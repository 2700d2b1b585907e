# talentgrid/scripts/import_profiles_jsonl.py
import os, json
import logging

from fastapi import HTTPException
from pydantic import ValidationError
from sqlalchemy.orm import Session

from talentgrid.database import Base, SessionLocal, engine
from talentgrid import models  # noqa: F401
from talentgrid.schemas import ProfileIn
from talentgrid.services.profile_store import ProfileStore
from talentgrid.services.profiles import create_profile

log = logging.getLogger("scripts.import_profiles")

JSONL_PATH = os.environ.get("PROFILES_JSONL", "data/profiles.jsonl")


def import_lines(db: Session, lines) -> int:
    """One JSON profile per line (camelCase keys). Returns how many were stored."""
    store = ProfileStore(db)
    added = 0
    for n, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            obj = json.loads(line)
            body = ProfileIn.model_validate(obj)
        except (json.JSONDecodeError, ValidationError) as e:
            log.warning("line %d skipped: %s", n, e)
            continue

        created_at = obj.get("createdAt") if isinstance(obj.get("createdAt"), int) else None
        try:
            create_profile(store, body, created_at=created_at)
        except HTTPException as e:
            log.warning("line %d skipped: %s", n, e.detail)
            continue
        added += 1
    return added


def run(path: str = JSONL_PATH) -> int:
    if not os.path.exists(path):
        log.warning("No file found at %s. Nothing to import.", path)
        return 0

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        with open(path, "r", encoding="utf-8") as f:
            added = import_lines(db, f)
    finally:
        db.close()
    log.info("Imported %d profiles from %s.", added, path)
    return added


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run()
