import os

# Must be set before talentgrid.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV"] = "test"

import pytest
from fastapi.testclient import TestClient

from talentgrid.schemas import ProfileOut


def make_profile(pid, first, last, skills=(), availability="Available", created_at=0):
    return ProfileOut(
        id=pid,
        first_name=first,
        last_name=last,
        email=f"{first.lower()}@talentgrid.io",
        photo_url=f"https://avatars.talentgrid.io/{pid}.svg",
        availability=availability,
        skills=[{"name": n, "proficiency": lvl} for n, lvl in skills],
        created_at=created_at,
    )


@pytest.fixture()
def client():
    from talentgrid.database import Base, engine
    from talentgrid.main import app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as c:
        yield c
