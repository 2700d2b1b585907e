# talentgrid/models.py
from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text, BigInteger, Index, JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.mutable import MutableList

from talentgrid.database import Base

# JSON type that works on Postgres (JSONB) and falls back elsewhere
JSONType = JSON().with_variant(JSONB(), "postgresql")


# =======================
# Profile model
# =======================
class Profile(Base):
    __tablename__ = "profiles"

    # Insertion order for list(); the public id is the UUID
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, index=True, nullable=False)

    first_name = Column(String(255), nullable=False)
    last_name  = Column(String(255), nullable=False)
    email      = Column(String(255), nullable=False, index=True)
    photo_url  = Column(String(512), nullable=False, default="")
    bio        = Column(Text, nullable=True)

    # Available | Busy | Not Looking
    availability = Column(String(32), nullable=False, default="Available", index=True)

    # [{"name": str, "proficiency": int}, ...]
    skills = Column(MutableList.as_mutable(JSONType), nullable=False, default=list)

    # epoch milliseconds
    created_at = Column(BigInteger, nullable=False, index=True)

    __table_args__ = (
        Index("ix_profiles_last_first", "last_name", "first_name"),
    )

    def __repr__(self) -> str:
        return f"<Profile id={self.id} name={self.first_name!r} {self.last_name!r}>"
