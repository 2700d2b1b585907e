# talentgrid/schemas/profiles.py
from typing import Any, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Availability = Literal["Available", "Busy", "Not Looking"]
LeaderboardType = Literal["skills", "prolific", "newest"]

T = TypeVar("T")

# camelCase on the wire, snake_case in Python
_wire = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
    str_strip_whitespace=True,
)


class Skill(BaseModel):
    model_config = _wire

    name: str = Field(..., min_length=1, max_length=100)
    proficiency: int = Field(..., ge=1, le=5)      # 1-5 scale


class ProfileIn(BaseModel):
    """Payload for create. Required fields are checked by the service so the
    error message matches the form's."""
    model_config = {**_wire, "extra": "ignore"}

    first_name: Any = None
    last_name: Any = None
    email: Any = None
    bio: Optional[str] = Field(None, max_length=120)
    availability: Optional[Availability] = None
    skills: Optional[List[Skill]] = None


class ProfileOut(BaseModel):
    """A stored profile, as the matching engine and the frontend see it."""
    model_config = _wire

    id: str
    first_name: str
    last_name: str
    email: str
    photo_url: str = ""
    bio: Optional[str] = None
    availability: Availability = "Available"
    skills: List[Skill] = Field(default_factory=list)
    created_at: int = 0                              # epoch millis


class TeamBuildRequest(BaseModel):
    model_config = {**_wire, "extra": "ignore"}

    skills: Optional[List[str]] = None
    team_size: Optional[int] = None


class TeamMember(ProfileOut):
    score: int = 0
    matching_skills: List[Skill] = Field(default_factory=list)


class LeaderboardUser(BaseModel):
    model_config = _wire

    id: str
    first_name: str
    last_name: str
    photo_url: str
    value: Union[int, str]
    created_at: Optional[int] = None


class SkillCount(BaseModel):
    name: str
    count: int


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
