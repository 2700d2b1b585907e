from .profiles import (
    Availability,
    LeaderboardType,
    Skill,
    ProfileIn,
    ProfileOut,
    TeamBuildRequest,
    TeamMember,
    LeaderboardUser,
    SkillCount,
    ApiResponse,
)
