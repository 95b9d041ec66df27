"""
Data models for the scorekeeper server

Wire format uses camelCase field names (teamCount, scoreIncrement,
shuffleNames); snake_case names are accepted on input as well.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase aliases"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Team(CamelModel):
    """A named, colored team with an integer score"""
    id: int
    name: str
    score: int = 0
    color: str


class TeamCreate(CamelModel):
    """Payload for creating a team; every field may be omitted"""
    name: Optional[str] = None
    score: Optional[int] = None
    color: Optional[str] = None


class TeamUpdate(CamelModel):
    """
    Partial team update

    Only fields present in the request are applied. An explicit
    ``"name": null`` asks the server to pick a new random name.
    """
    name: Optional[str] = None
    score: Optional[int] = None
    color: Optional[str] = None


class Settings(CamelModel):
    """Global scoreboard settings"""
    id: int = 1
    team_count: int = 2
    score_increment: int = 100


class SettingsUpdate(CamelModel):
    team_count: Optional[int] = Field(default=None, ge=1)
    score_increment: Optional[int] = Field(default=None, ge=1)


class ResetRequest(CamelModel):
    shuffle_names: bool = False


class AppConfig(BaseModel):
    """Server configuration loaded from YAML"""
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = ["*"]
    static_dir: str = "static"

    default_team_count: int = 2
    default_score_increment: int = 100
    min_team_count: int = 1
    max_team_count: int = 8

    team_colors: List[str] = [
        "#4F46E5",  # Indigo
        "#10B981",  # Emerald
        "#EF4444",  # Red
        "#F59E0B",  # Amber
        "#8B5CF6",  # Purple
    ]

    # Optional YAML snapshot of teams and settings, rewritten on every change
    state_file: Optional[str] = None

    @model_validator(mode="after")
    def check_limits(self) -> "AppConfig":
        if not self.team_colors:
            raise ValueError("team_colors must not be empty")
        if self.min_team_count < 1 or self.min_team_count > self.max_team_count:
            raise ValueError("min_team_count must be between 1 and max_team_count")
        if not self.min_team_count <= self.default_team_count <= self.max_team_count:
            raise ValueError("default_team_count outside [min_team_count, max_team_count]")
        return self
