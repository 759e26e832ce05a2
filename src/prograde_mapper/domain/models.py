from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional

class _CamelModel(BaseModel):
    # Serialized form keeps the camelCase keys used by ProGrade backups
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class TeamAlias(_CamelModel):
    model_config = ConfigDict(frozen=True)

    external_name: str
    internal_name: str
    abbreviation: str
    conference: Optional[str] = None
    level: Literal["NFL", "COLLEGE", "HIGH_SCHOOL"]
    confidence: float = Field(ge=0.0, le=1.0)

    @property
    def key(self) -> str:
        return self.external_name.lower()

class ExternalGame(_CamelModel):
    home_team: str
    away_team: str
    source: str
    season: int

class GameMappingResult(_CamelModel):
    external_game_id: str
    mapped: bool = False
    confidence: float = 0.0
    suggested_teams: List[str] = Field(default_factory=list)
    mapping_notes: List[str] = Field(default_factory=list)

class TeamSuggestion(BaseModel):
    alias: TeamAlias
    score: int = Field(ge=0, le=100)
