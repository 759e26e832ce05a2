import logging
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    FUZZY_MATCH_THRESHOLD: float = 0.7
    PARTIAL_MATCH_PENALTY: float = 0.5
    SUGGESTION_LIMIT: int = 3
    SUGGESTION_SCORE_CUTOFF: int = 60
    TEAM_MAPPING_PATH: str = "data/team_mapping.json"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

settings = Settings()

def configure_logging(level: Optional[str] = None):
    level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
    # basicConfig is a no-op once the host has installed handlers
    logging.getLogger("prograde_mapper").setLevel(level)
