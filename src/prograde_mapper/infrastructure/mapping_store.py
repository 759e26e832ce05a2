import logging
import os
from typing import Optional, TYPE_CHECKING
from prograde_mapper.config import settings

if TYPE_CHECKING:
    from prograde_mapper.application.team_mapper import TeamNameMatcher

logger = logging.getLogger(__name__)

class MappingStore:
    """JSON file backing for the alias registry (admin backup / restore)."""
    def __init__(self, path: Optional[str] = None):
        self.path = path or settings.TEAM_MAPPING_PATH

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load_into(self, matcher: "TeamNameMatcher") -> int:
        if not self.exists():
            logger.warning("No team mapping file at %s, keeping built-in aliases", self.path)
            return 0
        with open(self.path, 'r', encoding='utf-8') as f:
            count = matcher.import_team_mappings(f.read())
        logger.info("Loaded %d team mappings from %s", count, self.path)
        return count

    def save_from(self, matcher: "TeamNameMatcher") -> str:
        parent = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(parent, exist_ok=True)
        payload = matcher.export_team_mappings()
        # Write beside the target and swap in, so a failed write never truncates the last backup
        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path): os.remove(tmp_path)
            raise
        logger.info("Saved %d team mappings to %s", len(matcher), self.path)
        return self.path
