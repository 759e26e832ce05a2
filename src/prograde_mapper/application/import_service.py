import logging
from typing import Dict, Iterable, List, Optional
from prograde_mapper.application.team_mapper import TeamNameMatcher
from prograde_mapper.domain.models import ExternalGame, GameMappingResult, TeamAlias, TeamSuggestion
from prograde_mapper.infrastructure.mapping_store import MappingStore

logger = logging.getLogger(__name__)

class GameImportService:
    """Maps batches of feed games and manages the manual-mapping queue around a shared matcher."""
    def __init__(self, matcher: Optional[TeamNameMatcher] = None, store: Optional[MappingStore] = None):
        self.matcher = matcher if matcher is not None else TeamNameMatcher()
        self.store = store
        if self.store:
            self.store.load_into(self.matcher)

    def map_games(self, games: Iterable[ExternalGame]) -> List[GameMappingResult]:
        results = [self.matcher.map_game_to_teams(game) for game in games]
        mapped = sum(1 for r in results if r.mapped)
        logger.info("Mapped %d/%d games", mapped, len(results))
        return results

    def pending_review(self, results: Iterable[GameMappingResult]) -> Dict[str, List[TeamSuggestion]]:
        queue: Dict[str, List[TeamSuggestion]] = {}
        for result in results:
            for name in result.suggested_teams:
                if name not in queue:
                    queue[name] = self.matcher.suggest_teams(name)
        return queue

    def resolve_manually(self, external_name: str, target: TeamAlias, confidence: float = 1.0) -> TeamAlias:
        """Register ``external_name`` as a new alias of ``target``'s team."""
        alias = TeamAlias.model_validate({**target.model_dump(), "external_name": external_name, "confidence": confidence})
        self.matcher.add_team_mapping(alias)
        logger.info("Operator mapped %r to %s", external_name, alias.internal_name)
        if self.store:
            self.store.save_from(self.matcher)
        return alias

    def backup(self) -> Optional[str]:
        if not self.store: return None
        return self.store.save_from(self.matcher)

    def restore(self) -> int:
        if not self.store: return 0
        return self.store.load_into(self.matcher)
