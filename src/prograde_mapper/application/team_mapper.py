import json
import logging
from typing import Dict, List, Optional
from pydantic import TypeAdapter, ValidationError
from thefuzz import fuzz, process
from prograde_mapper.config import settings
from prograde_mapper.domain.default_aliases import DEFAULT_ALIASES
from prograde_mapper.domain.errors import FormatError
from prograde_mapper.domain.models import ExternalGame, GameMappingResult, TeamAlias, TeamSuggestion
from prograde_mapper.domain.similarity import similarity

logger = logging.getLogger(__name__)

_ALIAS_LIST = TypeAdapter(List[TeamAlias])

class TeamNameMatcher:
    """Resolves external feed team names to registered aliases: exact key first, Levenshtein fallback."""
    def __init__(self, threshold: Optional[float] = None, partial_penalty: Optional[float] = None):
        self.threshold = settings.FUZZY_MATCH_THRESHOLD if threshold is None else threshold
        self.partial_penalty = settings.PARTIAL_MATCH_PENALTY if partial_penalty is None else partial_penalty
        # Insertion order doubles as the fuzzy tie-break order
        self.mapping: Dict[str, TeamAlias] = {}
        for alias in DEFAULT_ALIASES:
            self.mapping[alias.key] = alias

    def __len__(self) -> int:
        return len(self.mapping)

    def add_team_mapping(self, alias: TeamAlias):
        self.mapping[alias.key] = alias

    def get_all_team_mappings(self) -> List[TeamAlias]:
        return list(self.mapping.values())

    def find_team_match(self, external_team_name: str) -> Optional[TeamAlias]:
        if not external_team_name: return None
        normalized = external_team_name.lower().strip()
        if normalized in self.mapping: return self.mapping[normalized]

        best_match, best_score = None, 0.0
        for key, alias in self.mapping.items():
            score = similarity(normalized, key)
            if score > best_score and score >= self.threshold:
                best_match, best_score = alias, score

        if best_match is not None:
            logger.debug("Fuzzy matched %r to %r (score %.3f)", external_team_name, best_match.external_name, best_score)
        return best_match

    def map_game_to_teams(self, game: ExternalGame) -> GameMappingResult:
        home = self.find_team_match(game.home_team)
        away = self.find_team_match(game.away_team)

        result = GameMappingResult(external_game_id=f"{game.source}_{game.season}_{game.home_team}_{game.away_team}")

        if home and away:
            result.mapped = True
            result.confidence = min(home.confidence, away.confidence)
        elif home or away:
            result.confidence = (home or away).confidence * self.partial_penalty

        for raw_name, alias in ((game.home_team, home), (game.away_team, away)):
            if alias:
                result.mapping_notes.append(f"Successfully mapped {raw_name} to {alias.internal_name}")
            else:
                result.mapping_notes.append(f"Failed to map {raw_name}")
                result.suggested_teams.append(raw_name)

        if not result.mapped:
            logger.warning("Game %s needs manual mapping for %s", result.external_game_id, result.suggested_teams)
        return result

    def search_teams(self, query: str) -> List[TeamAlias]:
        needle = query.lower()
        return [
            alias for alias in self.mapping.values()
            if needle in alias.external_name.lower()
            or needle in alias.internal_name.lower()
            or needle in alias.abbreviation.lower()
        ]

    def suggest_teams(self, external_team_name: str, limit: Optional[int] = None) -> List[TeamSuggestion]:
        """Ranked candidates for an unresolved name, scored against display names as well as alias keys.

        Advisory only; ``find_team_match`` never uses this.
        """
        if not external_team_name or not external_team_name.strip(): return []
        limit = settings.SUGGESTION_LIMIT if limit is None else limit

        best: Dict[str, int] = {}
        for choices in ({k: a.internal_name for k, a in self.mapping.items()}, {k: k for k in self.mapping}):
            hits = process.extractBests(
                external_team_name, choices, scorer=fuzz.WRatio,
                score_cutoff=settings.SUGGESTION_SCORE_CUTOFF, limit=len(choices),
            )
            for _, score, key in hits:
                best[key] = max(best.get(key, 0), int(score))

        # sorted() is stable, so equal scores keep registry order
        ranked = sorted((k for k in self.mapping if k in best), key=lambda k: -best[k])
        return [TeamSuggestion(alias=self.mapping[k], score=best[k]) for k in ranked[:limit]]

    def export_team_mappings(self) -> str:
        payload = _ALIAS_LIST.dump_python(self.get_all_team_mappings(), by_alias=True, exclude_none=True)
        return json.dumps(payload, indent=2)

    def import_team_mappings(self, json_data: str) -> int:
        try:
            aliases = _ALIAS_LIST.validate_json(json_data)
        except ValidationError as e:
            raise FormatError(f"Invalid team mappings JSON format: {e.error_count()} error(s)") from e
        for alias in aliases:
            self.add_team_mapping(alias)
        logger.info("Imported %d team mappings", len(aliases))
        return len(aliases)
