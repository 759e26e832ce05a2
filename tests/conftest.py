import pytest

from prograde_mapper.application.team_mapper import TeamNameMatcher
from prograde_mapper.domain.models import TeamAlias


@pytest.fixture
def matcher():
    return TeamNameMatcher()


@pytest.fixture
def make_alias():
    """Factory for custom aliases with sensible defaults."""
    def _make(external_name, internal_name=None, abbreviation="TST", level="COLLEGE", confidence=0.8, conference=None):
        return TeamAlias(
            external_name=external_name,
            internal_name=internal_name or f"{external_name} Testers",
            abbreviation=abbreviation,
            conference=conference,
            level=level,
            confidence=confidence,
        )
    return _make
