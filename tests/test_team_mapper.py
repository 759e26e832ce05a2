import pytest

from prograde_mapper.application.team_mapper import TeamNameMatcher
from prograde_mapper.domain.similarity import similarity


def test_seeded_with_built_in_aliases(matcher):
    aliases = matcher.get_all_team_mappings()
    assert len(matcher) == 15
    assert aliases[0].internal_name == "Ohio State Buckeyes"
    assert aliases[-1].internal_name == "New England Patriots"


@pytest.mark.parametrize("raw", ["Ohio State", "ohio state", "  OHIO STATE  ", "\tOhio State\n"])
def test_exact_match_ignores_case_and_whitespace(matcher, raw):
    alias = matcher.find_team_match(raw)
    assert alias is matcher.mapping["ohio state"]
    assert alias.confidence == 0.95


def test_exact_match_keeps_static_confidence(matcher, make_alias):
    matcher.add_team_mapping(make_alias("Low Trust U", confidence=0.3))
    assert matcher.find_team_match("LOW TRUST U").confidence == 0.3


def test_fuzzy_match_one_character_short(matcher):
    alias = matcher.find_team_match("ohio stat")
    assert alias is not None
    assert alias.internal_name == "Ohio State Buckeyes"


def test_fuzzy_match_at_or_above_threshold(matcher):
    # "texa" vs "texas" -> 4/5 = 0.8
    assert matcher.find_team_match("texa").abbreviation == "TEX"


def test_fuzzy_match_exactly_at_threshold(matcher):
    # "ohio st" vs "ohio state" -> (10 - 3) / 10 = 0.7
    assert similarity("ohio st", "ohio state") == 0.7
    assert matcher.find_team_match("ohio st").internal_name == "Ohio State Buckeyes"


def test_below_threshold_returns_none(matcher):
    # "tex" vs "texas" -> 3/5 = 0.6
    assert matcher.find_team_match("tex") is None
    assert matcher.find_team_match("Nonexistent Tech") is None


@pytest.mark.parametrize("raw", ["ohio stat", "michgan", "alabam", "Georgia Tech", "Texas A&M", "Dallas", "chiefs"])
def test_fuzzy_results_never_fall_below_threshold(matcher, raw):
    alias = matcher.find_team_match(raw)
    if alias is not None and alias.key != raw.lower().strip():
        assert similarity(raw.lower().strip(), alias.key) >= 0.7


def test_fuzzy_compares_alias_keys_not_display_names(matcher):
    assert matcher.find_team_match("Ohio State Buckeye") is None


def test_ties_keep_first_registered(make_alias):
    first = TeamNameMatcher()
    first.add_team_mapping(make_alias("abcd"))
    first.add_team_mapping(make_alias("abce"))
    assert first.find_team_match("abcx").external_name == "abcd"

    second = TeamNameMatcher()
    second.add_team_mapping(make_alias("abce"))
    second.add_team_mapping(make_alias("abcd"))
    assert second.find_team_match("abcx").external_name == "abce"


def test_custom_threshold():
    strict = TeamNameMatcher(threshold=0.95)
    assert strict.find_team_match("ohio stat") is None
    loose = TeamNameMatcher(threshold=0.5)
    assert loose.find_team_match("tex").abbreviation == "TEX"


@pytest.mark.parametrize("raw", ["", None])
def test_empty_input_returns_none(matcher, raw):
    assert matcher.find_team_match(raw) is None


def test_add_team_mapping_same_key_last_write_wins(matcher, make_alias):
    before = len(matcher)
    matcher.add_team_mapping(make_alias("Boise State", internal_name="Boise State Broncos", confidence=0.7))
    matcher.add_team_mapping(make_alias("BOISE STATE", internal_name="Boise St. Broncos", confidence=0.9))
    assert len(matcher) == before + 1
    alias = matcher.find_team_match("boise state")
    assert alias.internal_name == "Boise St. Broncos"
    assert alias.confidence == 0.9


def test_add_team_mapping_overrides_built_in(matcher, make_alias):
    matcher.add_team_mapping(make_alias("Ohio State", internal_name="The Ohio State University", confidence=0.99))
    assert matcher.find_team_match("ohio state").internal_name == "The Ohio State University"
    assert len(matcher) == 15


def test_search_teams_matches_any_name_field(matcher):
    assert [a.external_name for a in matcher.search_teams("ohio")] == ["Ohio State"]
    assert [a.external_name for a in matcher.search_teams("longhorns")] == ["Texas"]
    assert [a.external_name for a in matcher.search_teams("PHI")] == ["Philadelphia Eagles"]


def test_search_teams_keeps_registry_order(matcher):
    assert len(matcher.search_teams("")) == 15
    names = [a.external_name for a in matcher.search_teams("an")]
    assert names == ["Michigan", "USC", "Kansas City Chiefs", "San Francisco 49ers", "New England Patriots"]


def test_suggest_teams_ranks_display_name_hits(matcher):
    suggestions = matcher.suggest_teams("Buckeyes")
    assert suggestions
    assert suggestions[0].alias.internal_name == "Ohio State Buckeyes"


def test_suggest_teams_respects_limit_order_and_cutoff(matcher):
    suggestions = matcher.suggest_teams("State", limit=2)
    assert len(suggestions) <= 2
    scores = [s.score for s in suggestions]
    assert scores == sorted(scores, reverse=True)
    assert all(s >= 60 for s in scores)


def test_suggest_teams_does_not_change_lookup(matcher):
    matcher.suggest_teams("Buckeyes")
    assert matcher.find_team_match("Buckeyes") is None


def test_suggest_teams_blank_input(matcher):
    assert matcher.suggest_teams("   ") == []
