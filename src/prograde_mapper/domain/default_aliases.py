from typing import List
from prograde_mapper.domain.models import TeamAlias

NCAA_TEAMS: List[TeamAlias] = [
    TeamAlias(external_name="Ohio State", internal_name="Ohio State Buckeyes", abbreviation="OSU", conference="Big Ten", level="COLLEGE", confidence=0.95),
    TeamAlias(external_name="Michigan", internal_name="Michigan Wolverines", abbreviation="MICH", conference="Big Ten", level="COLLEGE", confidence=0.95),
    TeamAlias(external_name="Alabama", internal_name="Alabama Crimson Tide", abbreviation="ALA", conference="SEC", level="COLLEGE", confidence=0.95),
    TeamAlias(external_name="Georgia", internal_name="Georgia Bulldogs", abbreviation="UGA", conference="SEC", level="COLLEGE", confidence=0.95),
    TeamAlias(external_name="TCU", internal_name="TCU Horned Frogs", abbreviation="TCU", conference="Big 12", level="COLLEGE", confidence=0.95),
    TeamAlias(external_name="Clemson", internal_name="Clemson Tigers", abbreviation="CLEM", conference="ACC", level="COLLEGE", confidence=0.95),
    TeamAlias(external_name="Notre Dame", internal_name="Notre Dame Fighting Irish", abbreviation="ND", conference="Independent", level="COLLEGE", confidence=0.95),
    TeamAlias(external_name="USC", internal_name="USC Trojans", abbreviation="USC", conference="Pac-12", level="COLLEGE", confidence=0.95),
    TeamAlias(external_name="Texas", internal_name="Texas Longhorns", abbreviation="TEX", conference="SEC", level="COLLEGE", confidence=0.95),
    TeamAlias(external_name="Oklahoma", internal_name="Oklahoma Sooners", abbreviation="OU", conference="SEC", level="COLLEGE", confidence=0.95),
]

NFL_TEAMS: List[TeamAlias] = [
    TeamAlias(external_name="Kansas City Chiefs", internal_name="Kansas City Chiefs", abbreviation="KC", conference="AFC", level="NFL", confidence=0.95),
    TeamAlias(external_name="Philadelphia Eagles", internal_name="Philadelphia Eagles", abbreviation="PHI", conference="NFC", level="NFL", confidence=0.95),
    TeamAlias(external_name="San Francisco 49ers", internal_name="San Francisco 49ers", abbreviation="SF", conference="NFC", level="NFL", confidence=0.95),
    TeamAlias(external_name="Dallas Cowboys", internal_name="Dallas Cowboys", abbreviation="DAL", conference="NFC", level="NFL", confidence=0.95),
    TeamAlias(external_name="New England Patriots", internal_name="New England Patriots", abbreviation="NE", conference="AFC", level="NFL", confidence=0.95),
]

DEFAULT_ALIASES: List[TeamAlias] = NCAA_TEAMS + NFL_TEAMS
