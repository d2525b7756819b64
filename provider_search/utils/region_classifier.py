"""
Region inference from free-text country strings

Provider rows carry a free-text ``country`` ("London, UK", "USA / Canada",
"Remote") and a single ``region`` label from the closed REGIONS taxonomy.
infer_region() maps the former onto the latter. It is pure and does no I/O.
"""
import re
from typing import Dict, List, Optional, Pattern, Tuple

from provider_search.models.taxonomy import DEFAULT_REGION


COUNTRIES_BY_REGION: Dict[str, Tuple[str, ...]] = {
    "North America": (
        "united states", "united states of america", "usa", "u.s.a.", "u.s.", "us",
        "canada", "new mexico", "north america",
    ),
    "Europe": (
        "united kingdom", "uk", "u.k.", "great britain", "britain", "england",
        "scotland", "wales", "northern ireland", "ireland", "germany", "france",
        "spain", "portugal", "italy", "netherlands", "the netherlands", "holland",
        "belgium", "luxembourg", "switzerland", "austria", "denmark", "sweden",
        "norway", "finland", "iceland", "poland", "czech republic", "czechia",
        "slovakia", "hungary", "romania", "bulgaria", "greece", "croatia",
        "serbia", "slovenia", "bosnia", "albania", "north macedonia", "montenegro",
        "estonia", "latvia", "lithuania", "ukraine", "moldova", "belarus",
        "malta", "cyprus", "monaco", "andorra", "liechtenstein", "europe", "eu",
    ),
    "Asia Pacific": (
        "australia", "new zealand", "india", "pakistan", "bangladesh", "sri lanka",
        "nepal", "china", "hong kong", "taiwan", "japan", "south korea", "korea",
        "singapore", "malaysia", "indonesia", "philippines", "thailand", "vietnam",
        "cambodia", "myanmar", "laos", "mongolia", "papua new guinea", "fiji",
        "kazakhstan", "uzbekistan", "apac",
    ),
    "Latin America": (
        "mexico", "brazil", "argentina", "chile", "colombia", "peru", "venezuela",
        "ecuador", "bolivia", "paraguay", "uruguay", "costa rica", "panama",
        "guatemala", "honduras", "el salvador", "nicaragua", "cuba",
        "dominican republic", "puerto rico", "jamaica", "latam", "latin america",
        "south america", "central america", "caribbean",
    ),
    "Middle East": (
        "united arab emirates", "uae", "u.a.e.", "dubai", "abu dhabi",
        "saudi arabia", "qatar", "kuwait", "bahrain", "oman", "israel", "jordan",
        "lebanon", "turkey", "turkiye", "iran", "iraq", "syria", "yemen",
        "middle east",
    ),
    "Africa": (
        "south africa", "nigeria", "kenya", "egypt", "morocco", "ghana",
        "ethiopia", "tanzania", "uganda", "rwanda", "tunisia", "algeria",
        "senegal", "cameroon", "ivory coast", "cote d'ivoire", "zimbabwe",
        "zambia", "botswana", "namibia", "mauritius", "guinea", "africa",
    ),
}


def _build_patterns() -> List[Tuple[Pattern[str], str]]:
    aliases = [
        (alias, region)
        for region, names in COUNTRIES_BY_REGION.items()
        for alias in names
    ]
    # Longest alias first so "new mexico" wins over "mexico"
    aliases.sort(key=lambda pair: len(pair[0]), reverse=True)
    return [
        (re.compile(r"(?<![a-z])" + re.escape(alias) + r"(?![a-z])"), region)
        for alias, region in aliases
    ]


_PATTERNS = _build_patterns()


def infer_region(country: Optional[str]) -> str:
    """
    Classify a free-text country string into a REGIONS label

    Args:
        country: Country text as stored on the provider row, may be blank

    Returns:
        Region label; DEFAULT_REGION when nothing matches
    """
    if not country:
        return DEFAULT_REGION

    text = country.strip().lower()
    if not text:
        return DEFAULT_REGION

    for pattern, region in _PATTERNS:
        if pattern.search(text):
            return region

    return DEFAULT_REGION
