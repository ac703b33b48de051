"""Client-side profile search used by the members listing.

Operates on profiles that were already fetched; never talks to the store,
so it is safe to run again on every keystroke.
"""
from typing import Iterable, List, Union

from app.modules.profiles.schemas import Intent, IntentFilter, ProfileResponse

ALL_INTENTS = IntentFilter.ALL.value


def _value(v) -> str:
    return v.value if isinstance(v, (Intent, IntentFilter)) else v


def _matches_text(profile: ProfileResponse, term: str) -> bool:
    return (
        term in profile.name.lower()
        or any(term in skill.lower() for skill in profile.skills)
        or any(term in interest.lower() for interest in profile.interests)
        or term in profile.ikigai.lower()
    )


def filter_profiles(
    profiles: Iterable[ProfileResponse],
    search_term: str = "",
    intent_filter: Union[str, Intent, IntentFilter] = ALL_INTENTS,
) -> List[ProfileResponse]:
    """Return the profiles matching `search_term` and `intent_filter`, in input order.

    The text match is a case-insensitive substring test against name, skills,
    interests and ikigai; a blank term matches everything. Intent must match
    exactly unless the filter is "all".
    """
    result = list(profiles)
    term = (search_term or "").strip().lower()
    if term:
        result = [p for p in result if _matches_text(p, term)]
    wanted = _value(intent_filter) or ALL_INTENTS
    if wanted != ALL_INTENTS:
        result = [p for p in result if _value(p.intent) == wanted]
    return result
