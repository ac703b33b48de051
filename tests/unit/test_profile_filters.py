"""Unit tests for the client-side profile filter."""

from datetime import datetime, timezone

import pytest

from app.modules.profiles.filters import filter_profiles
from app.modules.profiles.schemas import Intent, IntentFilter, ProfileResponse


def profile(name, skills=(), interests=(), ikigai="", intent="cofounder") -> ProfileResponse:
    return ProfileResponse(
        id=name.lower(),
        name=name,
        email=f"{name.lower()}@example.com",
        ikigai=ikigai,
        skills=list(skills),
        interests=list(interests),
        intent=intent,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def profiles():
    return [
        profile("Ada", skills=["Rust"], intent="cofounder"),
        profile("Bo", skills=["Go"], intent="client"),
    ]


class TestFilterProfiles:
    def test_matches_skill_case_insensitively(self, profiles):
        assert [p.name for p in filter_profiles(profiles, "rust", "all")] == ["Ada"]

    def test_empty_term_with_intent(self, profiles):
        assert [p.name for p in filter_profiles(profiles, "", "client")] == ["Bo"]

    def test_no_match(self, profiles):
        assert filter_profiles(profiles, "xyz", "all") == []

    def test_empty_term_and_all_passes_everything(self, profiles):
        assert filter_profiles(profiles, "", "all") == profiles

    def test_matches_name_interests_and_ikigai(self):
        people = [
            profile("Carmen", interests=["Climate Tech"]),
            profile("Dee", ikigai="Helping FARMERS sell direct"),
            profile("Rustam"),
        ]

        assert [p.name for p in filter_profiles(people, "climate")] == ["Carmen"]
        assert [p.name for p in filter_profiles(people, "farmers")] == ["Dee"]
        assert [p.name for p in filter_profiles(people, "RUST")] == ["Rustam"]

    def test_text_and_intent_combine(self):
        people = [
            profile("Ada", skills=["Rust"], intent="cofounder"),
            profile("Eve", skills=["Rust"], intent="teammate"),
        ]

        assert [p.name for p in filter_profiles(people, "rust", IntentFilter.TEAMMATE)] == ["Eve"]
        assert [p.name for p in filter_profiles(people, "rust", Intent.COFOUNDER)] == ["Ada"]

    def test_does_not_mutate_input_and_is_repeatable(self, profiles):
        before = list(profiles)

        first = filter_profiles(profiles, "o", "all")
        second = filter_profiles(profiles, "o", "all")

        assert first == second
        assert profiles == before
        assert first is not profiles

    @pytest.mark.parametrize("term", ["   ", "\t", " \n "])
    def test_whitespace_only_term_passes_everything(self, profiles, term):
        assert filter_profiles(profiles, term, "all") == profiles

    def test_surrounding_whitespace_is_ignored(self, profiles):
        assert [p.name for p in filter_profiles(profiles, "  rust ", "all")] == ["Ada"]
