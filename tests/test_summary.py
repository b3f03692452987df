import pytest

from neptune_search.models import SearchIntent
from neptune_search.search.summary import (
    SummaryGenerator,
    SummaryServiceUnavailable,
    build_fallback_summary,
    build_summary_prompt,
)


def _intent(query="plumbers in Austin", location="Austin", category="plumber"):
    return SearchIntent(location=location, category=category, max_price=None, original_query=query)


@pytest.fixture
def ranked(provider_factory):
    return [
        provider_factory(
            id="1",
            name="Top Plumbing",
            rating=4.8,
            review_count=342,
            price_range="$75-120/hr",
            availability="Weekdays",
            neptune_score=8.2,
        ),
        provider_factory(id="2", name="Second Plumbing", price_range="$45-65/hr", availability="Same-day", neptune_score=7.0),
        provider_factory(id="3", name="Third Plumbing", price_range="$75-120/hr", availability="Weekdays", neptune_score=6.1),
    ]


class StubGenerator:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


def test_fallback_summary_reports_top_provider_and_stats(ranked):
    summary = build_fallback_summary(ranked, _intent())

    assert summary.startswith("Found 3 plumber providers in Austin.")
    assert "Top Plumbing leads with a Neptune Score of 8.2/10 and 4.8/5 stars from 342 reviews" in summary
    assert "Options range from $45-65/hr to $75-120/hr" in summary
    assert "average Neptune Score of 7.1/10" in summary
    assert "Same-day service options available" in summary


def test_fallback_summary_uses_service_label_without_category(ranked):
    summary = build_fallback_summary(ranked, _intent(location="", category=""))
    assert summary.startswith("Found 3 service providers.")


def test_fallback_summary_replaces_category_hyphen(ranked):
    summary = build_fallback_summary(ranked, _intent(category="appliance-repair"))
    assert summary.startswith("Found 3 appliance repair providers")


def test_emergency_wins_over_other_tiers(ranked, provider_factory):
    providers = ranked + [provider_factory(id="4", availability="24/7 hotline", neptune_score=5.0)]
    assert "Emergency services available" in build_fallback_summary(providers, _intent())


def test_standard_scheduling_when_no_tier_keywords(provider_factory):
    providers = [provider_factory(neptune_score=5.0)]
    assert "Standard scheduling available" in build_fallback_summary(providers, _intent())


def test_empty_results_echo_query():
    query = "left-handed chimney sweep on Mars"
    summary = build_fallback_summary([], _intent(query=query, location="", category=""))
    assert summary.startswith(f'No service providers found matching "{query}".')


def test_prompt_includes_top_three_only(ranked, provider_factory):
    providers = ranked + [provider_factory(id="4", name="Fourth Plumbing", neptune_score=5.0)]
    prompt = build_summary_prompt(providers, _intent())

    assert 'User Query: "plumbers in Austin"' in prompt
    assert "Search Results Found: 4 providers" in prompt
    assert "- Top Plumbing (Neptune Score: 8.2/10, Rating: 4.8/5, Price: $75-120/hr)" in prompt
    assert "Fourth Plumbing" not in prompt
    assert "Location Focus: Austin" in prompt
    assert "under 150 words" in prompt


def test_prompt_for_empty_results():
    prompt = build_summary_prompt([], _intent())
    assert "No specific providers found for this query." in prompt


def test_generator_text_replaces_fallback(ranked):
    generator = StubGenerator(text="  Top Plumbing is your best bet.  ")
    summary = SummaryGenerator(generator).summarize(ranked, _intent())

    assert summary == "Top Plumbing is your best bet."
    assert len(generator.prompts) == 1


@pytest.mark.parametrize(
    "generator",
    [
        None,
        StubGenerator(error=SummaryServiceUnavailable("no key")),
        StubGenerator(error=KeyError("boom")),
        StubGenerator(text="   "),
    ],
)
def test_failures_fall_back_silently(ranked, generator):
    summary = SummaryGenerator(generator).summarize(ranked, _intent())
    assert summary == build_fallback_summary(ranked, _intent())


def test_non_text_generator_output_falls_back(ranked):
    summary = SummaryGenerator(StubGenerator(text={"text": "x"})).summarize(ranked, _intent())
    assert summary == build_fallback_summary(ranked, _intent())


def test_whole_numbers_print_without_decimals(provider_factory):
    providers = [provider_factory(name="Round Plumbing", rating=5.0, review_count=10, neptune_score=9.0)]

    summary = build_fallback_summary(providers, _intent())
    prompt = build_summary_prompt(providers, _intent())

    assert "Neptune Score of 9/10 and 5/5 stars from 10 reviews" in summary
    assert "- Round Plumbing (Neptune Score: 9/10, Rating: 5/5," in prompt
