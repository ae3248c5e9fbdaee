"""Tests for the budget reverse-calculator strategies."""

from decimal import Decimal

import pytest

from ratecard.domain.types import ArtistTier, CampaignType, RecommendationStrategy
from ratecard.pricing.engine import compute_breakdown, quantize_money
from ratecard.pricing.rate_tables import RateTables
from ratecard.recommend.search import (
    find_recommendations,
    max_duration,
    max_impact,
    max_volume,
)


class TestMaxVolume:
    """Tests for the track-count strategy."""

    def test_large_budget_takes_every_track(self, rate_tables: RateTables):
        rec = max_volume(Decimal("100000"), rate_tables=rate_tables)

        assert rec is not None
        assert rec.strategy == RecommendationStrategy.MAX_VOLUME
        assert rec.label == "Max Volume"
        assert rec.configuration.track_volume == 20
        assert rec.configuration.artist_tier == ArtistTier.DEVELOPING
        assert rec.configuration.campaign_type == CampaignType.ORGANIC
        assert rec.configuration.duration_weeks == 4
        assert rec.configuration.is_viral is True
        assert rec.description == "20 tracks with Developing artists for 4 weeks."
        # 50% off 2846.15 (35% volume + 15% virality)
        assert quantize_money(rec.price) == Decimal("1423.08")
        assert quantize_money(rec.savings) == Decimal("1423.08")

    def test_budget_only_reachable_through_volume_discount(self, rate_tables: RateTables):
        """A single track costs 2419.23, but 10+ tracks cost 1423.08."""
        rec = max_volume(Decimal("2000"), rate_tables=rate_tables)

        assert rec is not None
        assert rec.configuration.track_volume == 20
        assert rec.price <= Decimal("2000")

    def test_budget_below_cheapest_yields_nothing(self, rate_tables: RateTables):
        assert max_volume(Decimal("1000"), rate_tables=rate_tables) is None


class TestMaxImpact:
    """Tests for the highest-tier strategy."""

    @pytest.mark.parametrize(
        ("budget", "expected_tier"),
        [
            ("100000", ArtistTier.LEGACY),
            ("36680.77", ArtistTier.LEGACY),
            ("36680", ArtistTier.SUPERSTAR),
            ("13011.54", ArtistTier.SUPERSTAR),
            ("10000", ArtistTier.ESTABLISHED),
            ("5000", ArtistTier.BREAKING),
            ("3000", ArtistTier.DEVELOPING),
        ],
        ids=[
            "ample",
            "just_fits_legacy",
            "just_misses_legacy",
            "just_fits_superstar",
            "established",
            "breaking",
            "developing",
        ],
    )
    def test_highest_tier_that_fits(
        self, budget: str, expected_tier: ArtistTier, rate_tables: RateTables
    ):
        rec = max_impact(Decimal(budget), rate_tables=rate_tables)

        assert rec is not None
        assert rec.configuration.artist_tier == expected_tier
        assert rec.configuration.campaign_type == CampaignType.PAID
        assert rec.price <= Decimal(budget)

    def test_legacy_price_and_savings(self, rate_tables: RateTables):
        rec = max_impact(Decimal("100000"), rate_tables=rate_tables)

        assert rec is not None
        assert rec.description == "Legacy artist with Paid amplification for 4 weeks."
        assert quantize_money(rec.price) == Decimal("36680.77")
        assert quantize_money(rec.savings) == Decimal("6473.08")

    def test_nothing_fits(self, rate_tables: RateTables):
        assert max_impact(Decimal("2000"), rate_tables=rate_tables) is None


class TestMaxDuration:
    """Tests for the longest-run strategy."""

    @pytest.mark.parametrize(
        ("budget", "expected_weeks"),
        [
            ("100000", 52),
            ("47387.51", 52),
            ("47387.49", 48),
            ("10000", 8),
            ("3645.20", 4),
        ],
        ids=["ample", "just_fits_a_year", "just_misses_a_year", "eight_weeks", "four_weeks"],
    )
    def test_longest_duration_that_fits(
        self, budget: str, expected_weeks: int, rate_tables: RateTables
    ):
        rec = max_duration(Decimal(budget), rate_tables=rate_tables)

        assert rec is not None
        assert rec.configuration.duration_weeks == expected_weeks
        assert rec.configuration.artist_tier == ArtistTier.ESTABLISHED
        assert rec.description == f"Established artist for {expected_weeks} weeks (Organic)."

    def test_durations_step_by_four(self, rate_tables: RateTables):
        rec = max_duration(Decimal("20000"), rate_tables=rate_tables)
        assert rec is not None
        assert rec.configuration.duration_weeks % 4 == 0

    def test_nothing_fits(self, rate_tables: RateTables):
        assert max_duration(Decimal("3000"), rate_tables=rate_tables) is None


class TestFindRecommendations:
    """Tests for running all strategies together."""

    def test_zero_budget_returns_nothing(self, rate_tables: RateTables):
        assert find_recommendations(0, rate_tables=rate_tables) == []

    def test_ample_budget_returns_all_three_in_order(self, rate_tables: RateTables):
        recs = find_recommendations(Decimal("100000"), rate_tables=rate_tables)

        assert [r.strategy for r in recs] == [
            RecommendationStrategy.MAX_VOLUME,
            RecommendationStrategy.MAX_IMPACT,
            RecommendationStrategy.MAX_DURATION,
        ]

    def test_omits_strategies_without_a_fit(self, rate_tables: RateTables):
        recs = find_recommendations(Decimal("3000"), rate_tables=rate_tables)

        assert [r.strategy for r in recs] == [
            RecommendationStrategy.MAX_VOLUME,
            RecommendationStrategy.MAX_IMPACT,
        ]

    def test_every_recommendation_fits_budget(self, rate_tables: RateTables):
        budget = Decimal("25000")
        for rec in find_recommendations(budget, rate_tables=rate_tables):
            assert rec.price <= budget
            priced = compute_breakdown(rec.configuration, 100, rate_tables=rate_tables)
            assert priced.final_price == rec.price
            assert priced.total_discount_amount == rec.savings

    def test_recommendations_price_at_worldwide_coverage(self, rate_tables: RateTables):
        for rec in find_recommendations(Decimal("100000"), rate_tables=rate_tables):
            assert rec.configuration.selected_territories == ("worldwide",)

    def test_is_idempotent(self, rate_tables: RateTables):
        first = find_recommendations(Decimal("42000"), rate_tables=rate_tables)
        second = find_recommendations(Decimal("42000"), rate_tables=rate_tables)
        assert first == second

    def test_accepts_int_float_and_str_budgets(self, rate_tables: RateTables):
        expected = find_recommendations(Decimal("5000"), rate_tables=rate_tables)
        assert find_recommendations(5000, rate_tables=rate_tables) == expected
        assert find_recommendations(5000.0, rate_tables=rate_tables) == expected
        assert find_recommendations("5000", rate_tables=rate_tables) == expected

    def test_defaults_to_configured_rate_card(self):
        assert len(find_recommendations(Decimal("100000"))) == 3

    def test_logs_search(self, rate_tables: RateTables, _captured_logs: list[dict]):
        find_recommendations(Decimal("3000"), rate_tables=rate_tables)
        events = [e for e in _captured_logs if e["event"] == "recommendations_found"]
        assert events[0]["strategies"] == ["max-volume", "max-impact"]
