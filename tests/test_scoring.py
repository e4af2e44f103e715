"""
VentureScope tests - Scoring Engine
"""

import itertools
import random
import sys
sys.path.insert(0, ".")
from datetime import datetime

import pytest
from pydantic import ValidationError

from app.domain import (
    ScoringEngine,
    CATEGORY_MULTIPLIERS,
    LOCATION_MULTIPLIERS,
    category_multiplier,
    location_multiplier,
    compute_success_probability,
    compute_feature_importance,
)
from app.schemas import FeatureImportance, StartupProfile
from conftest import EmptyLengthRandom, StubRandom

YEAR = datetime.now().year


def make_profile(**overrides) -> StartupProfile:
    values = {
        "founded_year": YEAR - 2,
        "team_size": 25,
        "market_category": "AI/ML",
        "location": "North America",
        "funding_amount": 5_000_000,
    }
    values.update(overrides)
    return StartupProfile(**values)


class TestSuccessProbability:
    """Success probability"""

    def setup_method(self):
        # U = 0.5 makes the noise term zero
        self.engine = ScoringEngine(rng=StubRandom(0.5))

    def test_worked_example(self):
        """Documented example: 54.5 x 1.20 x 1.10"""
        result = self.engine.compute_success_probability(
            make_profile(), 0.8, current_year=YEAR
        )

        assert result == pytest.approx(71.94)

    def test_clock_injection(self):
        """Company age comes from the injected clock"""
        engine = ScoringEngine(rng=StubRandom(0.5), clock=lambda: datetime(YEAR, 6, 1))

        assert engine.compute_success_probability(make_profile(), 0.8) == pytest.approx(71.94)

    def test_company_age_changes_with_year(self):
        """Same input, later year, higher score"""
        profile = make_profile()

        now = self.engine.compute_success_probability(profile, 0.8, current_year=YEAR)
        later = self.engine.compute_success_probability(profile, 0.8, current_year=YEAR + 5)

        assert later > now

    def test_noise_bounds(self):
        """Noise moves the score by at most 5 points"""
        profile = make_profile()
        low = self.engine.compute_success_probability(
            profile, 0.8, current_year=YEAR, rng=StubRandom(0.0)
        )
        high = self.engine.compute_success_probability(
            profile, 0.8, current_year=YEAR, rng=StubRandom(0.999999)
        )

        assert low == pytest.approx(71.94 - 5)
        assert high == pytest.approx(71.94 + 5, abs=1e-4)

    def test_one_random_draw(self):
        rng = StubRandom(0.3)
        self.engine.compute_success_probability(make_profile(), 0.5, current_year=YEAR, rng=rng)

        assert rng.calls == 1

    def test_falsy_rng_is_used(self):
        """A source with len() == 0 still replaces the engine's own"""
        rng = EmptyLengthRandom(0.0)

        result = self.engine.compute_success_probability(
            make_profile(), 0.8, current_year=YEAR, rng=rng
        )

        assert rng.calls == 1
        assert result == pytest.approx(71.94 - 5)

    def test_falsy_rng_in_constructor(self):
        rng = EmptyLengthRandom(0.5)
        engine = ScoringEngine(rng=rng)

        assert engine.rng is rng

    def test_clamped_to_minimum(self):
        """Weak profile is clamped at 5"""
        profile = make_profile(
            founded_year=YEAR,
            team_size=1,
            funding_amount=0,
            market_category="Gaming",
            location="Africa",
        )

        result = self.engine.compute_success_probability(
            profile, 0.0, current_year=YEAR, rng=StubRandom(0.0)
        )

        assert result == 5.0

    def test_clamped_to_maximum(self):
        """Saturated profile is clamped at 95"""
        profile = make_profile(
            founded_year=1990,
            team_size=500,
            funding_amount=50_000_000,
        )

        result = self.engine.compute_success_probability(
            profile, 1.0, current_year=YEAR, rng=StubRandom(0.999)
        )

        assert result == 95.0

    def test_range_with_real_randomness(self):
        """Any valid input lands in [5, 95]"""
        engine = ScoringEngine(rng=random.Random(42))
        grid = itertools.product(
            [1900, 2000, YEAR - 3, YEAR],
            [1, 10, 50, 10_000],
            ["AI/ML", "Gaming", "Unknown"],
            ["North America", "Africa", "Mars"],
            [0, 1_000_000, 10_000_000, 1e9],
            [0.0, 0.5, 1.0],
        )
        for year, team, category, location, funding, sentiment in grid:
            profile = make_profile(
                founded_year=year,
                team_size=team,
                market_category=category,
                location=location,
                funding_amount=funding,
            )
            result = engine.compute_success_probability(profile, sentiment, current_year=YEAR)
            assert 5.0 <= result <= 95.0

    def test_idempotent_with_stubs(self):
        profile = make_profile()

        first = self.engine.compute_success_probability(profile, 0.65, current_year=YEAR)
        second = self.engine.compute_success_probability(profile, 0.65, current_year=YEAR)

        assert first == second

    def test_module_level_function(self):
        result = compute_success_probability(
            make_profile(), 0.8, current_year=YEAR, rng=StubRandom(0.5)
        )

        assert result == pytest.approx(71.94)


class TestBaseScore:
    """Pre-noise score"""

    def setup_method(self):
        self.engine = ScoringEngine(rng=StubRandom(0.5))

    @pytest.mark.parametrize("field, values", [
        ("funding_amount", [0, 1_000_000, 4_000_000, 9_999_999]),
        ("team_size", [1, 10, 30, 49]),
    ])
    def test_monotonic_in_profile(self, field, values):
        """More funding / a bigger team never lowers the base score"""
        scores = [
            self.engine.base_score(make_profile(**{field: v}), 0.5, current_year=YEAR)
            for v in values
        ]

        assert scores == sorted(scores)

    def test_monotonic_in_sentiment(self):
        scores = [
            self.engine.base_score(make_profile(), s, current_year=YEAR)
            for s in [0.0, 0.2, 0.5, 0.9, 1.0]
        ]

        assert scores == sorted(scores)

    def test_caps(self):
        """Values above the caps score the same as the caps"""
        capped = self.engine.base_score(
            make_profile(funding_amount=10_000_000, team_size=50), 0.5, current_year=YEAR
        )
        above = self.engine.base_score(
            make_profile(funding_amount=80_000_000, team_size=5_000), 0.5, current_year=YEAR
        )

        assert capped == above

    def test_unknown_category_and_location(self):
        """Unrecognized values use multiplier 1.0"""
        profile = make_profile(market_category="Quantum Farming", location="Antarctica")

        # 17.5 + 10 + 3 + 24
        assert self.engine.base_score(profile, 0.8, current_year=YEAR) == pytest.approx(54.5)

    def test_sub_scores(self):
        scores = self.engine.sub_scores(make_profile(), 0.8, current_year=YEAR)

        assert scores == pytest.approx({
            "funding": 50.0,
            "team_size": 50.0,
            "age": 20.0,
            "sentiment": 80.0,
        })


class TestMultipliers:
    """Category / location tables"""

    def test_known_values(self):
        assert category_multiplier("AI/ML") == 1.2
        assert category_multiplier("Gaming") == 0.85
        assert location_multiplier("Europe") == 1.05
        assert location_multiplier("Africa") == 0.85

    def test_default(self):
        assert category_multiplier("Other") == 0.9
        assert category_multiplier("other") == 1.0
        assert location_multiplier("Atlantis") == 1.0

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            CATEGORY_MULTIPLIERS["AI/ML"] = 2.0
        with pytest.raises(TypeError):
            LOCATION_MULTIPLIERS["Europe"] = 2.0

    def test_table_sizes(self):
        assert len(CATEGORY_MULTIPLIERS) == 11
        assert len(LOCATION_MULTIPLIERS) == 6


class TestFeatureImportance:
    """Feature importance"""

    def setup_method(self):
        self.engine = ScoringEngine(rng=StubRandom(0.5))

    def test_shape_and_order(self):
        result = self.engine.compute_feature_importance(
            make_profile(), 0.8, current_year=YEAR
        )

        assert len(result) == 5
        importances = [f.importance for f in result]
        assert importances == sorted(importances, reverse=True)

    def test_ties_keep_fixed_order(self):
        """sentiment (80) before market (80), funding (50) before team size (50)"""
        result = self.engine.compute_feature_importance(
            make_profile(), 0.8, current_year=YEAR
        )

        assert [f.feature for f in result] == [
            "sentiment",
            "market_category",
            "funding_total_usd",
            "team_size",
            "company_age",
        ]
        assert [f.display_name for f in result] == [
            "Sentiment", "Market", "Funding", "Team Size", "Company Age",
        ]

    def test_all_saturated(self):
        """All capped at 100: insertion order, market last"""
        profile = make_profile(founded_year=1990, team_size=200, funding_amount=20_000_000)

        result = self.engine.compute_feature_importance(profile, 1.0, current_year=YEAR)

        assert [f.feature for f in result] == [
            "funding_total_usd",
            "company_age",
            "team_size",
            "sentiment",
            "market_category",
        ]
        assert [f.importance for f in result[:4]] == [100.0] * 4

    def test_ranges_with_real_randomness(self):
        engine = ScoringEngine(rng=random.Random(7))
        for funding, team, sentiment in itertools.product(
            [0, 3_000_000, 50_000_000], [1, 25, 5_000], [0.0, 0.4, 1.0]
        ):
            profile = make_profile(funding_amount=funding, team_size=team)
            result = engine.compute_feature_importance(profile, sentiment, current_year=YEAR)

            assert len(result) == 5
            for item in result:
                if item.feature == "market_category":
                    assert 70.0 <= item.importance < 90.0
                else:
                    assert 0.0 <= item.importance <= 100.0

    def test_market_bounds(self):
        low = self.engine.compute_feature_importance(
            make_profile(), 0.5, current_year=YEAR, rng=StubRandom(0.0)
        )
        market = next(f for f in low if f.feature == "market_category")

        assert market.importance == 70.0

    def test_falsy_rng_is_used(self):
        rng = EmptyLengthRandom(0.0)

        result = self.engine.compute_feature_importance(
            make_profile(), 0.5, current_year=YEAR, rng=rng
        )
        market = next(f for f in result if f.feature == "market_category")

        assert rng.calls == 1
        assert market.importance == 70.0

    def test_idempotent_with_stubs(self):
        first = self.engine.compute_feature_importance(make_profile(), 0.3, current_year=YEAR)
        second = self.engine.compute_feature_importance(make_profile(), 0.3, current_year=YEAR)

        assert first == second

    def test_serializes_with_camel_case(self):
        result = compute_feature_importance(
            make_profile(), 0.8, current_year=YEAR, rng=StubRandom(0.5)
        )

        dumped = result[0].model_dump(by_alias=True)
        assert set(dumped) == {"feature", "displayName", "importance"}

    @pytest.mark.parametrize("importance", [0.0, 100.0])
    def test_importance_bounds_accepted(self, importance):
        item = FeatureImportance(feature="sentiment", display_name="Sentiment", importance=importance)

        assert item.importance == importance

    @pytest.mark.parametrize("importance", [-0.1, 100.1])
    def test_importance_outside_range_rejected(self, importance):
        with pytest.raises(ValidationError):
            FeatureImportance(feature="sentiment", display_name="Sentiment", importance=importance)


class TestScore:
    """Combined score"""

    def test_score_bundles_both(self):
        engine = ScoringEngine(rng=StubRandom(0.5))

        result = engine.score(make_profile(), 0.8, current_year=YEAR)

        assert result.success_probability == pytest.approx(71.94)
        assert len(result.feature_importance) == 5


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
