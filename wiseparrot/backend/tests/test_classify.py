import math

import pytest

from leadlookup.domain.classify import quality_tier, score_bar_width, score_tier
from leadlookup.domain.types import Tier


@pytest.mark.parametrize(
    "label,tier",
    [
        ("High", Tier.STRONG),
        ("EXCELLENT", Tier.STRONG),
        ("medium", Tier.MEDIUM),
        (" Good ", Tier.MEDIUM),
        ("Low", Tier.WEAK),
        ("poor", Tier.WEAK),
        ("", Tier.DEFAULT),
        ("Hot lead", Tier.DEFAULT),
        (None, Tier.DEFAULT),
        (3, Tier.DEFAULT),
    ],
)
def test_quality_tiers(label, tier):
    assert quality_tier(label) == tier


@pytest.mark.parametrize(
    "score,tier",
    [
        (100, Tier.STRONG),
        (80, Tier.STRONG),
        (79.9, Tier.MEDIUM),
        (60, Tier.MEDIUM),
        (59, Tier.WEAK),
        (40, Tier.WEAK),
        (39.99, Tier.DEFAULT),
        (0, Tier.DEFAULT),
        (-5, Tier.DEFAULT),
        (250, Tier.STRONG),
        ("85", Tier.STRONG),
        ("n/a", Tier.DEFAULT),
        (None, Tier.DEFAULT),
        (math.nan, Tier.DEFAULT),
        (True, Tier.DEFAULT),
    ],
)
def test_score_tiers(score, tier):
    assert score_tier(score) == tier


def test_score_bar_is_capped_not_the_score():
    assert score_bar_width(85) == 85.0
    assert score_bar_width(140) == 100.0
    assert score_bar_width(-10) == 0.0
    assert score_bar_width("oops") == 0.0
