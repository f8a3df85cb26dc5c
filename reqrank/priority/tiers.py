"""Score to tier mapping."""

from reqrank.priority.models import Tier

# (lower bound, tier), checked top-down; lower bounds are inclusive
TIER_THRESHOLDS = [
    (10.0, Tier.CRITICAL),  # Dependencies of blocking systems
    (8.0, Tier.HIGH),       # Blocking systems themselves
    (6.0, Tier.MEDIUM),     # Important features
    (4.0, Tier.LOW),        # Nice to have
]


def score_to_tier(score: float) -> Tier:
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return Tier.DEFERRED
