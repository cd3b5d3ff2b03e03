"""
Credit Limit Strategies.

Each client tier maps to exactly one limit formula:
    STANDARD: score * 0.5
    PREMIUM:  score * 0.75 + income * 0.1
    VIP:      score + income * 0.2

Strategies hold no mutable state, so one instance per tier is shared by
every analysis.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping

from credit_sync.domain.entities import ClientTier
from credit_sync.domain.exceptions import InvalidArgumentException


class LimitStrategy(ABC):
    """Computes a credit limit from income and score."""

    @abstractmethod
    def calculate_limit(self, income: float, score: float) -> float:
        ...


@dataclass(frozen=True)
class StandardLimitStrategy(LimitStrategy):
    score_factor: float = 0.5

    def calculate_limit(self, income: float, score: float) -> float:
        return score * self.score_factor


@dataclass(frozen=True)
class PremiumLimitStrategy(LimitStrategy):
    score_factor: float = 0.75
    income_factor: float = 0.1

    def calculate_limit(self, income: float, score: float) -> float:
        return score * self.score_factor + income * self.income_factor


@dataclass(frozen=True)
class VipLimitStrategy(LimitStrategy):
    score_factor: float = 1.0
    income_factor: float = 0.2

    def calculate_limit(self, income: float, score: float) -> float:
        return score * self.score_factor + income * self.income_factor


LIMIT_STRATEGIES: Mapping[ClientTier, LimitStrategy] = {
    ClientTier.STANDARD: StandardLimitStrategy(),
    ClientTier.PREMIUM: PremiumLimitStrategy(),
    ClientTier.VIP: VipLimitStrategy(),
}


def get_limit_strategy(tier: ClientTier) -> LimitStrategy:
    """
    Select the limit strategy for a client tier.

    Raises:
        InvalidArgumentException: If the tier has no strategy
    """
    try:
        return LIMIT_STRATEGIES[tier]
    except KeyError:
        raise InvalidArgumentException(f"Unknown client tier: {tier!r}") from None
