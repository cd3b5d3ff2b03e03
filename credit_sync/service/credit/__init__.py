"""
Credit Decision Policy: cash flow, score and tiered limits.
"""

from .settings import CreditSettings, credit_settings
from .cash_flow import CashFlow, aggregate_cash_flow, window_start
from .score import calculate_score
from .limit_strategy import (
    LimitStrategy,
    StandardLimitStrategy,
    PremiumLimitStrategy,
    VipLimitStrategy,
    LIMIT_STRATEGIES,
    get_limit_strategy,
)

__all__ = [
    # Settings
    "CreditSettings",
    "credit_settings",
    # Cash Flow
    "CashFlow",
    "aggregate_cash_flow",
    "window_start",
    # Score
    "calculate_score",
    # Limits
    "LimitStrategy",
    "StandardLimitStrategy",
    "PremiumLimitStrategy",
    "VipLimitStrategy",
    "LIMIT_STRATEGIES",
    "get_limit_strategy",
]
