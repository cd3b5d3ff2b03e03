"""
Credit Score Calculation.

score = max(0, (income - expenses) * tier multiplier)
"""

from credit_sync.domain.entities import ClientTier

from .settings import CreditSettings, credit_settings


def calculate_score(
    tier: ClientTier,
    income: float,
    expenses: float,
    settings: CreditSettings = credit_settings,
) -> float:
    """
    Calculate a creditworthiness score from net cash flow.

    Args:
        tier: Client tier
        income: Total credits in the window
        expenses: Total debits in the window
        settings: Credit settings (uses defaults if not provided)

    Returns:
        Non-negative score
    """
    base_score = income - expenses
    return max(0.0, base_score * settings.score_multiplier(tier))
