"""
Credit Policy Settings.

Parameters of the credit decision engine. The defaults are the credit
policy and are not read from the environment or a .env file; a different
policy has to be passed explicitly.

Usage:
    from credit_sync.service.credit.settings import credit_settings

    # Or create custom settings for testing
    custom = CreditSettings(min_approval_score=500)
"""

from functools import lru_cache
from typing import Tuple, Type

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from credit_sync.domain.entities import ClientTier


class CreditSettings(BaseSettings):
    """
    Parameters for credit scoring and approval.

    Only constructor arguments are honoured.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
    )

    # === Approval ===
    min_approval_score: float = Field(
        default=300.0,
        ge=0.0,
        description="Scores strictly below this are rejected",
    )

    # === Cash Flow Window ===
    cash_flow_window_months: int = Field(
        default=3,
        ge=1,
        description="Trailing window of transactions counted as income/expenses",
    )

    # === Tier Score Multipliers ===
    standard_score_multiplier: float = Field(
        default=1.0,
        gt=0.0,
        description="Multiplier applied to net cash flow for STANDARD clients",
    )
    premium_score_multiplier: float = Field(
        default=1.1,
        gt=0.0,
        description="Multiplier applied to net cash flow for PREMIUM clients",
    )
    vip_score_multiplier: float = Field(
        default=1.2,
        gt=0.0,
        description="Multiplier applied to net cash flow for VIP clients",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)

    def score_multiplier(self, tier: ClientTier) -> float:
        """Get the score multiplier for a client tier."""
        if tier == ClientTier.VIP:
            return self.vip_score_multiplier
        elif tier == ClientTier.PREMIUM:
            return self.premium_score_multiplier
        return self.standard_score_multiplier


@lru_cache
def get_credit_settings() -> CreditSettings:
    """Get cached credit settings instance."""
    return CreditSettings()


credit_settings = get_credit_settings()
