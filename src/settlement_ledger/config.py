from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from settlement_ledger.domain.handlers import FeeSchedule


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"

    # Fee schedule, in basis points of the requested amount
    credit_surcharge_bps: int = Field(default=1000, ge=0)
    cash_discount_bps: int = Field(default=1000, ge=0, le=10_000)

    def fee_schedule(self) -> FeeSchedule:
        return FeeSchedule(
            credit_surcharge_bps=self.credit_surcharge_bps,
            cash_discount_bps=self.cash_discount_bps,
        )


settings = Settings()
