"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict

from credit_calculator.domain.models import RateConfiguration


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Rates (annual percent)
    base_rate: Decimal = Decimal("15.00")
    insurance_discount: Decimal = Decimal("3.00")
    salary_client_discount: Decimal = Decimal("1.00")

    # Insurance premium added to the principal of insured offers
    insurance_cost: Decimal = Decimal("10000.00")

    # Service
    service_name: str = "credit-calculator"
    log_level: str = "INFO"

    def rate_configuration(self) -> RateConfiguration:
        """Freeze the rate parameters for the calculator"""
        return RateConfiguration(
            base_rate=self.base_rate,
            insurance_discount=self.insurance_discount,
            salary_client_discount=self.salary_client_discount,
            insurance_cost=self.insurance_cost,
        )


settings = Settings()
