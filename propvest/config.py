from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "PROPVEST_"}

    # Rental income tax approximation (flat rate, not a tax-law engine)
    rental_tax_rate: Decimal = Decimal("0.28")
    # Share of annual debt service treated as deductible interest
    interest_share_of_debt_service: Decimal = Decimal("0.80")
    # Annual depreciation allowance as a fraction of purchase price
    depreciation_rate: Decimal = Decimal("0.02")

    # Stress-test multipliers
    optimistic_rent_factor: Decimal = Decimal("1.2")
    optimistic_maintenance_factor: Decimal = Decimal("0.9")
    pessimistic_rent_factor: Decimal = Decimal("0.9")
    pessimistic_maintenance_factor: Decimal = Decimal("1.2")

    # App
    log_level: str = "INFO"


settings = Settings()
