"""
Application configuration loaded from environment variables.

All configuration is validated at startup to fail fast on misconfiguration.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with validation.
    
    All settings are loaded from environment variables with the same name.
    Use .env file for local development.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )
    
    # OGM issuance
    ogm_prefix: str = Field(
        default="001",
        pattern=r"^[0-9]{3}$",
        description="3-digit cooperative prefix for structured communications"
    )
    
    # Dividends
    default_withholding_tax_rate: Decimal = Field(
        default=Decimal("0.30"),
        ge=0,
        le=1,
        description="Withholding tax rate used when a period does not set one (0-1)"
    )
    
    # EPC QR beneficiary (the cooperative's own bank account)
    epc_bic: str | None = Field(
        default=None,
        description="BIC of the cooperative's bank account"
    )
    epc_beneficiary_name: str | None = Field(
        default=None,
        description="Beneficiary name printed in payment QR codes"
    )
    epc_iban: str | None = Field(
        default=None,
        description="IBAN receiving share purchase payments"
    )
    
    # QR rendering
    qr_box_size: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Pixel size of a single QR module"
    )
    qr_border: int = Field(
        default=4,
        ge=0,
        le=20,
        description="Quiet zone width in modules"
    )
    
    # Server
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with detailed error messages"
    )
    
    @property
    def has_epc_beneficiary(self) -> bool:
        """Return True when a default payment beneficiary is fully configured."""
        return bool(self.epc_bic and self.epc_beneficiary_name and self.epc_iban)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    
    Settings are loaded once at startup and cached for subsequent calls.
    This ensures consistent configuration across the application lifecycle.
    """
    return Settings()
