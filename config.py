"""
config.py: konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks SYMATH_.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Ewaluacja: liczba cyfr po przecinku wyniku i precyzja kontekstu Decimal
    eval_scale: int = Field(default=10, ge=0)
    eval_precision: int = Field(default=50, ge=1)

    # Formatter: cyfry po przecinku dla literałów dziesiętnych
    display_places: int = Field(default=4, ge=0)

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "Symath"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="SYMATH_", env_file=".env", extra="ignore")
