"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks ARITHMOS_.
"""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Evaluator
    record_steps: bool = True

    # Jak CLI pokazuje wynik niezdefiniowany: "undefined" albo +inf / -inf / nan
    undefined_policy: Literal["none", "ieee"] = "none"

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "Arithmos"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="ARITHMOS_", env_file=".env", extra="ignore")
