"""
config.py — Application settings read from environment variables.
All variables use the BIGCALC_ prefix.
"""
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # REPL
    prompt: str = ""
    help_text: str = "The program evaluates basic arithmetic expressions"
    farewell: str = "Bye!"

    # Tokenizer: raise on an unrecognized remainder instead of dropping it
    strict_tokens: bool = False

    # Passed to sys.set_int_max_str_digits (0 = no limit)
    int_max_str_digits: int = 0

    model_config = SettingsConfigDict(env_prefix="BIGCALC_", env_file=".env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("int_max_str_digits")
    @classmethod
    def _check_digit_limit(cls, v: int) -> int:
        # sys.set_int_max_str_digits accepts 0 or at least 640
        if v != 0 and v < 640:
            raise ValueError("int_max_str_digits must be 0 or >= 640")
        return v
