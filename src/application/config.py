"""Runtime configuration loaded from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class Settings:
    """Settings for a single solver run."""

    input_path: str = "input"
    log_level: str = "INFO"
    output_format: str = "text"


def load_settings() -> Settings:
    """Load settings from a .env file and environment variables."""
    load_dotenv()

    output_format = os.getenv("HOMEWORK_OUTPUT_FORMAT", "text").lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"HOMEWORK_OUTPUT_FORMAT must be one of {OUTPUT_FORMATS}, got {output_format!r}"
        )

    return Settings(
        input_path=os.getenv("HOMEWORK_INPUT", "input"),
        log_level=os.getenv("HOMEWORK_LOG_LEVEL", "INFO").upper(),
        output_format=output_format,
    )
