# File: flattener/core/config/settings.py

import os
from typing import FrozenSet


class Settings:
    # --- Logging ---
    LOG_LEVEL: str = os.getenv("FLATTENER_LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("FLATTENER_LOG_FORMAT", "%(message)s")

    # --- Confirmation Prompt ---
    # Comma separated, compared case-insensitively
    CONFIRM_ANSWERS_RAW: str = os.getenv("FLATTENER_CONFIRM_ANSWERS", "y,yes")

    @property
    def CONFIRM_ANSWERS(self) -> FrozenSet[str]:
        return frozenset(
            answer.strip().casefold()
            for answer in self.CONFIRM_ANSWERS_RAW.split(",")
            if answer.strip()
        )


settings = Settings()
