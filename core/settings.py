"""Window defaults read from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_WINDOW_SIZE = 17

_ENV_FILE = Path(".env")


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class WindowSettings:
    """Default window parameters for the command line."""

    size: int = DEFAULT_WINDOW_SIZE
    step: Optional[int] = None

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "WindowSettings":
        """
        Build settings from WINDOW_SIZE and WINDOW_STEP.

        Variables already present in the process environment win over the
        values of the .env file.
        """
        env_file = env_file or _ENV_FILE
        if env_file.exists():
            load_dotenv(env_file)

        return cls(
            size=_int_from_env("WINDOW_SIZE", DEFAULT_WINDOW_SIZE),
            step=_int_from_env("WINDOW_STEP", None),
        )
