from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_LOADED = False


def load_env(candidates: list[Path] | None = None) -> Path | None:
    global _LOADED
    if _LOADED:
        return None
    _LOADED = True

    if candidates is None:
        candidates = [Path.cwd() / ".env", Path(__file__).resolve().parent / ".env"]

    for path in candidates:
        if not path.exists():
            continue
        # Real environment variables win over .env values.
        load_dotenv(dotenv_path=path, override=False)
        logger.debug("Environment loaded from %s", path)
        return path
    return None
