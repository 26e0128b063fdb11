"""
Browser storage state (cookies/localStorage) shared across test sessions.

The browser context is created from ``auth/storageState.json``; the file is
seeded empty before the first run so a context can always be built from it.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from playwright.async_api import BrowserContext

logger = logging.getLogger(__name__)

DEFAULT_AUTH_STATE_PATH = Path("auth") / "storageState.json"
EMPTY_STORAGE_STATE = {"cookies": [], "origins": []}

PathLike = Union[str, Path]


def ensure_storage_state(path: PathLike = DEFAULT_AUTH_STATE_PATH) -> Path:
    """Create an empty storage state file if none exists yet.

    Args:
        path: Location of the storage state JSON

    Returns:
        Path to the (possibly pre-existing) state file
    """
    state_file = Path(path)
    state_file.parent.mkdir(parents=True, exist_ok=True)

    if not state_file.exists():
        state_file.write_text(json.dumps(EMPTY_STORAGE_STATE), encoding="utf-8")
        logger.info("Created empty auth state: %s", state_file)

    return state_file


async def save_storage_state(context: BrowserContext, path: PathLike = DEFAULT_AUTH_STATE_PATH) -> Path:
    """Persist the cookies and origins of a logged-in browser context."""
    state_file = Path(path)
    state_file.parent.mkdir(parents=True, exist_ok=True)
    await context.storage_state(path=str(state_file))
    logger.info("Saved auth state to: %s", state_file)
    return state_file


def clear_storage_state(path: PathLike = DEFAULT_AUTH_STATE_PATH) -> None:
    """Reset the state file to the empty document."""
    state_file = Path(path)
    if state_file.exists():
        state_file.write_text(json.dumps(EMPTY_STORAGE_STATE), encoding="utf-8")
        logger.info("Cleared auth state: %s", state_file)
