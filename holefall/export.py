"""Trial log persistence."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILE = "data.json"


def save_trials(document: Dict[str, Any], path: str = DEFAULT_EXPORT_FILE) -> None:
    """Write an exported `{gameInfo, trials}` document as JSON."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)
    logger.info("Saved %d trials to %s", len(document.get("trials", [])), path)


def load_trials(path: str = DEFAULT_EXPORT_FILE) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        document = json.load(f)
    if not isinstance(document, dict) or "gameInfo" not in document or "trials" not in document:
        raise ValueError(f"{path} is not a trial export")
    return document
