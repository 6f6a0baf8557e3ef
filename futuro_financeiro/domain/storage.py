"""JSON file persistence for the simulation history."""

import logging
import os
import tempfile

from pydantic import ValidationError

from futuro_financeiro.schemas.history import SimulationHistory

logger = logging.getLogger(__name__)


def ensure_data_dir(path: str) -> None:
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


def load_history(path: str) -> SimulationHistory:
    """Read the stored history; a missing, empty or corrupt file yields an empty one."""
    if not os.path.exists(path):
        return SimulationHistory()
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw_text = f.read().strip()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read history file %s: %s", path, exc)
        return SimulationHistory()
    if not raw_text:
        return SimulationHistory()
    try:
        return SimulationHistory.model_validate_json(raw_text)
    except ValidationError as exc:
        logger.warning("Discarding unreadable history file %s: %s", path, exc)
        return SimulationHistory()


def save_history(path: str, history: SimulationHistory) -> None:
    """Write to a uniquely named temp file beside ``path``, then swap it in."""
    ensure_data_dir(path)
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=os.path.dirname(path) or ".",
            prefix=os.path.basename(path) + ".",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_path = f.name
            f.write(history.model_dump_json(indent=2))
        os.replace(tmp_path, path)
    finally:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
