# app/repos/json_file_repo.py
import json
from pathlib import Path
from typing import Any, Dict, List

from app.utils.logging import get_logger

logger = get_logger(__name__)


class JsonFileRepo:
    """
    Plik JSON z tablica rekordow, bez metadanych.
    Bledy odczytu i zapisu sa logowane, nie rzucane dalej.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> List[Dict[str, Any]] | None:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.warning(f"Storage file {self.path} does not exist")
            return None
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load {self.path}: {e}")
            return None

        if not isinstance(data, list):
            logger.error(f"Failed to load {self.path}: expected a JSON array, got {type(data).__name__}")
            return None

        #kazdy rekord musi byc obiektem
        if not all(isinstance(record, dict) for record in data):
            logger.error(f"Failed to load {self.path}: every record must be a JSON object")
            return None

        return data

    def save(self, records: List[Dict[str, Any]]) -> bool:
        try:
            self.path.write_text(
                json.dumps(records, ensure_ascii=False, separators=(",", ":")),
                encoding="utf-8",
            )
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save {self.path}: {e}")
            return False
        return True
