# app/domain/id_policy.py
from enum import Enum
from typing import Any, Dict, List


class IdPolicy(str, Enum):
    """
    Sposob wyliczania nastepnego id po wczytaniu pliku.

    COUNT - liczba rekordow + 1. Po usunieciu rekordu id moze sie powtorzyc.
    MAX   - najwyzsze zapisane id + 1, id nigdy nie wraca.
    """

    COUNT = "count"
    MAX = "max"

    def next_id(self, records: List[Dict[str, Any]]) -> int:
        if self is IdPolicy.MAX:
            return max((r.get("id", 0) for r in records), default=0) + 1
        return len(records) + 1
