"""Bounded record of recent calculations for front ends to display."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Tuple

import pandas as pd

from swu_calculator.config.constants import HISTORY_LIMIT
from swu_calculator.formatting import result_to_dict


@dataclass(frozen=True)
class HistoryEntry:
    name: str
    inputs: Tuple[float, ...]
    result: Any
    timestamp: datetime = field(default_factory=datetime.now)


class CalculationHistory:
    """Keeps the latest ``limit`` calculations, oldest dropped first."""

    def __init__(self, limit: int = HISTORY_LIMIT):
        if limit <= 0:
            raise ValueError(f"History limit must be positive, got {limit}")
        self.limit = limit
        self._entries: deque[HistoryEntry] = deque(maxlen=limit)

    def record(self, name: str, inputs, result) -> HistoryEntry:
        entry = HistoryEntry(name=name, inputs=tuple(inputs), result=result)
        self._entries.append(entry)
        logging.debug("Recorded %s calculation (%d/%d kept)", name, len(self._entries), self.limit)
        return entry

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def to_frame(self) -> pd.DataFrame:
        """One row per entry: name, timestamp, inputs and flattened result fields."""
        if not self._entries:
            return pd.DataFrame(columns=["name", "timestamp", "inputs"])
        records: List[Dict[str, Any]] = []
        for entry in self._entries:
            row: Dict[str, Any] = {"name": entry.name, "timestamp": entry.timestamp, "inputs": entry.inputs}
            row.update(result_to_dict(entry.result))
            records.append(row)
        return pd.DataFrame(records)
