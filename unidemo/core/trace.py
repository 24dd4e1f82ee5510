"""Trace logger recording demo checkpoints."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional


@dataclass
class TraceLogger:
    """Keep timestamped events in memory, optionally appending them to a file."""

    path: Optional[Path] = None
    events: List[str] = field(default_factory=list)

    def log(self, message: str) -> None:
        timestamp = datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
        entry = f"{timestamp} | {message}"
        self.events.append(entry)
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(entry + "\n")
