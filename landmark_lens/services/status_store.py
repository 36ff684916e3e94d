from dataclasses import dataclass, field
from typing import List

MAX_LOG_LINES = 200


@dataclass
class StatusStore:
    busy: bool = False
    last_error: str | None = None   # cause of the most recent collapsed failure
    logs: List[str] = field(default_factory=list)

    def set_busy(self, v: bool):
        self.busy = v

    def log(self, msg: str):
        self.logs.append(msg)
        if len(self.logs) > MAX_LOG_LINES:
            self.logs = self.logs[-MAX_LOG_LINES:]
