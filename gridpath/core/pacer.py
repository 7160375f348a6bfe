import time
from dataclasses import dataclass, field
from typing import Callable, Dict

from gridpath.config import STEP_DELAYS_MS


@dataclass
class Pacer:
    """Delays inserted before each step so grid mutations become visible frames.

    Delays are keyed by step kind: an algorithm name, or "path" for
    final-path marking. scale=0 turns pacing off.
    """

    delays_ms: Dict[str, float] = field(default_factory=lambda: dict(STEP_DELAYS_MS))
    scale: float = 1.0
    sleep: Callable[[float], None] = time.sleep

    def delay_for(self, kind: str) -> float:
        """Seconds to wait before a step of this kind."""
        return max(0.0, self.delays_ms.get(kind, 0.0) * self.scale) / 1000.0

    def pause(self, kind: str) -> None:
        seconds = self.delay_for(kind)
        if seconds > 0:
            self.sleep(seconds)
