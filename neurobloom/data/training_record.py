from typing import Dict
from dataclasses import dataclass, field, asdict
import time


@dataclass
class TrainingRecord:
    epoch: int
    step: int

    train_loss: float = 0.0
    test_loss: float = 0.0
    accuracy: float = 0.0
    timestamp: float = field(default_factory=time.time)

    def to_row(self) -> Dict[str, float]:
        return asdict(self)
