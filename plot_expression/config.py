import math
from dataclasses import dataclass

import numpy as np


@dataclass
class SamplingConfig:
    """Horizontal geometry of a plot: the range of x and the number of columns."""
    x_min: float = -2.0
    x_max: float = 2.0
    width: int = 60

    def __post_init__(self):
        self.x_min = float(self.x_min)
        self.x_max = float(self.x_max)
        if not (math.isfinite(self.x_min) and math.isfinite(self.x_max)):
            raise ValueError(f"x bounds must be finite, got [{self.x_min}, {self.x_max}]")
        if int(self.width) != self.width or self.width < 1:
            raise ValueError(f"width must be a positive integer, got {self.width}")
        self.width = int(self.width)

    @property
    def step(self) -> float:
        return (self.x_max - self.x_min) / self.width

    def abscissas(self) -> np.ndarray:
        """The width + 1 column borders, x_min first and x_max last."""
        return self.x_min + np.arange(self.width + 1, dtype=np.float64) * self.step
