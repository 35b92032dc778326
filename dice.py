import random
from typing import Optional


class StandardDice:
    """Two six-sided dice."""

    def __init__(self, seed: Optional[int] = None):
        self.random = random.Random(seed)

    def roll(self) -> int:
        """Roll two dice and return the sum."""
        return self.random.randint(1, 6) + self.random.randint(1, 6)
