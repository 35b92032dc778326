"""
Simulation configuration and config-file parsing.
"""

from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Optional, Union

from game_constants import VP_TO_WIN, MAX_RESOURCES_BEFORE_DISCARD

DEFAULT_MAX_ROUNDS = 8192
MIN_ROUNDS = 1
MAX_ROUNDS = 8192


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


@dataclass
class SimulationConfig:
    """
    Tunable parameters for one simulated game.

    Use ``to_dict()`` / ``from_dict()`` for serialization.
    """

    max_rounds: int = DEFAULT_MAX_ROUNDS
    random_seed: Optional[int] = None
    num_players: int = 4
    victory_points_to_win: int = VP_TO_WIN
    discard_threshold: int = MAX_RESOURCES_BEFORE_DISCARD

    def __post_init__(self):
        if self.max_rounds < MIN_ROUNDS:
            raise ValueError("Round limit must be at least 1")
        if not 2 <= self.num_players <= 4:
            raise ValueError("Catan supports 2-4 players")
        if self.victory_points_to_win < 1:
            raise ValueError("Victory point target must be at least 1")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SimulationConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def _parse_turns(raw: str) -> int:
    try:
        turns = int(raw.strip())
    except ValueError:
        raise ConfigError(f"Invalid turns value: {raw.strip()!r}") from None
    if not MIN_ROUNDS <= turns <= MAX_ROUNDS:
        raise ConfigError(f"Turns value must be between {MIN_ROUNDS} and {MAX_ROUNDS}, got: {turns}")
    return turns


def read_max_turns(filename: Union[str, Path]) -> int:
    """
    Read the maximum number of rounds from a config file.

    Blank lines and lines starting with ``#`` are skipped. The first other
    line must be either ``turns: <int>`` or a bare integer.
    """
    try:
        text = Path(filename).read_text()
    except OSError as e:
        raise ConfigError(f"Could not read config file {filename}: {e}") from e

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("turns:"):
            return _parse_turns(line.split(":", 1)[1])
        return _parse_turns(line)

    raise ConfigError("Configuration file does not contain 'turns: <int>'")
