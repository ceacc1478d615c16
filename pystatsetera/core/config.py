import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from pystatsetera.adapters.numpy_random import NumpyRandomSource
from pystatsetera.core.ports.random_source import RandomSource


DEFAULT_SEED: Optional[int] = None
DEFAULT_ALPHA = 0.05
DEFAULT_BOOTSTRAP_ROUNDS = 1000
DEFAULT_LOG_LEVEL = "ERROR"
DEFAULT_LAG = 1
DEFAULT_WINDOW = 20

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Config:
    def __init__(self, path: str):
        """
        Load YAML configuration from the given path.

        Args:
            path: Path to config.yaml, e.g. 'configs/config.yaml'.
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Config file not found: {self.path}")

        with open(self.path, "r") as f:
            self._data: Dict[str, Any] = yaml.safe_load(f) or {}

    def get(self, key: str, default=None):
        """Get a config value by key."""
        return self._data.get(key, default)

    @property
    def seed(self) -> Optional[int]:
        random_props = self._data.get("random", {})
        seed = random_props.get("seed", DEFAULT_SEED)
        if seed is not None and (not isinstance(seed, int) or seed < 0):
            raise ValueError(f"random.seed must be a non negative integer, got {seed!r}")
        return seed

    def random_source(self) -> RandomSource:
        return NumpyRandomSource(self.seed)

    @property
    def alpha(self) -> float:
        edf_props = self._data.get("edf", {})
        alpha = float(edf_props.get("alpha", DEFAULT_ALPHA))
        if not 0 < alpha < 1:
            raise ValueError(f"edf.alpha must be in (0, 1), got {alpha}")
        return alpha

    @property
    def bootstrap_rounds(self) -> int:
        bootstrap_props = self._data.get("bootstrap", {})
        rounds = bootstrap_props.get("rounds", DEFAULT_BOOTSTRAP_ROUNDS)
        if not isinstance(rounds, int) or rounds < 1:
            raise ValueError(f"bootstrap.rounds must be a positive integer, got {rounds!r}")
        return rounds

    @property
    def lag(self) -> int:
        stream_props = self._data.get("stream", {})
        lag = stream_props.get("lag", DEFAULT_LAG)
        if not isinstance(lag, int) or lag < 1:
            raise ValueError(f"stream.lag must be a positive integer, got {lag!r}")
        return lag

    @property
    def window(self) -> int:
        stream_props = self._data.get("stream", {})
        window = stream_props.get("window", DEFAULT_WINDOW)
        if not isinstance(window, int) or window < 1:
            raise ValueError(f"stream.window must be a positive integer, got {window!r}")
        return window

    @property
    def log_level(self) -> str:
        logging_props = self._data.get("logging", {})
        level = str(logging_props.get("level", DEFAULT_LOG_LEVEL)).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        return level
