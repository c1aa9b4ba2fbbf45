import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict

DEFAULT_ENTER_DELAY = 1000
DEFAULT_EXIT_DELAY = 700

# camelCase spellings accepted alongside the field names
_ALIASES = {
    "enterDelay": "enter_delay",
    "exitDelay": "exit_delay",
}


@dataclass(frozen=True)
class TraversalConfig:
    """Pacing of a run, in milliseconds."""

    enter_delay: float = DEFAULT_ENTER_DELAY
    exit_delay: float = DEFAULT_EXIT_DELAY

    def __post_init__(self):
        for name in ("enter_delay", "exit_delay"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"{name} must be a number, got {value!r}.")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}.")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value!r}.")

    @classmethod
    def from_options(cls, **options: Any) -> "TraversalConfig":
        """Build a config from a platform ``**options`` dict; unknown keys are ignored."""
        values: Dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name in ("enter_delay", "exit_delay") and value is not None:
                values[name] = value
        return cls(**values)
