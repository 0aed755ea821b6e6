"""Demonstration settings: defaults, validation, YAML loading."""
from __future__ import annotations

import numbers
from dataclasses import asdict, dataclass, fields

import yaml

from biasvariance.constants import (
    DEFAULT_HIGH_DEGREE, DEFAULT_MAX_DEGREE, DEFAULT_N, DEFAULT_N_REPEATS,
    DEFAULT_NOISE_SD, DEFAULT_SEED, DEFAULT_TRUE_FUNCTION, DEFAULT_X_RANGE,
)


@dataclass
class DemoConfig:
    """Everything needed to synthesize the samples used by every step."""

    seed: int = DEFAULT_SEED
    n: int = DEFAULT_N
    noise_sd: float = DEFAULT_NOISE_SD
    x_min: float = DEFAULT_X_RANGE[0]
    x_max: float = DEFAULT_X_RANGE[1]
    true_function: str = DEFAULT_TRUE_FUNCTION
    max_degree: int = DEFAULT_MAX_DEGREE
    high_degree: int = DEFAULT_HIGH_DEGREE
    n_repeats: int = DEFAULT_N_REPEATS
    same_x: bool = True

    def validate(self) -> "DemoConfig":
        from biasvariance.data_gen import TRUE_FUNCTIONS

        for name in ("seed", "n", "max_degree", "high_degree", "n_repeats"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in ("noise_sd", "x_min", "x_max"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{name} must be a number, got {value!r}")
        if not isinstance(self.same_x, bool):
            raise ValueError(f"same_x must be true or false, got {self.same_x!r}")

        if self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")
        if self.n < 2:
            raise ValueError(f"n must be at least 2, got {self.n}")
        if self.noise_sd < 0:
            raise ValueError(f"noise_sd must be non-negative, got {self.noise_sd}")
        if self.x_min >= self.x_max:
            raise ValueError(f"x_min ({self.x_min}) must be below x_max ({self.x_max})")
        if self.true_function not in TRUE_FUNCTIONS:
            raise ValueError(
                f"Unknown true_function {self.true_function!r}; "
                f"choose one of {sorted(TRUE_FUNCTIONS)}"
            )
        if self.max_degree < 0:
            raise ValueError(f"max_degree must be non-negative, got {self.max_degree}")
        if not 0 <= self.high_degree <= self.max_degree:
            raise ValueError(
                f"high_degree must lie in [0, {self.max_degree}], got {self.high_degree}"
            )
        if self.n_repeats < 2:
            raise ValueError(f"n_repeats must be at least 2, got {self.n_repeats}")
        # decomposition repeats draw seeds up to seed + 1000 + n_repeats
        if self.seed + 1000 + self.n_repeats >= 2 ** 32:
            raise ValueError(
                f"seed ({self.seed}) plus n_repeats ({self.n_repeats}) is too large for the random generator"
            )
        return self

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(path: str | None = None) -> DemoConfig:
    """Read a YAML mapping and overlay it on the defaults."""
    if path is None:
        return DemoConfig().validate()

    with open(path, "r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must contain a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(DemoConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {unknown}")

    return DemoConfig(**raw).validate()
