from __future__ import annotations
import numpy as np


def check_nonnegative_int(value: int, name: str) -> int:
    if int(value) != value:
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return int(value)


def assert_1d(x: np.ndarray, name: str = "sample") -> None:
    if x.ndim != 1:
        raise ValueError(f"{name} must be 1D, got shape {x.shape}")


def is_sorted(x: np.ndarray) -> bool:
    return bool(np.all(x[:-1] <= x[1:]))
