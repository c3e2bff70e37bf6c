"""Activation functions used by the network layers."""

from __future__ import annotations

import math
from collections.abc import Iterable


def relu(x: float) -> float:
    """Rectified linear unit: ``x`` when positive, otherwise zero."""
    return x if x > 0 else 0.0


def sigmoid(x: float) -> float:
    """Logistic function, saturating instead of overflowing for large inputs."""
    try:
        return 1.0 / (1.0 + math.exp(-x))
    except OverflowError:
        return 0.0


def softmax(values: Iterable[float]) -> list[float]:
    """Return the softmax of ``values`` as a new list.

    The maximum is subtracted before exponentiation for numerical stability.
    """
    items = list(values)
    if not items:
        raise ValueError("softmax requires at least one value")
    peak = max(items)
    exps = [math.exp(v - peak) for v in items]
    total = sum(exps)
    return [e / total for e in exps]