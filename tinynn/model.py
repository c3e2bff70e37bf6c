"""Loading a dense network from disk and running a forward pass."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from dataclasses import dataclass

from .activations import relu, softmax

_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
# Separators tolerated between values; NUL bytes may trail rows in some files.
_SKIPPABLE = " \t\r\n\v\f\0"


class ModelLoadError(Exception):
    """Raised when a model directory or one of its files cannot be read."""


@dataclass
class Model:
    """A fully connected network with ReLU hidden layers and a softmax output."""

    input_size: int
    output_size: int
    hidden_layers: int
    layer_sizes: list[int]
    weights: list[list[list[float]]]
    biases: list[list[float]]

    def forward(self, inputs: Sequence[float]) -> list[float]:
        """Run ``inputs`` through every layer and return the output probabilities."""
        if len(inputs) != self.input_size:
            raise ValueError(
                f"expected {self.input_size} inputs, got {len(inputs)}"
            )
        current = [float(v) for v in inputs]
        last = len(self.layer_sizes) - 1
        for index, (rows, biases) in enumerate(zip(self.weights, self.biases)):
            sums = [
                sum(w * x for w, x in zip(row, current)) + bias
                for row, bias in zip(rows, biases)
            ]
            current = [relu(v) for v in sums] if index < last else softmax(sums)
        return current


def read_float_csv(path: str | os.PathLike[str], count: int) -> list[float]:
    """Read exactly ``count`` floats separated by commas and/or whitespace."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise ModelLoadError(f"Could not open file {path}") from exc

    values: list[float] = []
    pos = 0
    while len(values) < count:
        while pos < len(text) and text[pos] in _SKIPPABLE:
            pos += 1
        match = _FLOAT_RE.match(text, pos)
        if match is None:
            raise ModelLoadError(
                f"Failed to read element {len(values)} from {path}"
            )
        values.append(float(match.group()))
        pos = match.end()
        if pos < len(text) and text[pos] == ",":
            pos += 1
    return values


def _read_architecture(path: str) -> tuple[int, int, int, list[int]]:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            tokens = handle.read().split()
    except OSError as exc:
        raise ModelLoadError(f"Could not open architecture file at {path}") from exc

    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ModelLoadError(f"Malformed architecture file at {path}") from exc
    if len(numbers) < 3:
        raise ModelLoadError(f"Incomplete architecture file at {path}")

    input_size, output_size, hidden_layers = numbers[:3]
    if hidden_layers < 0:
        raise ModelLoadError(f"Negative hidden layer count in {path}")
    layer_sizes = numbers[3 : 3 + hidden_layers + 1]
    if len(layer_sizes) != hidden_layers + 1:
        raise ModelLoadError(f"Missing layer sizes in architecture file at {path}")
    if input_size <= 0 or any(size <= 0 for size in layer_sizes):
        raise ModelLoadError(f"Non-positive layer size in {path}")
    return input_size, output_size, hidden_layers, layer_sizes


def load_model(model_path: str | os.PathLike[str]) -> Model:
    """Load a model from a directory holding ``architecture.txt`` and layer CSVs."""
    base = os.fspath(model_path)
    input_size, output_size, hidden_layers, layer_sizes = _read_architecture(
        os.path.join(base, "architecture.txt")
    )

    weights: list[list[list[float]]] = []
    biases: list[list[float]] = []
    prev_size = input_size
    for index, size in enumerate(layer_sizes):
        flat = read_float_csv(
            os.path.join(base, f"layer_{index}_weights.csv"), prev_size * size
        )
        weights.append(
            [flat[row * prev_size : (row + 1) * prev_size] for row in range(size)]
        )
        biases.append(
            read_float_csv(os.path.join(base, f"layer_{index}_biases.csv"), size)
        )
        prev_size = size

    return Model(
        input_size=input_size,
        output_size=output_size,
        hidden_layers=hidden_layers,
        layer_sizes=layer_sizes,
        weights=weights,
        biases=biases,
    )