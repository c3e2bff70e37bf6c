"""Creating randomly initialised models from a set of size presets."""

from __future__ import annotations

import os
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

_RESET = "\033[0m"
_GREEN = "\033[32m"
_MAGENTA = "\033[35m"

GENERATED_MODEL_NAME = "generated_model"


@dataclass(frozen=True)
class ModelPreset:
    """A named network shape: input size, output size and hidden/output layer sizes."""

    name: str
    input_size: int
    output_size: int
    layer_sizes: tuple[int, ...]

    @property
    def num_layers(self) -> int:
        return len(self.layer_sizes)


PRESETS: tuple[ModelPreset, ...] = (
    ModelPreset("Micro", 16, 4, (8, 4)),
    ModelPreset("Small", 64, 8, (32, 16, 8)),
    ModelPreset("Medium", 128, 16, (64, 32, 32, 16)),
    ModelPreset("Large", 256, 16, (128, 64, 64, 32, 16)),
    ModelPreset("Huge", 1024, 32, (512, 256, 128, 64, 32)),
)


def clear_directory(path: str | os.PathLike[str]) -> None:
    """Remove the entries directly inside ``path``; do nothing if it does not exist."""
    directory = Path(path)
    if not directory.is_dir():
        return
    print(f"Clearing contents of directory '{os.fspath(path)}'...")
    for entry in directory.iterdir():
        try:
            if entry.is_dir() and not entry.is_symlink():
                entry.rmdir()
            else:
                entry.unlink()
        except OSError:
            # Entries that cannot be removed (e.g. non-empty folders) are left alone.
            pass


def _random_values(rng: random.Random, count: int) -> list[str]:
    return [f"{rng.uniform(-1.0, 1.0):f}" for _ in range(count)]


def generate_model(
    preset: ModelPreset,
    directory: str | os.PathLike[str],
    rng: random.Random | None = None,
) -> Path:
    """Write the architecture and random weights/biases of ``preset`` into ``directory``."""
    rng = rng if rng is not None else random.Random()
    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)

    lines = [preset.input_size, preset.output_size, preset.num_layers - 1]
    lines.extend(preset.layer_sizes)
    (target / "architecture.txt").write_text(
        "".join(f"{n}\n" for n in lines), encoding="utf-8"
    )
    print(f"{_GREEN} Saved architecture.txt{_RESET}")

    prev_size = preset.input_size
    for index, size in enumerate(preset.layer_sizes):
        print(f"  - Processing Layer {index} (size: {size})")
        rows = (",".join(_random_values(rng, prev_size)) + "\n" for _ in range(size))
        (target / f"layer_{index}_weights.csv").write_text(
            "".join(rows), encoding="utf-8"
        )
        print(f"{_GREEN} Saved layer_{index}_weights.csv{_RESET}")

        (target / f"layer_{index}_biases.csv").write_text(
            ",".join(_random_values(rng, size)), encoding="utf-8"
        )
        print(f"{_GREEN} Saved layer_{index}_biases.csv{_RESET}")
        prev_size = size
    return target


def _print_menu(presets: Sequence[ModelPreset]) -> None:
    print("\n========================")
    print(f"    {_MAGENTA}Model Generator{_RESET}")
    print("========================")
    print("Please choose a model preset to generate")
    print("Keep in mind that the bigger the model, the more storage it needs:")
    steps = max(len(presets) - 1, 1)
    for index, preset in enumerate(presets):
        red = (255 * index) // steps
        green = 255 - red
        print(
            f"\033[38;2;{red};{green};0m  {index + 1}. {preset.name} "
            f"(Input: {preset.input_size}, Output: {preset.output_size}, "
            f"Layers: {preset.num_layers}){_RESET}"
        )


def _choose(prompt: Callable[[str], str], count: int) -> int:
    while True:
        answer = prompt(f"\nEnter your choice (1-{count}): ")
        try:
            choice = int(answer.split()[0])
        except (ValueError, IndexError):
            continue
        if 1 <= choice <= count:
            return choice


def run_model_generator(
    models_dir: str | os.PathLike[str] = "models",
    prompt: Callable[[str], str] = input,
) -> Path:
    """Ask for a preset and generate it into ``<models_dir>/generated_model``."""
    _print_menu(PRESETS)
    preset = PRESETS[_choose(prompt, len(PRESETS)) - 1]

    parent = Path(models_dir)
    parent.mkdir(parents=True, exist_ok=True)
    target = parent / GENERATED_MODEL_NAME
    clear_directory(target)
    target.mkdir(exist_ok=True)
    print(f"Created directory: {os.fspath(target)}")

    generate_model(preset, target, random.Random())
    print("\nModel generation complete!")
    return target