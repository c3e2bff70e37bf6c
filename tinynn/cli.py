"""Interactive command-line front end: generate, import and run models."""

from __future__ import annotations

import argparse
import os
import re
import sys
from collections.abc import Callable, Sequence

from .generator import run_model_generator
from .manager import discover_models, run_model_importer
from .model import ModelLoadError, load_model

_RESET = "\033[0m"
_RED = "\033[31m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_BLUE = "\033[34m"
_MAGENTA = "\033[35m"
_CYAN = "\033[36m"

_RAINBOW = (_RED, _YELLOW, _GREEN, _CYAN, _BLUE, _MAGENTA)

_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_WHITESPACE = " \t\r\n\v\f"

Prompt = Callable[[str], str]


def _leading_floats(text: str):
    """Yield floats from ``text`` until one cannot be read (comma or space separated)."""
    pos = 0
    while True:
        while pos < len(text) and text[pos] in _WHITESPACE:
            pos += 1
        match = _FLOAT_RE.match(text, pos)
        if match is None:
            return
        yield float(match.group())
        pos = match.end()
        if pos < len(text) and text[pos] == ",":
            pos += 1


def load_input_from_file(
    filepath: str | os.PathLike[str], expected_size: int
) -> list[float]:
    """Read up to ``expected_size`` floats from ``filepath``, padding with zeros.

    Raises ``OSError`` if the file cannot be opened.
    """
    with open(filepath, encoding="utf-8", errors="replace") as handle:
        text = handle.read()

    values: list[float] = []
    for value in _leading_floats(text):
        if len(values) >= expected_size:
            break
        values.append(value)

    if len(values) < expected_size:
        print(
            f"{_YELLOW}WARNING: File '{os.fspath(filepath)}' contained fewer elements "
            f"than expected ({len(values)}/{expected_size}). "
            f"Remaining values will be set to 0.{_RESET}",
            file=sys.stderr,
        )
        values.extend([0.0] * (expected_size - len(values)))
    return values


def list_csv_files(directory: str | os.PathLike[str]) -> list[str]:
    """Return the paths of the ``.csv`` files directly inside ``directory``, sorted."""
    base = os.fspath(directory)
    try:
        entries = list(os.scandir(base))
    except OSError:
        return []
    return sorted(
        os.path.join(base, entry.name)
        for entry in entries
        if len(entry.name) > 4 and entry.name.endswith(".csv") and not entry.is_dir()
    )


def _parse_int(answer: str) -> int | None:
    parts = answer.split()
    if not parts:
        return None
    try:
        return int(parts[0])
    except ValueError:
        return None


def _choose(prompt: Prompt, text: str, low: int, high: int) -> int:
    while True:
        choice = _parse_int(prompt(text))
        if choice is not None and low <= choice <= high:
            return choice


def _print_listing(items: Sequence[str]) -> None:
    for index, item in enumerate(items):
        print(f"{_RAINBOW[index % len(_RAINBOW)]}  {index + 1}. {item}{_RESET}")


def _read_inputs(size: int, data_dir: str | os.PathLike[str], prompt: Prompt) -> list[float] | None:
    print("\nChoose input data source:")
    print("  1. Use dummy data (all 1.0s)")
    print(f"  2. Load from a CSV file in '{_YELLOW}data/{_RESET}'")
    source = _choose(prompt, "Enter your choice (1-2): ", 1, 2)

    if source == 1:
        print(f"{_BLUE}Using dummy data...{_RESET}")
        return [1.0] * size

    csv_files = list_csv_files(data_dir)
    if not csv_files:
        print(f"{_RED}No CSV files found in 'data/'.{_RESET}")
        return None
    print("Select an input CSV file:")
    _print_listing(csv_files)
    picked = csv_files[
        _choose(prompt, f"Enter your choice (1-{len(csv_files)}): ", 1, len(csv_files)) - 1
    ]
    print(f"{_BLUE}Loading data from '{picked}'...{_RESET}")
    try:
        return load_input_from_file(picked, size)
    except OSError:
        print(f"{_RED}ERROR: Could not open input file '{picked}'.{_RESET}", file=sys.stderr)
        return None


def run_inference(
    models_dir: str | os.PathLike[str] = "models",
    data_dir: str | os.PathLike[str] = "data",
    prompt: Prompt = input,
) -> list[float] | None:
    """Pick a model and an input, run a forward pass and print the prediction.

    Returns the output probabilities, or None when inference could not run.
    """
    print(f"\n{_CYAN}--- Running Inference ---{_RESET}")

    models = discover_models(models_dir)
    if not models:
        print(
            f"{_RED}No models found. Please generate or import a model first.{_RESET}",
            file=sys.stderr,
        )
        return None

    print("Please select a model to run:")
    _print_listing(models)
    model_path = models[
        _choose(prompt, f"Enter your choice (1-{len(models)}): ", 1, len(models)) - 1
    ]

    try:
        model = load_model(model_path)
    except ModelLoadError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        print(f"{_RED}Failed to load model from '{model_path}'.{_RESET}", file=sys.stderr)
        return None
    print(
        f"{_GREEN}Model loaded successfully{_RESET} "
        f"(Input: {model.input_size}, Output: {model.output_size})."
    )

    inputs = _read_inputs(model.input_size, data_dir, prompt)
    if inputs is None:
        return None

    print(f"{_CYAN}Running forward pass...{_RESET}")
    output = model.forward(inputs)

    print(f"\n{_MAGENTA}--- Prediction Results ---{_RESET}")
    for index, value in enumerate(output):
        red = int((1.0 - value) * 255)
        green = int(value * 255)
        print(f"  Class {index}: \033[38;2;{red};{green};0m\t{value:.6f}{_RESET}")
    print("--------------------------")
    print(f"Sum of probabilities: {sum(output):.6f}")
    print(f"\n{_GREEN}Inference complete.{_RESET}")
    return output


def _print_main_menu() -> None:
    print("\n========================")
    print(f"    {_MAGENTA}TinyNN Main Menu{_RESET}")
    print("========================")
    print(f"  1. {_CYAN}Generate a New Model{_RESET}")
    print(f"  2. {_GREEN}Run Inference on a Model{_RESET}")
    print(f"  3. {_YELLOW}Import External Model{_RESET}")
    print(f"  0. {_RED}Exit{_RESET}")
    print("------------------------")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinynn", description="Generate, import and run small dense networks."
    )
    parser.add_argument("--models-dir", default="models", help="where models are kept")
    parser.add_argument("--data-dir", default="data", help="where input CSV files are kept")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive main menu until the user exits."""
    args = _build_parser().parse_args(argv)

    def prompt(text: str) -> str:
        return input(text)

    try:
        while True:
            _print_main_menu()
            choice = _parse_int(prompt("Enter your choice: "))
            if choice is None:
                print("Invalid input. Please enter a number.")
                continue
            if choice == 1:
                run_model_generator(args.models_dir, prompt)
            elif choice == 2:
                run_inference(args.models_dir, args.data_dir, prompt)
            elif choice == 3:
                run_model_importer(args.models_dir, prompt)
            elif choice == 0:
                print("Exiting. Goodbye!")
                return 0
            else:
                print("Invalid choice. Please try again.")
    except (EOFError, KeyboardInterrupt):
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())