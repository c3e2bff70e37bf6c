"""Discovering model directories and importing external models."""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Callable
from pathlib import Path

_RESET = "\033[0m"
_RED = "\033[31m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"

ARCHITECTURE_FILE = "architecture.txt"


class ModelImportError(Exception):
    """Raised when a model cannot be imported."""


def is_valid_model_dir(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` holds a readable ``architecture.txt``."""
    arch = Path(path) / ARCHITECTURE_FILE
    try:
        with open(arch, "rb"):
            return True
    except OSError:
        return False


def discover_models(models_dir: str | os.PathLike[str] = "models") -> list[str]:
    """Return the paths of valid model directories directly inside ``models_dir``, sorted."""
    base = os.fspath(models_dir)
    try:
        entries = list(os.scandir(base))
    except OSError:
        return []
    return sorted(
        os.path.join(base, entry.name)
        for entry in entries
        if entry.is_dir() and is_valid_model_dir(os.path.join(base, entry.name))
    )


def import_model(
    src_path: str | os.PathLike[str],
    new_name: str,
    models_dir: str | os.PathLike[str] = "models",
) -> Path:
    """Copy the files of the model at ``src_path`` into ``<models_dir>/<new_name>``."""
    if not is_valid_model_dir(src_path):
        raise ModelImportError(f"'{os.fspath(src_path)}' is not a valid model directory")
    if not new_name:
        raise ModelImportError("a name for the imported model is required")

    parent = Path(models_dir)
    parent.mkdir(parents=True, exist_ok=True)
    dest = parent / new_name
    dest.mkdir(exist_ok=True)

    print("Copying model files...")
    for entry in sorted(Path(src_path).iterdir()):
        try:
            shutil.copyfile(entry, dest / entry.name)
        except OSError:
            print(f"{_RED}Failed to copy {entry.name}{_RESET}", file=sys.stderr)
    print(f"{_GREEN}Model '{new_name}' imported successfully!{_RESET}")
    return dest


def _first_token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def run_model_importer(
    models_dir: str | os.PathLike[str] = "models",
    prompt: Callable[[str], str] = input,
) -> Path | None:
    """Interactively import a model; return its new location, or None if the source is invalid."""
    print("\n--- Import External Model ---")
    print("This tool will validate and copy a model folder (exported to our .csv format)")
    print(f"into a managed '{_YELLOW}models/{_RESET}' directory.")

    src_path = _first_token(prompt("\nEnter the path to the source model directory: "))
    if not src_path or not is_valid_model_dir(src_path):
        return None

    new_name = ""
    while not new_name:
        new_name = _first_token(prompt("Enter a new name for this model (no spaces): "))
    return import_model(src_path, new_name, models_dir)