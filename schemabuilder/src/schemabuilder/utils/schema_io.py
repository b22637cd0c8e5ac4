"""Utilities for loading and saving a workspace from/to JSON files."""

from pathlib import Path
from pydantic import ValidationError
from schemabuilder.ir.workspace import WorkspaceState


def load_workspace(path: Path) -> WorkspaceState:
    """
    Load a WorkspaceState from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Loaded WorkspaceState

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or isn't a valid workspace
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")

    content = path.read_text(encoding="utf-8").strip()
    if not content:
        raise ValueError(f"Schema file is empty: {path}")

    try:
        return WorkspaceState.model_validate_json(content)
    except ValidationError as e:
        raise ValueError(f"Failed to load schema from {path}: {e}") from e


def save_workspace(state: WorkspaceState, path: Path) -> None:
    """
    Save a WorkspaceState to a JSON file.

    Note:
        Creates parent directories if they don't exist.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
