"""Scenario repository backed by a JSON catalog."""

from pathlib import Path
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from schemabuilder.ir.scenario import ProblemSet, Scenario
from schemabuilder.config.settings import get_settings
from schemabuilder.config.logging import get_logger

logger = get_logger(__name__)

# Catalog shipped with the package
SCENARIOS_DIR = Path(__file__).resolve().parent
DEFAULT_CATALOG = SCENARIOS_DIR / "catalog.json"

Catalog = Dict[str, ProblemSet]

_cache: Dict[Path, Catalog] = {}


class UnknownScenarioError(LookupError):
    """Raised when a problem set id or level number is not in the catalog."""


class _CatalogFile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    problem_sets: List[ProblemSet] = Field(alias="problemSets")


def load_catalog(path: Optional[Path] = None) -> Catalog:
    """
    Load problem sets from a JSON catalog file.

    Args:
        path: Catalog file; defaults to the packaged catalog

    Returns:
        Problem sets keyed by id, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty, invalid, or repeats an id or level
    """
    catalog_path = Path(path) if path else DEFAULT_CATALOG
    if not catalog_path.exists():
        raise FileNotFoundError(f"Scenario catalog not found: {catalog_path}")

    content = catalog_path.read_text(encoding="utf-8").strip()
    if not content:
        raise ValueError(f"Scenario catalog is empty: {catalog_path}")

    try:
        parsed = _CatalogFile.model_validate_json(content)
    except ValidationError as e:
        raise ValueError(f"Failed to load scenario catalog from {catalog_path}: {e}") from e

    catalog: Catalog = {}
    for problem_set in parsed.problem_sets:
        if problem_set.id in catalog:
            raise ValueError(f"{catalog_path}: duplicate problem set id '{problem_set.id}'")
        levels = [s.level for s in problem_set.levels]
        if len(set(levels)) != len(levels):
            raise ValueError(f"{catalog_path}: duplicate level numbers in '{problem_set.id}'")
        catalog[problem_set.id] = problem_set

    logger.debug(f"Loaded {len(catalog)} problem sets from {catalog_path}")
    return catalog


def get_catalog() -> Catalog:
    """Return the configured catalog, loading it once per path."""
    path = (get_settings().scenarios_file or DEFAULT_CATALOG).resolve()
    if path not in _cache:
        _cache[path] = load_catalog(path)
    return _cache[path]


def list_problem_sets(catalog: Optional[Catalog] = None) -> List[ProblemSet]:
    catalog = get_catalog() if catalog is None else catalog
    return list(catalog.values())


def get_problem_set(set_id: str, catalog: Optional[Catalog] = None) -> ProblemSet:
    catalog = get_catalog() if catalog is None else catalog
    problem_set = catalog.get(set_id)
    if problem_set is None:
        logger.error(f"Unknown problem set: {set_id}")
        raise UnknownScenarioError(
            f"Unknown problem set '{set_id}'. Available: {', '.join(catalog)}"
        )
    return problem_set


def get_scenario(set_id: str, level: int, catalog: Optional[Catalog] = None) -> Scenario:
    """
    Look up one level of a problem set.

    Args:
        set_id: Problem set id, e.g. 'university'
        level: Level number as authored (1-based)
        catalog: Catalog to search; defaults to the configured one

    Raises:
        UnknownScenarioError: If the set or the level doesn't exist
    """
    problem_set = get_problem_set(set_id, catalog)
    for scenario in problem_set.levels:
        if scenario.level == level:
            return scenario
    logger.error(f"Unknown level {level} in problem set {set_id}")
    raise UnknownScenarioError(f"Problem set '{set_id}' has no level {level}")
