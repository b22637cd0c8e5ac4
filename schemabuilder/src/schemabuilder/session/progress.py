"""Level progression and the session clock."""

from dataclasses import dataclass
from typing import Optional
from schemabuilder.ir.verdict import ValidationVerdict
from schemabuilder.scenarios.repository import Catalog, UnknownScenarioError, get_problem_set

SET_COMPLETE_MESSAGE = "You have mastered this scenario. Try the next problem set!"


@dataclass(frozen=True)
class LevelAdvance:
    """Where to go after finishing a level."""

    set_id: str
    next_level: Optional[int] = None
    set_complete: bool = False
    message: Optional[str] = None


def next_level(
    set_id: str, current_level: int, catalog: Optional[Catalog] = None
) -> LevelAdvance:
    """
    Determine the level that follows ``current_level`` in a problem set.

    Args:
        set_id: Problem set id
        current_level: Level number just played
        catalog: Catalog to search; defaults to the configured one

    Raises:
        UnknownScenarioError: If the set or ``current_level`` doesn't exist
    """
    problem_set = get_problem_set(set_id, catalog)
    numbers = [s.level for s in problem_set.levels]
    if current_level not in numbers:
        raise UnknownScenarioError(
            f"Problem set '{problem_set.id}' has no level {current_level}"
        )
    position = numbers.index(current_level)
    if position == len(numbers) - 1:
        return LevelAdvance(
            set_id=problem_set.id, set_complete=True, message=SET_COMPLETE_MESSAGE
        )
    return LevelAdvance(set_id=problem_set.id, next_level=numbers[position + 1])


class SessionTimer:
    """Whole-second level clock driven by an external periodic tick."""

    def __init__(self):
        self.elapsed = 0
        self.running = False

    def reset(self) -> None:
        """Restart from zero, e.g. when a level starts or is reset."""
        self.elapsed = 0
        self.running = True

    def pause(self) -> None:
        self.running = False

    def observe(self, verdict: ValidationVerdict) -> None:
        """Stop the clock once a validation passes; failures keep it running."""
        if verdict.passed:
            self.pause()

    def tick(self) -> None:
        if self.running:
            self.elapsed += 1

    def format_elapsed(self) -> str:
        return format_time(self.elapsed)


def format_time(seconds: int) -> str:
    """Render seconds as MM:SS."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"
