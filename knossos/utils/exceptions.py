"""
Exception classes for knossos with helpful error messages and user guidance.

Every error raised by the maze core derives from :class:`MazeError`, which
formats a clear description together with the component that raised it, a
suggested action, an error code and optional diagnostic data.

All of these are local, recoverable conditions. The core never clamps or
guesses a corrected value for invalid input; callers decide whether to abort,
retry with different parameters or report the problem.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from knossos.core.coords import Coordinate


class MazeError(Exception):
    """
    Base exception for maze errors with helpful context and suggestions.

    This exception class provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.message = message
        self.component = component or "knossos"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class InvalidDimensionError(MazeError, ValueError):
    """Exception raised when a grid width or height is not a positive integer."""

    def __init__(self, parameter_name: str, provided_value: Any, component: str | None = None):
        self.parameter_name = parameter_name
        self.provided_value = provided_value

        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": repr(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        super().__init__(
            message=f"Invalid maze dimension '{parameter_name}'",
            component=component,
            suggested_action=f"Set {parameter_name} to an integer of at least 1",
            error_code="INVALID_DIMENSION",
            diagnostic_data=diagnostic_data,
        )


class OutOfBoundsError(MazeError, IndexError):
    """Exception raised when a coordinate lies outside the grid extent."""

    def __init__(self, coord: Any, width: int, height: int, component: str | None = None):
        self.coord = coord
        self.width = width
        self.height = height

        diagnostic_data = {
            "coordinate": _format_coord(coord),
            "valid_x": f"[0, {width - 1}]",
            "valid_y": f"[0, {height - 1}]",
        }

        super().__init__(
            message=f"Coordinate {_format_coord(coord)} is outside a {width}x{height} grid",
            component=component,
            suggested_action="Use coordinates with 0 <= x < width and 0 <= y < height",
            error_code="OUT_OF_BOUNDS",
            diagnostic_data=diagnostic_data,
        )


class NotAdjacentError(MazeError, ValueError):
    """Exception raised when a passage is requested between non-adjacent cells."""

    def __init__(self, first: Coordinate, second: Coordinate, component: str | None = None):
        self.first = first
        self.second = second

        diagnostic_data = {
            "first": _format_coord(first),
            "second": _format_coord(second),
            "manhattan_distance": abs(first[0] - second[0]) + abs(first[1] - second[1]),
        }

        super().__init__(
            message=f"Cells {_format_coord(first)} and {_format_coord(second)} are not adjacent",
            component=component,
            suggested_action="Only carve between cells that differ by 1 in exactly one axis",
            error_code="NOT_ADJACENT",
            diagnostic_data=diagnostic_data,
        )


class InvalidStartError(MazeError, ValueError):
    """Exception raised when a generation start coordinate cannot be used."""

    def __init__(
        self,
        start: Any,
        width: int | None = None,
        height: int | None = None,
        component: str | None = None,
        reason: str | None = None,
    ):
        self.start = start

        diagnostic_data: dict[str, Any] = {"start": _format_coord(start)}
        if width is not None and height is not None:
            diagnostic_data["grid_size"] = f"{width}x{height}"

        message = reason or f"Start coordinate {_format_coord(start)} is outside the grid"

        super().__init__(
            message=message,
            component=component,
            suggested_action="Choose a start inside the grid or omit it to use the algorithm default",
            error_code="INVALID_START",
            diagnostic_data=diagnostic_data,
        )


class InvalidSeedError(MazeError, ValueError):
    """Exception raised when a generation seed is not a non-negative integer."""

    def __init__(self, seed: Any, component: str | None = None):
        self.seed = seed

        super().__init__(
            message=f"Invalid seed {seed!r}",
            component=component,
            suggested_action="Use an integer of at least 0, or omit the seed for a random maze",
            error_code="INVALID_SEED",
            diagnostic_data={"provided_value": repr(seed), "provided_type": type(seed).__name__},
        )


class UnreachableGoalError(MazeError):
    """Exception raised when no path connects the start to a requested goal."""

    def __init__(self, start: Coordinate, goal: Coordinate, component: str | None = None):
        self.start = start
        self.goal = goal

        diagnostic_data = {
            "start": _format_coord(start),
            "goal": _format_coord(goal),
        }

        super().__init__(
            message=f"No path from {_format_coord(start)} to {_format_coord(goal)}",
            component=component,
            suggested_action="Verify the grid is connected (Maze.verify()) before pathfinding",
            error_code="UNREACHABLE_GOAL",
            diagnostic_data=diagnostic_data,
        )


class WallSymmetryError(MazeError, ValueError):
    """Exception raised when external wall masks disagree between neighbours."""

    def __init__(self, first: Coordinate, second: Coordinate, component: str | None = None):
        self.first = first
        self.second = second

        super().__init__(
            message=f"Wall between {_format_coord(first)} and {_format_coord(second)} is open on one side only",
            component=component,
            suggested_action="Open or close the shared wall on both cells",
            error_code="WALL_SYMMETRY",
            diagnostic_data={"first": _format_coord(first), "second": _format_coord(second)},
        )


class FrozenGridError(MazeError, RuntimeError):
    """Exception raised when carving into a grid that belongs to an assembled maze."""

    def __init__(self, operation_attempted: str, component: str | None = None):
        self.operation_attempted = operation_attempted

        super().__init__(
            message=f"Cannot perform '{operation_attempted}' on a frozen grid",
            component=component,
            suggested_action="Build a new maze instead of mutating an assembled one",
            error_code="FROZEN_GRID",
            diagnostic_data={"attempted_operation": operation_attempted},
        )


def _format_coord(coord: Any) -> str:
    """Render a coordinate-like value as ``(x, y)`` when possible."""
    try:
        x, y = coord
    except (TypeError, ValueError):
        return repr(coord)
    return f"({x}, {y})"


# Convenience functions for common error scenarios


def validate_dimensions(width: Any, height: Any, component: str | None = None) -> None:
    """Validate that both grid dimensions are positive integers."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidDimensionError(name, value, component=component)


def validate_coordinate(coord: Any, width: int, height: int, component: str | None = None) -> None:
    """Validate that a coordinate lies inside a ``width x height`` grid."""
    try:
        x, y = coord
    except (TypeError, ValueError) as exc:
        raise OutOfBoundsError(coord, width, height, component=component) from exc

    if not (0 <= x < width and 0 <= y < height):
        raise OutOfBoundsError(coord, width, height, component=component)


def validate_seed(seed: Any, component: str | None = None) -> None:
    """Validate that a seed is either None or a non-negative integer."""
    if seed is None:
        return
    if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
        raise InvalidSeedError(seed, component=component)
