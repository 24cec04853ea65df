# rich-based rendering of explored nodes
# src/pathfinding/render.py
"""
Terminal rendering of a search for debugging.

Draws one horizontal layer (fixed y) of the lattice as a character grid
using `rich`:

    S  start          G  goal
    *  path cell      .  explored cell
       (blank) never materialised

Cells of other layers are ignored; a path that climbs or drops shows
only where it crosses the chosen layer.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Set, Tuple

from rich.panel import Panel
from rich.text import Text

from .node import Coord, PathNode

_EXPLORED = "."
_PATH = "*"
_START = "S"
_GOAL = "G"

_STYLES = {
    _EXPLORED: "dim",
    _PATH: "bold green",
    _START: "bold cyan",
    _GOAL: "bold magenta",
}


def _bounds(cells: Iterable[Tuple[int, int]]) -> Optional[Tuple[int, int, int, int]]:
    xs, zs = [], []
    for x, z in cells:
        xs.append(x)
        zs.append(z)
    if not xs:
        return None
    return min(xs), max(xs), min(zs), max(zs)


def render_layer(
    explored: Iterable[PathNode],
    path: Sequence[PathNode],
    y: int,
    *,
    start: Optional[Coord] = None,
    goal: Optional[Coord] = None,
) -> Text:
    """
    Build a rich Text grid of layer y.

    Rows are z (growing downward), columns are x (growing rightward).
    """
    explored_cells: Set[Tuple[int, int]] = {(n.x, n.z) for n in explored if n.y == y}
    path_cells: Set[Tuple[int, int]] = {(n.x, n.z) for n in path if n.y == y}

    marks = {}
    for cell in explored_cells:
        marks[cell] = _EXPLORED
    for cell in path_cells:
        marks[cell] = _PATH
    if start is not None and start[1] == y:
        marks[(start[0], start[2])] = _START
    if goal is not None and goal[1] == y:
        marks[(goal[0], goal[2])] = _GOAL

    text = Text()
    bounds = _bounds(marks)
    if bounds is None:
        text.append(f"<nothing explored at y={y}>", style="italic")
        return text

    min_x, max_x, min_z, max_z = bounds
    for z in range(min_z, max_z + 1):
        for x in range(min_x, max_x + 1):
            mark = marks.get((x, z), " ")
            text.append(mark, style=_STYLES.get(mark))
        if z != max_z:
            text.append("\n")

    return text


def render_panel(
    explored: Iterable[PathNode],
    path: Sequence[PathNode],
    y: int,
    *,
    start: Optional[Coord] = None,
    goal: Optional[Coord] = None,
    title: Optional[str] = None,
) -> Panel:
    """render_layer wrapped in a titled Panel."""
    body = render_layer(explored, path, y, start=start, goal=goal)
    return Panel(body, title=title or f"Layer y={y}", border_style="cyan")


__all__ = ["render_layer", "render_panel"]
