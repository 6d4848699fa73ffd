"""Terminal layout of the board using rich."""
from __future__ import annotations

from typing import Iterable

from rich import box
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from worldclock.display import HEADING, BoardCell
from worldclock.icons import glyph


def render_cell(cell: BoardCell) -> Panel:
    body = Text(justify="center")
    body.append(f"{cell.time}\n", style="bold white")
    body.append(f"{glyph(cell.icon)} {cell.temperature_label}\n", style="bright_white")
    body.append(cell.condition, style="dim")
    return Panel(
        body,
        title=cell.city.upper(),
        box=box.ROUNDED,
        border_style="yellow",
        width=28,
    )


def render_board(cells: Iterable[BoardCell]) -> Panel:
    return Panel(
        Columns([render_cell(cell) for cell in cells], equal=True),
        title=Text(HEADING.upper(), style="bold yellow"),
        box=box.DOUBLE,
        border_style="cyan",
    )


def render_text(cells: Iterable[BoardCell], width: int = 100) -> str:
    """Plain-text frame, used when output is not an interactive terminal."""
    console = Console(width=width, color_system=None, force_terminal=False)
    with console.capture() as capture:
        console.print(render_board(cells))
    return capture.get()


__all__ = ["render_board", "render_cell", "render_text"]
