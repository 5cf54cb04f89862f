"""Plain-text rendering of a board view."""
from __future__ import annotations

from typing import List

from .board import FILTERS, BoardView

BAR_WIDTH = 20
RULE = "-" * 48


def progress_bar(progress: int, width: int = BAR_WIDTH) -> str:
    filled = max(0, min(width, round(progress * width / 100)))
    return "[" + "#" * filled + "." * (width - filled) + f"] {progress}%"


def render_filters(active: str) -> str:
    return " ".join(f"<{f}>" if f == active else f" {f} " for f in FILTERS)


# PUBLIC_INTERFACE
def render_board(view: BoardView, message: str = "") -> str:
    """Return the full text frame for one board view."""
    lines: List[str] = ["Task Manager", RULE]
    if message:
        lines += [message, RULE]

    lines.append(f"{render_filters(view.filter)}    {view.active_count} left / {view.completed_count} done")
    lines.append("")

    if not view.visible:
        lines.append("No tasks yet. Add your first task and get productive!")
    else:
        width = max(len(str(t.id)) for t in view.visible)
        for task in view.visible:
            mark = "x" if task.completed else " "
            lines.append(f"[{mark}] {str(task.id).rjust(width)}  {task.title}")

    lines += ["", "Progress " + progress_bar(view.progress), view.summary]
    return "\n".join(lines)
