"""writer — text renderings of a task list."""

from taskorder.writer.mermaid import draw_mermaid

__all__ = ["draw_mermaid"]
