"""CLI renderer using Rich library.

Maps plan row statuses to semantic styles and renders them to the terminal.
"""

from rich import box
from rich.console import Console
from rich.table import Table

from ..core.plan import PresenterPlan
from ..presenters.protocol import VerbosityLevel
from .base import BaseRenderer


class CLIRenderer(BaseRenderer):
    """
    Renders a presenter plan as a Rich table.

    Status -> semantic style class -> Rich markup:
    - run -> success -> green
    - unresolved -> warning -> yellow
    - excluded -> muted -> dim
    """

    STATUS_STYLE = {
        "run": "success",
        "unresolved": "warning",
        "excluded": "muted",
    }

    # Semantic style class -> Rich markup color
    STYLE_MAP = {
        "success": "green",
        "error": "red",
        "warning": "yellow",
        "info": "blue",
        "highlight": "bold",
        "muted": "dim",
        "neutral": "",
    }

    def __init__(
        self,
        verbosity: VerbosityLevel = VerbosityLevel.NORMAL,
        color: bool = True,
        console: Console | None = None,
    ):
        super().__init__(verbosity)
        self.console = console or Console(no_color=not color)

    def style_for(self, status: str) -> str:
        """Rich style for a row status."""
        return self.STYLE_MAP[self.STATUS_STYLE.get(status, "neutral")]

    def render_plan(self, plan: PresenterPlan) -> None:
        if self.verbosity == VerbosityLevel.QUIET:
            self.console.print(" ".join(plan.selected_ids))
            return

        self.console.print(f"[bold blue]Presenters for {plan.page_type}[/bold blue]")
        if self.verbosity >= VerbosityLevel.VERBOSE:
            flags = ", ".join(f"{name}={value}" for name, value in plan.flags.items())
            self.console.print(f"[dim]{flags}[/dim]")

        table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Presenter")
        table.add_column("Categories")
        table.add_column("Status")

        position = 0
        for row in plan.filter_by_verbosity(self.verbosity):
            style = self.style_for(row.status)
            if row.status == "excluded":
                index = ""
            else:
                position += 1
                index = str(position)
            table.add_row(
                index,
                row.presenter_id,
                ", ".join(row.categories) or "-",
                f"[{style}]{row.status}[/{style}]" if style else row.status,
            )

        self.console.print(table)
