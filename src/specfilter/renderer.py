from typing import Any, Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from .config_loader import DEFAULT_DISPLAY
from .scenarios import ScenarioResult


class ConsoleRenderer:
    def __init__(
        self,
        results: list[ScenarioResult],
        *,
        display_config: Optional[dict[str, Any]] = None,
        console: Optional[Console] = None,
    ):
        self.results = results
        self.display = {**DEFAULT_DISPLAY, **(display_config or {})}
        self.theme = Theme(
            {"header": self.display["header_style"], "item": self.display["item_style"]}
        )
        self.console = console if console is not None else Console()

    def render(self) -> None:
        """One header line per scenario, then one line per matching product."""
        with self.console.use_theme(self.theme):
            for result in self.results:
                header, *items = result.lines(bullet=self.display["bullet"])
                self.console.print(Text(header, style="header"))
                for line in items:
                    self.console.print(Text(line, style="item"))
