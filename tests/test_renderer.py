import io

import pytest
from rich.console import Console
from rich.errors import MissingStyle

from specfilter.renderer import ConsoleRenderer
from specfilter.scenarios import run_scenarios


def render_text(results, display_config=None):
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    ConsoleRenderer(results, display_config=display_config, console=console).render()
    return buffer.getvalue()


def test_render_default_scenarios(products):
    text = render_text(run_scenarios(products))

    assert text.splitlines() == [
        "Green products (old):",
        " * Apple is green",
        " * Tree is green",
        "Green products (new):",
        " * Apple is green",
        " * Tree is green",
        "Large and blue products:",
        " * House is large and blue",
    ]


def test_render_uses_configured_bullet(products):
    text = render_text(run_scenarios(products)[-1:], display_config={"bullet": "-"})

    assert " - House is large and blue" in text.splitlines()


def test_render_empty_results():
    assert render_text([]) == ""


def test_render_leaves_caller_console_theme_untouched(products):
    console = Console(file=io.StringIO(), color_system=None)

    ConsoleRenderer(run_scenarios(products), console=console).render()

    with pytest.raises(MissingStyle):
        console.get_style("header")


def test_render_matches_scenario_lines(products):
    results = run_scenarios(products)

    expected = [line for r in results for line in r.lines(bullet="+")]
    assert render_text(results, display_config={"bullet": "+"}).splitlines() == expected
