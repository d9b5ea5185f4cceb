"""
Demo scenarios contrasting the naive filter with specification filtering.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .filtering.engine import filter_items
from .filtering.naive import ProductFilter
from .models.product import Color, Product, Size
from .models.product_specs import ColorSpec, SizeSpec
from .models.specs import AndSpecification

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scenario:
    name: str
    title: str
    label: str
    select: Callable[[list[Product]], list[Product]]


@dataclass(frozen=True)
class ScenarioResult:
    scenario: Scenario
    matches: list[Product]

    def lines(self, bullet: str = "*") -> list[str]:
        """Header line followed by one line per match."""
        out = [f"{self.scenario.title}:"]
        out.extend(f" {bullet} {p.name} is {self.scenario.label}" for p in self.matches)
        return out

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.scenario.name,
            "title": self.scenario.title,
            "matches": [p.name for p in self.matches],
        }


def _green_naive(products: list[Product]) -> list[Product]:
    return ProductFilter().filter_by_color(products, Color.GREEN)


def _green(products: list[Product]) -> list[Product]:
    return filter_items(products, ColorSpec(Color.GREEN))


def _large_blue(products: list[Product]) -> list[Product]:
    spec = AndSpecification(ColorSpec(Color.BLUE), SizeSpec(Size.LARGE))
    return filter_items(products, spec)


DEFAULT_SCENARIOS: tuple[Scenario, ...] = (
    Scenario("green-old", "Green products (old)", "green", _green_naive),
    Scenario("green", "Green products (new)", "green", _green),
    Scenario("large-blue", "Large and blue products", "large and blue", _large_blue),
)

SCENARIOS_BY_NAME: dict[str, Scenario] = {s.name: s for s in DEFAULT_SCENARIOS}


def run_scenarios(
    products: list[Product], scenarios: tuple[Scenario, ...] = DEFAULT_SCENARIOS
) -> list[ScenarioResult]:
    results = []
    for scenario in scenarios:
        matches = scenario.select(products)
        logger.info("Scenario %s matched %d products", scenario.name, len(matches))
        results.append(ScenarioResult(scenario, matches))
    return results
