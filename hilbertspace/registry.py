"""Curve registry: every 2D space-filling curve registers itself via decorator.

Usage:
    @curve(name="hilbert", description="Hilbert curve over an N×N grid")
    class HilbertSpace:
        def dimensions(self) -> tuple[int, int]: ...
        def map(self, t: int) -> tuple[int, int]: ...
        def map_inverse(self, x: int, y: int) -> int: ...

Adding a new curve = creating one module with the decorator. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class SpaceFillingCurve(Protocol):
    """What every curve exposes: a bijection between indices and grid cells."""

    def dimensions(self) -> tuple[int, int]: ...

    def map(self, t: int) -> tuple[int, int]: ...

    def map_inverse(self, x: int, y: int) -> int: ...


@dataclass
class CurveSpec:
    name: str
    factory: Callable[..., SpaceFillingCurve]
    description: str = ""


class CurveRegistry:
    """Singleton registry of all curves."""

    def __init__(self) -> None:
        self._curves: dict[str, CurveSpec] = {}

    def register(self, spec: CurveSpec) -> None:
        if spec.name in self._curves:
            raise ValueError(f"Duplicate curve name: {spec.name}")
        self._curves[spec.name] = spec
        logger.debug("Registered curve %s", spec.name)

    def get(self, name: str) -> CurveSpec:
        return self._curves[name]

    def names(self) -> list[str]:
        return sorted(self._curves)

    def create(self, name: str, n: int, **options: Any) -> SpaceFillingCurve:
        """Build curve `name` of order n. Unknown names raise KeyError."""
        return self.get(name).factory(n, **options)

    @property
    def count(self) -> int:
        return len(self._curves)


# Module-level singleton
_registry = CurveRegistry()


def get_registry() -> CurveRegistry:
    return _registry


def curve(*, name: str, description: str = ""):
    """Decorator to register a curve class or factory function."""

    def decorator(factory: Callable[..., SpaceFillingCurve]):
        _registry.register(CurveSpec(name=name, factory=factory, description=description))
        return factory

    return decorator
