"""Tests for the curve registry."""

from __future__ import annotations

import pytest

from hilbertspace.hilbert import HilbertSpace
from hilbertspace.registry import CurveRegistry, CurveSpec, SpaceFillingCurve, get_registry


def test_hilbert_registered():
    reg = get_registry()
    assert "hilbert" in reg.names()
    assert reg.get("hilbert").factory is HilbertSpace


def test_create_through_registry():
    space = get_registry().create("hilbert", 8, vertical_compatible=True)
    assert isinstance(space, HilbertSpace)
    assert space.vertical_compatible is True
    assert space.dimensions() == (8, 8)


def test_hilbert_satisfies_protocol():
    assert isinstance(HilbertSpace(2), SpaceFillingCurve)


def test_register_and_get():
    reg = CurveRegistry()
    spec = CurveSpec(name="hilbert", factory=HilbertSpace)
    reg.register(spec)
    assert reg.get("hilbert") is spec
    assert reg.count == 1


def test_duplicate_name_rejected():
    reg = CurveRegistry()
    reg.register(CurveSpec(name="hilbert", factory=HilbertSpace))
    with pytest.raises(ValueError):
        reg.register(CurveSpec(name="hilbert", factory=HilbertSpace))


def test_unknown_name():
    with pytest.raises(KeyError):
        CurveRegistry().create("peano", 9)


def test_names_sorted():
    reg = CurveRegistry()
    reg.register(CurveSpec(name="zorder", factory=HilbertSpace))
    reg.register(CurveSpec(name="hilbert", factory=HilbertSpace))
    assert reg.names() == ["hilbert", "zorder"]
