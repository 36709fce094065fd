"""Contract tests pinning the public surface and the variant structure."""

from __future__ import annotations

import dataclasses
import inspect

import pytest

import twofold
from twofold import UNIT, Error, Ok, Result, Unit, is_unit


class TestPublicSurface:
    """The package exports a small, curated API."""

    @pytest.mark.contract
    def test_all_is_curated(self):
        expected = {
            "UNIT",
            "Config",
            "ConfigurationError",
            "Error",
            "InvalidStateError",
            "Ok",
            "Result",
            "TwofoldError",
            "Unit",
            "configure",
            "get_config",
            "is_unit",
            "reset_config",
        }
        actual = set(twofold.__all__)
        assert actual == expected, (
            f"Public surface mismatch. Extra: {sorted(actual - expected)}; "
            f"Missing: {sorted(expected - actual)}"
        )
        for name in expected:
            assert hasattr(twofold, name)

    @pytest.mark.contract
    def test_version_is_a_string(self):
        assert isinstance(twofold.__version__, str)


class TestVariantStructure:
    """Result is a closed union of exactly two frozen variants."""

    @pytest.mark.contract
    def test_result_is_abstract(self):
        assert inspect.isabstract(Result)

    @pytest.mark.contract
    def test_variants_share_the_result_base(self):
        assert issubclass(Ok, Result)
        assert issubclass(Error, Result)
        assert not issubclass(Ok, Error)
        assert not issubclass(Error, Ok)

    @pytest.mark.contract
    @pytest.mark.parametrize("variant", [Ok, Error])
    def test_variants_are_frozen_slotted_dataclasses(self, variant):
        params = variant.__dataclass_params__
        assert params.frozen is True
        assert [f.name for f in dataclasses.fields(variant)] == ["value"]
        assert not hasattr(variant(1), "__dict__")

    @pytest.mark.contract
    @pytest.mark.parametrize("variant", [Ok, Error])
    def test_variants_are_final(self, variant):
        assert getattr(variant, "__final__", False) is True


class TestUnitMarker:
    """UNIT is the only value of the unit type."""

    @pytest.mark.contract
    def test_unit_has_a_single_member(self):
        assert list(Unit) == [UNIT]

    @pytest.mark.unit
    def test_is_unit(self):
        assert is_unit(UNIT)
        assert not is_unit(None)
        assert not is_unit("unit")

    @pytest.mark.unit
    def test_repr(self):
        assert repr(UNIT) == "UNIT"
