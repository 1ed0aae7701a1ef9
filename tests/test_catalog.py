"""Tests for config/catalog.py — technique registry and lookups.

Covers:
  - All six techniques registered, in catalogue order
  - Strict lookup raises UnknownTechniqueError (no fallback)
  - Non-raising lookup returns None
  - Category and application filters
  - Schema defaults lie inside their bounds
  - Registry is read-only
"""

from __future__ import annotations

import pytest

from echem_simulator.config import (
    TECHNIQUE_CATALOG,
    ParameterSpec,
    find_technique,
    get_technique,
    get_techniques_by_application,
    get_techniques_by_category,
    resolve_technique,
)
from echem_simulator.errors import ConfigurationError, UnknownTechniqueError


class TestRegistry:
    def test_six_techniques(self):
        assert list(TECHNIQUE_CATALOG) == ["cv", "eis", "ca", "dpv", "swv", "lsv"]

    def test_ids_match_keys(self):
        for key, technique in TECHNIQUE_CATALOG.items():
            assert technique.id == key

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            TECHNIQUE_CATALOG["xyz"] = TECHNIQUE_CATALOG["cv"]  # type: ignore[index]

    @pytest.mark.parametrize("technique_id", ["cv", "eis", "ca", "dpv", "swv", "lsv"])
    def test_defaults_within_bounds(self, technique_id):
        technique = get_technique(technique_id)
        for spec in technique.parameter_schema.values():
            assert spec.min <= spec.default <= spec.max

    def test_sensitivity_and_complexity_in_range(self):
        for technique in TECHNIQUE_CATALOG.values():
            assert 1 <= technique.sensitivity <= 10
            assert 1 <= technique.complexity <= 10

    def test_cv_defaults(self, cv):
        defaults = cv.defaults()
        assert defaults["startPotential"] == -0.6
        assert defaults["endPotential"] == 0.4
        assert defaults["scanRate"] == 0.1
        assert defaults["electrodeArea"] == 1.0
        assert defaults["temperature"] == 25.0

    def test_eis_typical_time(self, eis):
        assert eis.time_range.typical == 300


class TestLookups:
    def test_get_known(self):
        assert get_technique("ca").abbreviation == "CA"

    def test_get_unknown_raises(self):
        with pytest.raises(UnknownTechniqueError) as info:
            get_technique("polarography")
        assert info.value.technique_id == "polarography"
        assert info.value.code == "UNKNOWN_TECHNIQUE"
        assert "polarography" in str(info.value)

    def test_unknown_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            get_technique("nope")
        with pytest.raises(KeyError):
            get_technique("nope")

    def test_find_unknown_returns_none(self):
        assert find_technique("nope") is None
        assert find_technique("swv").id == "swv"

    def test_resolve_accepts_descriptor_and_id(self, cv):
        assert resolve_technique(cv) is cv
        assert resolve_technique("cv") is cv

    def test_by_category(self):
        pulse = {t.id for t in get_techniques_by_category("pulse")}
        assert pulse == {"dpv", "swv"}
        voltammetry = {t.id for t in get_techniques_by_category("voltammetry")}
        assert voltammetry == {"cv", "lsv"}
        assert get_techniques_by_category("spectroscopy") == []

    def test_by_application_case_insensitive(self):
        ids = {t.id for t in get_techniques_by_application("DIFFUSION coefficient")}
        assert ids == {"ca"}


class TestParameterSpec:
    def test_default_outside_bounds_rejected(self):
        with pytest.raises(ValueError):
            ParameterSpec(name="Bad", min=0, max=1, default=2)

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValueError):
            ParameterSpec(name="Bad", min=1, max=0, default=0.5)
