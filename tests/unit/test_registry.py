"""
test_registry.py - Unit tests for CorridorRegistry
"""

import pytest

from nostro import (
    CorridorDefinitionError, CorridorRegistry, NotFoundError, default_registry,
)

from tests.fake_corridor import make_corridor, with_bank


class TestDefaultRegistry:

    def test_bundled_ids_in_display_order(self, registry):
        assert registry.ids() == ["sgd-gbp", "usd-ngn", "inr-usd", "aed-php", "jpy-mxn"]

    def test_default_registry_is_cached(self):
        assert default_registry() is default_registry()

    def test_first_is_sgd_gbp(self, registry):
        assert registry.first().id == "sgd-gbp"

    def test_len_iter_contains(self, registry):
        assert len(registry) == 5
        assert [c.id for c in registry] == registry.ids()
        assert "jpy-mxn" in registry
        assert "eur-usd" not in registry


class TestLookup:

    def test_get_corridor(self, registry):
        corridor = registry.get_corridor("usd-ngn")
        assert corridor.source_currency == "USD"
        assert corridor.target_currency == "NGN"

    def test_unknown_id_raises(self, registry):
        with pytest.raises(NotFoundError, match="eur-usd"):
            registry.get_corridor("eur-usd")

    def test_empty_registry_first_raises(self):
        with pytest.raises(NotFoundError):
            CorridorRegistry([]).first()


class TestLoadAtomicity:

    def test_one_bad_corridor_rejects_all(self, fx_corridor):
        bad = with_bank(make_corridor(corridor_id="broken"), 0, bic="NOPE")
        with pytest.raises(CorridorDefinitionError) as exc_info:
            CorridorRegistry([fx_corridor, bad])
        assert any("broken" in p for p in exc_info.value.problems)

    def test_duplicate_ids_rejected(self, fx_corridor):
        with pytest.raises(CorridorDefinitionError, match="duplicate"):
            CorridorRegistry([fx_corridor, fx_corridor])

    def test_validation_can_be_skipped(self):
        bad = with_bank(make_corridor(corridor_id="broken"), 0, bic="NOPE")
        registry = CorridorRegistry([bad], validate=False)
        assert registry.get_corridor("broken").banks[0].bic == "NOPE"

    def test_insertion_order_kept(self, synthetic_registry):
        assert synthetic_registry.ids() == ["test-corridor", "flat"]
