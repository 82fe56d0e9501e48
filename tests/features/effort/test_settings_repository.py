"""
Tests for the JSON-file settings store.
"""

import json

import pytest

from trailsplit.features.effort import EffortSettings, SettingsRepository
from trailsplit.shared.constants import SETTINGS_KEY


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "prefs" / "settings.json"


class TestSettingsRepository:

    def test_missing_file_gives_defaults(self, store_path):
        assert SettingsRepository(store_path).get() == EffortSettings()

    def test_set_then_get(self, store_path):
        repo = SettingsRepository(store_path)
        repo.set(EffortSettings(fitness_level=4, backpack_weight_kg=8.5))

        loaded = SettingsRepository(store_path).get()
        assert loaded.fitness_level == 4
        assert loaded.backpack_weight_kg == 8.5

    def test_stored_under_fixed_key(self, store_path):
        SettingsRepository(store_path).set(EffortSettings(fitness_level=1))
        data = json.loads(store_path.read_text())
        assert data[SETTINGS_KEY] == {"fitnessLevel": 1, "backpackWeightKg": 15.0}

    def test_other_keys_preserved(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text(json.dumps({"mapZoom": 13}))

        SettingsRepository(store_path).set(EffortSettings())
        data = json.loads(store_path.read_text())
        assert data["mapZoom"] == 13
        assert SETTINGS_KEY in data

    def test_corrupt_file_gives_defaults(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{not json")
        assert SettingsRepository(store_path).get() == EffortSettings()

    def test_invalid_values_give_defaults(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text(json.dumps({SETTINGS_KEY: {"fitnessLevel": 9}}))
        assert SettingsRepository(store_path).get() == EffortSettings()
