"""
Effort settings repository.

Persists EffortSettings in a small JSON key-value file, under the
fixed SETTINGS_KEY, next to whatever other keys the file holds.

Usage:
    repo = SettingsRepository(settings.settings_file)
    effort = repo.get()
    repo.set(effort.model_copy(update={"fitness_level": 4}))
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from trailsplit.shared.constants import SETTINGS_KEY

from .schemas import EffortSettings

logger = logging.getLogger(__name__)


class SettingsRepository:
    """File-backed store for the effort settings object."""

    def __init__(self, path: Path, key: str = SETTINGS_KEY):
        """
        Args:
            path: JSON file holding the key-value store
            key: Key the settings are stored under
        """
        self.path = Path(path)
        self.key = key

    def get(self) -> EffortSettings:
        """
        Load settings.

        Returns defaults when the file or key is missing, or when the
        stored value is unreadable.
        """
        raw = self._read_store().get(self.key)
        if raw is None:
            return EffortSettings()

        try:
            return EffortSettings.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid stored settings in {self.path}: {e}")
            return EffortSettings()

    def set(self, effort: EffortSettings) -> None:
        """Store settings, keeping any other keys in the file."""
        store = self._read_store()
        store[self.key] = effort.model_dump(by_alias=True)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(store, indent=2), encoding="utf-8")
        logger.info(
            f"Saved settings: fitness={effort.fitness_level}, "
            f"backpack={effort.backpack_weight_kg}kg"
        )

    def _read_store(self) -> dict:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Cannot read settings store {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Settings store {self.path} is not a JSON object")
            return {}
        return data
