"""
Provider Registry

Ordered collection of provider entries keyed by config identity.
Insertion order is kept and used as the iteration and tie-break
order for selection strategies.

Not thread-safe on its own: ProviderPool serializes access.
"""

import logging
from typing import Any, Iterator, Mapping, Optional, Union

from .base import ProviderConfig, ProviderEntry
from .identity import generate_id

logger = logging.getLogger(__name__)


def _as_config(config: Union[ProviderConfig, Mapping[str, Any]]) -> ProviderConfig:
    """Validate a plain mapping into a ProviderConfig."""
    if isinstance(config, ProviderConfig):
        return config
    return ProviderConfig.model_validate(dict(config))


class ProviderRegistry:
    """Mutable, ordered set of ProviderEntry objects."""

    def __init__(self):
        self._entries: list[ProviderEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ProviderEntry]:
        return iter(self._entries)

    def __contains__(self, provider_id: object) -> bool:
        return self.get(provider_id) is not None

    def get(self, provider_id: object) -> Optional[ProviderEntry]:
        """Return the entry with the given id, or None."""
        return next((e for e in self._entries if e.id == provider_id), None)

    def add(self, config: Union[ProviderConfig, Mapping[str, Any]]) -> ProviderEntry:
        """
        Register a configuration.

        Re-adding a configuration whose identity is already present is a
        no-op and returns the existing entry untouched.

        Raises:
            pydantic.ValidationError: If a mapping is not a valid config
        """
        config = _as_config(config)
        provider_id = generate_id(config)

        existing = self.get(provider_id)
        if existing is not None:
            logger.debug(f"Provider {provider_id[:8]} already registered, skipping")
            return existing

        entry = ProviderEntry(id=provider_id, config=config)
        self._entries.append(entry)
        return entry

    def remove(self, provider_id: str) -> bool:
        """Remove an entry. Returns False if the id was unknown."""
        entry = self.get(provider_id)
        if entry is None:
            logger.debug(f"remove: unknown provider {str(provider_id)[:8]}")
            return False
        self._entries.remove(entry)
        return True

    def set_enabled(self, provider_id: str, enabled: bool) -> bool:
        """Set the enabled flag. Returns False if the id was unknown."""
        entry = self.get(provider_id)
        if entry is None:
            logger.debug(f"set_enabled: unknown provider {str(provider_id)[:8]}")
            return False
        entry.enabled = enabled
        return True

    def enable(self, provider_id: str) -> bool:
        return self.set_enabled(provider_id, True)

    def disable(self, provider_id: str) -> bool:
        return self.set_enabled(provider_id, False)

    def available(self) -> list[ProviderEntry]:
        """Entries that are enabled and under their ceiling, in insertion order."""
        return [entry for entry in self._entries if entry.is_available]

    def snapshot(self) -> list[dict[str, Any]]:
        """
        Flatten every entry into a status record.

        Each record holds all config fields followed by id, enabled and
        current_concurrent. Pool fields win over config extras that share
        their name.
        """
        return [
            {
                **entry.config.to_dict(),
                "id": entry.id,
                "enabled": entry.enabled,
                "current_concurrent": entry.current_concurrent,
            }
            for entry in self._entries
        ]
