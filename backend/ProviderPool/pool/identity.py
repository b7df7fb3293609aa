"""Stable identity for provider configurations."""

import hashlib
import json
from typing import Any, Mapping, Union

from pydantic import ValidationError

from .base import ProviderConfig


def _normalize(config: Union[ProviderConfig, Mapping[str, Any]]) -> dict[str, Any]:
    """Drop unset fields and order the rest by name.

    Mappings go through ProviderConfig validation first so they hash the
    same coerced values the registry stores. Mappings that are not valid
    configs are hashed as given.
    """
    if isinstance(config, ProviderConfig):
        fields = config.model_dump()
    else:
        try:
            fields = ProviderConfig.model_validate(dict(config)).model_dump()
        except (ValidationError, TypeError):
            fields = dict(config)
    return {
        str(key): fields[key]
        for key in sorted(fields, key=str)
        if fields[key] is not None
    }


def generate_id(config: Union[ProviderConfig, Mapping[str, Any]]) -> str:
    """
    Generate the identity hash of a provider configuration.

    Two configurations with the same defined key/value pairs produce the
    same id, whatever order the keys were given in. Fields set to None
    are ignored, so an explicit None and a missing field are equivalent.

    Args:
        config: A ProviderConfig or any mapping of config fields

    Returns:
        Hex SHA-1 digest of the normalized configuration

    Example:
        generate_id({"api_key": "k", "base_url": "b"})
        == generate_id({"base_url": "b", "api_key": "k", "max_retries": None})
    """
    serialized = json.dumps(
        _normalize(config),
        sort_keys=True,
        separators=(",", ":"),
        default=str,
    )
    return hashlib.sha1(serialized.encode("utf-8")).hexdigest()
