# Logger/registry.py
from typing import Dict, List

from Memory.Schema import RecordSchema

_SCHEMA_REGISTRY: Dict[str, RecordSchema] = {}


def register_schema(name: str, schema: RecordSchema) -> RecordSchema:
    """
    Register a record schema under a name usable as Record.type in configs.
    Usage:
        register_schema("gaze", RecordSchema((float, float, int), ("x", "y", "blink")))
    """
    name_upper = name.strip().upper()
    if name_upper in _SCHEMA_REGISTRY:
        raise ValueError(f"Schema '{name_upper}' already registered.")
    _SCHEMA_REGISTRY[name_upper] = schema
    return schema


def get_schema(name: str) -> RecordSchema:
    name_upper = name.strip().upper()
    if name_upper not in _SCHEMA_REGISTRY:
        raise KeyError(f"Schema '{name_upper}' not found in registry.")
    return _SCHEMA_REGISTRY[name_upper]


def list_registered_schemas() -> List[str]:
    return list(_SCHEMA_REGISTRY.keys())


register_schema("gaze", RecordSchema((float, float, int), ("x", "y", "blink")))
