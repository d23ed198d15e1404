# Memory/schema.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Sequence, Tuple

TYPE_NAMES: Dict[str, type] = {
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
    "object": object,
}


@dataclass(frozen=True)
class RecordSchema:
    """
    Fixed shape of one frame record.
    - types: one type per field, used to coerce values in make()
    - names: column names; default f0, f1, ...
    `object` keeps the value untouched.
    """
    types: Tuple[type, ...]
    names: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "types", tuple(self.types))
        if not self.names:
            object.__setattr__(self, "names", tuple(f"f{i}" for i in range(len(self.types))))
        else:
            object.__setattr__(self, "names", tuple(str(n) for n in self.names))
        if len(self.names) != len(self.types):
            raise ValueError(f"RecordSchema: {len(self.names)} names for {len(self.types)} types")

    def __len__(self): return len(self.types)

    @property
    def arity(self) -> int:
        return len(self.types)

    def make(self, values: Sequence[Any]) -> Tuple[Any, ...]:
        if len(values) != self.arity:
            raise ValueError(f"Record expects {self.arity} values, got {len(values)}")
        return tuple(v if t is object else t(v) for t, v in zip(self.types, values))

    @classmethod
    def of(cls, *types: type) -> "RecordSchema":
        return cls(tuple(types))

    @classmethod
    def from_config(cls, fields: Iterable[Any]) -> "RecordSchema":
        """
        fields: list of {name, type} mappings or bare type names, e.g.
          - {name: x, type: float}
          - int
        """
        types, names = [], []
        for i, f in enumerate(fields):
            if isinstance(f, dict):
                type_name = f.get("type", "object")
                names.append(str(f.get("name", f"f{i}")))
            else:
                type_name = f
                names.append(f"f{i}")
            key = str(type_name).strip().lower()
            if key not in TYPE_NAMES:
                raise ValueError(f"Unknown field type '{type_name}' (expected one of {sorted(TYPE_NAMES)})")
            types.append(TYPE_NAMES[key])
        if not types:
            raise ValueError("Record.fields must not be empty")
        return cls(tuple(types), tuple(names))
