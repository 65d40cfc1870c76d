import math
from typing import ItemsView, Mapping, Optional

CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "euler": math.e,
    "phi": (1 + math.sqrt(5)) / 2,
    "eulerMascheroni": 0.57721566490153286060,
}


class SymbolTable:
    """Variable name -> value store, seeded with ``CONSTANTS``.

    Constants are ordinary entries: they can be reassigned, and ``reset`` brings them back
    while dropping everything the user defined.
    """

    def __init__(self) -> None:
        self._vars: dict[str, float] = dict(CONSTANTS)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float]) -> "SymbolTable":
        """Seeded table updated with ``mapping``; user values win over constants of the same name"""
        table = cls()
        for name, value in mapping.items():
            table.set(name, value)
        return table

    def get(self, name: str) -> Optional[float]:
        return self._vars.get(name)

    def set(self, name: str, value: float) -> None:
        self._vars[name] = float(value)

    def reset(self) -> None:
        self._vars = dict(CONSTANTS)

    def items(self) -> ItemsView[str, float]:
        return self._vars.items()

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"SymbolTable({self._vars!r})"
