import enum
from typing import Iterable


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def human_join(items: Iterable[object], conjunction: str = "or") -> str:
    """A, B or C"""
    strs = [str(item) for item in items]
    if len(strs) < 2:
        return "".join(strs)
    return ", ".join(strs[:-1]) + f" {conjunction} {strs[-1]}"
