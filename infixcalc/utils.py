import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def to_flag(condition: bool) -> int:
    """C-style boolean: 1 for true, 0 for false"""
    return 1 if condition else 0
