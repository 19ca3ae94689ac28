"""Каталог примеров матриц для редактора сетки."""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class ExampleMatrix:
    name: str
    matrix: Tuple[Tuple[str, ...], ...]

    def to_dict(self) -> Dict[str, object]:
        return {"name": self.name, "matrix": [list(row) for row in self.matrix]}


EXAMPLE_MATRICES: Tuple[ExampleMatrix, ...] = (
    ExampleMatrix(
        name="Identity 3x3",
        matrix=(("1", "0", "0"), ("0", "1", "0"), ("0", "0", "1")),
    ),
    ExampleMatrix(
        name="Rank 1 (dependent rows)",
        matrix=(("1", "2"), ("2", "4")),
    ),
    ExampleMatrix(
        name="Zero 2x2",
        matrix=(("0", "0"), ("0", "0")),
    ),
    ExampleMatrix(
        name="Wide 2x3",
        matrix=(("1", "0", "1"), ("0", "1", "1")),
    ),
    ExampleMatrix(
        name="Tall 4x2",
        matrix=(("1", "2"), ("3", "4"), ("5", "6"), ("7", "8")),
    ),
    ExampleMatrix(
        name="Singular 3x3",
        matrix=(("1", "2", "3"), ("4", "5", "6"), ("7", "8", "9")),
    ),
    ExampleMatrix(
        name="Fractions and decimals",
        matrix=(("1/2", "0.25", "-3"), ("1", "0.5", "-6"), ("2/3", "1/3", "0")),
    ),
)


def list_examples() -> List[Dict[str, object]]:
    """Payload примеров: [{"name", "matrix"}, ...]."""
    return [example.to_dict() for example in EXAMPLE_MATRICES]


def get_example(name: str) -> ExampleMatrix:
    """
    Raises:
        KeyError: неизвестное имя примера
    """
    for example in EXAMPLE_MATRICES:
        if example.name == name:
            return example
    raise KeyError(f"Unknown example: {name!r}")
