"""Тесты каталога примеров матриц."""

import pytest

from fourspaces.core.math.parsing import MATRIX_MAX_DIMENSION
from fourspaces.engine.examples import EXAMPLE_MATRICES, get_example, list_examples
from fourspaces.engine.pipeline import FourSpacesEngine


def test_names_unique():
    names = [example.name for example in EXAMPLE_MATRICES]
    assert len(names) == len(set(names))


def test_examples_fit_editor_limits():
    for example in EXAMPLE_MATRICES:
        assert 1 <= len(example.matrix) <= MATRIX_MAX_DIMENSION
        assert 1 <= len(example.matrix[0]) <= MATRIX_MAX_DIMENSION


def test_list_examples_payload():
    payload = list_examples()
    assert payload[1] == {"name": "Rank 1 (dependent rows)", "matrix": [["1", "2"], ["2", "4"]]}
    assert len(payload) == len(EXAMPLE_MATRICES)


def test_get_example():
    assert get_example("Zero 2x2").matrix == (("0", "0"), ("0", "0"))


def test_get_unknown_example():
    with pytest.raises(KeyError, match="Unknown example"):
        get_example("Hilbert 9x9")


@pytest.mark.parametrize(
    "name, rank",
    [
        ("Identity 3x3", 3),
        ("Rank 1 (dependent rows)", 1),
        ("Zero 2x2", 0),
        ("Wide 2x3", 2),
        ("Tall 4x2", 2),
        ("Singular 3x3", 2),
        ("Fractions and decimals", 2),
    ],
)
def test_example_ranks(name, rank):
    assert FourSpacesEngine().compute(get_example(name).matrix).rank == rank
