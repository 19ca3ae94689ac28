"""
Тесты для Pipeline и Result Assembler

Проверяет:
1. Конкретные сценарии: payload ComputationResult (rank, RREF, подпространства)
2. Конфигурацию (лимиты, пустые ячейки, проверка выхода)
3. Таксономию ошибок (ParseError, DimensionError, InternalInvariantError)
4. Best-effort typesetting: сбой рендеринга не меняет числовые поля
5. JSON-in / JSON-out (compute_request)
6. Логирование
"""

import logging

import pytest

from fourspaces import (
    DimensionError,
    EngineConfig,
    FourSpacesEngine,
    InternalInvariantError,
    MatrixInputError,
    ParseError,
    compute_fundamental_subspaces,
)
from fourspaces.core.contracts import validate_computation_result
from fourspaces.core.domain.matrix import RationalMatrix
from fourspaces.core.errors import DivisionByZero
from fourspaces.core.math.rational import Rational
from fourspaces.engine import assembler as assembler_module
from fourspaces.engine import pipeline as pipeline_module
from fourspaces.engine.assembler import ResultAssembler
from fourspaces.engine.examples import EXAMPLE_MATRICES
from fourspaces.engine.subspaces import extract_fundamental_subspaces

from tests.unit.matrices import PROPERTY_MATRICES


@pytest.fixture
def engine() -> FourSpacesEngine:
    return FourSpacesEngine()


def _vec(*entries: str) -> str:
    return "\\begin{bmatrix} " + " \\\\ ".join(entries) + " \\end{bmatrix}"


# =============================================================================
# ТЕСТЫ: Сценарии
# =============================================================================


class TestScenarios:
    def test_identity_3x3(self, engine):
        payload = engine.compute([["1", "0", "0"], ["0", "1", "0"], ["0", "0", "1"]]).to_dict()

        assert payload["matrix"] == {"rows": 3, "cols": 3}
        assert payload["rank"] == 3
        assert payload["rref"]["pivots"] == [0, 1, 2]
        assert payload["rref"]["latex"] == (
            "\\begin{bmatrix} 1 & 0 & 0 \\\\ 0 & 1 & 0 \\\\ 0 & 0 & 1 \\end{bmatrix}"
        )
        assert payload["null_space"]["dimension"] == 0
        assert payload["null_space"]["latex"] == []
        assert payload["column_space"]["latex"] == [
            _vec("1", "0", "0"),
            _vec("0", "1", "0"),
            _vec("0", "0", "1"),
        ]

    def test_zero_2x2(self, engine):
        payload = engine.compute([["0", "0"], ["0", "0"]]).to_dict()

        assert payload["rank"] == 0
        assert payload["rref"]["pivots"] == []
        assert payload["null_space"]["dimension"] == 2
        assert payload["null_space"]["latex"] == [_vec("1", "0"), _vec("0", "1")]
        assert payload["column_space"]["dimension"] == 0
        assert payload["dimension_check"] == {"rank_plus_nullity": 2, "rank_plus_left_nullity": 2}

    def test_rank_one_2x2(self, engine):
        payload = engine.compute([["1", "2"], ["2", "4"]]).to_dict()

        assert payload["rank"] == 1
        assert payload["rref"]["latex"] == "\\begin{bmatrix} 1 & 2 \\\\ 0 & 0 \\end{bmatrix}"
        assert payload["rref"]["pivots"] == [0]
        assert payload["null_space"]["latex"] == [_vec("-2", "1")]
        assert payload["column_space"]["latex"] == [_vec("1", "2")]
        assert payload["dimension_check"]["rank_plus_nullity"] == 2

    def test_wide_2x3(self, engine):
        payload = engine.compute([["1", "0", "1"], ["0", "1", "1"]]).to_dict()

        assert payload["rank"] == 2
        assert payload["rref"]["pivots"] == [0, 1]
        assert payload["null_space"]["latex"] == [_vec("-1", "-1", "1")]
        assert payload["row_space"]["latex"] == [_vec("1", "0", "1"), _vec("0", "1", "1")]
        assert payload["dimension_check"] == {"rank_plus_nullity": 3, "rank_plus_left_nullity": 2}
        assert payload["left_null_space"]["dimension"] == 0

    def test_fraction_rendering(self, engine):
        payload = engine.compute([["1/2", "1/3"]]).to_dict()
        assert payload["null_space"]["latex"] == [_vec("-\\frac{2}{3}", "1")]

    def test_descriptions_present(self, engine):
        payload = engine.compute([["1", "2"], ["3", "4"], ["5", "6"]]).to_dict()
        assert "R^3" in payload["column_space"]["description"]
        assert "R^2" in payload["row_space"]["description"]
        assert "R^2" in payload["null_space"]["description"]
        assert "R^3" in payload["left_null_space"]["description"]

    def test_numeric_and_text_input_agree(self, engine):
        from_text = engine.compute([["0.5", "1"], ["1", "2"]]).to_dict()
        from_numbers = engine.compute([[0.5, 1], [1, 2]]).to_dict()
        assert from_text == from_numbers

    def test_engine_result_keeps_exact_values(self, engine):
        result = engine.compute([["0.1", "0.2"]])
        assert result.rank == 1
        assert result.spaces.null_space.basis == ((Rational(-2), Rational(1)),)

    def test_convenience_function(self):
        result = compute_fundamental_subspaces([["2", "4"], ["1", "2"]])
        assert result.rank == 1

    def test_input_matrix_not_mutated(self, engine):
        m = RationalMatrix.from_rows([[0, 1], [3, 2]])
        before = m.rows_as_lists()
        engine.compute_matrix(m)
        assert m.rows_as_lists() == before


@pytest.mark.parametrize("grid", PROPERTY_MATRICES)
def test_payload_satisfies_contract(engine, grid):
    payload = engine.compute(grid).to_dict()
    validate_computation_result(payload)
    assert payload["dimension_check"]["rank_plus_nullity"] == payload["matrix"]["cols"]
    assert payload["dimension_check"]["rank_plus_left_nullity"] == payload["matrix"]["rows"]


@pytest.mark.parametrize("example", EXAMPLE_MATRICES, ids=lambda e: e.name)
def test_examples_compute(engine, example):
    payload = engine.compute(example.matrix).to_dict()
    assert payload["matrix"]["rows"] == len(example.matrix)


# =============================================================================
# ТЕСТЫ: Ошибки ввода
# =============================================================================


class TestInputErrors:
    def test_parse_error(self, engine):
        with pytest.raises(ParseError) as exc_info:
            engine.compute([["1", "2"], ["3", "x"]])
        assert exc_info.value.literal == "x"
        assert (exc_info.value.row, exc_info.value.col) == (1, 1)

    def test_zero_denominator(self, engine):
        with pytest.raises(ParseError, match="zero denominator"):
            engine.compute([["1/0"]])

    def test_ragged_rows(self, engine):
        with pytest.raises(DimensionError):
            engine.compute([["1", "2"], ["3"]])

    def test_empty_grid(self, engine):
        with pytest.raises(DimensionError):
            engine.compute([])

    def test_input_errors_share_base(self, engine):
        with pytest.raises(MatrixInputError):
            engine.compute([["?"]])


class TestLargeInputs:
    def test_value_beyond_float_range(self, engine):
        payload = engine.compute([["1e400", "1"], ["2", "3"]]).to_dict()
        assert payload["rank"] == 2
        assert payload["rref"]["latex"] == "\\begin{bmatrix} 1 & 0 \\\\ 0 & 1 \\end{bmatrix}"

    def test_negative_value_beyond_float_range(self, engine):
        assert engine.compute([["2", "3"], ["-1e400", "1"]]).rank == 2

    def test_overlong_cell_is_parse_error(self, engine):
        literal = "1" + "0" * 5000
        with pytest.raises(ParseError) as exc_info:
            engine.compute([["1", literal]])
        assert exc_info.value.literal == literal
        assert (exc_info.value.row, exc_info.value.col) == (0, 1)

    def test_huge_entries_are_rendered(self, engine):
        zeros = "0" * 5000
        result = engine.compute_matrix(RationalMatrix.from_rows([[10**5000, 1]])).result

        assert result.rank == 1
        assert result.column_space.latex == [_vec("1" + zeros)]
        assert result.null_space.latex == [_vec("-\\frac{1}{1" + zeros + "}", "1")]

    def test_plain_fallback_for_huge_entries(self, monkeypatch):
        def broken(vector):
            raise RuntimeError("template broken")

        monkeypatch.setattr(assembler_module, "vector_to_typeset_string", broken)
        spaces = extract_fundamental_subspaces(RationalMatrix.from_rows([[10**5000, 1]]))
        result = ResultAssembler().assemble(spaces)
        assert result.null_space.latex == ["[-1/1" + "0" * 5000 + ", 1]"]


# =============================================================================
# ТЕСТЫ: Конфигурация
# =============================================================================


class TestConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert config.max_rows is None
        assert config.max_cols is None
        assert config.empty_cell_as_zero is True
        assert config.validate_output is True

    def test_dimension_limits(self):
        engine = FourSpacesEngine(EngineConfig(max_rows=2, max_cols=2))
        with pytest.raises(DimensionError):
            engine.compute([["1"], ["2"], ["3"]])
        with pytest.raises(DimensionError):
            engine.compute([["1", "2", "3"]])

    def test_empty_cells(self):
        assert FourSpacesEngine().compute([["", "1"]]).rank == 1
        strict = FourSpacesEngine(EngineConfig(empty_cell_as_zero=False))
        with pytest.raises(ParseError, match="empty cell"):
            strict.compute([["", "1"]])

    def test_output_validation_disabled(self):
        engine = FourSpacesEngine(EngineConfig(validate_output=False))
        assert engine.compute([["1"]]).rank == 1


# =============================================================================
# ТЕСТЫ: Внутренние ошибки
# =============================================================================


class TestInternalFaults:
    def test_division_by_zero_becomes_internal_error(self, engine, monkeypatch):
        def broken_rref(matrix):
            raise DivisionByZero("zero pivot")

        monkeypatch.setattr(pipeline_module, "compute_rref", broken_rref)
        with pytest.raises(InternalInvariantError) as exc_info:
            engine.compute([["1"]])
        assert isinstance(exc_info.value, ArithmeticError)
        assert not isinstance(exc_info.value, MatrixInputError)
        assert isinstance(exc_info.value.__cause__, DivisionByZero)


# =============================================================================
# ТЕСТЫ: Best-effort typesetting
# =============================================================================


class TestTypesettingFallback:
    def test_vector_fallback_keeps_numeric_fields(self, monkeypatch, caplog):
        def broken(vector):
            raise RuntimeError("template broken")

        monkeypatch.setattr(assembler_module, "vector_to_typeset_string", broken)
        spaces = extract_fundamental_subspaces(RationalMatrix.from_rows([[1, 2], [2, 4]]))

        with caplog.at_level(logging.WARNING, logger="fourspaces.engine.assembler"):
            result = ResultAssembler().assemble(spaces)

        assert result.rank == 1
        assert result.null_space.dimension == 1
        assert result.null_space.latex == ["[-2, 1]"]
        assert result.rref.latex == "\\begin{bmatrix} 1 & 2 \\\\ 0 & 0 \\end{bmatrix}"
        assert "typesetting of basis vector failed" in caplog.text

    def test_matrix_fallback(self, monkeypatch):
        def broken(self):
            raise RuntimeError("template broken")

        monkeypatch.setattr(RationalMatrix, "to_typeset_string", broken)
        result = FourSpacesEngine().compute([["1", "1/2"]]).result
        assert result.rref.latex == "[[1, 1/2]]"
        assert result.rref.pivots == [0]


# =============================================================================
# ТЕСТЫ: JSON-in / JSON-out
# =============================================================================


class TestComputeRequest:
    def test_valid_request(self, engine):
        payload = engine.compute_request({"matrix": [["1", 2], [3, "4"]]})
        assert payload["rank"] == 2
        validate_computation_result(payload)

    def test_empty_matrix(self, engine):
        with pytest.raises(DimensionError):
            engine.compute_request({"matrix": []})
        with pytest.raises(DimensionError):
            engine.compute_request({"matrix": [[]]})

    def test_bad_cell_type(self, engine):
        with pytest.raises(ParseError) as exc_info:
            engine.compute_request({"matrix": [["1", True]]})
        assert (exc_info.value.row, exc_info.value.col) == (0, 1)

    def test_missing_matrix(self, engine):
        with pytest.raises(MatrixInputError):
            engine.compute_request({})

    def test_ragged_request(self, engine):
        with pytest.raises(DimensionError):
            engine.compute_request({"matrix": [["1", "2"], ["3"]]})


# =============================================================================
# ТЕСТЫ: Логирование
# =============================================================================


def test_computation_logged(engine, caplog):
    with caplog.at_level(logging.INFO, logger="fourspaces.engine.pipeline"):
        engine.compute([["1", "0", "1"], ["0", "1", "1"]])
    assert "computed 2x3 matrix: rank=2 nullity=1 left_nullity=0" in caplog.text
