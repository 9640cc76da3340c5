"""Unit tests for the matrix operations (render, transpose, flatten, sum, multiply)."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from matrix_service.matrix.decoding import decode_and_validate
from matrix_service.matrix.errors import MatrixError, MatrixErrorKind
from matrix_service.matrix.operations import flatten, matrix_sum, multiply, render, transpose, transpose_rows
from matrix_service.matrix.patterns import INT64_MIN
from matrix_service.matrix.schema import Matrix

THREE_BY_THREE = Matrix(rows=[["1", "2", "3"], ["4", "5", "6"], ["7", "8", "9"]])
WITH_LETTER = Matrix(rows=[["1", "b", "3"], ["4", "5", "6"], ["7", "8", "9"]])

SQUARE_GRIDS = [
    [["5"]],
    [["1", "2"], ["3", "4"]],
    [["-3", "0", "12"], ["7", "+8", "-1"], ["100", "2", "9"]],
    [["10", "20", "30", "40"], ["1", "2", "3", "4"], ["-1", "-2", "-3", "-4"], ["0", "0", "0", "1"]],
]


# ===========================================================================
# Concrete 3x3 scenario
# ===========================================================================


class TestThreeByThree:

    def test_echo(self):
        assert render(THREE_BY_THREE) == "1,2,3\n4,5,6\n7,8,9\n"

    def test_invert(self):
        assert render(transpose(THREE_BY_THREE)) == "1,4,7\n2,5,8\n3,6,9\n"

    def test_flatten(self):
        assert flatten(THREE_BY_THREE) == "1,2,3,4,5,6,7,8,9\n"

    def test_sum(self):
        assert matrix_sum(THREE_BY_THREE) == 45

    def test_multiply(self):
        assert multiply(THREE_BY_THREE) == 362880


class TestNonIntegerCell:
    """Text operations never coerce, integer operations always do."""

    def test_text_operations_succeed(self):
        assert render(WITH_LETTER) == "1,b,3\n4,5,6\n7,8,9\n"
        assert render(transpose(WITH_LETTER)) == "1,4,7\nb,5,8\n3,6,9\n"
        assert flatten(WITH_LETTER) == "1,b,3,4,5,6,7,8,9\n"

    @pytest.mark.parametrize("operation", [matrix_sum, multiply])
    def test_integer_operations_fail(self, operation):
        with pytest.raises(MatrixError) as exc_info:
            operation(WITH_LETTER)
        assert exc_info.value.kind is MatrixErrorKind.NOT_INTEGER


# ===========================================================================
# Transpose
# ===========================================================================


class TestTranspose:

    def test_two_by_two(self):
        assert transpose(Matrix(rows=[["1", "2"], ["3", "4"]])).rows == (("1", "3"), ("2", "4"))

    def test_rectangular_rows(self):
        """The row swap itself is general: R x C in, C x R out."""
        assert transpose_rows([["1", "2", "3"], ["4", "5", "6"]]) == [["1", "4"], ["2", "5"], ["3", "6"]]

    def test_empty_rows(self):
        assert transpose_rows([]) == []

    def test_input_unchanged(self):
        matrix = Matrix(rows=[["1", "2"], ["3", "4"]])
        transpose(matrix)
        assert matrix.rows == (("1", "2"), ("3", "4"))

    @pytest.mark.parametrize("rows", SQUARE_GRIDS)
    def test_involution(self, rows):
        matrix = Matrix(rows=rows)
        assert transpose(transpose(matrix)) == matrix


# ===========================================================================
# Rendering
# ===========================================================================


class TestRender:

    @pytest.mark.parametrize("rows", SQUARE_GRIDS)
    def test_render_decodes_back(self, rows):
        matrix = Matrix(rows=rows)
        assert decode_and_validate(render(matrix).encode("utf-8")) == matrix

    def test_cells_needing_quotes_decode_back(self):
        matrix = Matrix(rows=[["a,b", 'say "hi"'], ["line\nbreak", ""]])
        assert decode_and_validate(render(matrix).encode("utf-8")) == matrix

    @pytest.mark.parametrize(
        "rows",
        [
            [["a\rb", "c"], ["d", "e"]],
            [["a\r\nb", "c"], ["d", "e"]],
            [['a"b', "c"], ["d", "\r"]],
        ],
    )
    def test_carriage_return_cells_decode_back(self, rows):
        matrix = Matrix(rows=rows)
        assert decode_and_validate(render(matrix).encode("utf-8")) == matrix

    def test_carriage_return_cell_is_quoted(self):
        assert render(Matrix(rows=[["a\rb", "c"], ["d", "e"]])) == '"a\rb",c\nd,e\n'

    def test_comma_cell_is_quoted(self):
        assert render(Matrix(rows=[["a,b", "c"], ["d", "e"]])) == '"a,b",c\nd,e\n'

    def test_single_empty_cell_decodes_back(self):
        matrix = Matrix(rows=[[""]])
        assert decode_and_validate(render(matrix).encode("utf-8")) == matrix

    def test_flatten_single_line(self):
        assert flatten(Matrix(rows=[["1", "2"], ["3", "4"]])) == "1,2,3,4\n"


# ===========================================================================
# Sum / Multiply
# ===========================================================================


class TestSumAndMultiply:

    def test_one_by_one(self):
        matrix = Matrix(rows=[["5"]])
        assert matrix_sum(matrix) == 5
        assert multiply(matrix) == 5

    def test_zero_cell_product(self):
        assert multiply(Matrix(rows=[["1", "2"], ["0", "4"]])) == 0

    def test_negative_cells(self):
        matrix = Matrix(rows=[["-1", "2"], ["3", "-4"]])
        assert matrix_sum(matrix) == 0
        assert multiply(matrix) == 24

    @pytest.mark.parametrize("rows", SQUARE_GRIDS)
    def test_sum_equals_sum_of_flattened(self, rows):
        matrix = Matrix(rows=rows)
        flattened = [int(cell) for cell in flatten(matrix).strip().split(",")]
        assert matrix_sum(matrix) == sum(flattened)

    def test_sum_overflow_wraps(self):
        half = str(1 << 62)
        assert matrix_sum(Matrix(rows=[[half, half], ["0", "0"]])) == INT64_MIN

    def test_product_overflow_wraps(self):
        assert multiply(Matrix(rows=[[str(1 << 62), "2"], ["1", "1"]])) == INT64_MIN

    def test_product_overflow_wraps_to_zero(self):
        big = str(1 << 32)
        assert multiply(Matrix(rows=[[big, big], ["1", "1"]])) == 0
