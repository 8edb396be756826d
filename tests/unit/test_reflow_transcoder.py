"""Unit tests for re-flowing vertically written operands."""

import pytest

from domain.exceptions import TranscodeError
from infrastructure.parsers import GridParser, ReflowTranscoder

EXAMPLE = (
    "123 328  51 64 \n"
    " 45 64  387 23 \n"
    "  6 98  215 314\n"
    "*   +   *   +  \n"
)


@pytest.fixture
def transcoder():
    return ReflowTranscoder(GridParser)


def test_translate_example(transcoder):
    translated = transcoder.translate(EXAMPLE)

    assert translated == (
        "1   369  32 623\n"
        "24  248 581 431\n"
        "356 8   175   4\n"
        "*   +   *   +  "
    )


def test_translated_example_solves_part2(transcoder):
    homework = GridParser.parse(transcoder.translate(EXAMPLE))
    homework.solve()

    assert homework.answers == [8544, 625, 3253600, 1058]
    assert homework.total == 3263827


def test_pads_empty_slots_with_identity(transcoder):
    translated = transcoder.translate("1 2\n3 4\n+ *")

    assert translated == "13 24\n0 1\n+ *"

    homework = GridParser.parse(translated)
    assert homework.solve() == [13, 24]


def test_short_rows_count_as_blank(transcoder):
    translated = transcoder.translate("1 2\n3\n+ *\n")

    assert translated == "13 2 \n0 1\n+ *"


def test_single_row_survives_unchanged(transcoder):
    text = "5 7 9\n+ * +"
    translated = transcoder.translate(text)

    assert translated == text

    original = GridParser.parse(text)
    reflowed = GridParser.parse(translated)
    assert original.solve() == reflowed.solve()


def test_empty_input(transcoder):
    with pytest.raises(TranscodeError, match="input was empty"):
        transcoder.translate("")


@pytest.mark.parametrize("text", ["1 2\n3 4\n", "\n", "1 2\n+ x\n"])
def test_invalid_operator_line(transcoder, text):
    with pytest.raises(TranscodeError, match="operator line"):
        transcoder.translate(text)


def test_too_many_operands_in_column(transcoder):
    with pytest.raises(TranscodeError, match="needs more than 1 operands"):
        transcoder.translate("123\n+  ")


def test_more_columns_than_operators(transcoder):
    with pytest.raises(TranscodeError, match="only 2 operators"):
        transcoder.translate("1 2 3 \n2 4   \n+ *   ")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 2\n+ * ", "1 2\n+ * "),
        ("1 2 \n3 4 \n+ * \n", "13 24\n0 1\n+ * "),
        ("1 2   \n+ *   ", "1 2\n+ *   "),
    ],
)
def test_trailing_blank_columns(transcoder, text, expected):
    assert transcoder.translate(text) == expected


def test_crlf_line_endings(transcoder):
    assert transcoder.translate("1 2\r\n+ *\r\n") == "1 2\n+ *"


def test_only_newline_separates_lines(transcoder):
    # U+2028 is a blank slice inside the row, not a line break
    assert transcoder.translate("1\u20282\n+ *") == "1 2\n+ *"
