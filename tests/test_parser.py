import pytest

from segment_decoder.errors import FormatError
from segment_decoder.parser import InputLine, parse_line, parse_lines, parse_pattern


class TestParsePattern:
    def test_order_independent(self) -> None:
        assert parse_pattern("acedgfb") == parse_pattern("bfcagde")

    def test_reparse_serialization(self) -> None:
        pattern = parse_pattern("fcadb")
        assert parse_pattern(str(pattern)) == pattern


class TestParseLine:
    def test_parse_worked_example(self, worked_example: InputLine) -> None:
        assert len(worked_example.patterns) == 10
        assert len(worked_example.outputs) == 4
        assert worked_example.outputs[0] == parse_pattern("cdfeb")
        assert worked_example.outputs[0] == worked_example.outputs[2]

    def test_outputs_match_sample_patterns(self, worked_example: InputLine) -> None:
        """Outputs are written in a different character order than the samples."""
        for output in worked_example.outputs:
            assert output in worked_example.patterns

    def test_groups_by_length(self, worked_example: InputLine) -> None:
        groups = worked_example.patterns_by_length()
        assert {n: len(ps) for n, ps in groups.items()} == {2: 1, 3: 1, 4: 1, 5: 3, 6: 3, 7: 1}
        assert groups[2] == [parse_pattern("ab")]

    def test_trailing_newline(self) -> None:
        line = parse_line("ab cd | ab dc\n")
        assert line.outputs == (parse_pattern("ab"), parse_pattern("cd"))

    def test_missing_separator(self) -> None:
        with pytest.raises(FormatError, match="separator"):
            parse_line("acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab")

    def test_separator_needs_spaces(self) -> None:
        with pytest.raises(FormatError):
            parse_line("ab cd|ab cd")

    def test_empty_outputs_keep_separator(self) -> None:
        line = parse_line("ab cd | ")
        assert line.patterns == (parse_pattern("ab"), parse_pattern("cd"))
        assert line.outputs == ()

    def test_crlf_terminator(self) -> None:
        line = parse_line("ab | ba\r\n")
        assert line.outputs == (parse_pattern("ab"),)

    def test_invalid_label(self) -> None:
        with pytest.raises(FormatError):
            parse_line("ab xy | ab ab ab ab")

    def test_str_round_trip(self, worked_example: InputLine) -> None:
        assert parse_line(str(worked_example)) == worked_example


class TestParseLines:
    def test_parse_sample(self, sample_records: list[InputLine]) -> None:
        assert len(sample_records) == 10

    def test_skips_blank_lines(self) -> None:
        records = parse_lines(["ab | ab", "", "   ", "cd | cd"])
        assert len(records) == 2

    def test_error_names_line_number(self) -> None:
        with pytest.raises(FormatError, match="line 3"):
            parse_lines(["ab | ab", "cd | cd", "no separator here"])
