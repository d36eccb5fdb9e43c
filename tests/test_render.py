from segment_decoder.aggregate import PuzzleResult, decode_lines
from segment_decoder.render import format_decoded, format_result, render_digits


class TestRenderDigits:
    def test_eight(self) -> None:
        assert render_digits([8]) == "\n".join([
            " --",
            "|  |",
            " --",
            "|  |",
            " --",
        ])

    def test_one(self) -> None:
        assert render_digits([1]) == "\n".join([
            "",
            "   |",
            "",
            "   |",
            "",
        ])

    def test_side_by_side(self) -> None:
        rows = render_digits([4, 7]).split("\n")
        assert rows[0] == "      --"
        assert rows[1] == "|  |    |"
        assert rows[2] == " --"


class TestFormat:
    def test_format_result(self) -> None:
        result = PuzzleResult(unique_length_count=26, decoded_sum=61229)
        assert format_result(result) == "Part 1 solution 26\nPart 2 solution 61229"

    def test_format_decoded(self, worked_example) -> None:
        text = format_decoded(decode_lines([worked_example])[0])
        first = text.split("\n")[0]
        assert first.startswith("5353  wiring: ")
        assert "d->a" in first
