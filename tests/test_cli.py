import io

from segment_decoder.cli import main


class TestMain:
    def test_file_input(self, sample_file, capsys) -> None:
        assert main([str(sample_file)]) == 0
        out = capsys.readouterr().out
        assert out == "Part 1 solution 26\nPart 2 solution 61229\n"

    def test_stdin_input(self, sample_text, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(sample_text))
        assert main([]) == 0
        assert "Part 2 solution 61229" in capsys.readouterr().out

    def test_sat_method(self, sample_file, capsys) -> None:
        assert main(["--method", "sat", str(sample_file)]) == 0
        assert "Part 2 solution 61229" in capsys.readouterr().out

    def test_verify(self, sample_file, capsys) -> None:
        assert main(["--verify", str(sample_file)]) == 0
        assert "Part 1 solution 26" in capsys.readouterr().out

    def test_show(self, sample_file, capsys) -> None:
        assert main(["--show", str(sample_file)]) == 0
        out = capsys.readouterr().out
        assert "8394  wiring:" in out
        assert out.rstrip().endswith("Part 2 solution 61229")

    def test_digit_table(self, capsys) -> None:
        assert main(["--digit-table"]) == 0
        assert "Canonical 7-Segment Digit Table" in capsys.readouterr().out

    def test_missing_separator(self, tmp_path, capsys) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab\n")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: line 1:")

    def test_undecodable_line(self, tmp_path, capsys) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("ab cde | ab\n")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert "Part 1" not in captured.out
        assert "Error:" in captured.err

    def test_missing_file(self, tmp_path, capsys) -> None:
        assert main([str(tmp_path / "nope.txt")]) == 1
        assert "Error:" in capsys.readouterr().err
