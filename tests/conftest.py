import pytest

from segment_decoder.parser import parse_line, parse_lines

WORKED_EXAMPLE = (
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | cdfeb fcadb cdfeb cdbaf"
)

SAMPLE_INPUT = """be cfbegad cbdgef fgaecd cgeb fdcge agebfd fecdb fabcd edb | fdgacbe cefdb cefbgd gcbe
edbfga begcd cbg gc gcadebf fbgde acbgfd abcde gfcbed gfec | fcgedb cgb dgebacf gc
fgaebd cg bdaec gdafb agbcfd gdcbef bgcad gfac gcb cdgabef | cg cg fdcagb cbg
fbegcd cbd adcefb dageb afcb bc aefdc ecdab fgdeca fcdbega | efabcd cedba gadfec cb
aecbfdg fbg gf bafeg dbefa fcge gcbea fcaegb dgceab fcbdga | gecf egdcabf bgf bfgea
fgeab ca afcebg bdacfeg cfaedg gcfdb baec bfadeg bafgc acf | gebdcfa ecba ca fadegcb
dbcfg fgd bdegcaf fgec aegbdf ecdfab fbedc dacgb gdcebf gf | cefg dcbef fcge gbcadfe
bdfegc cbegaf gecbf dfcage bdacg ed bedf ced adcbefg gebcd | ed bcgafe cdgba cbgef
egadfb cdbfeg cegd fecab cgb gbdefca cg fgcdab egfdb bfceg | gbdfcae bgc cg cgb
gcafb gcf dcaebfg ecagb gf abcdeg gaef cafbge fdbac fegbdc | fgae cfgab fg bagce
"""

# Decoded values of SAMPLE_INPUT, in order
SAMPLE_VALUES = [8394, 9781, 1197, 9361, 4873, 8418, 4548, 1625, 8717, 4315]


@pytest.fixture
def worked_example():
    """The single-record example whose outputs read 5353."""
    return parse_line(WORKED_EXAMPLE)


@pytest.fixture
def sample_records():
    """Ten records whose answers are 26 and 61229."""
    return parse_lines(SAMPLE_INPUT.splitlines())


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_INPUT)
    return path


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_INPUT


@pytest.fixture
def sample_values() -> list[int]:
    return SAMPLE_VALUES
