"""Tests for the command line front end."""

import pytest

from autcheck.cli import INVALID_FILE_MESSAGE, NO_EXAMPLE_MESSAGE, main

MAZE = """\
(START) |- start
start G exit
start T t1
t1 T t2
t2 D dragon
dragon S exit
dragon R exit
t2 A arc
exit -| (FINAL)
"""


@pytest.fixture
def maze(tmp_path):
    path = tmp_path / "maze.aut"
    path.write_text(MAZE, encoding="utf-8")
    return str(path)


def run(capsys, argv):
    code = main(argv)
    return code, capsys.readouterr().out.strip()


class TestLevels:
    @pytest.mark.parametrize(
        "level,expected",
        [("0", "G"), ("1", "TTDR"), ("2", "TTDR")],
    )
    def test_shortest_example(self, capsys, maze, level, expected):
        assert run(capsys, [maze, "--level", level]) == (0, expected)

    def test_default_level(self, capsys, maze):
        assert run(capsys, [maze]) == (0, "G")

    def test_unsolvable(self, capsys, tmp_path):
        path = tmp_path / "gate.aut"
        path.write_text("(START) |- s\ns G f\nf -| (FINAL)\n", encoding="utf-8")
        assert run(capsys, [str(path), "-l", "1"]) == (0, NO_EXAMPLE_MESSAGE)

    def test_custom_alphabet(self, capsys, tmp_path):
        path = tmp_path / "words.aut"
        path.write_text("(START) |- s\ns x f\nf -| (FINAL)\n", encoding="utf-8")
        assert run(capsys, [str(path), "--alphabet", "x, y"]) == (0, "x")

    def test_verbose(self, capsys, maze):
        assert run(capsys, [maze, "-v"]) == (0, "G")


class TestErrors:
    @pytest.mark.parametrize(
        "text",
        [
            "(START) |- s\ns T\n",
            "(START) |- s\ns Q f\n",
            "s T f\nf -| (FINAL)\n",
        ],
        ids=["syntax", "unknown-symbol", "no-start"],
    )
    def test_invalid_file(self, capsys, tmp_path, text):
        path = tmp_path / "bad.aut"
        path.write_text(text, encoding="utf-8")
        assert run(capsys, [str(path)]) == (1, INVALID_FILE_MESSAGE)

    def test_missing_file(self, capsys, tmp_path):
        assert run(capsys, [str(tmp_path / "missing.aut")]) == (1, INVALID_FILE_MESSAGE)

    def test_undecodable_file(self, capsys, tmp_path):
        path = tmp_path / "binary.aut"
        path.write_bytes(b"(START) |- s\n\xff\xfe T f\n")
        assert run(capsys, [str(path)]) == (1, INVALID_FILE_MESSAGE)

    def test_epsilon_token_in_alphabet(self, maze):
        with pytest.raises(SystemExit) as excinfo:
            main([maze, "--alphabet", "T,$"])
        assert excinfo.value.code == 2

    def test_missing_argument(self):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2

    def test_unknown_level(self, maze):
        with pytest.raises(SystemExit):
            main([maze, "--level", "7"])
