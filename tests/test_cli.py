import os

from click.testing import CliRunner

from scanparse.cli import cli
from scanparse.util import open_file


def expected_output(input_file: str, extension: str = ".output") -> str:
    return open_file(os.path.splitext(input_file)[0] + extension)


def test_cli(input_file: str):
    runner = CliRunner()
    result = runner.invoke(cli, [input_file])

    assert result.exit_code == 0
    assert result.output == expected_output(input_file)


def test_cli_tree(expressions_file: str):
    runner = CliRunner()
    result = runner.invoke(cli, ["--format", "tree", expressions_file])

    assert result.exit_code == 0
    assert result.output == expected_output(expressions_file, ".tree")


def test_cli_tokens(expressions_file: str):
    runner = CliRunner()
    result = runner.invoke(cli, ["--tokens", expressions_file])

    assert result.exit_code == 0
    blocks = result.output.split("\n\n")
    assert blocks[0].splitlines() == [
        "IDENTIFIER a",
        "PLUS       +",
        "IDENTIFIER b",
        "EOF",
    ]
    assert "Unexpected character '#'" in result.output


def test_cli_empty_file(tmp_path):
    empty = tmp_path / "empty.input"
    empty.write_text("")

    result = CliRunner().invoke(cli, [str(empty)])
    assert result.exit_code == 0
    assert result.output == ""


def test_cli_missing_file(tmp_path):
    result = CliRunner().invoke(cli, [str(tmp_path / "missing.input")])
    assert result.exit_code != 0
    assert "does not exist" in result.output


def test_cli_directory(tmp_path):
    result = CliRunner().invoke(cli, [str(tmp_path)])
    assert result.exit_code != 0


def test_cli_undecodable_file(tmp_path):
    binary = tmp_path / "binary.input"
    binary.write_bytes(b"\xff\xfe\xfa")

    result = CliRunner().invoke(cli, [str(binary)])
    assert result.exit_code == 1
    assert "Could not open file" in result.output


def test_cli_no_color(expressions_file: str):
    result = CliRunner().invoke(cli, ["--no-color", expressions_file])
    assert "\033[" not in result.output


def test_cli_tokens_with_format(expressions_file: str):
    result = CliRunner().invoke(cli, ["--tokens", "--format", "tree", expressions_file])
    assert result.exit_code == 2
    assert "--tokens cannot be combined with --format." in result.output
