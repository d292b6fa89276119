import os
import sys
from glob import glob
from typing import List

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest  # noqa: E402

from scanparse.parser.grammar import GRAMMAR_FILE, Grammar  # noqa: E402

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture(scope="session")
def grammar() -> Grammar:
    return Grammar(grammar_file=GRAMMAR_FILE)


@pytest.fixture(scope="session")
def expressions_file() -> str:
    return os.path.join(DATA_DIR, "expressions.input")


def input_files() -> List[str]:
    return sorted(glob(os.path.join(DATA_DIR, "*.input")))


def valid_expressions() -> List[str]:
    return [
        "a",
        "42",
        "a+b",
        "12*xyz",
        "(a)",
        "((a))",
        "a+b*c",
        "(a+b)*c",
        "  x  *  ( 7 + y )  ",
        "\tfoo*bar+baz*(1+2*3)",
        "a*b*c+d+e",
    ]


@pytest.fixture(scope="session", params=input_files())
def input_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=valid_expressions())
def valid_expression(request) -> str:
    return request.param
