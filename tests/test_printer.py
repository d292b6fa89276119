from scanparse import Parser, Scanner
from scanparse.parser.derivation import Derivation
from scanparse.parser.grammar import Grammar
from scanparse.tree.printer import LevelOrderPrinter
from scanparse.tree.tree import Node


def tree(line: str, grammar: Grammar) -> Node:
    return Node.from_derivation(Parser(line, grammar=grammar).parse(Scanner(line)))


def test_from_derivation(grammar: Grammar):
    root = tree("a+b", grammar)
    assert root.label == "EXPR"
    assert [child.label for child in root.children] == ["TERM", "EXPRDASH"]

    plus = root.children[1]
    assert [child.label for child in plus.children] == ["PLUS", "TERM", "EXPRDASH"]
    assert plus.children[0].is_leaf


def test_print_sum(grammar: Grammar):
    assert LevelOrderPrinter().print(tree("a+b", grammar)).splitlines() == [
        "EXPR",
        "TERM EXPRDASH",
        "FACTOR TERMDASH PLUS TERM EXPRDASH",
        "IDENTIFIER(a) EPSILON FACTOR TERMDASH EPSILON",
        "IDENTIFIER(b) EPSILON",
    ]


def test_print_brackets(grammar: Grammar):
    assert LevelOrderPrinter().print(tree("(a)", grammar)).splitlines() == [
        "EXPR",
        "TERM EXPRDASH",
        "FACTOR TERMDASH EPSILON",
        "BOPEN EXPR BCLOSE EPSILON",
        "TERM EXPRDASH",
        "FACTOR TERMDASH EPSILON",
        "IDENTIFIER(a) EPSILON",
    ]


def test_print_product(grammar: Grammar):
    levels = list(LevelOrderPrinter().levels(tree("2*3", grammar)))
    assert levels[3] == ["NUMBER(2)", "STAR", "FACTOR", "TERMDASH"]
    assert levels[4] == ["NUMBER(3)", "EPSILON"]


def test_separator(grammar: Grammar):
    printed = LevelOrderPrinter(separator=", ").print(tree("a", grammar))
    assert printed.splitlines()[1] == "TERM, EXPRDASH"


def test_empty():
    assert Node.from_derivation(Derivation()) is None
    assert LevelOrderPrinter().print(None) == ""
