import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from scanparse.error.error import CompilerException
from scanparse.error.parser_error import ParserException
from scanparse.error.scanner_error import ScannerException
from scanparse.parser.derivation import Derivation
from scanparse.parser.grammar import GRAMMAR_FILE, Grammar
from scanparse.parser.parser import Parser
from scanparse.scanner.scanner import Scanner
from scanparse.tree.printer import LevelOrderPrinter
from scanparse.tree.tree import Node
from scanparse.util import open_file

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("steps", "tree")


@dataclass
class LineResult:
    line_no: int
    line: str
    derivation: Optional[Derivation] = None
    error: Optional[CompilerException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_lines(filename: str) -> List[str]:
    # Read the file in full, so that I/O errors occur before any line is processed.
    # Only newlines end a line, form feeds and the like are whitespace within it.
    lines = open_file(filename).split("\n")
    if lines[-1] == "":
        lines.pop()
    logger.debug("Read %d lines from %s", len(lines), filename)
    return lines


def process_line(
    line: str, line_no: int = 1, grammar: Optional[Grammar] = None
) -> LineResult:
    """Scan and parse a single line, with a fresh Scanner and Parser.

    Lexical and syntax errors are caught here and stored on the result, so they never
    affect other lines. Lines that only contain whitespace are skipped, giving an empty
    derivation.
    """
    if not line.strip():
        logger.debug("Skipping empty line %d", line_no)
        return LineResult(line_no, line, Derivation())

    scanner = Scanner(line, line_no)
    parser = Parser(line, line_no, grammar)
    try:
        derivation = parser.parse(scanner)
    except (ScannerException, ParserException) as error:
        logger.debug("Line %d failed with %s", line_no, type(error).__name__)
        return LineResult(line_no, line, error=error)
    return LineResult(line_no, line, derivation)


def process_lines(
    lines: Iterable[str], grammar: Optional[Grammar] = None
) -> Iterator[LineResult]:
    # The grammar is read-only, so one instance is shared by all lines
    grammar = grammar or Grammar(grammar_file=GRAMMAR_FILE)
    for line_no, line in enumerate(lines, start=1):
        yield process_line(line, line_no, grammar)


def format_result(result: LineResult, output_format: str = "steps") -> str:
    if not result.ok:
        return str(result.error)

    match output_format:
        case "steps":
            return str(result.derivation)
        case "tree":
            return LevelOrderPrinter().print(Node.from_derivation(result.derivation))
    raise ValueError(f"Unknown output format {output_format!r}.")


def format_tokens(line: str, line_no: int = 1) -> str:
    """List the tokens of a line, one per row, or the lexical error of the line."""
    if not line.strip():
        return ""
    try:
        tokens = Scanner(line, line_no).scan()
    except ScannerException as error:
        return str(error)
    return "\n".join(f"{token.type.name:<10} {token.text}".rstrip() for token in tokens)
