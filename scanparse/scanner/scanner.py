import re
from typing import Iterator, List

from scanparse.error.communicator import Communicator
from scanparse.error.scanner_error import ScannerException, UnexpectedCharacterError
from scanparse.token import Token
from scanparse.type import Type
from scanparse.util import Span


class Scanner:
    pattern = re.compile(
        r"""
            (?P<IDENTIFIER>[A-Za-z]+)|
            (?P<NUMBER>[0-9]+)|
            (?P<PLUS>\+)|
            (?P<STAR>\*)|
            (?P<LRB>\()| # lrb = Left Round Bracket
            (?P<RRB>\))| # rrb = Right Round Bracket
            (?P<SPACE>\s+)|
            (?P<ERROR>.)
        """,
        flags=re.X,
    )

    def __init__(self, line: str, line_no: int = 1) -> None:
        self.og_line = line
        self.line_no = line_no

    def __iter__(self) -> Iterator[Token]:
        """Lazily extract the tokens from the line passed to `Scanner(line)`.

        Tokens are only produced when they are requested, so an illegal character is
        reported as a ScannerException at the moment its token would be consumed.
        The final token is always of type `Type.EOF`.

        Yields:
            Token: The next Token of the line.
        """
        for match in self.pattern.finditer(self.og_line):
            span = Span(self.line_no, match.span())
            match match.lastgroup:
                case "SPACE":
                    continue
                case "ERROR":
                    UnexpectedCharacterError(self.og_line, span)
                    Communicator.communicate(ScannerException)

            yield Token(match[0], Type.to_type(match.lastgroup), span)

        end = len(self.og_line)
        yield Token("", Type.EOF, Span(self.line_no, (end, end)))

    def scan(self) -> List[Token]:
        """Extract the full list of tokens, including the final `Type.EOF` token.

        Raises:
            ScannerException: On the first illegal character.

        Returns:
            List[Token]: A list of Token instances
        """
        return list(self)
