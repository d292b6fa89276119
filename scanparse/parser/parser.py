import logging
from typing import Iterable, Iterator, Optional

from scanparse.error.communicator import Communicator
from scanparse.parser.derivation import Derivation
from scanparse.parser.grammar import GRAMMAR_FILE, Grammar, NonTerminal, Production
from scanparse.token import Token
from scanparse.type import Type
from scanparse.util import Span

from scanparse.error.parser_error import (  # isort:skip
    NestingDepthError,
    ParserException,
    TrailingInputError,
    UnclosedBracketError,
    UnexpectedTokenError,
)

logger = logging.getLogger(__name__)


class Parser:
    def __init__(
        self, line: str, line_no: int = 1, grammar: Optional[Grammar] = None
    ) -> None:
        self.og_line = line
        self.line_no = line_no
        self.grammar = grammar or Grammar(grammar_file=GRAMMAR_FILE)

        self.tokens: Iterator[Token] = iter(())
        self.current: Optional[Token] = None
        self.derivation = Derivation()

    def parse(self, tokens: Iterable[Token]) -> Derivation:
        """Given the tokens of a single line, derive an expression from the grammar in
        `grammar.txt`, recording every production that is applied.

        Tokens are pulled from `tokens` one at a time, so a lazy `Scanner` may be passed
        directly. The first error ends the derivation of the line.

        Args:
            tokens (Iterable[Token]): The tokens of the line, ending in a `Type.EOF` token.

        Raises:
            ScannerException: If the scanner meets an illegal character.
            ParserException: If the tokens do not form an expression.

        Returns:
            Derivation: The productions applied, in the order in which they were invoked.
        """
        self.tokens = iter(tokens)
        self.derivation = Derivation()
        self.advance()

        try:
            self.parse_expr()
        except RecursionError:
            NestingDepthError(self.og_line, self.current.span)
            Communicator.communicate(ParserException)

        # The whole line must be consumed by the expression
        if not self.current.match(Type.EOF):
            TrailingInputError(self.og_line, self.current.span, self.current)
            Communicator.communicate(ParserException)

        logger.debug("Derived line %d in %d steps", self.line_no, len(self.derivation))
        return self.derivation

    def advance(self) -> Token:
        # Move the lookahead to the next token, returning the consumed one
        consumed = self.current
        self.current = next(self.tokens, None) or self.end_of_input()
        return consumed

    def end_of_input(self) -> Token:
        end = len(self.og_line)
        return Token("", Type.EOF, Span(self.line_no, (end, end)))

    def predict(self, nt: NonTerminal) -> Production:
        production = self.grammar.predict(nt, self.current.type)
        if production is None:
            UnexpectedTokenError(
                self.og_line,
                self.current.span,
                nt,
                self.grammar.expected(nt),
                self.current,
            )
            Communicator.communicate(ParserException)
        return production

    # EXPR -> TERM EXPRDASH
    def parse_expr(self) -> None:
        self.derivation.append(self.predict(NonTerminal.EXPR))
        self.parse_term()
        self.parse_exprdash()

    # EXPRDASH -> + TERM EXPRDASH | ε
    def parse_exprdash(self) -> None:
        production = self.predict(NonTerminal.EXPRDASH)
        self.derivation.append(production)
        if production.is_epsilon:
            return

        self.advance()  # '+'
        self.parse_term()
        self.parse_exprdash()

    # TERM -> FACTOR TERMDASH
    def parse_term(self) -> None:
        self.derivation.append(self.predict(NonTerminal.TERM))
        self.parse_factor()
        self.parse_termdash()

    # TERMDASH -> * FACTOR TERMDASH | ε
    def parse_termdash(self) -> None:
        production = self.predict(NonTerminal.TERMDASH)
        self.derivation.append(production)
        if production.is_epsilon:
            return

        self.advance()  # '*'
        self.parse_factor()
        self.parse_termdash()

    # FACTOR -> IDENTIFIER | NUMBER | ( EXPR )
    def parse_factor(self) -> None:
        production = self.predict(NonTerminal.FACTOR)
        if not self.current.match(Type.LRB):
            # An identifier or a number
            self.derivation.append(production, self.advance())
            return

        self.derivation.append(production)
        bracket = self.advance()  # '('
        self.parse_expr()
        if not self.current.match(Type.RRB):
            UnclosedBracketError(self.og_line, bracket.span, bracket.type, self.current)
            Communicator.communicate(ParserException)
        self.advance()  # ')'
