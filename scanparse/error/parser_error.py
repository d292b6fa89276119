from dataclasses import dataclass

from scanparse.error.error import CompilerError, CompilerException
from scanparse.parser.grammar import NonTerminal
from scanparse.token import Token
from scanparse.type import Type


class ParserException(CompilerException):
    pass


@dataclass
class UnexpectedTokenError(CompilerError):
    nt: NonTerminal
    expected: list
    got: Token

    def __str__(self) -> str:
        expected = [symbol.article_str() for symbol in self.expected]
        if len(expected) > 1:
            expected = [", ".join(expected[:-1]) + " or " + expected[-1]]

        after = f"Got {self.got} instead."
        if expected:
            after = f"Expected {expected[0]}, but got {self.got} instead."
        return self.create_error(
            f"Expected {self.nt.article_str()} on {self.span.position_str}.",
            after,
            class_name="SyntaxError",
        )


@dataclass
class BracketMismatchError(CompilerError):
    bracket: Type
    got: Token

    def create_error(self, before, after=""):
        return super().create_error(before, after, class_name="SyntaxError")


class UnclosedBracketError(BracketMismatchError):
    def __str__(self) -> str:
        return self.create_error(
            f"The {self.bracket} bracket on {self.span.position_str} was never closed.",
            f"Expected {Type.RRB}, but found {self.got}.",
        )


@dataclass
class TrailingInputError(CompilerError):
    got: Token

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected token after expression on {self.span.position_str}.",
            f"Expected {Type.EOF}, but found {self.got}.",
            class_name="SyntaxError",
        )


class NestingDepthError(CompilerError):
    def __str__(self) -> str:
        return self.create_error(
            f"Expression nested too deeply on {self.span.lines_str}.",
            class_name="SyntaxError",
        )
