from dataclasses import dataclass

from scanparse.error.communicator import Communicator, ErrorRaiser
from scanparse.util import Span


# Python exceptions to differentiate the stage in which errors are thrown
class CompilerException(Exception):
    pass


# Raised while loading the grammar, before any line is parsed
class GrammarException(CompilerException):
    pass


@dataclass
class CompilerError:
    program: str
    span: Span

    # Call __post_init__ using dataclass, to automatically add errors to the list
    def __post_init__(self) -> None:
        ErrorRaiser.ERRORS.append(self)

    def create_error(
        self, before: str = "", after: str = "", class_name="CompilerError"
    ):
        return Communicator.create_message(
            self.program, self.span, class_name, before, after
        )

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        return self.program[self.span.start_col : self.span.end_col]
