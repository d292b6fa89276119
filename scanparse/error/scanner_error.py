from scanparse.error.error import CompilerError, CompilerException


class ScannerException(CompilerException):
    pass


class ScannerError(CompilerError):
    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="ScannerError", after=after)


class UnexpectedCharacterError(ScannerError):
    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected character {self.error_chars!r} on {self.span.position_str}."
        )
