from typing import List

from scanparse.util import Colors, Span


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        line: str,
        span: Span,
        class_name="CompilerError",
        before: str = "",
        after: str = "",
        color=Colors.RED,
    ) -> str:
        # Only the offending line is shown, as every input line is parsed on its own.
        # See the * in the following example:
        #    *-> 3. (a+1
        final_line = f"-> {span.start_ln}. {line[:span.start_col]}"
        final_line += f"{color}{line[span.start_col:span.end_col]}{Colors.ENDC}"
        final_line += line[span.end_col :]

        message = class_name + ": " + before + "\n" + final_line
        if after:
            message += "\n" + after
        return message

    # Communicates the accumulated errors to the programmer
    # In case of any errors, processing of the line will stop with an exception
    @staticmethod
    def communicate(stage_of_exception) -> None:
        errors = "\n\n".join(str(error) for error in ErrorRaiser.ERRORS)
        if errors:
            ErrorRaiser.ERRORS.clear()
            raise stage_of_exception(errors)


# Used to store all the accumulated errors
class ErrorRaiser:
    ERRORS: List = []
