import os
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Call-site information carried into a message header.
    """

    file: str
    # Base name of the source file that issued the statement.

    line: int
    # Line number of the statement within that file.

    function: str
    # Name of the enclosing function ("<module>" at top level).

    @classmethod
    def capture(cls, stacklevel: int = 1) -> "SourceLocation":
        """
        Build a location from a frame on the current call stack.

        stacklevel=1 is the function calling capture(); each extra
        level walks one frame further out, so a helper that captures
        on behalf of its own caller passes stacklevel=2.
        """
        frame = sys._getframe(stacklevel)
        code = frame.f_code
        return cls(
            file=os.path.basename(code.co_filename),
            line=frame.f_lineno,
            function=code.co_name,
        )
