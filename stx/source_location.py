"""Information about a place in the source code: file, function, line, column."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A file name, function name, line and column in the source code."""

    file: str = ""
    function: str = ""
    line: int = 0
    column: int = 0

    @classmethod
    def current(cls) -> SourceLocation:
        """Return the location of the code that calls this method."""
        frame = sys._getframe(1)
        code = frame.f_code
        column = 0
        positions = getattr(code, "co_positions", None)
        if positions is not None and frame.f_lasti >= 0:
            for index, (_, _, col_offset, _) in enumerate(positions()):
                if index == frame.f_lasti // 2:
                    if col_offset is not None:
                        column = col_offset + 1
                    break
        return cls(
            file=code.co_filename,
            function=code.co_name,
            line=frame.f_lineno,
            column=column,
        )