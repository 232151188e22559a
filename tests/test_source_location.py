import dataclasses
import inspect

import pytest

from stx.source_location import SourceLocation


def test_default_location_is_empty():
    loc = SourceLocation()
    assert loc.file == ""
    assert loc.function == ""
    assert loc.line == 0
    assert loc.column == 0


def test_current_reports_caller_file_and_function():
    loc = SourceLocation.current()
    assert loc.file == __file__
    assert loc.function == "test_current_reports_caller_file_and_function"


def test_current_reports_caller_line():
    expected = inspect.currentframe().f_lineno + 1
    loc = SourceLocation.current()
    assert loc.line == expected


def test_current_inside_helper_names_helper():
    def helper():
        return SourceLocation.current()

    assert helper().function == "helper"


def test_column_is_non_negative():
    assert SourceLocation.current().column >= 0


def test_location_is_immutable():
    loc = SourceLocation(file="a.py", function="f", line=3, column=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        loc.line = 4  # type: ignore[misc]
    assert loc.line == 3


def test_locations_compare_by_value():
    assert SourceLocation("a.py", "f", 3, 1) == SourceLocation("a.py", "f", 3, 1)
    assert not (SourceLocation("a.py", "f", 3, 1) == SourceLocation("a.py", "f", 4, 1))