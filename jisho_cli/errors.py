"""Exceptions raised by jisho-cli."""

from enum import Enum
from typing import Optional


class JishoError(Exception):
    """Base class for all jisho-cli errors."""


class StructureProblem(Enum):
    MISSING_REPRESENTATION = "entry block has no headword representation"
    MISSING_HEADWORD = "headword representation has no text element"
    MISSING_FURIGANA = "headword representation has no furigana element"
    MISSING_MEANINGS = "entry block has no meanings container"


class StructureError(JishoError):
    """A required structural anchor is missing from the results page."""

    def __init__(self, problem: StructureProblem, detail: Optional[str] = None):
        self.problem = problem
        self.detail = detail
        message = problem.value
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class FetchError(JishoError):
    """The results page could not be retrieved."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
