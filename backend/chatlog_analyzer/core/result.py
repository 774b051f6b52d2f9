"""Explicit result type for one analysis call."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..services.llm.base import ERROR_CLASSES, ChatLogAnalysisError, ErrorKind
from .types import AnalysisReportData


@dataclass(frozen=True)
class AnalysisOk:
    """Successful analysis carrying the parsed report."""

    report: AnalysisReportData

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> AnalysisReportData:
        return self.report


@dataclass(frozen=True)
class AnalysisErr:
    """Failed analysis carrying the classified error."""

    kind: ErrorKind
    message: str
    detail: str | None = None
    cause: BaseException | None = None

    @property
    def ok(self) -> bool:
        return False

    def to_exception(self) -> ChatLogAnalysisError:
        return ERROR_CLASSES[self.kind](self.message)

    def unwrap(self) -> AnalysisReportData:
        """Raise the typed error, chained to the original failure when there is one."""
        raise self.to_exception() from self.cause

    @classmethod
    def from_exception(cls, err: ChatLogAnalysisError) -> "AnalysisErr":
        return cls(
            kind=err.kind,
            message=str(err),
            detail=str(err.__cause__) if err.__cause__ is not None else None,
            cause=err.__cause__,
        )


AnalysisResult = Union[AnalysisOk, AnalysisErr]
