"""Stage and chain result models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")


class Stage(str, Enum):
    """The four stages of an upload chain, in order."""

    AUTHENTICATE = "authenticate"
    REGISTER = "register"
    UPLOAD = "upload"
    PLAYLIST = "playlist"


class FailureKind(str, Enum):
    UNKNOWN = "unknown"
    DUPLICATE_TITLE = "duplicate_title"
    FILE_TOO_LARGE = "file_too_large"


@dataclass(frozen=True)
class StageError:
    """Why a stage failed."""

    stage: Stage
    kind: FailureKind
    detail: str = ""


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """Either the value produced by a stage or the error that stopped it."""

    value: T | None = None
    error: StageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "StageResult[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls, stage: Stage, kind: FailureKind = FailureKind.UNKNOWN, detail: str = ""
    ) -> "StageResult[T]":
        return cls(error=StageError(stage=stage, kind=kind, detail=detail))


@dataclass
class ChainOutcome:
    """Summary of one image's upload chain."""

    image_path: Path
    title: str
    artwork_id: str | None = None
    completed: list[Stage] = field(default_factory=list)
    error: StageError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and Stage.PLAYLIST in self.completed
