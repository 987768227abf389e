"""Data models for artworks and upload results."""

from .artwork import ArtworkRecord, ArtworkSession, Credentials, UploadedImage
from .result import ChainOutcome, FailureKind, Stage, StageError, StageResult

__all__ = [
    "ArtworkRecord",
    "ArtworkSession",
    "Credentials",
    "UploadedImage",
    "ChainOutcome",
    "FailureKind",
    "Stage",
    "StageError",
    "StageResult",
]
