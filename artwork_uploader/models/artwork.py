"""Artwork data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Canvia account credentials."""

    username: str
    password: str

    def to_payload(self) -> dict:
        return {"email": self.username, "password": self.password}


@dataclass
class ArtworkRecord:
    """An artwork as registered with the Canvia API.

    Description, mediums and subjects are not exposed by the CLI and are
    always sent empty.
    """

    title: str
    imageid: str  # Client-generated, distinct from the server-assigned id
    details: str = ""
    mediums: list[str] = field(default_factory=list)
    subjects: list[str] = field(default_factory=list)

    def to_payload(self) -> dict:
        return {
            "imageid": self.imageid,
            "title": self.title,
            "details": self.details,
            "mediums": list(self.mediums),
            "subjects": list(self.subjects),
        }


@dataclass(frozen=True)
class ArtworkSession:
    """Token and artwork id passed from one stage to the next."""

    token: str
    artwork_id: str


@dataclass(frozen=True)
class UploadedImage:
    """An image accepted by the upload endpoint."""

    session: ArtworkSession
    artwork: str | None = None  # As reported back by the server
