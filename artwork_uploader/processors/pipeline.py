"""Per-image upload chain: authenticate, register, upload, add to playlist."""

import logging
from pathlib import Path
from typing import Callable

from ..config import AccountConfig
from ..models.result import ChainOutcome, FailureKind, Stage, StageError
from ..services.canvia import CanviaClient
from ..utils.identifiers import derive_title

logger = logging.getLogger(__name__)

SUCCESS_GLYPH = "✅"
FAILURE_GLYPH = "❌"
ABORT_GLYPH = "❗"

# Failure messages per stage, shown for FailureKind.UNKNOWN
UNKNOWN_ERRORS = {
    Stage.AUTHENTICATE: "Unknown error authenticating",
    Stage.REGISTER: "Unknown error creating artwork ID",
    Stage.UPLOAD: "Unknown error uploading photo",
    Stage.PLAYLIST: "Unknown error adding to playlist",
}


def describe_error(error: StageError) -> str:
    """Render a stage error as a single diagnostic line."""
    if error.kind == FailureKind.DUPLICATE_TITLE:
        return "Error: Couldn't create artwork, please provide a unique file name."
    if error.kind == FailureKind.FILE_TOO_LARGE:
        return f"Error: Image is too large to upload, {error.detail}"
    return f"Error: {UNKNOWN_ERRORS[error.stage]} {error.detail}".rstrip()


class UploadPipeline:
    """Runs the four-stage chain for one image at a time.

    Each stage only starts once the previous one succeeded. The first
    failure stops the chain for that image; artworks created before the
    failure are left on the server.
    """

    def __init__(
        self,
        client: CanviaClient,
        account: AccountConfig,
        report: Callable[[str], None] = print,
    ) -> None:
        self._client = client
        self._account = account
        self._report = report

    def run(self, image_path: Path) -> ChainOutcome:
        """Upload one image and attach it to the configured playlist."""
        outcome = ChainOutcome(image_path=image_path, title=derive_title(image_path))
        username = self._account.username

        auth = self._client.authenticate(self._account.credentials)
        if not auth.ok:
            return self._abort(outcome, auth.error)
        self._advance(outcome, Stage.AUTHENTICATE, "Authenticated")

        created = self._client.create_artwork(auth.value, image_path)
        if not created.ok:
            return self._abort(outcome, created.error)
        session = created.value
        outcome.artwork_id = session.artwork_id
        self._advance(outcome, Stage.REGISTER, f"Created Artwork ID: {session.artwork_id}")

        uploaded = self._client.upload_image(
            username, session.token, session.artwork_id, image_path
        )
        if not uploaded.ok:
            return self._abort(outcome, uploaded.error)
        session = uploaded.value.session
        self._advance(
            outcome, Stage.UPLOAD, f"Uploaded image: {uploaded.value.artwork} {image_path}"
        )

        linked = self._client.add_to_playlist(
            username, session.token, session.artwork_id, self._account.playlist
        )
        if not linked.ok:
            return self._abort(outcome, linked.error)
        self._advance(outcome, Stage.PLAYLIST, "Added to playlist")

        return outcome

    def _advance(self, outcome: ChainOutcome, stage: Stage, message: str) -> None:
        outcome.completed.append(stage)
        self._report(f"{SUCCESS_GLYPH}  {message}")

    def _abort(self, outcome: ChainOutcome, error: StageError) -> ChainOutcome:
        outcome.error = error
        logger.warning(
            f"{outcome.image_path.name}: {error.stage.value} failed "
            f"({error.kind.value}) {error.detail}"
        )
        self._report(f"{FAILURE_GLYPH}  {describe_error(error)}")
        self._report(
            f"{ABORT_GLYPH} Unable to upload {outcome.image_path}, please see errors above."
        )
        return outcome
