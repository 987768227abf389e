"""Canvia API service for registering and uploading artworks."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

import requests
from requests_toolbelt import MultipartEncoder

from ..config import MAX_UPLOAD_BYTES, ApiConfig
from ..models.artwork import ArtworkRecord, ArtworkSession, Credentials, UploadedImage
from ..models.result import FailureKind, Stage, StageResult
from ..utils.identifiers import derive_title, new_image_id

logger = logging.getLogger(__name__)

# Status returned by /artworks when the title is already taken
HTTP_CONFLICT = 409


class CanviaClient:
    """Client for the four Canvia endpoints used by an upload chain.

    Every method returns a StageResult instead of raising. Transport errors,
    non-2xx responses and malformed payloads become failures at the method
    boundary.
    """

    def __init__(self, config: ApiConfig) -> None:
        self._config = config

    def _url(self, path: str) -> str:
        return f"{self._config.url}/{path.lstrip('/')}"

    def _post_json(self, path: str, body: dict, headers: dict | None = None) -> dict:
        """POST a JSON body and return the decoded JSON response.

        Raises requests.RequestException on transport errors and non-2xx
        responses.
        """
        url = self._url(path)
        logger.debug(f"POST {url}")
        response = requests.post(
            url,
            json=body,
            headers=headers or {},
            timeout=self._config.request_timeout,
        )
        response.raise_for_status()
        if not response.content:
            return {}
        return response.json()

    def authenticate(self, credentials: Credentials) -> StageResult[str]:
        """Exchange username and password for a session token."""
        try:
            data = self._post_json("/authenticate", credentials.to_payload())
        except requests.RequestException as e:
            logger.debug(f"Authentication failed for {credentials.username}: {e}")
            return StageResult.failure(Stage.AUTHENTICATE, detail=str(e))

        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            return StageResult.failure(
                Stage.AUTHENTICATE, detail="response did not contain a token"
            )
        return StageResult.success(token)

    def create_artwork(
        self, token: str, image_path: Path | str
    ) -> StageResult[ArtworkSession]:
        """Register an artwork titled after the image file.

        The title must be unique across the account. A duplicate title is
        reported as FailureKind.DUPLICATE_TITLE and is never retried.
        """
        record = ArtworkRecord(title=derive_title(image_path), imageid=new_image_id())

        try:
            data = self._post_json(
                "/artworks",
                record.to_payload(),
                headers={"x-access-token": token},
            )
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == HTTP_CONFLICT:
                return StageResult.failure(
                    Stage.REGISTER,
                    FailureKind.DUPLICATE_TITLE,
                    f"an artwork titled '{record.title}' already exists",
                )
            return StageResult.failure(Stage.REGISTER, detail=str(e))
        except requests.RequestException as e:
            return StageResult.failure(Stage.REGISTER, detail=str(e))

        artwork_id = data.get("id") if isinstance(data, dict) else None
        if artwork_id is None:
            return StageResult.failure(
                Stage.REGISTER, detail="response did not contain an artwork id"
            )

        logger.debug(f"Registered '{record.title}' as artwork {artwork_id}")
        return StageResult.success(ArtworkSession(token=token, artwork_id=artwork_id))

    def upload_image(
        self,
        username: str,
        token: str,
        artwork_id: str,
        image_path: Path | str,
    ) -> StageResult[UploadedImage]:
        """Stream an image file to the artwork as multipart form data.

        Files larger than MAX_UPLOAD_BYTES are rejected without contacting
        the server. The file is read in chunks by the encoder while the
        request body is sent.
        """
        image_path = Path(image_path)
        try:
            size = image_path.stat().st_size
        except OSError as e:
            return StageResult.failure(
                Stage.UPLOAD, detail=f"unable to read {image_path}: {e}"
            )

        if size > MAX_UPLOAD_BYTES:
            return StageResult.failure(
                Stage.UPLOAD,
                FailureKind.FILE_TOO_LARGE,
                f"{image_path.name} is {size} bytes, the limit is {MAX_UPLOAD_BYTES}",
            )

        content_type = mimetypes.guess_type(image_path.name)[0] or "application/octet-stream"
        url = self._url("/uploads/upload_artwork_image")

        try:
            with image_path.open("rb") as fh:
                encoder = MultipartEncoder(
                    fields={
                        "image": (image_path.name, fh, content_type),
                        "artwork": str(artwork_id),
                    }
                )
                headers = {
                    "x-access-token": token,
                    "x-user-id": username,
                    "Content-Type": encoder.content_type,
                }
                logger.debug(f"POST {url} ({size} bytes)")
                response = requests.post(
                    url,
                    data=encoder,
                    headers=headers,
                    timeout=self._config.upload_timeout,
                )
                response.raise_for_status()
                data = response.json() if response.content else {}
        except requests.RequestException as e:
            return StageResult.failure(Stage.UPLOAD, detail=str(e))
        except OSError as e:
            return StageResult.failure(
                Stage.UPLOAD, detail=f"unable to read {image_path}: {e}"
            )

        uploaded = data.get("artwork") if isinstance(data, dict) else None
        logger.debug(f"Uploaded {image_path} to artwork {uploaded}")
        return StageResult.success(
            UploadedImage(
                session=ArtworkSession(token=token, artwork_id=artwork_id),
                artwork=uploaded,
            )
        )

    def add_to_playlist(
        self, username: str, token: str, artwork_id: str, playlist_id: str
    ) -> StageResult[None]:
        """Attach an artwork to a playlist."""
        body = {"artworks": [artwork_id], "playlist": playlist_id}
        try:
            self._post_json(
                "/playlists/add_artwork",
                body,
                headers={"x-access-token": token, "x-user-id": username},
            )
        except requests.RequestException as e:
            return StageResult.failure(Stage.PLAYLIST, detail=str(e))
        return StageResult.success()
