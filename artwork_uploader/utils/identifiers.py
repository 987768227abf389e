"""Identifier utilities and image path parsing."""

import re
import uuid
from pathlib import Path


def split_image_paths(value: str) -> list[Path]:
    """Split a comma separated list of image paths.

    Whitespace around commas is ignored and empty entries are dropped.
    Example: "/tmp/a.jpg , /tmp/b.jpg" -> [Path("/tmp/a.jpg"), Path("/tmp/b.jpg")]
    """
    if not value:
        return []
    parts = re.split(r"\s*,\s*", value.strip())
    return [Path(part).expanduser() for part in parts if part]


def derive_title(image_path: Path | str) -> str:
    """Derive the artwork title from an image path.

    The title is the file's base name with the extension stripped.
    Example: "/photos/Sunset Over Lake.jpg" -> "Sunset Over Lake"
    """
    return Path(image_path).stem


def new_image_id() -> str:
    """Generate a random, collision-resistant image identifier."""
    return str(uuid.uuid4())
