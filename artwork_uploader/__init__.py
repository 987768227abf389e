"""Upload images to Canvia as artworks and add them to a playlist."""

__version__ = "1.0.0"
