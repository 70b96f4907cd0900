"""Storage module - JSON clip files."""

from animsynth.storage.clips import JsonClipWriter, load_clip

__all__ = ["JsonClipWriter", "load_clip"]
