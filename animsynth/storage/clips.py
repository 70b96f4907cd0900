"""Clip Storage - Read source clips and write synthesized clips as JSON.

Both directions use the clip wire format documented in
``animsynth.synthesis.model``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

from animsynth.exceptions import ClipReadError, ClipWriteError
from animsynth.observability.logging import get_logger
from animsynth.observability.metrics import record_error
from animsynth.synthesis.model import AnimationClip, SynthesizedClip

logger = get_logger(__name__)


def load_clip(path: str | Path) -> AnimationClip:
    """Load a source clip from a JSON file.

    The clip name defaults to the file stem when the file has none.

    Raises:
        ClipReadError: If the file is missing, not JSON, or malformed
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        record_error("storage", "read")
        raise ClipReadError(str(path), e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        record_error("storage", "decode")
        raise ClipReadError(str(path), f"invalid JSON: {e.msg}") from e

    if not isinstance(data, dict):
        record_error("storage", "decode")
        raise ClipReadError(str(path), "clip must be a JSON object")
    data.setdefault("name", path.stem)

    try:
        clip = AnimationClip.from_dict(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        record_error("storage", "decode")
        raise ClipReadError(str(path), f"malformed channel data: {e!r}") from e

    logger.debug("clip_loaded", path=str(path), clip=clip.name, bindings=len(clip.bindings))
    return clip


class JsonClipWriter:
    """Writes synthesized clips as indented JSON files.

    Args:
        on_written: Called with the output path after each successful
            write, for hosts that need to reload their asset index.
        indent: JSON indentation
    """

    def __init__(
        self,
        on_written: Callable[[Path], None] | None = None,
        indent: int = 2,
    ) -> None:
        self._on_written = on_written
        self._indent = indent

    def write(self, clip: SynthesizedClip, output_path: Path) -> None:
        """Persist ``clip`` at ``output_path``, creating parent directories.

        Raises:
            ClipWriteError: If the directory or file cannot be written
        """
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(
                json.dumps(clip.to_dict(), indent=self._indent) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            record_error("storage", "write")
            raise ClipWriteError(str(output_path), e.strerror or str(e)) from e

        if self._on_written is not None:
            self._on_written(output_path)
