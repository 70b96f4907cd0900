"""Synthesis Constants - Fixed contracts of the clip merger.

These values define what the merger treats as a blendshape channel,
when a merged weight counts as inactive, and how output clips are
addressed and named.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class SynthConstants:
    """Immutable synthesis contract values."""

    # Channel selection
    BLENDSHAPE_PREFIX: Final[str] = "blendShape."  # Only these properties are merged

    # Zero suppression: |value| below this is treated as inactive
    ZERO_EPSILON: Final[float] = 1e-5

    # Output channel addressing
    TARGET_TYPE: Final[str] = "SkinnedMeshRenderer"  # Renderer that owns the shapes
    KEYFRAME_TIME: Final[float] = 0.0  # Every emitted curve holds one key here

    # Naming defaults
    DEFAULT_PREFIX: Final[str] = ""
    DEFAULT_SUFFIX: Final[str] = "_synth"
    DEFAULT_OUTPUT_DIR: Final[str] = "Assets"
    CLIP_EXTENSION: Final[str] = ".anim"


# Singleton instance for easy import
SYNTH = SynthConstants()
