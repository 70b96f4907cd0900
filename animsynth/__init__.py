"""AnimSynth - Blendshape animation clip synthesis."""

__version__ = "1.0.0"

# Export exception hierarchy for easy importing
from animsynth.exceptions import (
    AnimSynthError,
    ConfigurationError,
    InvalidConfigError,
    SynthesisError,
    InvalidInputError,
    ClipError,
    ClipReadError,
    ClipWriteError,
)

__all__ = [
    "__version__",
    # Base
    "AnimSynthError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigError",
    # Synthesis
    "SynthesisError",
    "InvalidInputError",
    # Storage
    "ClipError",
    "ClipReadError",
    "ClipWriteError",
]
