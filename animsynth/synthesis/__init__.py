"""Synthesis package - Blendshape clip merging.

Provides:
- Channel extraction from source clips
- Base/target reconciliation (max weight, base path preferred)
- Zero-suppressed emission of constant output channels
- Single and batch synthesis entry points
"""

from animsynth.synthesis.batch import build_output_path, synthesize_batch
from animsynth.synthesis.emitter import Emission, emit, is_approximately_zero
from animsynth.synthesis.extractor import extract_channels
from animsynth.synthesis.model import (
    AnimationClip,
    ChannelSample,
    ChannelTable,
    ClipBindingReader,
    ClipWriter,
    CurveBinding,
    Keyframe,
    OutputChannel,
    SourceReader,
    SynthesisResult,
    SynthesizedClip,
)
from animsynth.synthesis.reconciler import merge_samples, reconcile, resolve_path
from animsynth.synthesis.synthesizer import clip_name, synthesize, validate_inputs

__all__ = [
    # Model
    "AnimationClip",
    "ChannelSample",
    "ChannelTable",
    "CurveBinding",
    "Keyframe",
    "OutputChannel",
    "SynthesisResult",
    "SynthesizedClip",
    # Collaborators
    "ClipBindingReader",
    "ClipWriter",
    "SourceReader",
    # Steps
    "extract_channels",
    "reconcile",
    "merge_samples",
    "resolve_path",
    "emit",
    "Emission",
    "is_approximately_zero",
    # Entry points
    "clip_name",
    "validate_inputs",
    "synthesize",
    "synthesize_batch",
    "build_output_path",
]
