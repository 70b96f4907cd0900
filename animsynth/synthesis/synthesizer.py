"""Synthesizer - Merge a base clip with a target clip into a new clip.

Usage:
    result = synthesize(base, [target], prefix="", suffix="_synth")
    print(result.clip.name, result.nonzero_channels)

    # Persist through a writer collaborator
    synthesize(base, [target], output_path="Assets/Smile_synth.anim",
               writer=JsonClipWriter())

Inputs are validated before anything is read, so a rejected call reads and
writes nothing. The clip is fully built before the writer is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from animsynth.config.constants import SYNTH
from animsynth.exceptions import InvalidInputError
from animsynth.observability.logging import SynthesisLogger, bind_clip, unbind_clip
from animsynth.observability.metrics import record_error, record_synthesis
from animsynth.synthesis.emitter import emit
from animsynth.synthesis.extractor import extract_channels
from animsynth.synthesis.model import (
    AnimationClip,
    ClipBindingReader,
    ClipWriter,
    SourceReader,
    SynthesisResult,
    SynthesizedClip,
)
from animsynth.synthesis.reconciler import reconcile


def clip_name(target_name: str, prefix: str = "", suffix: str = "") -> str:
    """Name of the clip synthesized for ``target_name``."""
    return f"{prefix}{target_name}{suffix}"


def _check_inputs(
    base: AnimationClip | None,
    targets: Sequence[AnimationClip | None] | None,
) -> list[AnimationClip]:
    if base is None:
        raise InvalidInputError("base animation is not specified", argument="base")
    valid = [t for t in targets or () if t is not None]
    if not valid:
        raise InvalidInputError(
            "target animations are not specified", argument="targets"
        )
    return valid


def validate_inputs(
    base: AnimationClip | None,
    targets: Sequence[AnimationClip | None] | None,
) -> list[AnimationClip]:
    """Check preconditions and return the non-null targets.

    A rejection is logged as ``synthesis_failed`` and counted before it
    propagates.

    Raises:
        InvalidInputError: If base is missing or no usable target is given
    """
    try:
        return _check_inputs(base, targets)
    except InvalidInputError as e:
        SynthesisLogger().synthesis_failed(e.to_dict())
        record_error("synthesis", type(e).__name__)
        raise


def synthesize(
    base: AnimationClip | None,
    targets: Sequence[AnimationClip | None] | None,
    output_path: str | Path | None = None,
    prefix: str = SYNTH.DEFAULT_PREFIX,
    suffix: str = SYNTH.DEFAULT_SUFFIX,
    *,
    reader: SourceReader | None = None,
    writer: ClipWriter | None = None,
    zero_epsilon: float = SYNTH.ZERO_EPSILON,
) -> SynthesisResult:
    """Synthesize a clip from ``base`` and the first target.

    Only one target is merged per call; any further targets are logged
    and ignored. Use ``synthesize_batch`` for one clip per target.

    Args:
        base: Base animation, whose paths are preferred
        targets: Target animations; the first non-null one is merged
        output_path: Where to persist the clip (requires ``writer``)
        prefix: Prepended to the target name
        suffix: Appended to the target name
        reader: Source reader, defaults to in-memory bindings
        writer: Clip writer used when ``output_path`` is set
        zero_epsilon: Merged weights below this magnitude are dropped

    Returns:
        SynthesisResult with the clip and its channel counters

    Raises:
        InvalidInputError: If base is missing or no target is usable
    """
    valid_targets = validate_inputs(base, targets)

    reader = reader or ClipBindingReader()
    target = valid_targets[0]
    name = clip_name(target.name, prefix, suffix)

    bind_clip(name)
    try:
        log = SynthesisLogger()
        log.synthesis_started(base.name, target.name)
        if len(valid_targets) > 1:
            log.extra_targets_ignored(len(valid_targets) - 1)

        base_table = extract_channels(reader.get_bindings(base))
        log.channels_extracted("base", len(base_table))
        target_table = extract_channels(reader.get_bindings(target))
        log.channels_extracted("target", len(target_table))

        emission = emit(reconcile(base_table, target_table), zero_epsilon)
        clip = SynthesizedClip(name=name, channels=emission.channels)
        log.synthesis_completed(emission.total_channels, emission.nonzero_channels)
        record_synthesis(emission.total_channels, emission.nonzero_channels)

        result = SynthesisResult(
            clip=clip,
            total_channels=emission.total_channels,
            nonzero_channels=emission.nonzero_channels,
        )

        if output_path and writer is not None:
            path = Path(output_path)
            writer.write(clip, path)
            log.clip_written(str(path))
            result.output_path = path
        elif output_path:
            log.write_skipped(str(output_path))

        return result
    finally:
        unbind_clip()
