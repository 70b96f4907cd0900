"""Batch Synthesis - One output clip per target against a shared base.

Each target is merged independently; nothing is combined across
targets. Output files land at ``{output_dir}/{prefix}{name}{suffix}.anim``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from animsynth.config.constants import SYNTH
from animsynth.observability.logging import get_logger
from animsynth.synthesis.model import (
    AnimationClip,
    ClipWriter,
    SourceReader,
    SynthesisResult,
)
from animsynth.synthesis.synthesizer import clip_name, synthesize, validate_inputs

logger = get_logger(__name__)


def build_output_path(
    output_dir: str | Path,
    target_name: str,
    prefix: str = SYNTH.DEFAULT_PREFIX,
    suffix: str = SYNTH.DEFAULT_SUFFIX,
) -> Path:
    """Path of the clip file synthesized for ``target_name``."""
    return Path(output_dir) / f"{clip_name(target_name, prefix, suffix)}{SYNTH.CLIP_EXTENSION}"


def synthesize_batch(
    base: AnimationClip | None,
    targets: Sequence[AnimationClip | None] | None,
    output_dir: str | Path = SYNTH.DEFAULT_OUTPUT_DIR,
    prefix: str = SYNTH.DEFAULT_PREFIX,
    suffix: str = SYNTH.DEFAULT_SUFFIX,
    *,
    writer: ClipWriter,
    reader: SourceReader | None = None,
    zero_epsilon: float = SYNTH.ZERO_EPSILON,
) -> list[SynthesisResult]:
    """Synthesize and persist one clip per non-null target.

    Null targets are skipped. The first failure aborts the remaining
    targets; clips already written are left in place.

    Raises:
        InvalidInputError: If base is missing or no target is usable
    """
    valid_targets = validate_inputs(base, targets)

    results = []
    for target in valid_targets:
        output_path = build_output_path(output_dir, target.name, prefix, suffix)
        result = synthesize(
            base,
            [target],
            output_path,
            prefix,
            suffix,
            reader=reader,
            writer=writer,
            zero_epsilon=zero_epsilon,
        )
        results.append(result)

    logger.info(
        "batch_completed",
        event_type="synthesis.batch_completed",
        clips=len(results),
        output_dir=str(output_dir),
    )
    return results
