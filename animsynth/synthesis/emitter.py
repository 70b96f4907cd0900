"""Emitter - Render a merged table into output channels."""

from dataclasses import dataclass, field

from animsynth.config.constants import SYNTH
from animsynth.synthesis.model import ChannelTable, OutputChannel


@dataclass
class Emission:
    """Emitted channels and the counters reported for them."""

    channels: list[OutputChannel] = field(default_factory=list)
    total_channels: int = 0
    nonzero_channels: int = 0


def is_approximately_zero(value: float, epsilon: float = SYNTH.ZERO_EPSILON) -> bool:
    """Whether a weight is too small to count as active."""
    return abs(value) < epsilon


def emit(merged: ChannelTable, epsilon: float = SYNTH.ZERO_EPSILON) -> Emission:
    """Build one constant output channel per active merged entry.

    Entries that are approximately zero are skipped. Channels are sorted
    by property name so repeated runs produce identical clips.

    Args:
        merged: Reconciled channel table
        epsilon: Zero-suppression threshold

    Returns:
        Emission with channels and total/non-zero counts
    """
    channels = [
        OutputChannel.constant(name, sample.path, sample.value)
        for name, sample in sorted(merged.items())
        if not is_approximately_zero(sample.value, epsilon)
    ]
    return Emission(
        channels=channels,
        total_channels=len(merged),
        nonzero_channels=len(channels),
    )
