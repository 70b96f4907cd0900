"""Channel Extractor - Initial blendshape weights of a source clip."""

from typing import Iterable

from animsynth.synthesis.model import ChannelSample, ChannelTable, CurveBinding


def extract_channels(bindings: Iterable[CurveBinding]) -> ChannelTable:
    """Build a channel table from a source's raw bindings.

    Only ``blendShape.*`` properties are considered, and only the first
    keyframe of each curve is read. Bindings without keys are skipped.
    If a property is bound more than once, the later binding wins.

    Args:
        bindings: Curve bindings in source order

    Returns:
        Mapping of property name to (first value, path)
    """
    table: ChannelTable = {}
    for binding in bindings:
        if not binding.is_blendshape or not binding.keyframes:
            continue
        table[binding.property_name] = ChannelSample(
            value=binding.keyframes[0].value,
            path=binding.path,
        )
    return table
