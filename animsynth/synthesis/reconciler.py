"""Reconciler - Merge base and target channel tables.

Policy per property:
- Present in one table only: copied as is.
- Present in both: the strictly greater value wins, ties keep the base
  value. The path is the base path when non-empty, else the target path,
  chosen independently of which value won.

Nothing is dropped here, zero weights included; suppression is the
emitter's job.
"""

from animsynth.synthesis.model import ChannelSample, ChannelTable


def resolve_path(base_path: str, target_path: str) -> str:
    """Prefer the base rig's path, fall back to the target's."""
    return base_path if base_path else target_path


def merge_samples(base: ChannelSample, target: ChannelSample) -> ChannelSample:
    """Merge one property sampled in both clips."""
    value = target.value if target.value > base.value else base.value
    return ChannelSample(value=value, path=resolve_path(base.path, target.path))


def reconcile(base: ChannelTable, target: ChannelTable) -> ChannelTable:
    """Reconcile two channel tables into a new merged table.

    Neither input is modified.
    """
    merged: ChannelTable = dict(base)
    for name, target_sample in target.items():
        base_sample = merged.get(name)
        if base_sample is None:
            merged[name] = target_sample
        else:
            merged[name] = merge_samples(base_sample, target_sample)
    return merged
