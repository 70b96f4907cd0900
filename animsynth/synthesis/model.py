"""Synthesis Data Model - Clips, channels and collaborator interfaces.

Source clips are read through a ``SourceReader`` and results are
persisted through a ``ClipWriter``, so the merge steps never touch files
or host APIs directly.

Clip wire format (sources and outputs share it):
{
    "name": "Smile_synth",
    "channels": [
        {
            "propertyName": "blendShape.Smile",
            "path": "Body/Face",
            "targetType": "SkinnedMeshRenderer",
            "keyframes": [{"time": 0.0, "value": 60.0}]
        }
    ]
}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, Sequence

from animsynth.config.constants import SYNTH


def _require_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Keyframe:
    """A single curve key. Only ``value`` matters to the merger."""

    time: float
    value: float

    def to_dict(self) -> dict[str, float]:
        return {"time": self.time, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Keyframe:
        if not isinstance(data, dict):
            raise TypeError(f"keyframe must be an object, got {type(data).__name__}")
        return cls(time=float(data.get("time", 0.0)), value=float(data["value"]))


@dataclass(frozen=True)
class CurveBinding:
    """A raw animated property of a source clip with its keys.

    ``path`` addresses the scene object the property lives on and may be
    empty. Keyframes are assumed to be time-ordered.
    """

    property_name: str
    path: str = ""
    keyframes: tuple[Keyframe, ...] = ()
    target_type: str = ""

    @property
    def is_blendshape(self) -> bool:
        """Whether this binding animates a blendshape weight."""
        return self.property_name.startswith(SYNTH.BLENDSHAPE_PREFIX)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CurveBinding:
        if not isinstance(data, dict):
            raise TypeError(f"channel must be an object, got {type(data).__name__}")
        return cls(
            property_name=_require_str(data["propertyName"], "propertyName"),
            path=_require_str(data.get("path") or "", "path"),
            keyframes=tuple(Keyframe.from_dict(k) for k in data.get("keyframes", [])),
            target_type=data.get("targetType", ""),
        )


@dataclass
class AnimationClip:
    """An in-memory source animation."""

    name: str
    bindings: list[CurveBinding] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnimationClip:
        return cls(
            name=_require_str(data["name"], "name"),
            bindings=[CurveBinding.from_dict(c) for c in data.get("channels", [])],
        )


@dataclass(frozen=True)
class ChannelSample:
    """Initial weight of one blendshape channel and the path it was bound to."""

    value: float
    path: str = ""


# Property name -> sample
ChannelTable = dict[str, ChannelSample]


@dataclass(frozen=True)
class OutputChannel:
    """A channel of a synthesized clip: one constant key at time 0."""

    property_name: str
    path: str
    keyframes: tuple[Keyframe, ...]
    target_type: str = SYNTH.TARGET_TYPE

    @classmethod
    def constant(cls, property_name: str, path: str, value: float) -> OutputChannel:
        """Create a channel holding ``value`` in a single key at time 0."""
        return cls(
            property_name=property_name,
            path=path,
            keyframes=(Keyframe(time=SYNTH.KEYFRAME_TIME, value=value),),
        )

    @property
    def value(self) -> float:
        return self.keyframes[0].value

    def to_dict(self) -> dict[str, Any]:
        return {
            "propertyName": self.property_name,
            "path": self.path,
            "targetType": self.target_type,
            "keyframes": [k.to_dict() for k in self.keyframes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OutputChannel:
        return cls(
            property_name=data["propertyName"],
            path=data.get("path") or "",
            keyframes=tuple(Keyframe.from_dict(k) for k in data["keyframes"]),
            target_type=data.get("targetType", SYNTH.TARGET_TYPE),
        )


@dataclass
class SynthesizedClip:
    """The produced artifact: a named clip of constant blendshape channels."""

    name: str
    channels: list[OutputChannel] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "channels": [c.to_dict() for c in self.channels],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SynthesizedClip:
        """Create from dictionary."""
        return cls(
            name=data["name"],
            channels=[OutputChannel.from_dict(c) for c in data.get("channels", [])],
        )


@dataclass
class SynthesisResult:
    """Outcome of one synthesis: the clip plus its summary counters."""

    clip: SynthesizedClip
    total_channels: int
    nonzero_channels: int
    output_path: Path | None = None


class SourceReader(Protocol):
    """Reads raw curve bindings out of an animation source."""

    def get_bindings(self, source: AnimationClip) -> Sequence[CurveBinding]:
        """Return the source's bindings in their stored order."""
        ...


class ClipWriter(Protocol):
    """Persists a synthesized clip.

    Implementations create missing parent directories and perform any
    refresh signalling the host needs after the write.
    """

    def write(self, clip: SynthesizedClip, output_path: Path) -> None:
        ...


class ClipBindingReader:
    """Default reader for in-memory clips."""

    def get_bindings(self, source: AnimationClip) -> Sequence[CurveBinding]:
        return source.bindings
