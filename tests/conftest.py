"""Pytest configuration and shared fixtures."""

import os
from typing import Callable

import pytest
import structlog

from animsynth.synthesis.model import AnimationClip, CurveBinding, Keyframe

# Keep host environment from leaking into settings under test
for _key in [k for k in os.environ if k.startswith("ANIMSYNTH_")]:
    del os.environ[_key]


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore structlog defaults and clear bound context after each test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def make_binding() -> Callable[..., CurveBinding]:
    """Factory for curve bindings with one or more key values."""

    def _make(
        property_name: str,
        *values: float,
        path: str = "",
    ) -> CurveBinding:
        return CurveBinding(
            property_name=property_name,
            path=path,
            keyframes=tuple(
                Keyframe(time=float(i), value=v) for i, v in enumerate(values)
            ),
        )

    return _make


@pytest.fixture
def make_clip(make_binding) -> Callable[..., AnimationClip]:
    """Factory for clips from ``{name: value}`` or ``{name: (value, path)}``."""

    def _make(name: str, channels: dict) -> AnimationClip:
        bindings = []
        for prop, entry in channels.items():
            value, path = entry if isinstance(entry, tuple) else (entry, "")
            bindings.append(make_binding(prop, value, path=path))
        return AnimationClip(name=name, bindings=bindings)

    return _make


@pytest.fixture
def base_clip(make_clip) -> AnimationClip:
    """Base clip covering the documented merge scenarios."""
    return make_clip(
        "Base",
        {
            "blendShape.Smile": (30.0, "Face"),
            "blendShape.Blink": (0.0, "Face"),
            "blendShape.Frown": (50.0, ""),
        },
    )


@pytest.fixture
def target_clip(make_clip) -> AnimationClip:
    """Target clip paired with ``base_clip``."""
    return make_clip(
        "Smile",
        {
            "blendShape.Smile": (60.0, ""),
            "blendShape.Wink": (45.0, "Head"),
            "blendShape.Frown": (20.0, "Jaw"),
        },
    )
