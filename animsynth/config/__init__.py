"""Configuration module."""

from animsynth.config.constants import SYNTH, SynthConstants
from animsynth.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "SynthConstants", "SYNTH"]
