"""Common type definitions for the rooMaestro project."""

from .modes import (
    CapabilityGroup,
    DEFAULT_GROUPS,
    DEFAULT_SOURCE,
    ModeDescriptor,
    ModeEntry,
    RooModes,
)

__all__ = [
    'CapabilityGroup',
    'DEFAULT_GROUPS',
    'DEFAULT_SOURCE',
    'ModeDescriptor',
    'ModeEntry',
    'RooModes',
]
