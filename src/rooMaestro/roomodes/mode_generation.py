from typing import Iterable, List, Sequence

from rooMaestro.roo_types.modes import ModeDescriptor, ModeEntry, RooModes

from .utils import slugify

# Modes shipped with this repository's prompt set.
DEFAULT_MODE_NAMES: Sequence[str] = (
    'code-analyst',
    'coder',
    'maestro',
    'planner',
    'prodigy',
)


def create_mode_descriptor(name: str) -> ModeDescriptor:
    """Build the descriptor for a mode known only by its name.

    Role, usage hint and custom instructions all carry the slug; the prompt
    text itself lives in the markdown files the extension loads.
    """
    slug = slugify(name)
    return ModeDescriptor(
        name=name,
        slug=slug,
        role=slug,
        when_to_use=slug,
        custom_instructions=slug,
    )


def sort_modes(modes: Iterable[ModeDescriptor]) -> List[ModeDescriptor]:
    """Order modes by name using plain code-point comparison."""
    return sorted(modes, key=lambda mode: mode.name)


def generate_modes_from_names(names: Iterable[str]) -> List[ModeDescriptor]:
    """Map each name to a descriptor and return them sorted by name."""
    return sort_modes(create_mode_descriptor(name) for name in names)


def generate_mode_entry(mode: ModeDescriptor) -> ModeEntry:
    """Convert a descriptor into the camelCase record the host extension reads."""
    return {
        "slug": mode.slug,
        "name": mode.name,
        "roleDefinition": mode.role,
        "whenToUse": mode.when_to_use,
        "customInstructions": mode.custom_instructions,
        "groups": list(mode.groups),
        "source": mode.source,
    }


def build_roomodes(modes: Iterable[ModeDescriptor]) -> RooModes:
    return {"customModes": [generate_mode_entry(mode) for mode in modes]}
