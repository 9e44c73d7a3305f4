"""Type definitions for modes-related data structures."""

from typing import List, Literal, Tuple, TypedDict

from pydantic import BaseModel, ConfigDict, Field

CapabilityGroup = Literal['read', 'edit', 'browser', 'command', 'mcp']

# Every generated mode is granted the same capabilities, in this order.
DEFAULT_GROUPS: Tuple[CapabilityGroup, ...] = ('read', 'edit', 'browser', 'command', 'mcp')
DEFAULT_SOURCE = "project"


class ModeDescriptor(BaseModel):
    """One assistant mode as it will be registered with the host extension."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    role: str
    when_to_use: str
    custom_instructions: str
    groups: Tuple[CapabilityGroup, ...] = DEFAULT_GROUPS
    source: Literal['project'] = DEFAULT_SOURCE


class ModeEntry(TypedDict):
    slug: str
    name: str
    roleDefinition: str
    whenToUse: str
    customInstructions: str
    groups: List[CapabilityGroup]
    source: str


class RooModes(TypedDict):
    customModes: List[ModeEntry]
