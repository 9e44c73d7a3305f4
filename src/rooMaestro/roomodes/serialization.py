"""Rendering of the mode registry as YAML or JSON text.

The YAML layout is what the Roo Code extension expects in ``.roomodes``:
sequences indented under their parent key, the free-text fields
double-quoted, and the capability groups and source as plain scalars.
"""

import json
from typing import Iterable, List, Literal

import yaml

from rooMaestro.roo_types.modes import ModeDescriptor

from .mode_generation import build_roomodes

OutputFormat = Literal['yaml', 'json']

QUOTED_FIELDS = ('slug', 'name', 'roleDefinition', 'whenToUse', 'customInstructions')


class QuotedString(str):
    """A string that is always emitted in double-quoted style."""


class RooModesDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences under their mapping key."""

    def increase_indent(self, flow: bool = False, indentless: bool = False):
        return super().increase_indent(flow, False)


def _represent_quoted(dumper: yaml.SafeDumper, data: QuotedString) -> yaml.ScalarNode:
    return dumper.represent_scalar('tag:yaml.org,2002:str', str(data), style='"')


RooModesDumper.add_representer(QuotedString, _represent_quoted)


def render_yaml(modes: Iterable[ModeDescriptor]) -> str:
    """Render modes as the ``customModes`` YAML document, in the given order."""
    document = build_roomodes(modes)
    entries: List[dict] = []
    for entry in document["customModes"]:
        record = dict(entry)
        for field in QUOTED_FIELDS:
            record[field] = QuotedString(record[field])
        entries.append(record)

    return yaml.dump(
        {"customModes": entries},
        Dumper=RooModesDumper,
        indent=2,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=float("inf"),
    )


def render_json(modes: Iterable[ModeDescriptor]) -> str:
    return json.dumps(build_roomodes(modes), indent=2, ensure_ascii=False) + "\n"


def render_modes(modes: Iterable[ModeDescriptor], output_format: OutputFormat = "yaml") -> str:
    if output_format == "json":
        return render_json(modes)
    return render_yaml(modes)
