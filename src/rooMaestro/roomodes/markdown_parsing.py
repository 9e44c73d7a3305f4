"""Build mode descriptors from ``*-mode.md`` prompt documents.

A mode document starts with a ``# <Name> Mode`` heading (optionally preceded
by YAML frontmatter). The text before ``## Custom Instructions`` is the role
definition, the text after it the custom instructions. An optional
``## When to Use`` section supplies the usage hint.
"""

import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from rooMaestro.core.log_config import logger
from rooMaestro.roo_types.modes import ModeDescriptor

from .utils import normalize_slug

MODE_FILE_SUFFIX = "-mode.md"

_HEADING_RE = re.compile(r'^# ([^\n]+) Mode', re.MULTILINE)
_HEADING_STRIP_RE = re.compile(r'^# [^\n]+ Mode\s*', re.MULTILINE)
_CUSTOM_INSTRUCTIONS = '## Custom Instructions'
_CUSTOM_INSTRUCTIONS_RE = re.compile(r'## Custom Instructions[\r\n]+([\s\S]*)')
_ROLE_DEFINITION_RE = re.compile(r'## Role Definition[\r\n]+([\s\S]*?)(?=\n## |$)')
_WHEN_TO_USE_RE = re.compile(r'## When to Use[\r\n]+([\s\S]*?)(?=\n## |$)')


class ModeFileError(ValueError):
    """Raised when a markdown document does not describe a mode."""


def remove_yaml_frontmatter(content: str) -> str:
    if content.startswith('---'):
        end = content.find('---', 3)
        if end != -1:
            return content[end + 3:].strip()
    return content


def _split_when_to_use(text: str) -> Tuple[str, Optional[str]]:
    match = _WHEN_TO_USE_RE.search(text)
    if not match:
        return text, None
    remaining = (text[:match.start()] + text[match.end():]).strip()
    return remaining, match.group(1).strip() or None


def parse_mode_file(content: str, filename: str) -> ModeDescriptor:
    """Parse one mode document.

    Raises:
        ModeFileError: If no ``# <Name> Mode`` heading is found.
    """
    content = remove_yaml_frontmatter(content)

    name_match = _HEADING_RE.search(content)
    if not name_match:
        raise ModeFileError('Could not find mode name in markdown file')
    name = name_match.group(1).strip()
    slug = normalize_slug(name)
    if not slug:
        raise ModeFileError(f'Mode name "{name}" does not produce a usable slug')

    body = _HEADING_STRIP_RE.sub('', content, count=1).strip()
    body, when_to_use = _split_when_to_use(body)

    instructions_match = _CUSTOM_INSTRUCTIONS_RE.search(body)
    custom_instructions = instructions_match.group(1).strip() if instructions_match else None
    before_instructions = body[:body.index(_CUSTOM_INSTRUCTIONS)].strip() if instructions_match else body

    role_definition = before_instructions
    # The orchestrator document keeps extra sections next to its role text
    if filename.lower() == 'maestro-mode.md':
        role_match = _ROLE_DEFINITION_RE.search(body)
        if role_match:
            role_definition = role_match.group(1).strip()

    return ModeDescriptor(
        name=name,
        slug=slug,
        role=role_definition,
        when_to_use=when_to_use or slug,
        custom_instructions=custom_instructions or slug,
    )


def load_modes_from_directory(directory: Union[str, Path]) -> List[ModeDescriptor]:
    """Parse every ``*-mode.md`` file in ``directory``.

    Files that cannot be read or parsed are logged and skipped. Unreadable
    directories raise ``OSError``.
    """
    base = Path(directory)
    mode_files = sorted(p for p in base.iterdir() if p.is_file() and p.name.endswith(MODE_FILE_SUFFIX))
    logger.info(f"Found {len(mode_files)} mode files in {base}")

    modes: List[ModeDescriptor] = []
    for path in mode_files:
        logger.debug(f"Processing {path.name}...")
        try:
            content = path.read_text(encoding="utf-8")
            modes.append(parse_mode_file(content, path.name))
        except (ModeFileError, UnicodeDecodeError, OSError) as e:
            logger.error(f"Error parsing {path.name}: {e}")
    return modes
