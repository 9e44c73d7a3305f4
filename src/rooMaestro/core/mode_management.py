"""Core mode management functionality.

This module runs the generation pipeline: it builds the mode descriptors for
a run configuration, renders them and writes the ``.roomodes`` registry,
replacing whatever the target file held before.
"""

import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

from rich.console import Console

from rooMaestro.core.config import GeneratorConfig, ModeConfigError
from rooMaestro.core.log_config import logger
from rooMaestro.roo_types.modes import ModeDescriptor
from rooMaestro.roomodes.markdown_parsing import load_modes_from_directory
from rooMaestro.roomodes.mode_generation import generate_modes_from_names, sort_modes
from rooMaestro.roomodes.serialization import render_modes
from rooMaestro.ui.common_formatters import print_generation_summary

# mkstemp creates owner-only files
DEFAULT_FILE_MODE = 0o644


def build_modes(config: GeneratorConfig) -> List[ModeDescriptor]:
    """Descriptors for a run, sorted by name.

    Raises:
        ModeConfigError: If the markdown source yields no modes, or two
            documents map to the same slug.
    """
    if config.markdown_dir is None:
        return generate_modes_from_names(config.mode_names)

    modes = sort_modes(load_modes_from_directory(config.markdown_dir))
    if not modes:
        raise ModeConfigError(f"No mode documents could be parsed in {config.markdown_dir}")

    seen: Dict[str, ModeDescriptor] = {}
    for mode in modes:
        if mode.slug in seen:
            raise ModeConfigError(
                f'duplicate mode slug "{mode.slug}" ("{seen[mode.slug].name}" and "{mode.name}") in {config.markdown_dir}'
            )
        seen[mode.slug] = mode
    return modes


def write_roomodes(content: str, roomodes_path: Union[str, Path]) -> None:
    """Replace ``roomodes_path`` with ``content`` (UTF-8).

    The text is written to a temporary file next to the target and renamed
    over it, so the target is either the old or the new document.

    Raises:
        OSError: If the directory is missing or the file cannot be written.
    """
    # Write through a symlinked registry instead of replacing the link
    target = Path(roomodes_path).resolve()
    mode = target.stat().st_mode & 0o777 if target.exists() else DEFAULT_FILE_MODE
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def generate_modes_config(
    config: Optional[GeneratorConfig] = None,
    console: Optional[Console] = None
) -> List[ModeDescriptor]:
    """Generate the modes registry described by ``config``.

    Args:
        config: Run configuration. Defaults to the built-in mode list written
            to ``.roomodes`` in the working directory.
        console: Optional Rich console for the summary. If None, a new console is created.

    Returns:
        The descriptors that were written, in file order.

    Raises:
        OSError: If the registry file cannot be written.
        ModeConfigError: If no modes could be produced.
    """
    if config is None:
        config = GeneratorConfig()
    if console is None:
        console = Console()

    roomodes_path = config.resolve_output_path()
    logger.info(f"Generating modes configuration for {os.path.abspath(roomodes_path)}")

    modes = build_modes(config)
    content = render_modes(modes, config.output_format)

    try:
        if config.use_global:
            roomodes_path.parent.mkdir(parents=True, exist_ok=True)
        write_roomodes(content, roomodes_path)
    except OSError as e:
        reason = e.strerror or str(e)
        logger.error(f"Error generating modes configuration: cannot write {roomodes_path}: {reason}")
        # Report the requested path, not the temporary file
        raise OSError(e.errno, reason, str(roomodes_path)) from e

    logger.info(f"Wrote {len(modes)} modes to {roomodes_path}")
    print_generation_summary(modes, roomodes_path, console=console)
    return modes
