from pathlib import Path
from typing import Optional, Sequence, Union

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rooMaestro.roo_types.modes import ModeDescriptor

default_console = Console()


def print_generation_summary(
    modes: Sequence[ModeDescriptor],
    roomodes_path: Union[str, Path],
    console: Optional[Console] = None
) -> None:
    """Confirm a successful run: the mode count, then one ``name (slug)`` line per mode."""
    out = console or default_console
    file_name = escape(Path(roomodes_path).name)
    out.print(f"[green]Successfully generated {file_name} configuration with {len(modes)} modes[/green]", soft_wrap=True)
    out.print("\nGenerated modes:")
    for mode in modes:
        out.print(f"  - {escape(mode.name)} ({escape(mode.slug)})", highlight=False, soft_wrap=True)


def pretty_print_modes(modes: Sequence[ModeDescriptor], console: Optional[Console] = None) -> None:
    table = Table(title="Generated Modes", box=box.SIMPLE)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Slug", style="magenta")
    table.add_column("Groups", style="green")
    table.add_column("Source", style="yellow")
    for m in modes:
        table.add_row(escape(m.name), escape(m.slug), ", ".join(m.groups), m.source)
    (console or default_console).print(table)
