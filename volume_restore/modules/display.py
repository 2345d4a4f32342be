from typing import List, Dict, Mapping
from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

console = Console()

def confirm_abort() -> bool:
    """Ask the operator whether to abort. True means do not proceed."""
    return Confirm.ask("Abort the current operation?", default=False, console=console)

def display_restore_plan(volume_name: str, archive_path: str, interactive: bool) -> None:
    """Display what is about to be restored in a table format."""
    table = Table(title="Restore Plan")
    table.add_column("Volume", style="cyan")
    table.add_column("Archive", style="green")
    table.add_column("Interactive", style="yellow")

    table.add_row(volume_name, archive_path, "Yes" if interactive else "No")

    console.print(table)

def display_volumes(volumes: List[Dict]) -> None:
    """Display available volumes in a table format."""
    table = Table(title="Docker Volumes")
    table.add_column("Index", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Driver", style="yellow")

    for idx, volume in enumerate(volumes, 1):
        table.add_row(str(idx), volume['Name'], volume['Driver'])

    console.print(table)

def display_formats(extension_map: Mapping[str, str]) -> None:
    """Display supported archive extensions and how each one is extracted."""
    table = Table(title="Supported Archive Formats")
    table.add_column("Extension", style="cyan")
    table.add_column("Command", style="green")

    for extension, command in sorted(extension_map.items()):
        table.add_row(f".{extension}", command)

    console.print(table)
