"""
Volume Loader Module

Restores an archive into a named Docker volume by running a throwaway
container that mounts the volume and the archive's directory side by side.
"""
import logging
import shlex
from pathlib import Path
from types import MappingProxyType
from typing import Callable, NamedTuple, Optional
from .docker_client import DockerClient
from .display import console, confirm_abort

logger = logging.getLogger(__name__)

EXTENSION_COMMANDS = MappingProxyType({
    'gz': 'gunzip',
    'zip': 'unzip',
    'rar': 'unrar x',
    'tar': 'tar xvf',
    'tgz': 'tar xvzf',
    'tbz2': 'tar xvjf',
})

VOLUME_MOUNT = '/mybackup'
ARCHIVE_MOUNT = '/backup'
DEFAULT_IMAGE = 'alpine'

# Characters still special to the host shell inside a double-quoted string
DOUBLE_QUOTE_SPECIALS = ("\\", "\"", "$", "`")


class ArchivePathError(ValueError):
    """The archive path cannot be turned into an extraction command."""


class UnresolvablePathError(ArchivePathError):
    pass


class MissingExtensionError(ArchivePathError):
    pass


class MissingParentError(ArchivePathError):
    pass


class ArchiveInfo(NamedTuple):
    extension: str
    parent: str
    basename: str


class VolumeLoader:
    def __init__(self, volume_name: str, archive_path: str, interactive: bool,
                 docker_client: Optional[DockerClient] = None,
                 confirm: Callable[[], bool] = confirm_abort,
                 image: str = DEFAULT_IMAGE):
        """Initialize the loader. Inputs are stored as given and checked in load()."""
        self.volume_name = volume_name
        self.archive_path = archive_path
        self.interactive = interactive
        self.extension_map = EXTENSION_COMMANDS
        self.docker_client = docker_client if docker_client is not None else DockerClient()
        self.confirm = confirm
        self.image = image

    def load(self) -> bool:
        """
        Restore the archive into the volume.

        When the volume already exists and the loader is interactive, the
        operator is asked whether to abort; answering yes (confirm() returning
        True) cancels the restore. Non-interactive runs skip the question and
        overwrite.

        Returns:
            bool: True if the extraction container exited successfully, False
            if the restore was cancelled, the format is unsupported or the
            container failed

        Raises:
            ArchivePathError: If the archive path cannot be resolved or lacks
            an extension or parent directory
        """
        if self.docker_client.volume_exists(self.volume_name):
            console.print(f"[yellow]Requested docker volume `{self.volume_name}` already exists.[/yellow]")
            if self.interactive and self.confirm():
                logger.info(f"Restore into existing volume {self.volume_name} cancelled by user")
                console.print("[yellow]Abort, current operation has been cancelled.[/yellow]")
                return False
            logger.info(f"Overwriting existing volume {self.volume_name}")

        console.print("Continuing with loading of archive")

        info = self.resolve_archive()
        decompress = self.extension_map.get(info.extension)
        if decompress is None:
            logger.warning(f"Unsupported archive extension: {info.extension}")
            console.print(f"[red]Abort, file extension `{info.extension}` is not supported.[/red]")
            return False

        command = self.build_command(info, decompress)
        return self.docker_client.execute(command)

    def resolve_archive(self) -> ArchiveInfo:
        """Canonicalize the archive path and split out extension, parent and name."""
        try:
            path = Path(self.archive_path).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            logger.error(f"Error resolving archive path {self.archive_path}: {str(e)}")
            raise UnresolvablePathError(f"Cannot resolve archive path {self.archive_path}: {e}") from e

        if path.parent == path:
            raise MissingParentError(f"Archive {path} has no parent directory")
        if not path.suffix:
            raise MissingExtensionError(f"Archive {path} has no file extension")

        return ArchiveInfo(
            extension=path.suffix[1:].lower(),
            parent=str(path.parent),
            basename=path.name
        )

    def build_command(self, info: ArchiveInfo, decompress: str) -> str:
        """Build the command line that extracts the archive into the volume, using the client's binary."""
        inner = (
            f"cd {VOLUME_MOUNT} && {decompress} "
            f"{ARCHIVE_MOUNT}/{shlex.quote(info.basename)} --strip 1"
        )
        # Backslash goes first so the escapes added below are not doubled
        for char in DOUBLE_QUOTE_SPECIALS:
            inner = inner.replace(char, "\\" + char)
        command = (
            f"{shlex.quote(self.docker_client.binary)} run --rm "
            f"--volume {shlex.quote(self.volume_name + ':' + VOLUME_MOUNT)} "
            f"-v {shlex.quote(info.parent + ':' + ARCHIVE_MOUNT)} "
            f"{shlex.quote(self.image)} sh -c \"{inner}\""
        )
        logger.info(f"Built extraction command: {command}")
        return command
