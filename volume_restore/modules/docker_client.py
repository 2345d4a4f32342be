import logging
import subprocess
from typing import Dict, List

logger = logging.getLogger(__name__)

class DockerClient:
    def __init__(self, binary: str = "docker"):
        """Initialize the Docker client with the CLI binary to call."""
        self.binary = binary
        logger.info(f"Initialized Docker client using binary: {binary}")

    def volume_exists(self, volume_name: str) -> bool:
        """Check whether a named volume is already known to Docker."""
        try:
            result = subprocess.run(
                [self.binary, "volume", "inspect", volume_name],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL
            )
        except OSError as e:
            logger.error(f"Error checking volume {volume_name}: {str(e)}")
            raise
        exists = result.returncode == 0
        logger.info(f"Volume {volume_name} exists: {exists}")
        return exists

    def list_volumes(self) -> List[Dict]:
        """Get all volumes with their driver."""
        try:
            result = subprocess.run(
                [self.binary, "volume", "ls", "--format", "{{.Name}}\t{{.Driver}}"],
                capture_output=True,
                text=True,
                check=True
            )
        except (OSError, subprocess.CalledProcessError) as e:
            logger.error(f"Error listing volumes: {str(e)}")
            raise

        volumes = []
        for line in result.stdout.splitlines():
            if not line.strip():
                continue
            name, _, driver = line.partition("\t")
            volumes.append({'Name': name, 'Driver': driver or 'N/A'})
        return volumes

    def execute(self, command: str) -> bool:
        """
        Run a shell command and wait for it to finish.

        Args:
            command: The full command line, passed to the shell as-is

        Returns:
            bool: True if the command exited with status 0, False otherwise
        """
        logger.info(f"Executing command: {command}")
        try:
            result = subprocess.run(command, shell=True)
        except OSError as e:
            logger.error(f"Error executing command: {str(e)}")
            return False

        if result.returncode != 0:
            logger.error(f"Command exited with status {result.returncode}")
            return False
        logger.info("Command completed successfully")
        return True
