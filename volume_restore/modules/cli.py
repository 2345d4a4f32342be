import click
import copy
import os
import yaml
import logging
from typing import Optional
from datetime import datetime
from .docker_client import DockerClient
from .loader import VolumeLoader, ArchivePathError, EXTENSION_COMMANDS, DEFAULT_IMAGE
from .display import console, display_restore_plan, display_volumes, display_formats

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'config.yaml'
DEFAULT_CONFIG = {
    'docker': {
        'binary': 'docker',
        'image': DEFAULT_IMAGE,
    },
    'restore': {
        'interactive': True,
        'log_level': 'INFO',
        'log_file': 'volume_restore.log',
    },
}

def merge_config(base: dict, override: dict) -> dict:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged

def load_config(config_path: str) -> dict:
    """Load configuration from YAML file on top of the defaults."""
    if config_path == DEFAULT_CONFIG_PATH and not os.path.exists(config_path):
        return copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(config_path, 'r') as f:
            return merge_config(DEFAULT_CONFIG, yaml.safe_load(f))
    except Exception as e:
        console.print(f"[red]Error loading config file: {str(e)}[/red]")
        raise

def setup_logging(config: dict):
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, config['restore']['log_level']),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        filename=config['restore']['log_file']
    )

def display_progress(description: str, duration: float):
    """Display progress with duration."""
    console.print(f"[green]✓[/green] {description} ({duration:.2f} seconds)")

@click.group()
def cli():
    """Docker Volume Restore Tool"""
    pass

@cli.command()
@click.argument('volume')
@click.argument('archive')
@click.option('--interactive/--no-interactive', default=None,
              help='Ask before overwriting an existing volume')
@click.option('--config', default=DEFAULT_CONFIG_PATH, help='Path to configuration file')
def restore(volume: str, archive: str, interactive: Optional[bool], config: str):
    """Restore ARCHIVE into the docker volume VOLUME"""
    start_time = datetime.now()
    try:
        config_data = load_config(config)
        setup_logging(config_data)
        if interactive is None:
            interactive = bool(config_data['restore']['interactive'])
        logger.info(f"Starting restore of {archive} into volume {volume} (interactive: {interactive})")

        display_restore_plan(volume, archive, interactive)
        loader = VolumeLoader(
            volume,
            archive,
            interactive,
            docker_client=DockerClient(binary=config_data['docker']['binary']),
            image=config_data['docker']['image']
        )
        success = loader.load()
    except ArchivePathError as e:
        logger.error(f"Invalid archive {archive}: {str(e)}")
        console.print(f"[red]Invalid archive: {str(e)}[/red]")
        raise click.Abort()
    except Exception as e:
        total_duration = datetime.now() - start_time
        logger.error(f"Error during restoration after {total_duration.total_seconds():.2f} seconds: {str(e)}")
        console.print(f"[red]Error during restoration: {str(e)}[/red]")
        raise click.Abort()

    total_duration = datetime.now() - start_time
    if not success:
        logger.info(f"Restore into volume {volume} did not complete after {total_duration.total_seconds():.2f} seconds")
        console.print(f"[red]Volume {volume} was not restored[/red]")
        raise SystemExit(1)

    logger.info(f"Restore into volume {volume} completed in {total_duration.total_seconds():.2f} seconds")
    display_progress(f"Volume {volume} restored from {archive}", total_duration.total_seconds())

@cli.command()
@click.option('--config', default=DEFAULT_CONFIG_PATH, help='Path to configuration file')
def volumes(config: str):
    """List existing docker volumes"""
    try:
        config_data = load_config(config)
        setup_logging(config_data)
        display_volumes(DockerClient(binary=config_data['docker']['binary']).list_volumes())
    except Exception as e:
        logger.error(f"Error listing volumes: {str(e)}")
        console.print(f"[red]Error listing volumes: {str(e)}[/red]")
        raise click.Abort()

@cli.command()
def formats():
    """List supported archive formats"""
    display_formats(EXTENSION_COMMANDS)

if __name__ == '__main__':
    cli()
