#!/usr/bin/env python3
"""
Docker Volume Restore Tool

Restores a tar, gzip, zip or rar archive into a named docker volume by
extracting it inside a short-lived container.
"""

from volume_restore.modules.cli import cli

if __name__ == '__main__':
    cli()
