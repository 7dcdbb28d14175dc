"""
Host-specific configuration management utility.

Selects the settings env file for the current machine so one checkout can be
shared between hosts that talk to different Solr servers.
"""

import logging
import socket
from pathlib import Path

BASE_SETTINGS_FILE = "solr-post.env"


def get_hostname() -> str:
    """Get the current hostname (without domain)."""
    return socket.gethostname().split(".")[0]


def get_hostname_settings_file() -> str:
    """
    Get the appropriate settings file for this host.

    Logic:
    1. Get current hostname
    2. Use {hostname}-solr-post.env if it exists
    3. Otherwise fall back to solr-post.env (which may not exist either)

    Returns:
        str: Path to the settings file pydantic-settings should read
    """
    try:
        host_settings = Path(f"{get_hostname()}-{BASE_SETTINGS_FILE}")
        if host_settings.exists():
            logging.debug(f"Using host-specific configuration: {host_settings}")
            return str(host_settings)
    except OSError as e:
        logging.error(f"Error resolving host-specific settings: {e}")

    return BASE_SETTINGS_FILE


def list_all_settings_files() -> list[str]:
    """
    List all available settings files (base + host-specific).

    Returns:
        list[str]: List of settings file paths
    """
    settings_files = []

    if Path(BASE_SETTINGS_FILE).exists():
        settings_files.append(BASE_SETTINGS_FILE)

    for file_path in Path(".").glob(f"*-{BASE_SETTINGS_FILE}"):
        settings_files.append(str(file_path))

    return settings_files
