"""
Configuration package for solscaffold.

Contains Foundry project path resolution, router defaults and logging setup.
"""

from solscaffold.config.settings import (
    DEFAULT_DEPLOYER,
    DEFAULT_SALT,
    ROUTERS_SUBDIR,
    ProjectPaths,
    RouterConfig,
    load_project_paths,
    load_router_config,
    parse_deployer,
    parse_salt,
)

from solscaffold.config.logging_config import (
    LOG_DIR,
    setup_logger,
    get_cli_logger,
)

__all__ = [
    # Settings
    'DEFAULT_DEPLOYER',
    'DEFAULT_SALT',
    'ROUTERS_SUBDIR',
    'ProjectPaths',
    'RouterConfig',
    'load_project_paths',
    'load_router_config',
    'parse_deployer',
    'parse_salt',

    # Logging
    'LOG_DIR',
    'setup_logger',
    'get_cli_logger',
]
