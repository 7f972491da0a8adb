"""Main entry point for the regiondash application.

Sets up the Typer CLI application, performs dependency injection (Composition Root),
defines CLI commands, and delegates execution to the CommandHandler.
"""

import asyncio
import logging
from typing import Any, Coroutine, Dict, Optional

import typer
from typing_extensions import Annotated

logger = logging.getLogger(__name__)

# --- Core Layer ---
from regiondash.core.command_handler import CommandHandler
from regiondash.core.services.dashboard_service import DashboardService

# --- Infrastructure Layer ---
# Config
from regiondash.infrastructure.config.settings import (
    get_api_base_url,
    get_cache_ttl_seconds,
    get_config,
    get_request_timeout_seconds,
    load_configuration,
)
# UI
from regiondash.infrastructure.cli.display import ConsoleDisplay
# API
from regiondash.infrastructure.api.manager_client import ManagerApiClient
# Cache
from regiondash.infrastructure.cache.caching_service import CachingServiceImpl
# Monitoring
from regiondash.infrastructure.monitoring.logger_setup import (
    DEFAULT_LOG_FORMAT,
    level_from_name,
    setup_logging,
)

# --- Dependency Injection Container (Manual) ---

def create_dependencies() -> Dict[str, Any]:
    """Creates and wires up all dependencies for the application.

    This acts as the Composition Root.
    """
    load_configuration()
    setup_logging(
        log_level=level_from_name(get_config('logging.level')),
        log_format=get_config('logging.format', DEFAULT_LOG_FORMAT),
        log_file=get_config('logging.file'),
    )
    logger.info("Configuration and logging initialized.")

    dependencies: Dict[str, Any] = {}
    dependencies['ui'] = ConsoleDisplay()
    dependencies['cache_service'] = CachingServiceImpl(ttl=get_cache_ttl_seconds())
    dependencies['manager_api'] = ManagerApiClient(
        base_url=get_api_base_url(),
        timeout_seconds=get_request_timeout_seconds(),
    )
    dependencies['dashboard_service'] = DashboardService(
        manager_api=dependencies['manager_api'],
        cache_service=dependencies['cache_service'],
    )
    dependencies['command_handler'] = CommandHandler(
        dashboard_service=dependencies['dashboard_service'],
        ui=dependencies['ui'],
    )
    logger.info("All dependencies initialized successfully.")
    return dependencies

# Created on first command so importing the module has no side effects
_dependencies: Optional[Dict[str, Any]] = None

def get_dependencies() -> Dict[str, Any]:
    global _dependencies
    if _dependencies is None:
        _dependencies = create_dependencies()
    return _dependencies

def get_handler() -> CommandHandler:
    return get_dependencies()['command_handler']

# --- Typer App Definition ---
app = typer.Typer(
    name="regiondash",
    help="regiondash: manager region statistics dashboard.",
    add_completion=False,
)

# --- Helper for Running Async Commands ---
def run_async(coro: Coroutine[Any, Any, None]) -> None:
    """Runs an async command handler from a sync Typer command."""
    try:
        asyncio.run(coro)
    except Exception as e:
        logger.error(f"Error executing async command: {e}", exc_info=True)
        get_dependencies()['ui'].display_error(f"Command execution failed: {e}")
        raise typer.Exit(code=1)

# --- CLI Commands ---

@app.command(name="managers")
def managers_command():
    """Lists the available managers."""
    run_async(get_handler().handle_list_managers())

@app.command(name="show")
def show_command(
    manager_id: Annotated[int, typer.Argument(help="Id of the manager to show.")],
):
    """Shows region overview, customer distribution and hierarchy for a manager."""
    run_async(get_handler().handle_show(manager_id))

@app.command(name="dashboard")
def dashboard_command():
    """Starts the interactive dashboard."""
    get_handler().start_dashboard()

@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context):
    """Main entry point. Starts the interactive dashboard if no command is given."""
    if ctx.invoked_subcommand is None:
        logger.info("No command invoked, starting interactive dashboard.")
        get_handler().start_dashboard()

# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()

if __name__ == "__main__":
    cli_entry_point()
