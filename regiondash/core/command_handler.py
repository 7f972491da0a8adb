"""Command Handler: Orchestrates CLI command execution.

Receives commands from the main entry point (main.py), delegates the work
to the DashboardService and renders the resulting state through the
UserInterface. Also runs the interactive dashboard loop.
"""

import asyncio
import logging
from typing import Optional

from regiondash.core import projections
from regiondash.core.services.dashboard_service import DashboardService
from regiondash.domain.interfaces.user_interface import UserInterface
from regiondash.domain.models.common import ManagerId

logger = logging.getLogger(__name__)

DASHBOARD_PROMPT = "Manager id (blank clears, 'c' clears cache, 'r' reloads, 'q' quits): "
QUIT_COMMANDS = ("q", "quit", "exit")
RELOAD_COMMANDS = ("r", "reload")
CLEAR_CACHE_COMMANDS = ("c", "clear")

class CommandHandler:
    """Handles incoming commands and delegates to the dashboard service."""

    def __init__(self, dashboard_service: DashboardService, ui: UserInterface):
        """Initializes the CommandHandler with the service and the UI."""
        self.dashboard_service = dashboard_service
        self.ui = ui

    def render_managers(self) -> None:
        """Shows the manager list, or the list error banner."""
        service = self.dashboard_service
        if service.list_state.error:
            self.ui.display_error(service.list_state.error)
        self.ui.display_managers(service.managers)

    def render_dashboard(self) -> None:
        """Shows the three projection tables for the current state.

        On failure the error banner is shown above placeholder tables, so the
        layout stays the same whether or not data is available.
        """
        service = self.dashboard_service
        if service.data_state.error:
            self.ui.display_error(service.data_state.error)

        data = service.manager_data
        region_name = data.details.region_name if data else None
        self.ui.display_table(
            f"Overview for {region_name or 'Selected Region'}",
            projections.region_overview(data),
        )
        self.ui.display_table("Customers by Region Level", projections.customer_distribution(data))
        self.ui.display_table("Region Hierarchy", projections.region_hierarchy(data))

    async def handle_list_managers(self) -> None:
        """Handles the 'managers' command."""
        logger.info("Handling 'managers' command")
        try:
            await self.dashboard_service.load_manager_list()
        except Exception as e:
            logger.error(f"Listing managers failed: {e}", exc_info=True)
            self.ui.display_error(f"Listing managers failed: {e}")
            return
        self.render_managers()

    async def handle_show(self, manager_id: int) -> None:
        """Handles the 'show' command for one manager."""
        logger.info(f"Handling 'show' command for manager: {manager_id}")
        try:
            self.ui.display_loading(f"Loading data for manager {manager_id}...")
            await self.dashboard_service.load_manager_data(ManagerId(manager_id))
        except Exception as e:
            logger.error(f"Show command failed: {e}", exc_info=True)
            self.ui.display_error(f"Show failed: {e}")
            return
        self.render_dashboard()

    def handle_clear_cache(self) -> None:
        """Handles the dashboard's clear-cache action."""
        logger.info("Handling clear-cache action")
        self.dashboard_service.clear_cache()
        self.ui.display_info("Cache cleared.")

    def _parse_manager_id(self, raw: str) -> Optional[ManagerId]:
        try:
            return ManagerId(int(raw))
        except ValueError:
            self.ui.display_error(f"Invalid manager id: '{raw}'")
            return None

    async def run_dashboard(self) -> None:
        """Interactive loop: list managers once, then react to selections."""
        await self.handle_list_managers()

        while True:
            raw = self.ui.get_prompt(DASHBOARD_PROMPT).strip()
            command = raw.lower()

            if command in QUIT_COMMANDS:
                logger.info("Dashboard loop ended by user")
                break

            if command in RELOAD_COMMANDS:
                self.dashboard_service.clear_cache()
                await self.handle_list_managers()
                continue

            if command in CLEAR_CACHE_COMMANDS:
                self.handle_clear_cache()
                continue

            if not raw:
                self.dashboard_service.select_manager(None)
                self.ui.display_info("Selection cleared.")
                self.render_dashboard()
                continue

            manager_id = self._parse_manager_id(raw)
            if manager_id is None:
                continue

            self.ui.display_loading(f"Loading data for manager {manager_id}...")
            task = self.dashboard_service.select_manager(manager_id)
            if task is not None:
                await task
            self.render_dashboard()

    def start_dashboard(self) -> None:
        """Runs the interactive dashboard until the user quits."""
        logger.info("Starting interactive dashboard.")
        try:
            asyncio.run(self.run_dashboard())
        except (KeyboardInterrupt, EOFError):
            logger.info("Dashboard interrupted by user")
        except Exception as e:
            logger.error(f"Failed to run dashboard: {e}", exc_info=True)
            self.ui.display_error(f"Failed to run dashboard: {e}")
