import pytest
from unittest.mock import call

from regiondash.core.command_handler import DASHBOARD_PROMPT, CommandHandler
from regiondash.core.services.dashboard_service import MANAGER_DATA_ERROR, MANAGER_LIST_ERROR


@pytest.fixture
def command_handler(dashboard_service, mock_ui):
    """Fixture to create CommandHandler with a real service over a mocked API."""
    return CommandHandler(dashboard_service=dashboard_service, ui=mock_ui)


def table_calls(mock_ui):
    return {c.args[0]: c.args[1] for c in mock_ui.display_table.call_args_list}


@pytest.mark.asyncio
async def test_handle_list_managers(command_handler, mock_ui, manager):
    await command_handler.handle_list_managers()
    mock_ui.display_managers.assert_called_once_with([manager])
    mock_ui.display_error.assert_not_called()


@pytest.mark.asyncio
async def test_handle_list_managers_failure_shows_banner(command_handler, mock_ui, mock_manager_api):
    mock_manager_api.list_managers.side_effect = RuntimeError("down")
    await command_handler.handle_list_managers()
    mock_ui.display_error.assert_called_once_with(MANAGER_LIST_ERROR)
    mock_ui.display_managers.assert_called_once_with([])


@pytest.mark.asyncio
async def test_handle_show_renders_three_tables(command_handler, mock_ui):
    await command_handler.handle_show(1)

    tables = table_calls(mock_ui)
    assert tables["Overview for East Java"][1] == ["Total Customers", 42]
    assert tables["Customers by Region Level"][1] == ["City", 10]
    assert tables["Region Hierarchy"][3] == ["Surabaya", "East Java", 3]
    mock_ui.display_loading.assert_called_once()
    mock_ui.display_error.assert_not_called()


@pytest.mark.asyncio
async def test_handle_show_failure_renders_banner_and_placeholders(command_handler, mock_ui, mock_manager_api):
    mock_manager_api.get_manager_hierarchy.side_effect = RuntimeError("down")

    await command_handler.handle_show(1)

    mock_ui.display_error.assert_called_once_with(MANAGER_DATA_ERROR)
    tables = table_calls(mock_ui)
    assert tables["Overview for Selected Region"][1:] == [["Total Customers", 0], ["Cities Covered", 0]]
    assert tables["Region Hierarchy"][1] == ["Indonesia", None, 0]


def test_handle_clear_cache(command_handler, mock_ui, cache):
    cache.set("entities", [])
    command_handler.handle_clear_cache()
    assert cache.get("entities") is None
    mock_ui.display_info.assert_called_once_with("Cache cleared.")


@pytest.mark.asyncio
async def test_run_dashboard_clear_cache_forces_refetch(command_handler, mock_ui, mock_manager_api):
    mock_ui.get_prompt.side_effect = ["1", "c", "1", "q"]

    await command_handler.run_dashboard()

    mock_ui.display_info.assert_called_once_with("Cache cleared.")
    assert mock_manager_api.get_manager_details.await_count == 2
    assert mock_manager_api.get_manager_stats.await_count == 2
    assert mock_manager_api.get_manager_hierarchy.await_count == 2


@pytest.mark.asyncio
async def test_run_dashboard_select_reselect_clear_and_quit(command_handler, mock_ui, mock_manager_api):
    mock_ui.get_prompt.side_effect = ["1", "1", "", "q"]

    await command_handler.run_dashboard()

    assert mock_ui.get_prompt.call_args_list == [call(DASHBOARD_PROMPT)] * 4
    mock_manager_api.list_managers.assert_awaited_once()
    # Second selection of manager 1 is a cache hit
    assert mock_manager_api.get_manager_details.await_count == 1
    mock_ui.display_info.assert_called_once_with("Selection cleared.")
    assert command_handler.dashboard_service.selected_manager_id is None
    # Three renders of three tables each
    assert mock_ui.display_table.call_count == 9


@pytest.mark.asyncio
async def test_run_dashboard_reload_bypasses_cache(command_handler, mock_ui, mock_manager_api):
    mock_ui.get_prompt.side_effect = ["r", "quit"]
    await command_handler.run_dashboard()
    assert mock_manager_api.list_managers.await_count == 2


@pytest.mark.asyncio
async def test_run_dashboard_invalid_id(command_handler, mock_ui, mock_manager_api):
    mock_ui.get_prompt.side_effect = ["abc", "exit"]
    await command_handler.run_dashboard()
    mock_ui.display_error.assert_called_once_with("Invalid manager id: 'abc'")
    mock_manager_api.get_manager_details.assert_not_awaited()


def test_start_dashboard_handles_interrupt(command_handler, mock_ui):
    mock_ui.get_prompt.side_effect = KeyboardInterrupt
    command_handler.start_dashboard()
    mock_ui.display_error.assert_not_called()


def test_start_dashboard_error(command_handler, mock_ui):
    mock_ui.get_prompt.side_effect = RuntimeError("terminal gone")
    command_handler.start_dashboard()
    mock_ui.display_error.assert_called_once_with("Failed to run dashboard: terminal gone")
