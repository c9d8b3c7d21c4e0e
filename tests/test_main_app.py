"""Test the Date Validator terminal application."""

import asyncio

from textual import widgets

from datecheck.model import config, validator
from datecheck.view import main_app


def _message(app: main_app.DateCheckApp) -> str:
    assert app.last_result is not None
    return app.last_result.message


def test_separate_fields() -> None:
    """Typing a day, month and year shows the weekday and date info."""

    async def run() -> None:
        app = main_app.DateCheckApp()
        async with app.run_test() as pilot:
            # Assert initial state
            assert app.input_mode == config.InputMode.SEPARATE
            assert app.query_one("#separate-fields").display
            assert not app.query_one("#single-field").display
            assert _message(app) == "Please fill in all date fields"
            assert app.query_one("#result-message").has_class("result-info")
            # Act
            app.query_one("#day-input", widgets.Input).value = "29"
            app.query_one("#month-input", widgets.Input).value = "2"
            app.query_one("#year-input", widgets.Input).value = "2024"
            await pilot.pause()
            # Assert
            assert _message(app) == "Valid date! This is a Thursday."
            assert app.query_one("#result-message").has_class("result-success")
            assert app.query_one("#date-info").display

    asyncio.run(run())


def test_invalid_separate_fields() -> None:
    """An impossible day shows an error and hides the date info."""

    async def run() -> None:
        app = main_app.DateCheckApp()
        async with app.run_test() as pilot:
            app.query_one("#day-input", widgets.Input).value = "31"
            app.query_one("#month-input", widgets.Input).value = "2"
            app.query_one("#year-input", widgets.Input).value = "2023"
            await pilot.pause()
            assert _message(app) == "Day must be between 1 and 28 for February 2023"
            assert app.query_one("#result-message").has_class("result-error")
            assert not app.query_one("#date-info").display

    asyncio.run(run())


def test_switch_to_single_field() -> None:
    """The Single Field button swaps inputs and validates free text."""

    async def run() -> None:
        app = main_app.DateCheckApp()
        async with app.run_test() as pilot:
            # Act
            await pilot.click("#single-mode")
            await pilot.pause()
            # Assert
            assert app.input_mode == config.InputMode.SINGLE
            assert app.query_one("#single-field").display
            assert not app.query_one("#separate-fields").display
            assert _message(app) == "Please enter a date"
            # Act
            app.query_one("#date-input", widgets.Input).value = "2024-03-15"
            await pilot.pause()
            # Assert
            assert _message(app) == "Valid date! This is a Friday."
            assert app.query_one("#date-info").display
            # Act
            app.query_one("#date-input", widgets.Input).value = "15/15/2024"
            await pilot.pause()
            # Assert
            assert _message(app) == "Month must be between 1 and 12"
            # Act
            await pilot.click("#separate-mode")
            await pilot.pause()
            # Assert
            assert app.input_mode == config.InputMode.SEPARATE
            assert _message(app) == "Please fill in all date fields"

    asyncio.run(run())


def test_configured_mode_and_hidden_info() -> None:
    """Settings choose the starting mode and can hide date info."""
    # Arrange
    config.settings.input_mode = config.InputMode.SINGLE
    config.settings.show_date_info = False

    async def run() -> None:
        app = main_app.DateCheckApp()
        async with app.run_test() as pilot:
            assert app.query_one("#single-field").display
            app.query_one("#date-input", widgets.Input).value = "29/02/2024"
            await pilot.pause()
            assert app.last_result is not None
            assert app.last_result.is_valid
            assert not app.query_one("#date-info").display

    asyncio.run(run())


def test_format_date_info() -> None:
    """Date info reads like the summary shown under the message."""
    # Arrange
    leap_info = validator.DateInfo("Thursday", True, 29)
    common_info = validator.DateInfo("Friday", False, 31)
    # Act, Assert
    assert main_app.format_date_info(leap_info) == (
        "Thursday  |  Leap Year  |  29 days in month"
    )
    assert "Common Year" in main_app.format_date_info(common_info)
