"""Terminal user interface for the Date Validator."""

import textual
from textual import app, containers, reactive, widgets

from datecheck.features import validators
from datecheck.model import config, validator


class DateCheckApp(app.App):
    """Enter a date in separate fields or a single field and check it.

    The date is validated again after every change to any input field.
    """

    CSS_PATH = "../styles/main.tcss"
    TITLE = "Date Validator"
    BINDINGS = [
        ("s", "separate_mode", "Separate Fields"),
        ("f", "single_mode", "Single Field"),
        ("q", "quit", "Quit"),
    ]
    input_mode: reactive.reactive[config.InputMode] = reactive.reactive(
        config.InputMode.SEPARATE, init=False
    )
    last_result: validator.ValidationResult | None = None
    """Most recent result, kept for inspection."""

    def compose(self) -> app.ComposeResult:
        """Add widgets to screen."""
        yield widgets.Header()
        with containers.HorizontalGroup(id="mode-buttons"):
            yield widgets.Button("Separate Fields", id="separate-mode")
            yield widgets.Button("Single Field", id="single-mode")

        with containers.HorizontalGroup(id="separate-fields", classes="date-fields"):
            with containers.VerticalGroup():
                yield widgets.Label("Day")
                yield widgets.Input(
                    placeholder="DD",
                    id="day-input",
                    validators=[validators.IntegerFieldValidator()],
                )
            with containers.VerticalGroup():
                yield widgets.Label("Month")
                yield widgets.Input(
                    placeholder="MM",
                    id="month-input",
                    validators=[validators.IntegerFieldValidator()],
                )
            with containers.VerticalGroup():
                yield widgets.Label("Year")
                yield widgets.Input(
                    placeholder="YYYY",
                    id="year-input",
                    validators=[validators.IntegerFieldValidator()],
                )

        with containers.VerticalGroup(id="single-field", classes="date-fields"):
            yield widgets.Label("Date")
            yield widgets.Input(
                placeholder="DD/MM/YYYY, DD-MM-YYYY or YYYY-MM-DD",
                id="date-input",
                validators=[validators.FreeTextDateValidator()],
            )

        yield widgets.Label("", id="result-message")
        yield widgets.Label("", id="date-info")
        yield widgets.Footer()

    def on_mount(self) -> None:
        """Start in the configured input mode."""
        self.input_mode = config.settings.input_mode
        self._show_input_mode()

    @textual.on(widgets.Button.Pressed, "#separate-mode")
    def action_separate_mode(self) -> None:
        """Enter the day, month and year in their own fields."""
        self.input_mode = config.InputMode.SEPARATE

    @textual.on(widgets.Button.Pressed, "#single-mode")
    def action_single_mode(self) -> None:
        """Enter the whole date in one field."""
        self.input_mode = config.InputMode.SINGLE

    def watch_input_mode(self) -> None:
        """Swap the visible input fields."""
        self._show_input_mode()

    def _show_input_mode(self) -> None:
        separate = self.input_mode == config.InputMode.SEPARATE
        self.query_one("#separate-fields").display = separate
        self.query_one("#single-field").display = not separate
        self.query_one("#separate-mode", widgets.Button).variant = (
            "primary" if separate else "default"
        )
        self.query_one("#single-mode", widgets.Button).variant = (
            "default" if separate else "primary"
        )
        self.validate_date()

    @textual.on(widgets.Input.Changed)
    def _input_changed(self, event: widgets.Input.Changed) -> None:
        """Check the date again whenever a field changes."""
        textual.log(f"Input changed: {event.input.id}={event.value!r}")
        self.validate_date()

    def validate_date(self) -> validator.ValidationResult:
        """Validate the fields for the current input mode and show the result."""
        if self.input_mode == config.InputMode.SEPARATE:
            result = validator.validate_components(
                self.query_one("#day-input", widgets.Input).value,
                self.query_one("#month-input", widgets.Input).value,
                self.query_one("#year-input", widgets.Input).value,
            )
        else:
            result = validator.validate_free_text(
                self.query_one("#date-input", widgets.Input).value
            )
        self.show_result(result)
        return result

    def show_result(self, result: validator.ValidationResult) -> None:
        """Display the message, styled by kind, and any date info."""
        self.last_result = result
        message = self.query_one("#result-message", widgets.Label)
        message.update(result.message)
        message.set_classes(f"result-{result.kind.value}")

        info_label = self.query_one("#date-info", widgets.Label)
        info = result.date_info
        if info is None or not config.settings.show_date_info:
            info_label.update("")
            info_label.display = False
            return
        info_label.update(format_date_info(info))
        info_label.display = True


def format_date_info(info: validator.DateInfo) -> str:
    """One line summary of the facts about a valid date."""
    year_type = "Leap Year" if info.is_leap_year else "Common Year"
    return (
        f"{info.day_of_week}  |  {year_type}  |  {info.days_in_month} days in month"
    )
