"""Start the Date Validator."""
import argparse
import json
import pathlib
import sys

import rich

from datecheck.model import config, validator
import datecheck.view.main_app


KIND_STYLES = {
    validator.ResultKind.SUCCESS: "bold green",
    validator.ResultKind.ERROR: "bold red",
    validator.ResultKind.INFO: "yellow",
}


def build_parser() -> argparse.ArgumentParser:
    """Define command line arguments."""
    parser = argparse.ArgumentParser(prog="datecheck")
    subparsers = parser.add_subparsers()
    parser.set_defaults(func=None)

    app_parser = subparsers.add_parser("app", help="Run the Date Validator application.")
    app_parser.set_defaults(func=run_app)
    app_parser.add_argument(
        "-c", "--config_path",
        help="Path to config file",
        type=pathlib.Path,
        default=None
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Validate a single date and exit with status 0 if it is valid."
    )
    check_parser.set_defaults(func=check_date)
    check_parser.add_argument(
        "components",
        nargs="*",
        metavar="DAY MONTH YEAR",
        help="Day, month and year as separate values.",
    )
    check_parser.add_argument(
        "-t", "--text",
        default=None,
        help="Date as one string: DD/MM/YYYY, DD-MM-YYYY or YYYY-MM-DD.",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON.",
    )
    return parser


def run_app(args: argparse.Namespace) -> int:
    """Run the Date Validator TUI application."""
    config.settings.update_from_args(args)
    app = datecheck.view.main_app.DateCheckApp()
    app.run()
    return 0


def check_date(args: argparse.Namespace) -> int:
    """Validate one date from the command line and print the result."""
    if args.text is not None:
        result = validator.validate_free_text(args.text)
    else:
        result = validator.validate_components(*args.components)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_result(result)
    return 0 if result.is_valid else 1


def print_result(result: validator.ValidationResult) -> None:
    """Print a validation result with rich formatting."""
    rich.print(f"[{KIND_STYLES[result.kind]}]{result.message}[/]")
    info = result.date_info
    if info is not None:
        rich.print(f"  Day of week:   {info.day_of_week}")
        rich.print(f"  Leap year:     {'yes' if info.is_leap_year else 'no'}")
        rich.print(f"  Days in month: {info.days_in_month}")


def main(argv: list[str] | None = None) -> int:
    """Function to run the app, used for the pyproject.toml entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.func is None:
        parser.print_help()
        return 0
    if args.func is check_date:
        if args.text is not None and args.components:
            parser.error("give either DAY MONTH YEAR or --text, not both")
        if args.text is None and len(args.components) != 3:
            parser.error("check needs DAY MONTH YEAR or --text")
    try:
        status = args.func(args)
    except config.ConfigError as err:
        parser.error(str(err))
    return status


if __name__ == "__main__":
    sys.exit(main())
