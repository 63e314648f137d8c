"""Defines the command-line interface for the userval application.

This module uses the `click` library to expose the validator on the command
line. Each command validates one or more fields with the rules configured in
the active configuration and exits with status 1 if any field fails.
"""
import json
import logging
import sys
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .core.builder import create
from .core.config import Config
from .core.validator import UserValidator, ValidationResult

# Set up basic logging.
logger = logging.getLogger(__name__)


def _make_console(config: Config) -> Console:
    """Creates the rich console, honouring the `colors` setting."""
    return Console(emoji=True, highlight=False, no_color=not config.get("colors", True))


def _load_validator(config_path: Optional[str]) -> Tuple[Config, UserValidator]:
    """Loads the configuration and builds a validator from it.

    Args:
        config_path: An optional path to a custom config file.

    Returns:
        A tuple containing the loaded config and the configured validator.
    """
    config_obj = Config(config_path=config_path)
    validator = create().with_config(config_obj).build()
    logger.info(f"Using validator settings: {validator.settings}")
    return config_obj, validator


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="pyuserval")
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
def main(verbose: bool, debug: bool) -> None:
    """Validate emails, usernames and passwords against configurable rules.

    Every command reports the first rule each field breaks and exits with a
    non-zero status if any field is invalid.
    """
    log_level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.debug("Debug mode enabled.")


@main.command()
@click.argument("value")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to config file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
def email(value: str, config_path: Optional[str], json_output: bool) -> None:
    """Validate an email address."""
    config_obj, validator = _load_validator(config_path)
    _report([validator.check_email(value)], config_obj, json_output)


@main.command()
@click.argument("value")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to config file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
def username(value: str, config_path: Optional[str], json_output: bool) -> None:
    """Validate a username."""
    config_obj, validator = _load_validator(config_path)
    _report([validator.check_username(value)], config_obj, json_output)


@main.command()
@click.argument("value")
@click.option("--username", "-u", "username_value", help="The account's username; the password must differ from it.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to config file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
def password(value: str, username_value: Optional[str], config_path: Optional[str], json_output: bool) -> None:
    """Validate a password, optionally against a username."""
    config_obj, validator = _load_validator(config_path)
    _report([validator.check_password(username_value, value)], config_obj, json_output)


@main.command()
@click.option("--email", "email_value", help="Email address to validate.")
@click.option("--username", "username_value", help="Username to validate.")
@click.option("--password", "password_value", help="Password to validate.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to config file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
def check(
    email_value: Optional[str],
    username_value: Optional[str],
    password_value: Optional[str],
    config_path: Optional[str],
    json_output: bool,
) -> None:
    """Validate several fields of one account at once.

    Each supplied field is validated on its own and reports only the first
    rule it breaks. The username, when given, is also used for the
    password's username comparison.
    """
    if email_value is None and username_value is None and password_value is None:
        raise click.UsageError("Provide at least one of --email, --username or --password.")

    config_obj, validator = _load_validator(config_path)
    results = []
    if email_value is not None:
        results.append(validator.check_email(email_value))
    if username_value is not None:
        results.append(validator.check_username(username_value))
    if password_value is not None:
        results.append(validator.check_password(username_value, password_value))
    _report(results, config_obj, json_output)


def _report(results: List[ValidationResult], config: Config, json_output: bool) -> None:
    """Prints the results and exits with status 1 if any field failed.

    Args:
        results: The validation results to report.
        config: The application's configuration object.
        json_output: Print machine-readable JSON instead of tables.
    """
    if json_output:
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        _display_results(results, _make_console(config))

    if not all(r.valid for r in results):
        sys.exit(1)


def _display_results(results: List[ValidationResult], console: Console) -> None:
    """Displays validation results in a formatted table.

    Args:
        results: The validation results to display.
        console: The console to print to.
    """
    table = Table(title="Validation Results")
    table.add_column("Field", style="cyan")
    table.add_column("Status")
    table.add_column("Error")
    table.add_column("Message")
    for res in results:
        status = "[green]Valid[/green]" if res.valid else "[red]Invalid[/red]"
        table.add_row(res.field, status, res.kind or "", res.message or "")
    console.print(table)

    failed = [r for r in results if not r.valid]
    if failed:
        console.print(Panel(f"{len(failed)} of {len(results)} field(s) failed validation.", style="red", title="Validation Failed"))


@main.command()
@click.argument("action", type=click.Choice(['get', 'set', 'list', 'reset']), required=True)
@click.argument("key", type=str, required=False)
@click.argument("value", type=str, required=False)
def config(action: str, key: Optional[str], value: Optional[str]) -> None:
    """Manage the userval configuration.

    This command allows you to view, set, and reset configuration values
    that are stored in the user-level configuration file.

    \b
    ACTION:
        get <key>       Get a configuration value.
        set <key> <value> Set a configuration value.
        list            List all current configuration values.
        reset           Reset the configuration to its default state.

    Put `--` before values starting with a dash, e.g.
    `userval config set -- username.min_length -1`.
    """
    config_obj = Config()
    console = _make_console(config_obj)
    if action == "list":
        console.print(Panel(escape(json.dumps(config_obj.config, indent=2, ensure_ascii=False)), title="Current Configuration"))
    elif action == "get":
        if not key:
            raise click.UsageError("'get' action requires a key.")
        click.echo(config_obj.get(key))
    elif action == "set":
        if not key or value is None:
            raise click.UsageError("'set' action requires a key and a value.")
        processed_value = Config.parse_value(key, value)
        config_obj.set(key, processed_value)
        try:
            config_obj.save_user_config()
        except IOError as e:
            raise click.ClickException(f"Error saving configuration: {e}") from e
        console.print(f"[green]'{escape(key)}' set to '{escape(str(processed_value))}' and saved to user config.[/green]")
    elif action == "reset":
        if Config.reset_user_config():
            console.print("[green]Configuration reset to defaults.[/green]")
        else:
            console.print("[yellow]No user configuration file to reset.[/yellow]")


if __name__ == "__main__":
    main()
