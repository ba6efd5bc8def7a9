"""AEROCODE interactive shell.

A line-oriented command loop over the message bus. Each command prompts for
the fields its operation needs, builds the command object and dispatches it
with the shell's session. A failing command, whatever the cause, is printed
and the loop carries on; end of input (or ``exit``) leaves the loop.

Examples
    $ aerocode shell
    $ AEROCODE_DATA_DIR=/srv/aerocode aerocode shell --id-strategy ulid
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

import click

from aerocode import config
from aerocode.bootstrap import bootstrap
from aerocode.domain.errors import DomainError
from aerocode.domain.value_objects import (
    parse_aircraft_type,
    parse_part_type,
    parse_permission_level,
    parse_test_kind,
    parse_test_result,
)
from aerocode.service_layer import commands, views
from aerocode.service_layer.errors import AccessError
from aerocode.service_layer.messagebus import MessageBus
from aerocode.service_layer.session import Session

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

BANNER = "=== AEROCODE shell ==="  # pragma: no mutate
EXIT_COMMANDS = frozenset({"exit", "quit"})


def _ask(label: str) -> str:
    """Prompt for free text; an empty answer is allowed."""
    return click.prompt(label, default="", show_default=False)


class Shell:
    """Interactive command loop bound to one message bus and one session."""

    def __init__(self, bus: MessageBus, session: Session | None = None) -> None:
        self.bus = bus
        self.session = session if session is not None else Session()
        self._actions: dict[str, tuple[Callable[[], None], str]] = {
            "help": (self.show_help, "List available commands"),
            "create-employee": (self.create_employee, "Register an employee"),
            "login": (self.login, "Log in"),
            "logout": (self.logout, "Log out"),
            "whoami": (self.whoami, "Show the logged-in employee"),
            "create-aircraft": (self.create_aircraft, "Register an aircraft"),
            "list-aircraft": (self.list_aircraft, "List aircraft"),
            "show-aircraft": (self.show_aircraft, "Show one aircraft in detail"),
            "add-part": (self.add_part, "Add a part to an aircraft"),
            "add-stage": (self.add_stage, "Append a stage to an aircraft"),
            "start-stage": (self.start_stage, "Start a stage"),
            "finish-stage": (self.finish_stage, "Finish a stage"),
            "assign-employee": (self.assign_employee, "Assign an employee to a stage"),
            "add-test": (self.add_test, "Add a test to an aircraft"),
            "set-test-result": (self.set_test_result, "Record a test result"),
            "generate-report": (self.generate_report, "Write the delivery report"),
            "delete-employee": (self.delete_employee, "Delete an employee"),
            "delete-aircraft": (self.delete_aircraft, "Delete an aircraft"),
        }

    # --- Loop ---

    def run(self) -> None:
        """Read and execute commands until ``exit`` or end of input."""
        click.echo(BANNER)
        self.show_help()
        while True:
            try:
                name = click.prompt(
                    self._prompt_label(),
                    default="",
                    show_default=False,
                    prompt_suffix="> ",
                ).strip()
            except click.Abort:
                break
            if not name:
                continue
            if name in EXIT_COMMANDS:
                break
            if not self.execute(name):
                break
        click.echo("Bye.")

    def execute(self, name: str) -> bool:
        """Run one named command. Returns False when input ran out mid-command."""
        if (entry := self._actions.get(name)) is None:
            error(f"Unknown command: {name} (type 'help')")
            return True
        action, _ = entry
        try:
            action()
        except click.Abort:
            return False
        except (DomainError, AccessError) as e:
            error(str(e))
        except ValueError as e:
            logger.debug("Invalid input for %s", name, exc_info=True)
            error(str(e))
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.debug("Command %s failed", name, exc_info=True)
            error(str(e) or type(e).__name__)
        return True

    def _prompt_label(self) -> str:
        if (employee := self.session.employee) is None:
            return "\nguest"
        return f"\n{employee.username} ({employee.level.value})"

    # --- Session ---

    def show_help(self) -> None:
        click.echo("Commands:")
        for name, (_, description) in self._actions.items():
            click.echo(f"  {name:<17} {description}")
        click.echo(f"  {'exit':<17} Leave the shell")

    def login(self) -> None:
        username = _ask("Username")
        password = click.prompt("Password", hide_input=True, default="", show_default=False)
        logged_in = self.bus.handle(commands.Login(username, password), self.session)
        if logged_in and (employee := self.session.employee) is not None:
            success(f"Logged in as {employee.name} ({employee.level.value})")
        else:
            warn("Login failed.")

    def logout(self) -> None:
        self.bus.handle(commands.Logout(), self.session)
        success("Logged out.")

    def whoami(self) -> None:
        if (employee := self.session.employee) is None:
            click.echo("Not logged in.")
        else:
            click.echo(f"{employee.name} [{employee.id}] {employee.level.value}")

    # --- Employees ---

    def create_employee(self) -> None:
        cmd = commands.CreateEmployee(
            name=_ask("Name"),
            phone=_ask("Phone"),
            address=_ask("Address"),
            username=_ask("Username (login)"),
            password=click.prompt("Password", hide_input=True, default="", show_default=False),
            level=parse_permission_level(_ask("Level (ADMIN/ENGINEER/OPERATOR)")),
        )
        employee_id = self.bus.handle(cmd, self.session)
        success(f"Employee created: {employee_id} ({cmd.level.value})")

    def delete_employee(self) -> None:
        employee_id = _ask("Employee id")
        self.bus.handle(commands.DeleteEmployee(employee_id), self.session)
        success(f"Employee {employee_id} deleted.")

    # --- Aircraft ---

    def create_aircraft(self) -> None:
        cmd = commands.CreateAircraft(
            code=_ask("Code (unique)"),
            model=_ask("Model"),
            type=parse_aircraft_type(_ask("Type (COMMERCIAL/MILITARY)")),
            capacity=click.prompt("Capacity (passengers)", type=int),
            range=click.prompt("Range (km)", type=float),
        )
        code = self.bus.handle(cmd, self.session)
        success(f"Aircraft {code} created.")

    def delete_aircraft(self) -> None:
        code = _ask("Aircraft code")
        self.bus.handle(commands.DeleteAircraft(code), self.session)
        success(f"Aircraft {code} deleted.")

    def list_aircraft(self) -> None:
        summaries = views.list_aircraft(self.bus.uow.repository)
        if not summaries:
            click.echo("No aircraft registered.")
        for s in summaries:
            click.echo(
                f"{s['code']} - {s['model']} ({s['type']}) - "
                f"Parts:{s['parts']} Stages:{s['stages']} Tests:{s['tests']}"
            )

    def show_aircraft(self) -> None:
        details = views.aircraft_details(self.bus.uow.repository, _ask("Aircraft code"))
        click.echo(json.dumps(details, indent=2, ensure_ascii=False))

    def add_part(self) -> None:
        cmd = commands.AddPart(
            code=_ask("Aircraft code"),
            name=_ask("Part name"),
            type=parse_part_type(_ask("Type (NATIONAL/IMPORTED)")),
            supplier=_ask("Supplier"),
        )
        part_id = self.bus.handle(cmd, self.session)
        success(f"Part added: {part_id}")

    def add_stage(self) -> None:
        cmd = commands.AddStage(
            code=_ask("Aircraft code"),
            name=_ask("Stage name"),
            deadline=_ask("Deadline (ISO date or text)"),
        )
        stage_id = self.bus.handle(cmd, self.session)
        success(f"Stage added: {stage_id}")

    # --- Stages ---

    def start_stage(self) -> None:
        cmd = commands.StartStage(code=_ask("Aircraft code"), stage_id=_ask("Stage id"))
        self.bus.handle(cmd, self.session)
        success(f"Stage {cmd.stage_id} started.")

    def finish_stage(self) -> None:
        cmd = commands.FinishStage(code=_ask("Aircraft code"), stage_id=_ask("Stage id"))
        self.bus.handle(cmd, self.session)
        success(f"Stage {cmd.stage_id} finished.")

    def assign_employee(self) -> None:
        cmd = commands.AssignEmployee(
            code=_ask("Aircraft code"),
            stage_id=_ask("Stage id"),
            employee_id=_ask("Employee id"),
        )
        self.bus.handle(cmd, self.session)
        success(f"Employee {cmd.employee_id} assigned to stage {cmd.stage_id}.")

    # --- Tests ---

    def add_test(self) -> None:
        cmd = commands.AddTest(
            code=_ask("Aircraft code"),
            kind=parse_test_kind(_ask("Kind (ELECTRICAL/HYDRAULIC/AERODYNAMIC)")),
        )
        test_id = self.bus.handle(cmd, self.session)
        success(f"Test added: {test_id}")

    def set_test_result(self) -> None:
        cmd = commands.SetTestResult(
            code=_ask("Aircraft code"),
            test_id=_ask("Test id"),
            result=parse_test_result(_ask("Result (PASSED/FAILED)")),
        )
        self.bus.handle(cmd, self.session)
        success(f"Test {cmd.test_id} recorded as {cmd.result.value}.")

    # --- Reports ---

    def generate_report(self) -> None:
        cmd = commands.GenerateReport(
            code=_ask("Aircraft code"),
            client=_ask("Client name"),
            delivery_date=_ask("Delivery date (ISO)"),
        )
        location = self.bus.handle(cmd, self.session)
        success(f"Report written to {location}")


@click.command()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=config.DATA_DIR_ENV_VAR,
    show_envvar=True,
    default=None,
    help="Directory holding aircraft.json, employees.json and reports (default: ./data).",
)
@click.option(
    "--id-strategy",
    type=click.Choice([s.value for s in config.IdStrategy], case_sensitive=False),
    envvar=config.ID_STRATEGY_ENV_VAR,
    show_envvar=True,
    default=None,
    help="How new employee/part/stage/test ids are generated (default: short).",
)
def shell(data_dir: Path | None, id_strategy: str | None) -> None:
    """Start the interactive AEROCODE shell."""
    container = bootstrap(
        data_dir=data_dir,
        id_strategy=config.parse_id_strategy(id_strategy) if id_strategy else None,
    )
    logger.info("Using data directory %s", container.data_dir)
    Shell(container.message_bus).run()
