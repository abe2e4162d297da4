"""Employee account management commands.

Employees have no HTTP signup route; operators provision them here.
"""

import asyncio
from typing import Annotated

import typer

from src.core.database import AsyncSessionLocal
from src.core.database import close_database
from src.domains.customers.validators import MESSAGES
from src.domains.customers.validators import is_valid
from src.domains.employees.repositories import EmployeeRepository
from src.exceptions import ConflictException


app = typer.Typer(no_args_is_help=True)


async def _create_employee(
    employee_id: str,
    password: str,
    full_name: str,
    role: str,
    department: str,
) -> str:
    try:
        async with AsyncSessionLocal() as session:
            repo = EmployeeRepository(session)
            employee = await repo.create_employee(
                employee_id=employee_id,
                password=password,
                full_name=full_name,
                role=role,
                department=department,
            )
            await repo.commit()
            return str(employee.pk)
    finally:
        await close_database()


@app.command("create")
def create_employee(
    employee_id: Annotated[str, typer.Argument(help="Unique staff identifier used to log in")],
    full_name: Annotated[str, typer.Option("--full-name", "-n", help="Display name")],
    role: Annotated[str, typer.Option("--role", "-r", help="Job role embedded in tokens")],
    department: Annotated[str, typer.Option("--department", "-d", help="Organisational unit")],
    password: Annotated[
        str,
        typer.Option(prompt=True, hide_input=True, confirmation_prompt=True, help="Login password"),
    ],
) -> None:
    """Provision a new employee account."""
    if not is_valid("password", password):
        typer.secho(MESSAGES["password"], fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        pk = asyncio.run(_create_employee(employee_id, password, full_name, role, department))
    except ConflictException as exc:
        typer.secho(exc.message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from None

    typer.secho(f"Employee {employee_id} created ({pk})", fg=typer.colors.GREEN)
