"""Customer portal CLI."""

import typer

from .commands.database import app as database_app
from .commands.employees import app as employees_app


app = typer.Typer(
    name="portal",
    help="Customer portal CLI utilities",
    no_args_is_help=True,
)

app.add_typer(employees_app, name="employees", help="Employee account management commands")
app.add_typer(database_app, name="db", help="Database management commands")
