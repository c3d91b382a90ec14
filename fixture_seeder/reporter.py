from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from rich import box
from rich.console import Console
from rich.json import JSON
from rich.table import Table

from fixture_seeder.domain.models import UserFixture

if TYPE_CHECKING:
    from fixture_seeder.seeder import SeedReport

ABSENT = "[dim]<absent>[/dim]"


def _cell(fixture: UserFixture, name: str) -> str:
    if not fixture.has_field(name):
        return ABSENT
    value = getattr(fixture, name)
    if value is None:
        return "null"
    return value.isoformat() if hasattr(value, "isoformat") else str(value)


def print_report(
    report: "SeedReport",
    inserted: int,
    console: Optional[Console] = None,
) -> None:
    """
    Print the post-seed confirmation for humans.

    The count line reports the whole collection. When earlier data was already
    present the number inserted by this run is shown next to it.
    """
    console = console or Console()

    console.print(f"✅ Created {report.database} database with sample users")
    count_line = f"📊 Inserted {report.total_documents} sample users"
    if inserted != report.total_documents:
        count_line += f" [dim]({inserted} by this run)[/dim]"
    console.print(count_line)

    console.print("\n📋 Sample data overview:")
    for record in report.records:
        console.print(JSON.from_data(record, indent=None, default=str))

    console.print("\nReady for migration examples!")


def print_fixtures(fixtures: Iterable[UserFixture], console: Optional[Console] = None) -> None:
    """
    Render the fixture set as a rich table without touching the database.

    Absent fields are shown as `<absent>` so they stay distinguishable from
    empty values.
    """
    console = console or Console()
    table = Table(title="User fixtures", box=box.ROUNDED)

    table.add_column("Email", style="cyan", no_wrap=True)
    table.add_column("First name", style="magenta")
    table.add_column("Last name", style="magenta")
    table.add_column("Status", style="green")
    table.add_column("Created at", style="yellow")
    table.add_column("Updated at", style="yellow")

    for fixture in fixtures:
        table.add_row(
            fixture.email,
            _cell(fixture, "first_name"),
            _cell(fixture, "last_name"),
            fixture.status,
            fixture.created_at.isoformat(),
            _cell(fixture, "updated_at"),
        )

    console.print(table)


__all__ = ["print_fixtures", "print_report"]
