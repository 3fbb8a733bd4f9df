import argparse
import json
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from windsurf_recent.container import container
from windsurf_recent.exceptions import LaunchError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="windsurf-recent-cli",
        description="List projects recently opened in Windsurf, or open one of them.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the projects as a JSON array instead of a table",
    )
    parser.add_argument(
        "--open",
        type=int,
        default=None,
        metavar="INDEX",
        help="Open the project at INDEX (1-based, as shown in the table) in Windsurf",
    )

    args = parser.parse_args(argv)

    container.settings.configure_logging()
    projects = container.get_list_recent_projects_use_case().execute()

    if args.open is not None:
        if not 1 <= args.open <= len(projects):
            print(
                f"No recent project at index {args.open} ({len(projects)} available)",
                file=sys.stderr,
            )
            return 2
        project = projects[args.open - 1]
        try:
            container.get_open_project_use_case().execute(project.path)
        except LaunchError as e:
            print(f"Could not open project: {e}", file=sys.stderr)
            return 1
        print(f"Opened project: {project.path}")
        return 0

    if args.json:
        print(
            json.dumps(
                [p.get_details() for p in projects], ensure_ascii=False, indent=2
            )
        )
        return 0

    console = Console(soft_wrap=True)
    if not projects:
        console.print("[bold]No recent projects[/bold]")
        console.print("Projects you open in Windsurf will appear here.", style="dim")
        return 0

    table = Table(box=box.ROUNDED, border_style="magenta", expand=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Project", style="bold")
    table.add_column("Path")
    for idx, project in enumerate(projects, start=1):
        table.add_row(str(idx), project.label, project.path)
    console.print(table)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
