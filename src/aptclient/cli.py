"""aptclient: command line front end for the apt package tools."""

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import apt, sources
from .constants import APT_CONFIG_DIR
from .exceptions import AptError, ExternalToolError
from .models import Package, Repository

cli = typer.Typer(help="Query and manage Debian packages and apt repositories.", no_args_is_help=True)
repos_cli = typer.Typer(help="Inspect and edit apt sources.", no_args_is_help=True)
cli.add_typer(repos_cli, name="repos")

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, console=Console(stderr=True))],
    )


def _package_table(packages: list[Package], title: str | None = None) -> Table:
    table = Table(title=title)
    table.add_column("Name", style="bold")
    table.add_column("Version")
    table.add_column("Arch")
    table.add_column("Status")
    table.add_column("Size (KB)", justify="right")
    table.add_column("Description", overflow="ellipsis")
    for pkg in packages:
        table.add_row(
            pkg.name,
            pkg.version,
            pkg.architecture,
            pkg.status,
            str(pkg.installed_size_kb) if pkg.installed_size_kb else "",
            pkg.short_description,
        )
    return table


def _fail(e: AptError) -> NoReturn:
    logger.error(str(e))
    if isinstance(e, ExternalToolError) and e.returncode is not None:
        raise typer.Exit(e.returncode)
    raise typer.Exit(1)


def _print_output(output: str) -> None:
    if output:
        typer.echo(output.rstrip())


@cli.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    setup_logging(verbose)


@cli.command("list")
def list_cmd():
    """List all packages known to dpkg."""
    try:
        console.print(_package_table(apt.list_packages()))
    except AptError as e:
        _fail(e)


@cli.command()
def search(pattern: str = typer.Argument(..., help="dpkg-query package pattern")):
    """Search installed and known packages by name pattern."""
    try:
        packages = apt.search(pattern)
    except AptError as e:
        _fail(e)
    if not packages:
        logger.info(f"No packages found matching {pattern}")
        return
    console.print(_package_table(packages))


@cli.command()
def update():
    """Refresh the package indexes."""
    try:
        _print_output(apt.check_for_updates())
    except AptError as e:
        _fail(e)


@cli.command()
def upgradable():
    """List packages with a newer version available."""
    try:
        console.print(_package_table(apt.list_upgradable(), title="Upgradable packages"))
    except AptError as e:
        _fail(e)


@cli.command()
def install(
    packages: list[str] = typer.Argument(..., help="Packages to install"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Only show what would be done"),
):
    """Install packages."""
    try:
        output = apt.install_dry(*packages) if dry_run else apt.install(*packages)
    except AptError as e:
        _fail(e)
    _print_output(output)


@cli.command()
def remove(packages: list[str] = typer.Argument(..., help="Packages to remove")):
    """Remove packages."""
    try:
        _print_output(apt.remove(*packages))
    except AptError as e:
        _fail(e)


@cli.command()
def upgrade(
    packages: list[str] | None = typer.Argument(None, help="Packages to upgrade"),
    all_: bool = typer.Option(False, "--all", help="Upgrade every upgradable package"),
    dist: bool = typer.Option(False, "--dist", help="Run a dist-upgrade"),
):
    """Upgrade packages."""
    try:
        if dist:
            output = apt.dist_upgrade()
        elif all_:
            output = apt.upgrade_all()
        elif packages:
            output = apt.upgrade(*packages)
        else:
            logger.error("Give package names, --all or --dist")
            raise typer.Exit(2)
    except AptError as e:
        _fail(e)
    _print_output(output)


@cli.command()
def download(
    package: str = typer.Argument(..., help="Package to download"),
    target: Path = typer.Option(Path("."), "--target", "-t", help="Directory to download into"),
):
    """Download a package and its missing dependencies without installing them."""
    try:
        _print_output(apt.download(package, target.resolve()))
    except AptError as e:
        _fail(e)


@cli.command()
def depends(package: str = typer.Argument(..., help="Package to inspect")):
    """Print recursive dependencies of a package, leaves first."""
    try:
        deps = apt.get_dependencies(package)
    except AptError as e:
        _fail(e)
    for dep in deps:
        typer.echo(dep)


@repos_cli.command("list")
def repos_list(
    config_dir: Path = typer.Option(APT_CONFIG_DIR, "--config-dir", "-c", help="apt configuration directory"),
    enabled_only: bool = typer.Option(False, "--enabled", help="Hide disabled entries"),
):
    """List configured repositories."""
    try:
        repos = sources.parse_folder(config_dir)
    except AptError as e:
        _fail(e)
    if enabled_only:
        repos = repos.enabled()

    table = Table()
    table.add_column("Enabled")
    table.add_column("Type")
    table.add_column("Options")
    table.add_column("URI", style="bold")
    table.add_column("Distribution")
    table.add_column("Components")
    table.add_column("Comment")
    for repo in repos:
        table.add_row(
            "yes" if repo.enabled else "no",
            repo.repo_type,
            repo.options,
            repo.uri,
            repo.distribution,
            repo.components,
            repo.comment,
        )
    console.print(table)


@repos_cli.command("add")
def repos_add(
    line: str = typer.Argument(..., help='Repository line, e.g. "deb http://deb.debian.org/debian bookworm main"'),
    config_dir: Path = typer.Option(APT_CONFIG_DIR, "--config-dir", "-c", help="apt configuration directory"),
):
    """Append a repository to the managed sources file."""
    repo: Repository | None = sources.parse_line(line)
    if repo is None:
        logger.error(f"Not a valid repository line: {line!r}")
        raise typer.Exit(2)
    try:
        path = sources.add_repository(repo, config_dir)
    except AptError as e:
        _fail(e)
    typer.echo(f"Added to {path}")


def main() -> None:
    """Main entry point for the aptclient CLI."""
    cli()


if __name__ == "__main__":
    main()
