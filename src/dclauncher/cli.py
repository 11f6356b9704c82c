"""CLI entry point for DCLauncher.

Runs the API server, or the same launcher operations directly from a
terminal against a launcher root (the directory holding projects.json and
the projects/ checkouts).
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from dclauncher import __version__
from dclauncher.api.dependencies import Services, build_services
from dclauncher.config import ConfigurationError, LauncherSettings
from dclauncher.inventory import InventoryError
from dclauncher.logging import setup_logging
from dclauncher.orchestrator import ProjectStatus


def _build(ctx: click.Context) -> Services:
    services = build_services(ctx.obj["settings"])
    ctx.call_on_close(services.close)
    return services


@click.group()
@click.version_option(__version__)
@click.option(
    "-r",
    "--root",
    "root_dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="DCLAUNCHER_ROOT",
    default=".",
    show_default=True,
    help="Launcher root holding projects.json and projects/",
)
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="DCLAUNCHER_CONFIG",
    help="Project list (default: <root>/projects.json)",
)
@click.option(
    "--projects-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="DCLAUNCHER_PROJECTS_DIR",
    help="Checkout directory (default: <root>/projects)",
)
@click.option(
    "--docker-socket",
    envvar="DCLAUNCHER_DOCKER_SOCKET",
    help="Docker daemon socket (default: /var/run/docker.sock)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context,
    root_dir: Path,
    config_file: Path | None,
    projects_dir: Path | None,
    docker_socket: str | None,
    verbose: bool,
) -> None:
    """DCLauncher - launch and monitor docker compose and Android projects."""
    setup_logging(level="DEBUG" if verbose else None)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = LauncherSettings.from_root(
        root_dir,
        config_file=config_file,
        projects_dir=projects_dir,
        docker_socket=docker_socket,
    )


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address")
@click.option("--port", default=3001, show_default=True, type=int, help="Bind port")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int) -> None:
    """Run the REST API server."""
    import uvicorn  # noqa: PLC0415

    from dclauncher.api import create_app  # noqa: PLC0415

    click.echo(f"DCLauncher backend running on http://{host}:{port}")
    uvicorn.run(create_app(ctx.obj["settings"]), host=host, port=port)


@main.command()
@click.option("-f", "--follow", is_flag=True, help="Stream docker compose output")
@click.pass_context
def launch(ctx: click.Context, follow: bool) -> None:
    """Sync and start every enabled project."""
    services = _build(ctx)
    if follow:
        services.orchestrator.compose_worker.log_callback = click.echo
    try:
        report = services.orchestrator.launch_projects()
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    for result in report.results:
        marker = "ok" if result.status == ProjectStatus.SUCCESS else "FAILED"
        click.echo(f"[{marker}] {result.name} ({result.stage})")
        if result.error:
            click.echo(f"    {result.error}".replace("\n", "\n    "))

    failed = sum(1 for r in report.results if r.status == ProjectStatus.FAILED)
    click.echo(f"\n{report.total - failed}/{report.total} projects launched")
    if failed:
        sys.exit(1)


@main.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show running compose projects."""
    services = _build(ctx)
    try:
        projects = services.inventory.get_running_projects()
    except InventoryError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if not projects:
        click.echo("No running projects")
        return

    for project in projects:
        click.echo(f"{project.name} ({len(project.containers)} containers)")
        if project.repository:
            click.echo(f"  repository: {project.repository}")
        for port in project.ports:
            click.echo(f"  {port.url} -> {port.container}/{port.protocol}")


@main.command()
@click.pass_context
def devices(ctx: click.Context) -> None:
    """List devices connected through adb."""
    services = _build(ctx)
    listing = services.device_bridge.list_devices()
    if not listing.success:
        click.echo(f"Error: {listing.error}", err=True)
        sys.exit(1)
    if not listing.devices:
        click.echo("No devices connected")
        return
    for device in listing.devices:
        click.echo(f"{device.serial}\t{device.model}\t{device.product}")


@main.command("clone-android")
@click.pass_context
def clone_android(ctx: click.Context) -> None:
    """Clone or update every Android project."""
    services = _build(ctx)
    try:
        results = services.orchestrator.clone_android_projects()
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    for result in results:
        if result.success:
            click.echo(f"[ok] {result.name} -> {result.path}")
        else:
            click.echo(f"[FAILED] {result.name}: {result.error}")
    if any(not r.success for r in results):
        sys.exit(1)


@main.command()
@click.argument("project_name")
@click.argument("device_serial")
@click.option("-f", "--follow", is_flag=True, help="Stream Gradle output")
@click.pass_context
def install(ctx: click.Context, project_name: str, device_serial: str, follow: bool) -> None:
    """Build PROJECT_NAME and install it on DEVICE_SERIAL."""
    services = _build(ctx)
    if follow:
        services.orchestrator.android_builder.log_callback = click.echo
    result = services.orchestrator.install_android_project(project_name, device_serial)
    if not result.success:
        click.echo(f"Installation failed: {result.error}", err=True)
        sys.exit(1)
    click.echo(result.message)


if __name__ == "__main__":
    main()
