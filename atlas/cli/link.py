"""Link Typer app factory."""

import typer

from atlas.api.link.cmd_check import cmd_check
from atlas.api.link.cmd_resolve import cmd_resolve
from atlas.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Resolve and check magic links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="check")
    def check_cmd(
        ctx: typer.Context,
        content_dir: str | None = typer.Argument(None, help="Content directory (default from atlas.json)"),
        targets: str | None = typer.Option(None, "--targets", "-t", help="JSON file listing link targets"),
        pattern: list[str] | None = typer.Option(None, "--pattern", "-p", help="File pattern, repeatable"),
    ) -> None:
        """Report broken and placeholder magic links in content files."""
        _handle_stage_result(cmd_check, ctx)(content_dir=content_dir, targets_file=targets, patterns=pattern or None)

    @app.command(name="resolve")
    def resolve_cmd(
        ctx: typer.Context,
        ids: list[str] = typer.Argument(..., help="Ids to try in order"),
        targets: str | None = typer.Option(None, "--targets", "-t", help="JSON file listing link targets"),
    ) -> None:
        """Resolve a fallback chain of ids to a link target."""
        _handle_stage_result(cmd_resolve, ctx)(ids=ids, targets_file=targets)

    return app
