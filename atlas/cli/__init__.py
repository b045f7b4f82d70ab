"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Usage errors are reported by typer itself and exit with code 2.
    """
    import typer

    from atlas.api.config.AtlasConfig import AtlasConfig
    from atlas.cli._create_app import _create_app
    from atlas.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    try:
        config = AtlasConfig.load()
    except ValueError:
        configure_logging()
    else:
        log_file = config.resolve_path(config.log.file) if config.log.file else None
        configure_logging(config.log.level, log_file)

    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
