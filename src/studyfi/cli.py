"""Command-line interface for Studyfi.

Provides commands for running the server and managing the database.
"""

import asyncio

import click

from studyfi.core.config import get_settings
from studyfi.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="Studyfi")
def cli() -> None:
    """Studyfi - account and study group membership service.

    Configuration is read from STUDYFI_* environment variables and .env.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Enable auto-reload (default: on in development)",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool | None) -> None:
    """Start the Studyfi server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers
    if reload is None:
        reload = settings.is_development

    if bind_workers > 1 and settings.database_url.startswith("sqlite"):
        click.echo(
            "Error: SQLite does not support multiple worker processes. "
            "Use --workers 1 or switch to PostgreSQL.",
            err=True,
        )
        raise SystemExit(1)

    configure_logging(settings)
    logger = get_logger(__name__)
    logger.info(
        "Starting Studyfi server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "studyfi.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("init-db")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Create all database tables.

    Intended for development; production databases are managed with Alembic.
    """
    from studyfi.infrastructure.persistence import models  # noqa: F401
    from studyfi.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize() -> None:
        db = get_db_manager()
        try:
            await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command("create-account")
@click.option("--name", type=str, prompt="Name", help="Display name")
@click.option("--email", type=str, prompt="Email", help="Email address")
@click.option(
    "--password",
    type=str,
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password (prompts if not provided)",
)
def create_account(name: str, email: str, password: str) -> None:
    """Register an account from the command line."""
    from studyfi.domain.entities.account import AccountProfile
    from studyfi.domain.exceptions import PasswordPolicyViolation
    from studyfi.domain.services import IdentityService
    from studyfi.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)

    async def create() -> str:
        db = get_db_manager()
        try:
            async with db.session() as session:
                account = await IdentityService(session).register(
                    AccountProfile(name=name, email=email, password=password)
                )
                return account.id
        finally:
            await db.disconnect()

    try:
        account_id = asyncio.run(create())
    except PasswordPolicyViolation as e:
        click.echo(f"Error: {e.error.message}", err=True)
        raise SystemExit(1)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Account created: {account_id}")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
