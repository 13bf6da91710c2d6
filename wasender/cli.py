import json

import click


@click.group()
def main() -> None:
    """Wasender - typed client and webhook tools for the Wasender API."""


# ---------------------------------------------------------------------------
# Webhook tools
# ---------------------------------------------------------------------------


@main.command()
def events() -> None:
    """List the webhook event names the SDK understands."""
    from wasender.models.events import WEBHOOK_EVENT_REGISTRY

    for name, event_cls in WEBHOOK_EVENT_REGISTRY.items():
        click.echo(f"{name:<32} {event_cls.__name__}")


@main.command()
@click.argument("source", type=click.File("r"), default="-")
def dispatch(source) -> None:
    """Dispatch a JSON webhook delivery read from SOURCE (default: stdin)."""
    from wasender.webhook.dispatcher import parse_webhook_body

    event = parse_webhook_body(source.read())
    output = {"type": type(event).__name__, **event.model_dump(mode="json", by_alias=True, exclude_unset=True)}
    click.echo(json.dumps(output, indent=2, ensure_ascii=False))


@main.command()
@click.argument("signature")
@click.option("--secret", default=None, help="Webhook secret (default: from WASENDER_WEBHOOK_SECRET).")
@click.pass_context
def verify(ctx: click.Context, signature: str, secret: str | None) -> None:
    """Check SIGNATURE against the webhook secret.  Exit status 1 on mismatch."""
    from wasender.settings import get_settings
    from wasender.webhook.signature import verify_wasender_webhook_signature

    if secret is None:
        secret = get_settings().webhook_secret_value()

    if verify_wasender_webhook_signature(signature, secret):
        click.echo("Signature valid.")
        return
    click.echo("Signature invalid.", err=True)
    ctx.exit(1)


@main.command()
@click.option("--host", default=None, help="Bind host (default: from WASENDER_HOST or 0.0.0.0).")
@click.option("--port", default=None, type=int, help="Bind port (default: from WASENDER_PORT or 8000).")
def serve(host: str | None, port: int | None) -> None:
    """Start the webhook receiver."""
    import uvicorn

    from wasender.log import setup_logging
    from wasender.settings import get_settings
    from wasender.webhook.server import create_webhook_app

    settings = get_settings()
    setup_logging(settings.log_level, json_logs=settings.log_json)

    uvicorn.run(
        create_webhook_app(settings),
        host=host or settings.host,
        port=port or settings.port,
        log_level="warning",  # uvicorn's own logging is intercepted by loguru
    )


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------


@main.command()
def status() -> None:
    """Show the status of the session owning WASENDER_API_KEY."""
    import asyncio

    from wasender.client import WasenderClient
    from wasender.errors import WasenderAPIError

    async def _status() -> str:
        async with WasenderClient.from_settings() as client:
            result = await client.get_session_status()
        return result.response.status

    try:
        click.echo(asyncio.run(_status()))
    except WasenderAPIError as exc:
        raise click.ClickException(exc.message) from exc


if __name__ == "__main__":
    main()
