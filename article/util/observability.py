"""Logfire setup and library instrumentation.

Services and repositories log through logfire directly:

    logfire.info("Post created", post_id=str(post.id))

    with logfire.span("post_service.update_post", post_id=str(post_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from article.config import Settings

SERVICE_NAME = "article-backend"
SERVICE_VERSION = "0.1.0"

# Attribute names whose values never leave the process
SCRUBBED_FIELDS = ["password_hash", "api_secret", "signature", "token"]


def should_send(settings: Settings) -> bool:
    """Decide whether telemetry goes to Logfire cloud.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise telemetry is
    sent only when OBSERVABILITY__LOGFIRE_TOKEN is set.
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process and scripts.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_FIELDS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    """Attach method, path and whether the caller sent credentials."""
    result = {**attributes}
    if hasattr(request, "method"):
        result["method"] = request.method
    result["path"] = request.url.path
    result["authenticated"] = "authorization" in request.headers
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app.

    Headers are not captured; the Authorization header carries bearer tokens.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound httpx requests (media uploads)."""
    logfire.instrument_httpx()
