"""Logfire setup.

Services and use cases open spans named after themselves, e.g.::

    with logfire.span("post_service.update_post", slug=slug):
        ...
"""

import logfire
from fastapi import FastAPI

from blog.config import API_VERSION, Settings

# Settings fields whose values must never reach a span attribute
_SECRET_PATTERNS = ["jwt_secret", "admin_password", "password_hash"]

# Polled by the deployment health checker; tracing it is noise
_UNTRACED_URLS = ["/health"]


def _send_to_logfire(settings: Settings) -> bool:
    # An explicit flag wins, otherwise a token opts into cloud delivery
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process.

    Telemetry goes to the console unless OBSERVABILITY__LOGFIRE_TOKEN is set
    or OBSERVABILITY__SEND_TO_LOGFIRE is true.
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name="blog-api",
        service_version=f"{API_VERSION}+{settings.git_sha}",
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=_SECRET_PATTERNS),
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
        content_root=str(settings.content.root),
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except the health check.

    Post routes carry their category and slug as span attributes so a slow
    or failing request can be tied to one file. Headers are not captured,
    which keeps bearer tokens out of traces.
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes, "method": request.method, "path": request.url.path}
        params = getattr(request, "path_params", None) or {}
        for key in ("category", "slug"):
            if key in params:
                result[f"post_{key}"] = params[key]
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=_UNTRACED_URLS,
        request_attributes_mapper=_map_request_attributes,
    )
