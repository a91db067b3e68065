"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_VERSION = "0.1.0"


class AuthSettings(BaseModel):
    """Authentication configuration."""

    # JWT settings
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    jwt_algorithm: str = "HS256"
    token_expiry_hours: int = 24

    # Admin credentials
    # Preferred: a bcrypt hash (generate with scripts/hash_password.py)
    # Fallback: a plaintext password, hashed once at startup
    admin_password_hash: str | None = None
    admin_password: str = "admin123"

    # bcrypt work factor for hashes created by this process
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)


class ContentSettings(BaseModel):
    """Content directory configuration."""

    # Root of the Markdown tree (tech/<sub>/, life/, tools/, categories.json)
    root: Path = Path("content")

    # Maximum accepted size for uploaded Markdown files
    max_upload_bytes: int = 5 * 1024 * 1024


class SiteSettings(BaseModel):
    """Public site metadata used by the feed and sitemap."""

    url: str = "https://yourdomain.com"
    title: str = "大江东去"
    description: str = "技术探索、生活感悟、实用工具"
    language: str = "zh-CN"

    # Number of posts included in the RSS feed
    feed_size: int = 20


class RateLimitPolicy(BaseModel):
    """Fixed-window limit for one endpoint class."""

    max_requests: int = Field(ge=1)
    window_ms: int = Field(ge=1)


def _default_policies() -> dict[str, RateLimitPolicy]:
    minute = 60_000
    return {
        "auth": RateLimitPolicy(max_requests=5, window_ms=minute),
        "posts:get": RateLimitPolicy(max_requests=60, window_ms=minute),
        "post:get": RateLimitPolicy(max_requests=60, window_ms=minute),
        "posts:create": RateLimitPolicy(max_requests=10, window_ms=minute),
        "post:update": RateLimitPolicy(max_requests=20, window_ms=minute),
        "post:delete": RateLimitPolicy(max_requests=10, window_ms=minute),
        "categories:get": RateLimitPolicy(max_requests=60, window_ms=minute),
        "categories:create": RateLimitPolicy(max_requests=10, window_ms=minute),
        "categories:update": RateLimitPolicy(max_requests=10, window_ms=minute),
        "categories:delete": RateLimitPolicy(max_requests=10, window_ms=minute),
        "upload": RateLimitPolicy(max_requests=10, window_ms=minute),
        "feed": RateLimitPolicy(max_requests=60, window_ms=minute),
    }


class RateLimitSettings(BaseModel):
    """Per-endpoint rate limit policies.

    Keys are action names used by the request handlers. Values are policy,
    not contract, and can be tuned through the environment, e.g.
    RATE_LIMIT__POLICIES='{"auth": {"max_requests": 3, "window_ms": 60000}}'.
    """

    enabled: bool = True
    policies: dict[str, RateLimitPolicy] = Field(default_factory=_default_policies)

    def policy_for(self, action: str) -> RateLimitPolicy:
        """Return the policy for an action, falling back to 10 per minute."""
        return self.policies.get(
            action, RateLimitPolicy(max_requests=10, window_ms=60_000)
        )


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        AUTH__JWT_SECRET=...
        AUTH__ADMIN_PASSWORD_HASH='$2b$12$...'
        CONTENT__ROOT=/srv/blog/content
        SITE__URL=https://blog.example.com
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows AUTH__JWT_SECRET syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "localhost"
    port: int = 8000

    # Browser origins allowed to call the API (the admin UI)
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Set by the deployment pipeline
    git_sha: str = "unknown"

    # Nested settings
    auth: AuthSettings = AuthSettings()
    content: ContentSettings = ContentSettings()
    site: SiteSettings = SiteSettings()
    rate_limit: RateLimitSettings = RateLimitSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
