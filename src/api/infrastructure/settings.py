"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly,
in particular AGROFIX_AUTH_JWT_SECRET.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Documented insecure default, kept for parity with local development setups.
INSECURE_DEFAULT_JWT_SECRET = "MY_SECRET_TOKEN"


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        AGROFIX_DB_HOST: Database host (default: localhost)
        AGROFIX_DB_PORT: Database port (default: 5432)
        AGROFIX_DB_DATABASE: Database name (default: agrofix)
        AGROFIX_DB_USERNAME: Database user (default: agrofix)
        AGROFIX_DB_PASSWORD: Database password (required in production)
        AGROFIX_DB_URL: Full SQLAlchemy URL, overrides the fields above
            (e.g. sqlite+aiosqlite:///./agrofix.db)
        AGROFIX_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        AGROFIX_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        AGROFIX_DB_ECHO: Log emitted SQL (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="AGROFIX_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="agrofix", description="Database name")
    username: str = Field(default="agrofix", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy async URL overriding host/port/database",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    echo: bool = Field(default=False, description="Log emitted SQL statements")

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured URL targets SQLite."""
        return self.url is not None and self.url.startswith("sqlite")

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        if self.url is not None:
            return self.url.split("@")[-1] if "@" in self.url else self.url
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class AuthSettings(BaseSettings):
    """Token signing and password hashing settings.

    Environment variables:
        AGROFIX_AUTH_JWT_SECRET: HMAC signing key (default: insecure placeholder)
        AGROFIX_AUTH_JWT_ALGORITHM: JWS algorithm (default: HS256)
        AGROFIX_AUTH_TOKEN_TTL_MINUTES: Token lifetime in minutes (default: 60)
        AGROFIX_AUTH_BCRYPT_ROUNDS: bcrypt cost factor (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="AGROFIX_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    jwt_secret: SecretStr = Field(
        default=SecretStr(INSECURE_DEFAULT_JWT_SECRET),
        description="Secret used to sign bearer tokens. Override in every deployment.",
    )
    jwt_algorithm: str = Field(default="HS256", description="JWS signing algorithm")
    token_ttl_minutes: int = Field(
        default=60,
        description="Lifetime of issued tokens in minutes",
        ge=1,
        le=10080,
    )
    bcrypt_rounds: int = Field(
        default=10,
        description="bcrypt cost factor for password hashing",
        ge=4,
        le=16,
    )

    @property
    def uses_insecure_default_secret(self) -> bool:
        """Whether the signing key is still the documented placeholder."""
        return self.jwt_secret.get_secret_value() == INSECURE_DEFAULT_JWT_SECRET


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="AGROFIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Agrofix API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    host: str = Field(default="0.0.0.0", description="Interface uvicorn binds to")
    port: int = Field(default=3000, description="Port uvicorn listens on")
    cors_allowed_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed by the CORS middleware",
    )

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def auth(self) -> AuthSettings:
        """Get auth settings."""
        return get_auth_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_auth_settings() -> AuthSettings:
    """Get cached auth settings."""
    return AuthSettings()
