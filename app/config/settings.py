import json
from typing import Annotated, Any

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_REMINDER_BUCKETS: list[dict[str, Any]] = [
    {"name": "24h", "lead_hours": 24.0, "tolerance_hours": 0.5, "label": "24 hours"},
    {"name": "3h", "lead_hours": 3.0, "tolerance_hours": 0.5, "label": "3 hours"},
]


class Settings(BaseSettings):
    """
    Application settings loaded with Pydantic BaseSettings.
    Values come from environment variables or the .env file.
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Interview Reminder Bot"
    PROJECT_DESCRIPTION: str = "LINE bot for scheduling interviews and pushing reminder notifications"
    VERSION: str = "0.1.0"

    # LINE Messaging API settings
    LINE_API_BASE: str = Field("https://api.line.me", description="Base URL of the LINE Messaging API")
    LINE_CHANNEL_ACCESS_TOKEN: str = Field(..., description="Long-lived channel access token")
    LINE_CHANNEL_SECRET: str = Field(..., description="Channel secret used to verify webhook signatures")
    LINE_API_TIMEOUT: float = Field(10.0, description="Timeout for LINE API requests in seconds")
    AUTHORIZED_USERS: Annotated[list[str], NoDecode] = Field(
        default_factory=list, description="LINE user ids allowed to issue commands"
    )

    # PostgreSQL Database Settings
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("interview_reminders", description="Database name")
    DB_USER: str = Field("postgres", description="PostgreSQL user")
    DB_PASSWORD: str | None = Field(None, description="PostgreSQL password")
    DB_ECHO: bool = Field(False, description="Log SQL queries (debug only)")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(5, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(10, description="Maximum pool overflow")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections every X seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Timeout to acquire a pooled connection")

    # Reminder pipeline
    TIME_ZONE: str = Field("Asia/Taipei", description="Time zone for interview dates and times")
    REMINDER_RECIPIENT_ID: str | None = Field(
        None, description="Fixed LINE user id that receives every reminder (falls back to the owner)"
    )
    REMINDER_BUCKETS: list[dict[str, Any]] = Field(
        default_factory=lambda: [dict(bucket) for bucket in DEFAULT_REMINDER_BUCKETS],
        description="Reminder bucket definitions: name, lead_hours, tolerance_hours, label",
    )
    REMINDER_FETCH_PAGE_SIZE: int = Field(200, description="Rows per page when fetching sweep candidates")
    REMINDER_SEND_INTERVAL_SECONDS: float = Field(0.0, description="Pause between reminder sends")
    REMINDER_SCHEDULER_ENABLED: bool = Field(False, description="Run the in-process sweep scheduler")
    REMINDER_SWEEP_INTERVAL_MINUTES: int = Field(10, description="Minutes between scheduled sweeps")
    CRON_API_KEY: str | None = Field(None, description="Shared secret for the sweep trigger endpoint")

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    CORS_ORIGINS: list[str] = Field(default_factory=list, description="Allowed CORS origins outside debug mode")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("AUTHORIZED_USERS", mode="before")
    @classmethod
    def parse_authorized_users(cls, value):
        """Parse AUTHORIZED_USERS from a JSON array or a comma-separated string"""
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("[") and value.endswith("]"):
                try:
                    parsed = json.loads(value)
                    if isinstance(parsed, list):
                        return [str(user).strip() for user in parsed if user]
                except json.JSONDecodeError:
                    pass
            return [user.strip() for user in value.split(",") if user.strip()]
        return value

    @field_validator("REMINDER_BUCKETS", mode="before")
    @classmethod
    def parse_reminder_buckets(cls, value):
        if isinstance(value, str):
            value = json.loads(value)
        if not isinstance(value, list) or not value:
            raise ValueError("REMINDER_BUCKETS must be a non-empty list")
        for bucket in value:
            if not isinstance(bucket, dict) or "name" not in bucket or "lead_hours" not in bucket:
                raise ValueError("Each reminder bucket needs at least 'name' and 'lead_hours'")

        from app.domains.interviews.infrastructure.persistence.sqlalchemy.models import BUCKET_FLAG_COLUMNS

        # Every bucket needs a sent-flag column on the interviews table
        unknown = [bucket["name"] for bucket in value if bucket["name"] not in BUCKET_FLAG_COLUMNS]
        if unknown:
            raise ValueError(
                f"Unknown reminder bucket(s) {unknown}. Known buckets: {sorted(BUCKET_FLAG_COLUMNS)}"
            )
        return value

    @field_validator("TIME_ZONE")
    @classmethod
    def validate_time_zone(cls, v):
        import pytz

        try:
            pytz.timezone(v)
        except pytz.UnknownTimeZoneError as e:
            raise ValueError(f"Unknown TIME_ZONE: {v}") from e
        return v

    @field_validator("REMINDER_FETCH_PAGE_SIZE", "REMINDER_SWEEP_INTERVAL_MINUTES")
    @classmethod
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        if v > 100:
            raise ValueError("DB_POOL_SIZE should not exceed 100")
        return v

    @computed_field
    @property
    def database_url(self) -> str:
        """Synchronous PostgreSQL URL (used by Alembic)"""
        if self.DB_PASSWORD:
            return (
                f"postgresql+psycopg://{self.DB_USER}:{self.DB_PASSWORD}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
            )
        return f"postgresql+psycopg://{self.DB_USER}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @computed_field
    @property
    def is_development(self) -> bool:
        """Whether the app runs in a development environment"""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached settings instance.
    Avoids re-reading the environment on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
