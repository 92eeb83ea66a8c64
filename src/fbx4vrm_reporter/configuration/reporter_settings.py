from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SERVER_URL = "https://localhost:8443"


class ReporterSettings(BaseSettings):
    """
    Settings for the FBX4VRM report server connection.
    Every field can be overridden through an FBX4VRM_* environment variable.
    """
    server_url: str = Field(default=DEFAULT_SERVER_URL, description="Report server base URL")
    timeout_seconds: float = Field(default=30.0, gt=0, description="Per-request timeout")
    verbose_logging: bool = Field(default=False, description="Log method, URL and bodies of every request")
    skip_certificate_validation: bool = Field(
        default=True,
        description="Accept any server certificate. Insecure, development servers only",
    )

    # Reported in environment sections built by the service facade
    package_version: str = "0.0.0"
    unity_version: str = "unknown"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="FBX4VRM_",
        env_file=None,
        extra="ignore",
    )
