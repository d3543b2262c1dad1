from pydantic_settings import SettingsConfigDict, BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server settings
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    server_reload: bool = False

    # CORS settings
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["GET", "OPTIONS"]
    cors_allow_headers: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"

    # Cache settings
    cache_maxsize: int = 100
    cache_ttl_seconds: int = 600  # 10 minutes default

    # Renderer settings
    renderer_backend: str = "playwright"  # playwright, static
    renderer_args: List[str] = ["--no-sandbox", "--disable-setuid-sandbox"]
    renderer_user_agent: str = (
        "facebookexternalhit/1.1 (+http://www.facebook.com/externalhit_uatext.php)"
    )
    renderer_executable_path: Optional[str] = None
    renderer_headless: bool = True
    navigation_timeout: int = 30  # seconds

    # Image reachability probe
    probe_timeout: float = 5.0  # seconds

    # Static fetching settings
    fetch_follow_redirects: bool = True

    # Environment
    environment: str = "development"  # development, staging, production

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env file if it exists
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields in env file
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


# Create a single instance of settings
settings = Settings()
