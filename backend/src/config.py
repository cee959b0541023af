import logging
import logging.handlers
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_version: str = "1.0.0"

    # HTTP
    cors_origins: str = "*"
    cors_allow_credentials: bool = False
    trusted_hosts: str = "*"

    # Rate limiting (slowapi syntax)
    rate_limit_default: str = "60/minute"
    rate_limit_validate: str = "20/minute"

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_max_bytes: int = 10_485_760  # 10 MB
    log_backup_count: int = 5

    model_config = {"env_file": ".env"}

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def trusted_hosts_list(self) -> list[str]:
        return [h.strip() for h in self.trusted_hosts.split(",") if h.strip()]


settings = Settings()


def _rotating_file(path: Path, level: int, fmt: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def setup_logging() -> None:
    """Log to the console and ``app.log`` at ``log_level``; ERROR+ also goes to ``error.log``.

    Both files rotate at ``log_max_bytes``. Handlers already on the root
    logger are replaced.
    """
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s", "%H:%M:%S"))
    root.addHandler(console)

    detail_fmt = logging.Formatter("%(asctime)s %(levelname)-8s [%(name)s:%(lineno)d] %(message)s")
    root.addHandler(_rotating_file(log_dir / "app.log", logging.DEBUG, detail_fmt))
    root.addHandler(_rotating_file(log_dir / "error.log", logging.ERROR, detail_fmt))

    logging.getLogger(__name__).info("Logging to %s at %s", log_dir, settings.log_level.upper())
