"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from vfs_shell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

BACKENDS = ("memory", "local")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.backend: str = self._get_choice("VFS_BACKEND", "memory", BACKENDS)
        self.root: str = self._get_env("VFS_ROOT", "")
        if self.backend == "local" and not self.root:
            raise ConfigurationError(
                "Environment variable VFS_ROOT is required when VFS_BACKEND=local"
            )
        self.default_cwd: str = self._get_env("VFS_DEFAULT_CWD", "/projects")
        self.tmp_path: str = self._get_env("VFS_TMP_PATH", "/tmp")
        self.projects_path: str = self._get_env("VFS_PROJECTS_PATH", "/projects")
        self.log_level: str = self._get_choice(
            "LOG_LEVEL", "INFO", LOG_LEVELS, upper=True
        )
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_port("PORT", 8000)
        self.reload: bool = self._get_env("RELOAD", "0").strip().lower() in {
            "1",
            "true",
            "yes",
        }

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_port(self, key: str, default: int) -> int:
        """Get a TCP port number from the environment."""
        value = self._get_env(key, str(default)).strip()
        try:
            port = int(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for {key}: {value!r} (expected a port number)"
            ) from e
        if not 0 < port < 65536:
            raise ConfigurationError(
                f"Invalid value for {key}: {port} (expected 1-65535)"
            )
        return port

    def _get_choice(
        self, key: str, default: str, choices: tuple[str, ...], upper: bool = False
    ) -> str:
        """Get an environment variable restricted to ``choices``."""
        value = self._get_env(key, default).strip()
        value = value.upper() if upper else value.lower()
        if value not in choices:
            raise ConfigurationError(
                f"Invalid value for {key}: {value!r} (expected one of {', '.join(choices)})"
            )
        return value


# Global settings instance
settings = Settings()
