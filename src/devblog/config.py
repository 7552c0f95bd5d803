"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `DEVBLOG_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Site settings.

    All fields are environment-configurable. Prefix is `DEVBLOG_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEVBLOG_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    log_level: str = Field(default="INFO")

    # Content
    content_dir: Path = Field(default=Path("content"))
    public_dir: Path = Field(default=Path("public"))
    projects_file: Path | None = Field(default=None)
    content_cache_size: int = Field(default=256, ge=1, le=10_000)

    # Markdown pipeline
    highlight_code: bool = Field(default=True)
    pygments_style: str = Field(default="monokai")

    # Site identity
    site_title: str = Field(default="Sam Slotsky's Developer Blog")
    site_author: str = Field(default="Sam Slotsky")
    author_role: str = Field(default="Software Engineer")
    avatar_url: str = Field(
        default="https://www.gravatar.com/avatar/aa021790422f28010526a0d8973d4315"
    )
    social_url: str = Field(default="https://twitter.com/TheSaxyMofo")
    social_label: str = Field(default="Follow on \U0001d54f")
    stylesheets: list[str] = Field(
        default_factory=lambda: [
            "https://cdnjs.cloudflare.com/ajax/libs/prism/1.27.0/themes/prism-dark.min.css"
        ]
    )

    # HTTP caching
    cache_max_age_s: int = Field(default=5, ge=0)
    # Serve stale pages for up to a week while revalidating in the background
    cache_stale_while_revalidate_s: int = Field(default=60 * 60 * 24 * 7, ge=0)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("DEVBLOG_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
