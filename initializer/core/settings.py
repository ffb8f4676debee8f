from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import RenderOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="INITIALIZER_", case_sensitive=False)

    template_path: Path = Path("templates")
    binary_extensions: list[str] = [".jar"]
    overwrite: bool = True

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            binary_extensions=self.binary_extensions, overwrite=self.overwrite
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
