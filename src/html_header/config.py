from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from html_header.groups import DEFAULT_ORDER
from html_header.text import ELLIPSIS


class HeaderSettings(BaseModel):
    """Builder defaults. Constructing one never touches the environment."""

    automatic_open_graph: bool = True
    order: list[str] = Field(default_factory=lambda: list(DEFAULT_ORDER))

    description_max_length: int = Field(default=153, ge=1)
    og_title_max_length: int = Field(default=60, ge=1)
    og_description_max_length: int = Field(default=65, ge=1)
    twitter_title_max_length: int = Field(default=55, ge=1)
    twitter_description_max_length: int = Field(default=50, ge=1)

    twitter_card: str = "summary"
    ellipsis: str = ELLIPSIS


class EnvHeaderSettings(BaseSettings):
    """`HTML_HEADER_*` overrides read from the environment or `.env`; unset fields stay None."""

    model_config = SettingsConfigDict(
        env_prefix="HTML_HEADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    automatic_open_graph: bool | None = None
    order: list[str] | None = None

    description_max_length: int | None = None
    og_title_max_length: int | None = None
    og_description_max_length: int | None = None
    twitter_title_max_length: int | None = None
    twitter_description_max_length: int | None = None

    twitter_card: str | None = None
    ellipsis: str | None = None


def load_settings() -> HeaderSettings:
    overrides = EnvHeaderSettings().model_dump(exclude_none=True)
    return HeaderSettings.model_validate(overrides)
