from __future__ import annotations

import codecs
import os
from typing import Optional

from pydantic import BaseModel, field_validator


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def default_text_encoding() -> str:
    return os.getenv("MAPSCRIPT_TEXT_ENCODING", "utf-8")


class SaveConfig(BaseModel):
    """How script output and script-read files are encoded on disk."""

    text_encoding: str = "utf-8"
    # None = platform text mode ("\n" translated to os.linesep on write)
    newline: Optional[str] = None
    fsync: bool = False

    @field_validator("text_encoding")
    @classmethod
    def check_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown text encoding: {v!r}") from e
        return v

    @classmethod
    def from_env(cls) -> "SaveConfig":
        return cls(
            text_encoding=default_text_encoding(),
            fsync=_env_bool("MAPSCRIPT_FSYNC", False),
        )
