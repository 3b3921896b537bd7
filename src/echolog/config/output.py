"""
Output Configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OutputSettings(BaseSettings):
    """How rendered text is delivered to streams and files."""

    model_config = SettingsConfigDict(
        env_prefix="ECHOLOG_OUTPUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    encoding: str = Field(default="utf-8", description="Encoding used for file destinations")
    errors: str = Field(default="strict", description="Encoding error handler for file destinations")
    flush: bool = Field(default=False, description="Flush streams after every write")
    create_parent_dirs: bool = Field(
        default=False,
        description="Create missing parent directories before appending to a file",
    )
