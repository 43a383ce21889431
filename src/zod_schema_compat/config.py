"""Configuration management for zod-schema-compat."""

import json
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel): # Remains BaseModel, nested under Config (BaseSettings)
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format ('json' or 'console')")

class ConversionConfig(BaseModel):
    """Configuration for schema conversion."""

    enable_native_delegate: bool = Field(default=True, description="Try the v4 library's own JSON Schema converter before the manual builder.")
    native_modules: List[str] = Field(default_factory=lambda: ["zod.v4", "zod"], description="Modules probed, in order, for a native JSON Schema converter.")
    native_function_names: List[str] = Field(default_factory=lambda: ["to_json_schema", "toJSONSchema"], description="Converter attribute names looked up on the first importable module.")
    native_target: str = Field(default="draft-7", description="JSON Schema target requested from the native converter.")
    error_namespace: str = Field(default="[zod-schema-compat]", description="Tag prefixed to user-facing conversion errors.")
    docs_url: Optional[str] = Field(default=None, description="Optional link appended to unrepresentable-type errors.")


class Config(BaseSettings):
    """Main configuration for zod-schema-compat. Loads from environment variables prefixed with ZOD_SCHEMA_COMPAT_."""

    model_config = SettingsConfigDict(
        env_prefix='ZOD_SCHEMA_COMPAT_',
        env_nested_delimiter='__', # e.g., ZOD_SCHEMA_COMPAT_CONVERSION__DOCS_URL
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file.
        Note: This does not layer with environment variables.
        """
        with open(file_path) as f:
            config_data = json.load(f)
        return cls.model_validate(config_data)
