"""
Configuration model for locating the dictionary data files.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger("sanasto")


class SanastoConfig(BaseModel):
    """Where the dictionary data lives and how verbose to be.

    Can be built directly, from the environment (SANASTO_DATA_DIR,
    SANASTO_DEBUG, optionally via a .env file) or from a YAML file.
    """
    model_config = ConfigDict(extra="forbid")

    data_dir: Path = Field(
        default=Path("."),
        description="Directory holding the word list, glosses and phrase list"
    )
    words_file: str = Field(
        default="words.txt",
        description="Headword list, one word per line"
    )
    glosses_file: str = Field(
        default="glosses.jsonl",
        description="Gloss records, one JSON object per line"
    )
    phrases_file: str = Field(
        default="go-deeper.txt",
        description="Reference phrases that trigger cross-reference expansion"
    )
    debug: bool = Field(
        default=False,
        description="Write debug logging to log_file"
    )
    log_file: Path = Field(
        default=Path("debug.log"),
        description="Debug log destination"
    )

    @field_validator("words_file", "glosses_file", "phrases_file")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        """File names must not be blank."""
        if not v.strip():
            raise ValueError("file name must not be empty")
        return v.strip()

    @property
    def words_path(self) -> Path:
        return self.data_dir / self.words_file

    @property
    def glosses_path(self) -> Path:
        return self.data_dir / self.glosses_file

    @property
    def phrases_path(self) -> Path:
        return self.data_dir / self.phrases_file

    @classmethod
    def from_env(cls, **overrides: Any) -> "SanastoConfig":
        """Build a config from environment variables.

        Loads a .env file first if one is found. Explicit keyword overrides
        win over the environment.
        """
        if not load_dotenv():
            logger.debug("No .env file found, using environment and defaults")

        values: dict[str, Any] = {}
        data_dir = os.getenv("SANASTO_DATA_DIR")
        if data_dir:
            values["data_dir"] = Path(data_dir)
        debug = os.getenv("SANASTO_DEBUG")
        if debug:
            values["debug"] = debug
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Path) -> "SanastoConfig":
        """Load a config from a YAML mapping.

        Expected YAML format:
            data_dir: /usr/share/sanasto
            glosses_file: glosses.jsonl
            debug: false

        A relative data_dir is resolved against the YAML file's directory.

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
            ValueError: If the document is not a mapping
            pydantic.ValidationError: If a field is unknown or invalid
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("YAML config must be a mapping")

        if "data_dir" in data and not Path(str(data["data_dir"])).is_absolute():
            data["data_dir"] = Path(path).parent / str(data["data_dir"])

        return cls(**data)
