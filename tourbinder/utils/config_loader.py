"""
Settings loader for tourbinder.

Loads YAML settings from the config/ directory, then applies overrides from
the environment (a project-level .env file is loaded first).
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel


# Default config file (relative to project root)
CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "tourbinder.yaml"

QUIZ_FILE = Path("JSONFiles") / "AutomatedTour" / "quiz.json"

ENV_CONTENT_DIR = "TOURBINDER_CONTENT_DIR"
ENV_STRICT_TYPES = "TOURBINDER_STRICT_INSTRUCTION_TYPES"


class BinderSettings(BaseModel):
    content_dir: Path = Path("content")
    quiz_file: Path = QUIZ_FILE
    strict_instruction_types: bool = False
    diagnostic_level: str = "WARNING"

    @property
    def quiz_path(self) -> Path:
        """Fixed location of the quiz question set."""
        return self.content_dir / self.quiz_file

    def resolve(self, path: str | Path) -> Path:
        """Resolve a content path against content_dir unless already absolute."""
        path = Path(path)
        return path if path.is_absolute() else self.content_dir / path


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings(
    config_path: Optional[Path] = None,
    env_file: Optional[Path] = None,
) -> BinderSettings:
    """
    Load binder settings.

    Args:
        config_path: Optional YAML file; defaults to config/tourbinder.yaml.
            A missing default file means built-in defaults.
        env_file: Optional .env file to load before reading overrides

    Returns:
        Validated BinderSettings

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    load_dotenv(env_file)

    file_path = config_path or CONFIG_PATH
    values: dict[str, Any] = {}
    if file_path.exists():
        with open(file_path, "r", encoding="utf-8") as f:
            values = yaml.safe_load(f) or {}
    elif config_path is not None:
        raise FileNotFoundError(f"Settings file not found: {file_path}")

    if os.environ.get(ENV_CONTENT_DIR):
        values["content_dir"] = os.environ[ENV_CONTENT_DIR]
    if os.environ.get(ENV_STRICT_TYPES):
        values["strict_instruction_types"] = _env_flag(os.environ[ENV_STRICT_TYPES])

    return BinderSettings(**values)
