"""
Reading configuration sources from disk.

Relative paths resolve against the project root (the working directory
unless told otherwise). The .env file is optional; the JSON config file
must hold a single object.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from dotenv import load_dotenv

from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
)


logger = logging.getLogger(__name__)


class FileOperations:
    """Path resolution plus .env and JSON loading rooted at one directory."""

    def __init__(self, project_root: Path, env_file: str) -> None:
        self.project_root = Path(project_root)
        self.env_file = env_file
        self.logger = logger

    def resolve_path(self, path: Union[str, Path]) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else (self.project_root / candidate).resolve()

    def load_environment_variables(self) -> bool:
        """
        Export variables from the .env file into os.environ.

        Variables that are already set are left alone, so the real
        environment wins over the file.

        Returns:
            True if a .env file was found and read
        """
        dotenv_path = self.resolve_path(self.env_file)
        if not dotenv_path.is_file():
            self.logger.debug(f"No {self.env_file} in {self.project_root}")
            return False

        load_dotenv(dotenv_path, override=False)
        self.logger.debug(f"Read environment from {dotenv_path}")
        return True

    def load_json_file(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Read a JSON config file.

        Raises:
            ConfigurationFileNotFoundError: If the file is missing
            ConfigurationError: If it cannot be read, is not JSON, or is not an object
        """
        path = self.resolve_path(file_path)
        if not path.is_file():
            raise ConfigurationFileNotFoundError(f"Config file {path} does not exist", str(path))

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}", str(path)
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read config file: {e}", str(path)) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file must contain a JSON object, found {type(data).__name__}", str(path)
            )

        self.logger.debug(f"Loaded {len(data)} config sections from {path}")
        return data
