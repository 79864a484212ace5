"""Base configuration model shared by the gridimport importers.

Provides ``BaseImportConfig`` with the tunables common to every importer.
Each package subclasses it with its own format-specific fields.  Supports
loading overrides from YAML or JSON files via the ``from_file()``
classmethod.
"""

from __future__ import annotations

import json
import pathlib
from typing import TypeVar

from pydantic import BaseModel, Field

_ConfigT = TypeVar("_ConfigT", bound="BaseImportConfig")


class BaseImportConfig(BaseModel):
    """Tunables shared by all importers."""

    # --- Identity ---
    parser_version: str = "gridimport:1.0.0"

    # --- Security / Resource Limits ---
    max_file_size_mb: int | None = Field(default=100, gt=0)  # None = no cap
    large_file_warning_mb: int = Field(default=10, gt=0)

    # --- Logging / PII Safety ---
    log_sample_data: bool = False

    @classmethod
    def from_file(cls: type[_ConfigT], path: str) -> _ConfigT:
        """Load configuration from a YAML or JSON file.

        File format is detected by extension: ``.yaml`` / ``.yml`` for YAML,
        ``.json`` for JSON.  Any keys present in the file override the
        corresponding defaults; keys not present retain their defaults.

        Raises:
            FileNotFoundError: If *path* does not exist.
            ValueError: If the file extension is not recognized.
            ImportError: If a YAML file is provided but ``pyyaml`` is not
                installed.
        """
        file_path = pathlib.Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        suffix = file_path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            try:
                import yaml  # type: ignore[import-untyped]
            except ImportError as exc:
                raise ImportError(
                    "pyyaml is required to load YAML config files. "
                    "Install it with: pip install pyyaml"
                ) from exc
            with open(file_path) as fh:
                data = yaml.safe_load(fh)
        elif suffix == ".json":
            with open(file_path) as fh:
                data = json.load(fh)
        else:
            raise ValueError(
                f"Unsupported config file extension '{suffix}'. "
                "Use .yaml, .yml, or .json."
            )

        if data is None:
            data = {}

        return cls(**data)
