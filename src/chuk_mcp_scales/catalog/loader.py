"""
Scale catalog - discovers and loads named scale patterns.

Scales can come from:
1. Built-in library (shipped with package)
2. Project scales (user's project/scales directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_scales.core.errors import UnknownScaleError
from chuk_mcp_scales.core.scale import build_scale, select_chromatic_table, table_spelling
from chuk_mcp_scales.models.scale import ScaleDefinition, ScaleResult

logger = logging.getLogger(__name__)


class ScaleCatalog:
    """
    Discovers and loads scale definitions.

    Scales are loaded from YAML files in the library and project directories.
    Project scales override library scales with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the scale catalog.

        Args:
            library_path: Path to built-in scale library
            project_path: Path to project scales directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ScaleDefinition] | None = None

    def list_scales(self, tag: str | None = None) -> list[ScaleDefinition]:
        """
        List all available scales, sorted by name.

        Args:
            tag: Optional filter, only scales carrying this tag

        Returns:
            Scale definitions from library and project
        """
        scales = list(self._load_all().values())
        if tag:
            scales = [s for s in scales if tag in s.tags]
        return sorted(scales, key=lambda s: s.name)

    def get_scale(self, name: str) -> ScaleDefinition | None:
        """
        Get a scale by name or alias (case-insensitive).

        Args:
            name: Scale name or alias

        Returns:
            ScaleDefinition if found, None otherwise
        """
        scales = self._load_all()
        exact = scales.get(name.strip().lower())
        if exact:
            return exact

        for definition in scales.values():
            if definition.matches(name):
                return definition
        return None

    def build(self, tonic: str, name: str) -> ScaleResult:
        """
        Build a named scale from a tonic.

        Args:
            tonic: Starting note, e.g. 'D' or 'bb'
            name: Scale name or alias

        Returns:
            The computed scale

        Raises:
            UnknownScaleError: If no scale matches name
        """
        definition = self.get_scale(name)
        if definition is None:
            raise UnknownScaleError(name)

        notes = build_scale(tonic, definition.pattern)
        logger.debug("Built %s %s: %s", tonic, definition.name, notes)
        return ScaleResult(
            tonic=tonic,
            pattern=definition.pattern,
            name=definition.name,
            spelling=table_spelling(select_chromatic_table(tonic)),
            notes=notes,
        )

    def clear_cache(self) -> None:
        """Clear the scale cache."""
        self._cache = None

    def _load_all(self) -> dict[str, ScaleDefinition]:
        """Load library then project scales, keyed by lower-cased name."""
        if self._cache is not None:
            return self._cache

        scales: dict[str, ScaleDefinition] = {}
        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                definition = self._load_scale_file(path)
                if definition:
                    scales[definition.name.lower()] = definition

        logger.debug("Loaded %d scales", len(scales))
        self._cache = scales
        return scales

    def _load_scale_file(self, path: Path) -> ScaleDefinition | None:
        """Load a scale from a YAML file, skipping files that don't parse."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_scale(data)
        except (OSError, yaml.YAMLError, ValidationError, KeyError, AttributeError) as e:
            logger.warning("Skipping scale file %s: %s", path, e)
            return None

    def _parse_scale(self, data: dict[str, Any]) -> ScaleDefinition:
        """Parse scale from YAML data."""
        return ScaleDefinition(
            name=data.get("name", "unknown"),
            pattern=str(data["pattern"]),
            description=data.get("description", ""),
            aliases=data.get("aliases", []),
            tags=data.get("tags", []),
        )
