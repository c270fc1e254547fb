"""
Scale catalog - discovers and loads scale definitions.

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

from chuk_mcp_scales.core import Note, Scale
from chuk_mcp_scales.models.scale import ScaleDefinition, ScaleMetadata

logger = logging.getLogger(__name__)


def _normalize(name: str) -> str:
    return name.strip().lower().replace(" ", "_").replace("-", "_")


class ScaleCatalog:
    """
    Discovers and loads scale definitions.

    Definitions are loaded from YAML files in the library and project
    directories. Project scales override library scales with the same name.
    Every get_scale() call returns a new Scale, since scales carry a
    mutable root.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog.

        Args:
            library_path: Path to built-in scale library
            project_path: Path to project scales directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ScaleDefinition] = {}

    def _definitions(self) -> dict[str, ScaleDefinition]:
        """All definitions by name, project entries replacing library ones."""
        definitions: dict[str, ScaleDefinition] = {}

        if self.library_path.exists():
            for path in sorted(self.library_path.glob("*.yaml")):
                definition = self._load_scale_file(path)
                if definition:
                    definitions[definition.name] = definition

        if self.project_path and self.project_path.exists():
            for path in sorted(self.project_path.glob("*.yaml")):
                definition = self._load_scale_file(path)
                if definition:
                    definitions[definition.name] = definition

        return definitions

    def list_scales(self, family: str | None = None) -> list[ScaleMetadata]:
        """
        List all available scales.

        Args:
            family: Only list scales of this family (e.g. 'pentatonic')
        """
        return [
            ScaleMetadata.from_definition(definition)
            for definition in self._definitions().values()
            if family is None or definition.family == family
        ]

    def get_definition(self, name: str) -> ScaleDefinition | None:
        """
        Get a scale definition by name or alias.

        Project scales take precedence over library scales.

        Returns:
            ScaleDefinition if found, None otherwise
        """
        key = _normalize(name)
        if key in self._cache:
            return self._cache[key]

        for directory in (self.project_path, self.library_path):
            if directory is None or not directory.exists():
                continue
            scale_file = directory / f"{key}.yaml"
            if scale_file.exists():
                definition = self._load_scale_file(scale_file)
                if definition:
                    self._cache[key] = definition
                    return definition

        for definition in self._definitions().values():
            if key in definition.aliases:
                self._cache[key] = definition
                return definition

        return None

    def get_scale(self, name: str, root: Note | None = None) -> Scale | None:
        """
        Build a new scale from a catalog definition.

        Args:
            name: Scale name or alias
            root: Root note, or None for a template

        Returns:
            Scale if the name is known, None otherwise
        """
        definition = self.get_definition(name)
        if definition is None:
            return None
        return definition.to_scale(root)

    def identify(self, scale: Scale) -> list[ScaleMetadata]:
        """Catalog scales with exactly the same intervals as a scale."""
        return [
            ScaleMetadata.from_definition(definition)
            for definition in self._definitions().values()
            if definition.to_scale().has_equal_intervals(scale)
        ]

    def find_modes(self, scale: Scale) -> list[tuple[ScaleMetadata, int]]:
        """
        Catalog scales that are rotations of a scale.

        Returns:
            (metadata, start) pairs, where start is the degree of the given
            scale at which the catalog scale begins
        """
        modes: list[tuple[ScaleMetadata, int]] = []
        for definition in self._definitions().values():
            template = definition.to_scale()
            for start in range(len(scale.intervals)):
                if len(template.intervals) == len(scale.intervals) and (
                    scale.has_equal_interval_sequence(template, start)
                ):
                    modes.append((ScaleMetadata.from_definition(definition), start))
                    break
        return modes

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library scale to the project for customization.

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        key = _normalize(name)
        library_file = self.library_path / f"{key}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{key}.yaml"
        if dest_file.exists():
            raise ValueError(f"Scale already exists in project: {key}")

        dest_file.write_text(library_file.read_text())

        # Invalidate the name and any alias that resolved to it
        stale = [k for k, definition in self._cache.items() if k == key or definition.name == key]
        for k in stale:
            del self._cache[k]

        return dest_file

    def _load_scale_file(self, path: Path) -> ScaleDefinition | None:
        """Load a scale definition from a YAML file, or None if it is invalid."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            logger.warning("Skipping unreadable scale file %s", path, exc_info=True)
            return None

        try:
            definition = self._parse_scale(data, default_name=path.stem)
        except (ValidationError, TypeError) as e:
            logger.warning("Skipping invalid scale file %s: %s", path, e)
            return None

        logger.debug("Loaded scale %r from %s", definition.name, path)
        return definition

    def _parse_scale(self, data: dict[str, Any], default_name: str) -> ScaleDefinition:
        """Parse a scale definition from YAML data."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")
        data = dict(data)
        data.setdefault("name", default_name)
        data.setdefault("symbol", data["name"].replace("_", " ").title())
        return ScaleDefinition.model_validate(data)
