"""
Scale tools - MCP tools for scale discovery, classification and comparison.

Tools for listing catalog scales, describing a scale on a root, classifying
arbitrary interval patterns, comparing or locating notes in scales, and
copying library scales into the project.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.catalog import ScaleCatalog
from chuk_mcp_scales.constants import ErrorMessages, SuccessMessages
from chuk_mcp_scales.core import Note, Scale

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _classification(scale: Scale) -> dict[str, Any]:
    return {
        "size": scale.size(),
        "cents": scale.cents,
        "semitones": scale.semitones,
        "length": scale.length(),
        "ascending": scale.is_ascending(),
        "descending": scale.is_descending(),
        "chromatic": scale.is_chromatic(),
        "diatonic": scale.is_diatonic(),
        "diatonic_steps": scale.has_diatonic_steps(),
    }


def register_scale_tools(mcp: ChukMCPServer, catalog: ScaleCatalog) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The scale catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def resolve(name: str, root: str | None) -> Scale:
        scale = catalog.get_scale(name, Note.parse(root) if root else None)
        if scale is None:
            raise ValueError(ErrorMessages.SCALE_NOT_FOUND.format(name=name))
        return scale

    @mcp.tool  # type: ignore[arg-type]
    async def scale_list(family: str | None = None) -> str:
        """
        List available scales.

        Returns all scales from the library and project with basic
        metadata.

        Args:
            family: Only list this family (chromatic, diatonic, pentatonic,
                hexatonic, other)

        Returns:
            JSON string with list of scale summaries

        Example:
            scale_list(family="pentatonic")
        """
        try:
            scales = catalog.list_scales(family)
            return json.dumps(
                {
                    "status": "success",
                    "scales": [s.model_dump() for s in scales],
                    "count": len(scales),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scale_list"] = scale_list

    @mcp.tool  # type: ignore[arg-type]
    async def scale_describe(name: str, root: str | None = None) -> str:
        """
        Describe a catalog scale.

        Returns the intervals and classification, and the notes when a
        root is given.

        Args:
            name: Scale name or alias
            root: Root note like "C4" or "F#" (optional)

        Returns:
            JSON string with scale details

        Example:
            scale_describe(name="dorian", root="D4")
        """
        try:
            scale = resolve(name, root)
            definition = catalog.get_definition(name)
            return json.dumps(
                {
                    "status": "success",
                    "scale": {
                        "name": definition.name if definition else name,
                        "symbol": scale.symbol,
                        "label": str(scale),
                        "intervals": [i.cents for i in scale.intervals],
                        "notes": [str(n) for n in scale.notes()],
                        **_classification(scale),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scale_describe"] = scale_describe

    @mcp.tool  # type: ignore[arg-type]
    async def scale_classify(intervals: list[int]) -> str:
        """
        Classify an interval pattern.

        Reports direction, chromatic and diatonic checks, and any catalog
        scales the pattern equals or is a mode of.

        Args:
            intervals: Steps between degrees in cents

        Returns:
            JSON string with classification

        Example:
            scale_classify(intervals=[200, 100, 200, 200, 200, 100, 200])
        """
        try:
            scale = Scale(intervals)
            return json.dumps(
                {
                    "status": "success",
                    "classification": _classification(scale),
                    "matches": [m.name for m in catalog.identify(scale)],
                    "modes": [
                        {"name": m.name, "start": start} for m, start in catalog.find_modes(scale)
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to classify scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scale_classify"] = scale_classify

    @mcp.tool  # type: ignore[arg-type]
    async def scale_compare(
        first: str,
        second: str,
        first_root: str | None = None,
        second_root: str | None = None,
    ) -> str:
        """
        Compare two catalog scales.

        Args:
            first: First scale name
            second: Second scale name
            first_root: Root of the first scale (optional)
            second_root: Root of the second scale (optional)

        Returns:
            JSON string with each equivalence relation

        Example:
            scale_compare(first="major", second="minor",
                          first_root="C4", second_root="A4")
        """
        try:
            a = resolve(first, first_root)
            b = resolve(second, second_root)
            return json.dumps(
                {
                    "status": "success",
                    "comparison": {
                        "equal": a == b,
                        "equal_intervals": a.has_equal_intervals(b),
                        "rotation": a.has_equal_interval_sequence(b),
                        "equal_note_sequence": a.has_equal_note_sequence(b),
                        "equal_ignore_pitch": a.equals_ignore_pitch(b),
                        "equal_ignore_pitch_and_octave": a.equals_ignore_pitch_and_octave(b),
                        "contained": b.test(a),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to compare scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scale_compare"] = scale_compare

    @mcp.tool  # type: ignore[arg-type]
    async def scale_find_note(name: str, root: str, note: str) -> str:
        """
        Find the degree of a note in a scale.

        Notes without an octave match the pitch in any octave.

        Args:
            name: Scale name
            root: Root note like "C4"
            note: Note to look for like "A4" or "Bb"

        Returns:
            JSON string with the degree, or null when absent

        Example:
            scale_find_note(name="major", root="C4", note="A4")
        """
        try:
            if not root:
                raise ValueError(ErrorMessages.ROOT_REQUIRED.format(name=name))
            scale = resolve(name, root)
            target = Note.parse(note)
            degree = scale.index_of_note(target)
            found = degree < scale.size()
            return json.dumps(
                {
                    "status": "success",
                    "note": str(target),
                    "degree": degree if found else None,
                    "found": found,
                }
            )
        except Exception as e:
            logger.exception("Failed to find note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scale_find_note"] = scale_find_note

    @mcp.tool  # type: ignore[arg-type]
    async def scale_identify(notes: list[str]) -> str:
        """
        Identify a scale from its notes.

        Intervals are taken between consecutive notes; the first note is
        the root.

        Args:
            notes: Note names in order like ["A3", "B3", "C4", ...]

        Returns:
            JSON string with matching catalog scales and modes

        Example:
            scale_identify(notes=["A3", "B3", "C4", "D4", "E4", "F4", "G4", "A4"])
        """
        try:
            scale = Scale.from_notes(*(Note.parse(n) for n in notes))
            return json.dumps(
                {
                    "status": "success",
                    "intervals": [i.cents for i in scale.intervals],
                    "matches": [m.name for m in catalog.identify(scale)],
                    "modes": [
                        {"name": m.name, "start": start} for m, start in catalog.find_modes(scale)
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to identify scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scale_identify"] = scale_identify

    @mcp.tool  # type: ignore[arg-type]
    async def scale_copy_to_project(name: str) -> str:
        """
        Copy a library scale to your project for customization.

        The copy overrides the library scale of the same name, so editing
        it changes what the other tools see.

        Args:
            name: Library scale name

        Returns:
            JSON string with path to copied scale

        Example:
            scale_copy_to_project(name="dorian")
        """
        try:
            path = catalog.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCALE_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SCALE_COPIED.format(name=path.stem, path=path),
                    "path": str(path),
                    "hint": "You can now customize this scale by editing the YAML file",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scale_copy_to_project"] = scale_copy_to_project

    return tools
