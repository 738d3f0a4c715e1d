"""Bring a parsed model payload into the canonical document shape.

The canonical document is ``{"workflow": ..., "requirements": ...}``.
Models regularly drop the wrapper and return the workflow graph on its own,
or leave out ``requirements``; both are repaired here. Anything else is an
error: an empty workflow would be indistinguishable from a useless answer.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from ..config import AUXILIARY_KEY, PRIMARY_KEY, REQUIREMENT_LIST_KEYS
from ..exceptions import ModelReportedError, SchemaRepairError
from ..models import ExtractedDocument
from ..utils.llm_parsing import parse_structured_json

logger = logging.getLogger(__name__)

# Decides whether a parsed mapping is a bare workflow (the inner content)
ShapeDetector = Callable[[Mapping[str, Any]], bool]

# ---------------------------------------------------------------------------
# Bare workflow detectors
# ---------------------------------------------------------------------------

def looks_like_graph_workflow(value: Mapping[str, Any]) -> bool:
    """UI/graph export format: top-level ``nodes`` and ``links``."""
    if PRIMARY_KEY in value or AUXILIARY_KEY in value:
        return False
    return "nodes" in value and "links" in value


def looks_like_api_workflow(value: Mapping[str, Any]) -> bool:
    """API/prompt format: a map of node ids to node objects."""
    if not value or PRIMARY_KEY in value or AUXILIARY_KEY in value:
        return False
    return all(isinstance(node, Mapping) for node in value.values())


DEFAULT_DETECTORS: tuple[ShapeDetector, ...] = (looks_like_graph_workflow, looks_like_api_workflow)


def empty_requirements() -> Dict[str, list]:
    return {key: [] for key in REQUIREMENT_LIST_KEYS}


def _requirements_or_empty(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    if value is not None:
        logger.info("Ignoring non-object '%s' of type %s", AUXILIARY_KEY, type(value).__name__)
    return empty_requirements()


# ---------------------------------------------------------------------------
# Canonicalizer
# ---------------------------------------------------------------------------

class Canonicalizer:
    """Parse payload text and repair its top-level shape.

    Parameters
    ----------
    detectors
        Predicates tried in order to recognise a bare workflow that needs
        wrapping. Replace them to support other workflow encodings.
    """

    def __init__(self, detectors: Optional[Sequence[ShapeDetector]] = None) -> None:
        self.detectors: tuple[ShapeDetector, ...] = (
            DEFAULT_DETECTORS if detectors is None else tuple(detectors)
        )

    def canonicalize(self, payload_text: str) -> ExtractedDocument:
        """Parse *payload_text* and return the canonical document.

        Raises
        ------
        JsonSyntaxError
            The payload is not valid JSON.
        SchemaRepairError
            The JSON cannot be repaired into the canonical shape.
        """
        value = parse_structured_json(payload_text)
        return self.repair_shape(value, raw_text=payload_text.strip())

    def repair_shape(self, value: Any, *, raw_text: str = "") -> ExtractedDocument:
        if not isinstance(value, Mapping):
            raise SchemaRepairError(
                f"Expected a JSON object at the top level, got {type(value).__name__}",
                raw_text=raw_text,
            )

        reported = value.get("error")
        if isinstance(reported, str) and reported:
            raise ModelReportedError(
                f"The model could not generate a workflow: {reported}",
                raw_text=raw_text,
            )

        has_primary = PRIMARY_KEY in value
        has_auxiliary = AUXILIARY_KEY in value
        # Bare workflow candidate with any sibling requirements lifted out
        inner = {k: v for k, v in value.items() if k != AUXILIARY_KEY}

        # 1. Already canonical
        if has_primary and has_auxiliary:
            document = dict(value)

        # 2. Bare workflow without the wrapper
        elif not has_primary and self._is_bare_workflow(inner):
            logger.info("Payload is a bare workflow; wrapping it under '%s'", PRIMARY_KEY)
            document = {PRIMARY_KEY: inner, AUXILIARY_KEY: value.get(AUXILIARY_KEY)}

        # 3. Workflow without requirements
        elif has_primary:
            logger.info("Payload has no '%s'; using an empty one", AUXILIARY_KEY)
            document = {**value, AUXILIARY_KEY: None}

        # 4. Nothing to salvage
        else:
            raise SchemaRepairError(
                f"Generated JSON is missing the '{PRIMARY_KEY}' top-level key "
                f"(found keys: {', '.join(map(str, value.keys())) or 'none'})",
                raw_text=raw_text,
            )

        workflow = document[PRIMARY_KEY]
        if not isinstance(workflow, (Mapping, list)) or not workflow:
            raise SchemaRepairError(
                f"Generated JSON has an empty or invalid '{PRIMARY_KEY}' "
                f"({type(workflow).__name__})",
                raw_text=raw_text,
            )
        document[AUXILIARY_KEY] = _requirements_or_empty(document[AUXILIARY_KEY])
        return document

    def _is_bare_workflow(self, value: Mapping[str, Any]) -> bool:
        return any(detector(value) for detector in self.detectors)


_default = Canonicalizer()


def canonicalize(payload_text: str) -> ExtractedDocument:
    """Module-level shortcut using the default detectors."""
    return _default.canonicalize(payload_text)


def repair_shape(value: Any, *, raw_text: str = "") -> ExtractedDocument:
    """Repair an already-parsed value using the default detectors."""
    return _default.repair_shape(value, raw_text=raw_text)


__all__ = [
    "ShapeDetector",
    "looks_like_graph_workflow",
    "looks_like_api_workflow",
    "DEFAULT_DETECTORS",
    "empty_requirements",
    "Canonicalizer",
    "canonicalize",
    "repair_shape",
]
