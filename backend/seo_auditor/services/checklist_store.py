"""
Checklist Store - Load the external SEO checklist.

The checklist only supplies display metadata (label, priority, how-to-fix);
pass/fail logic lives in the evaluators. A missing or broken checklist is
not an error: evaluators fall back to their built-in defaults.
"""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from seo_auditor.config import settings
from seo_auditor.exceptions import ChecklistUnavailable
from seo_auditor.logger import logger

SECTION_KEY = re.compile(r"^\d+_")
BUILDER_SECTION = "0_website_builder_system"

# backend/seo_auditor/services -> repository root
PROJECT_ROOT = Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class CheckDefinition:
    """Display metadata for one check."""
    label: str
    priority: str = "medium"
    how_to_fix: str = ""


@dataclass(frozen=True)
class ChecklistSection:
    """A labelled group of checks."""
    label: str
    description: str = ""
    items: Mapping[str, CheckDefinition] = field(default_factory=dict)


@dataclass(frozen=True)
class Checklist:
    """Read-only checklist passed explicitly to evaluators."""
    sections: Mapping[str, ChecklistSection] = field(default_factory=dict)
    source: Optional[str] = None

    @classmethod
    def empty(cls) -> "Checklist":
        return cls()

    @classmethod
    def from_dict(cls, raw: dict, source: Optional[str] = None) -> "Checklist":
        """Build a checklist from the parsed JSON document.

        Only numbered top-level keys with an ``items`` object are sections;
        the website-builder block is skipped.
        """
        sections = {}
        for key, value in raw.items():
            if not SECTION_KEY.match(key) or key == BUILDER_SECTION:
                continue
            if not isinstance(value, dict) or not isinstance(value.get("items"), dict):
                continue

            items = {}
            for check_id, item in value["items"].items():
                if not isinstance(item, dict):
                    continue
                items[check_id] = CheckDefinition(
                    label=str(item.get("check", check_id)),
                    priority=str(item.get("priority", "medium")),
                    how_to_fix=str(item.get("how_to_fix", "")),
                )

            sections[key] = ChecklistSection(
                label=str(value.get("label", key)),
                description=str(value.get("description", "")),
                items=MappingProxyType(items),
            )

        return cls(sections=MappingProxyType(sections), source=source)

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def section_label(self, section_id: str) -> Optional[str]:
        section = self.sections.get(section_id)
        return section.label if section else None

    def item(self, section_id: str, check_id: str) -> Optional[CheckDefinition]:
        section = self.sections.get(section_id)
        if section is None:
            return None
        return section.items.get(check_id)


def candidate_paths(override: Optional[str] = None) -> list[Path]:
    """Checklist locations in lookup order; first existing file wins."""
    filename = settings.CHECKLIST_FILENAME
    paths = []

    explicit = override or settings.CHECKLIST_PATH
    if explicit:
        paths.append(Path(explicit).expanduser())

    paths.append(PROJECT_ROOT / filename)
    paths.append(Path.cwd() / filename)
    paths.append(Path.home() / ".seo-auditor" / filename)

    return paths


def _read(path: Path) -> Checklist:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ChecklistUnavailable(str(path), str(e)) from e

    if not isinstance(raw, dict):
        raise ChecklistUnavailable(str(path), "top-level JSON value is not an object")

    return Checklist.from_dict(raw, source=str(path))


def load_checklist(override: Optional[str] = None) -> Checklist:
    """Load the checklist from the first usable candidate path.

    Args:
        override: Explicit checklist path, tried before everything else

    Returns:
        The loaded checklist, or an empty one if no candidate is usable
    """
    tried = []

    for path in candidate_paths(override):
        tried.append(str(path))
        if not path.is_file():
            continue

        try:
            checklist = _read(path)
        except ChecklistUnavailable as e:
            logger.warning(str(e))
            continue

        logger.info(f"Loaded checklist from {path} ({len(checklist.sections)} sections)")
        return checklist

    logger.warning(f"No checklist loaded, using built-in defaults. Tried: {', '.join(tried)}")
    return Checklist.empty()


# Process-wide checklist instance
_checklist: Optional[Checklist] = None


def get_checklist() -> Checklist:
    """Get the process-wide checklist (loaded once)."""
    global _checklist
    if _checklist is None:
        _checklist = load_checklist()
    return _checklist


def reset_checklist_cache() -> None:
    """Forget the cached checklist so the next call reloads it."""
    global _checklist
    _checklist = None
