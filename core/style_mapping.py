"""
Style Mapping - Which step each preview text slot uses

PURPOSE: Catalog of the text slots in the preview screens, the rule-based
         default step for each slot and the user-editable override table.

CONTEXT: Preview collaborators ask StyleMappingTable.step_for(slot) and pass
         the result to core.style_resolver.resolve_style. Overrides live only
         for the session.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from utils.logger import get_logger

logger = get_logger()

TABS = ("examples", "dashboard", "tasks", "landing", "article")

PANEL_TITLES = {
    "examples": "Text styles for Cards",
    "dashboard": "Text styles for Dashboard",
    "tasks": "Text styles for Table",
    "landing": "Text styles for Landing",
    "article": "Text styles for Article",
}


@dataclass(frozen=True)
class TextElement:
    id: str
    label: str
    tab: str


TEXT_ELEMENTS: Tuple[TextElement, ...] = (
    # Dashboard
    TextElement("dashboard-title", "Dashboard Title", "dashboard"),
    TextElement("dashboard-download-btn", "Download Button", "dashboard"),
    TextElement("dashboard-tabs", "Tab Labels", "dashboard"),
    TextElement("dashboard-card-title", "Card Title", "dashboard"),
    TextElement("dashboard-card-value", "Card Value", "dashboard"),
    TextElement("dashboard-card-description", "Card Description", "dashboard"),
    TextElement("dashboard-section-title", "Section Title", "dashboard"),
    TextElement("dashboard-section-description", "Section Description", "dashboard"),
    TextElement("dashboard-table-header", "Table Header", "dashboard"),
    TextElement("dashboard-table-cell", "Table Cell", "dashboard"),
    # Examples
    TextElement("examples-card-title", "Card Title", "examples"),
    TextElement("examples-card-description", "Card Description", "examples"),
    TextElement("examples-label", "Label", "examples"),
    TextElement("examples-input", "Input", "examples"),
    TextElement("examples-button", "Button", "examples"),
    # Tasks
    TextElement("tasks-title", "Title", "tasks"),
    TextElement("tasks-description", "Description", "tasks"),
    TextElement("tasks-filter-input", "Filter Input", "tasks"),
    TextElement("tasks-filter-button", "Filter Button", "tasks"),
    TextElement("tasks-table-header", "Table Header", "tasks"),
    TextElement("tasks-table-cell", "Table Cell", "tasks"),
    TextElement("tasks-pagination", "Pagination", "tasks"),
    # Landing
    TextElement("landing-badge", "Badge", "landing"),
    TextElement("landing-heading", "Main Heading", "landing"),
    TextElement("landing-heading-2", "Section Heading", "landing"),
    TextElement("landing-description", "Hero Description", "landing"),
    TextElement("landing-button-primary", "Primary Button", "landing"),
    TextElement("landing-button-secondary", "Secondary Button", "landing"),
    TextElement("landing-feature-title", "Feature Title", "landing"),
    TextElement("landing-feature-description", "Feature Description", "landing"),
    # Article
    TextElement("article-title", "Title", "article"),
    TextElement("article-meta", "Meta", "article"),
    TextElement("article-body", "Body", "article"),
    TextElement("article-heading-2", "Heading 2", "article"),
    TextElement("article-heading-3", "Heading 3", "article"),
    TextElement("article-list-item", "List Item", "article"),
    TextElement("article-blockquote", "Blockquote", "article"),
)

_ELEMENT_IDS = {element.id for element in TEXT_ELEMENTS}

EXACT_DEFAULTS = {
    "landing-heading": "heading-1",
    "article-title": "heading-1",
    "landing-heading-2": "heading-2",
    "dashboard-title": "heading-3",
    "tasks-title": "heading-3",
}

# (substring, excluded substrings, step); first match wins, so more specific
# fragments come before the general ones they contain
SUBSTRING_DEFAULTS: Tuple[Tuple[str, Tuple[str, ...], str], ...] = (
    ("heading-2", (), "heading-2"),
    ("heading-3", (), "heading-3"),
    ("feature-description", (), "body"),
    ("feature-title", (), "heading-5"),
    ("card-title", (), "heading-6"),
    ("card-value", (), "heading-3"),
    ("section-title", (), "heading-5"),
    ("heading", ("card", "feature"), "heading-1"),
    ("table-header", (), "body-sm"),
    ("button", (), "body-sm"),
    ("tabs", (), "body-sm"),
    ("badge", (), "body-sm"),
    ("meta", (), "body-sm"),
    ("description", (), "body"),
    ("list-item", (), "body"),
    ("blockquote", (), "body-lg"),
    ("input", (), "body"),
    ("label", (), "body-sm"),
    ("pagination", (), "body-sm"),
    ("table-cell", (), "body"),
)

FALLBACK_STEP = "body"


def default_step_for_slot(slot_id: str) -> str:
    """
    Default step of a text slot when the user has not overridden it.

    Example:
        >>> default_step_for_slot("landing-feature-description")
        'body'
        >>> default_step_for_slot("examples-card-title")
        'heading-6'
    """
    if slot_id in EXACT_DEFAULTS:
        return EXACT_DEFAULTS[slot_id]

    for fragment, excluded, step in SUBSTRING_DEFAULTS:
        if fragment in slot_id and not any(word in slot_id for word in excluded):
            return step

    return FALLBACK_STEP


def _check_tab(tab: str) -> None:
    if tab not in TABS:
        raise ValueError(f"Unknown preview tab '{tab}', expected one of {', '.join(TABS)}")


def elements_for_tab(tab: str) -> List[TextElement]:
    _check_tab(tab)
    return [element for element in TEXT_ELEMENTS if element.tab == tab]


def panel_title(tab: str) -> str:
    _check_tab(tab)
    return PANEL_TITLES[tab]


class StyleMappingTable:
    """
    User overrides of slot -> step, falling back to the default rules

    WHY: Users reassign preview slots at runtime; the table is rebuilt for
    every session and never persisted.
    """

    def __init__(self, overrides: Optional[Dict[str, str]] = None):
        self._overrides: Dict[str, str] = {}
        for slot_id, step_name in (overrides or {}).items():
            self.set(slot_id, step_name)

    def step_for(self, slot_id: str) -> str:
        """Step used by a slot: its override if any, else the default rule"""
        return self._overrides.get(slot_id) or default_step_for_slot(slot_id)

    def set(self, slot_id: str, step_name: str):
        if slot_id not in _ELEMENT_IDS:
            logger.warning(f"Mapping unknown text slot '{slot_id}'")
        self._overrides[slot_id] = step_name

    def clear(self, slot_id: str):
        self._overrides.pop(slot_id, None)

    def restore_defaults(self, tab: str) -> int:
        """
        Drop every override of one preview tab

        Returns:
            Number of overrides removed
        """
        _check_tab(tab)
        removed = [slot_id for slot_id in self._overrides if slot_id.startswith(tab)]
        for slot_id in removed:
            del self._overrides[slot_id]
        logger.debug(f"Restored {len(removed)} default mapping(s) for '{tab}'")
        return len(removed)

    def is_overridden(self, slot_id: str) -> bool:
        return slot_id in self._overrides

    @property
    def overrides(self) -> Dict[str, str]:
        return dict(self._overrides)

    def __len__(self):
        return len(self._overrides)
