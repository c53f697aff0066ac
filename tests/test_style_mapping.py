"""
Tests for style_mapping module - Slot catalog and override table
"""
import pytest
from core.style_mapping import (
    TABS,
    TEXT_ELEMENTS,
    StyleMappingTable,
    default_step_for_slot,
    elements_for_tab,
    panel_title,
)


@pytest.mark.unit
class TestDefaultRules:
    """Tests for default_step_for_slot"""

    @pytest.mark.parametrize("slot,step", [
        ("landing-heading", "heading-1"),
        ("article-title", "heading-1"),
        ("landing-heading-2", "heading-2"),
        ("article-heading-3", "heading-3"),
        ("dashboard-title", "heading-3"),
        ("landing-feature-title", "heading-5"),
        ("landing-feature-description", "body"),
        ("examples-card-title", "heading-6"),
        ("dashboard-card-value", "heading-3"),
        ("dashboard-section-title", "heading-5"),
        ("dashboard-table-header", "body-sm"),
        ("landing-button-primary", "body-sm"),
        ("article-meta", "body-sm"),
        ("article-blockquote", "body-lg"),
        ("tasks-table-cell", "body"),
        ("examples-label", "body-sm"),
    ])
    def test_known_slots(self, slot, step):
        assert default_step_for_slot(slot) == step

    def test_heading_exclusions(self):
        """Test "heading" inside card / feature slots does not select heading-1"""
        assert default_step_for_slot("custom-card-heading") == "body"
        assert default_step_for_slot("custom-page-heading") == "heading-1"

    def test_fallback(self):
        assert default_step_for_slot("footer-copyright") == "body"


@pytest.mark.unit
class TestCatalog:
    """Tests for the slot catalog"""

    def test_slot_count(self):
        assert len(TEXT_ELEMENTS) == 37
        assert len({element.id for element in TEXT_ELEMENTS}) == 37

    def test_elements_per_tab(self):
        counts = {tab: len(elements_for_tab(tab)) for tab in TABS}
        assert counts == {"examples": 5, "dashboard": 10, "tasks": 7, "landing": 8, "article": 7}

    def test_panel_title(self):
        assert panel_title("tasks") == "Text styles for Table"

    def test_unknown_tab(self):
        with pytest.raises(ValueError):
            elements_for_tab("settings")


@pytest.mark.unit
class TestStyleMappingTable:
    """Tests for StyleMappingTable"""

    def test_defaults_without_overrides(self):
        table = StyleMappingTable()
        assert table.step_for("landing-heading") == "heading-1"
        assert len(table) == 0

    def test_override(self):
        table = StyleMappingTable()
        table.set("landing-heading", "heading-2")
        assert table.step_for("landing-heading") == "heading-2"
        assert table.is_overridden("landing-heading")

    def test_initial_overrides(self):
        table = StyleMappingTable({"article-body": "body-lg"})
        assert table.step_for("article-body") == "body-lg"

    def test_empty_override_uses_default(self):
        table = StyleMappingTable({"article-meta": ""})
        assert table.step_for("article-meta") == "body-sm"

    def test_clear(self):
        table = StyleMappingTable({"article-body": "body-lg"})
        table.clear("article-body")
        table.clear("article-body")
        assert table.step_for("article-body") == "body"

    def test_restore_defaults_for_one_tab(self):
        table = StyleMappingTable({
            "landing-heading": "heading-3",
            "landing-badge": "body",
            "article-body": "body-lg",
        })
        assert table.restore_defaults("landing") == 2
        assert table.overrides == {"article-body": "body-lg"}

    def test_restore_unknown_tab(self):
        with pytest.raises(ValueError):
            StyleMappingTable().restore_defaults("settings")

    def test_overrides_is_copy(self):
        table = StyleMappingTable({"article-body": "body-lg"})
        table.overrides["article-body"] = "heading-1"
        assert table.step_for("article-body") == "body-lg"
