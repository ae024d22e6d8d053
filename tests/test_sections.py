"""Tests for grouping entry content into sections."""

from __future__ import annotations

import logging

import pytest

from akafoe_menu.events import iter_events
from akafoe_menu.exceptions import AssemblyError, OrphanListError
from akafoe_menu.nodes import Element
from akafoe_menu.sections import UNKNOWN_SECTION, assemble_sections
from akafoe_menu.tree_builder import build_tree


def _entry(content: str) -> Element:
    return build_tree(iter_events(f"<entry><id>x</id>{content}</entry>".encode()))


def _wrapped(items: str) -> Element:
    return _entry(f'<content type="xhtml"><div>{items}</div></content>')


class TestAssembleSections:
    """Tests for assemble_sections."""

    def test_groups_lists_under_headings(self) -> None:
        entry = _wrapped(
            "<p><strong>Komponenten</strong></p>"
            "<ul><li>Pasta 1,00 EUR - 2,00 EUR</li><li>Reis 1,10 EUR - 2,10 EUR</li></ul>"
            "<p><strong>Beilagen</strong></p>"
            "<ul><li>Salat 0,50 EUR - 0,90 EUR</li></ul>"
        )
        sections = assemble_sections(entry)

        assert [s.title for s in sections] == ["Komponenten", "Beilagen"]
        assert [m.name for m in sections[0].items] == ["Pasta", "Reis"]
        assert [m.name for m in sections[1].items] == ["Salat"]

    def test_several_lists_extend_current_section(self) -> None:
        entry = _wrapped(
            "<p><b>A</b></p><ul><li>Brot 1 EUR - 2 EUR</li></ul><ul><li>Obst 1 EUR - 2 EUR</li></ul>"
        )
        (section,) = assemble_sections(entry)
        assert [m.name for m in section.items] == ["Brot", "Obst"]

    def test_heading_title_is_shallow_text_of_first_child(self) -> None:
        entry = _wrapped("<p>ignored<strong>Tages\n   Angebot <em>deep</em></strong></p>")
        (section,) = assemble_sections(entry)
        assert section.title == "Tages Angebot"

    def test_heading_without_child_element(self) -> None:
        entry = _wrapped("<p>plain text heading</p>")
        (section,) = assemble_sections(entry)
        assert section.title == UNKNOWN_SECTION
        assert section.items == []

    def test_only_li_children_become_meals(self) -> None:
        entry = _wrapped("<p><b>A</b></p><ul><lh>Header</lh><li>Brot 1 EUR - 2 EUR</li></ul>")
        (section,) = assemble_sections(entry)
        assert [m.name for m in section.items] == ["Brot"]

    def test_other_tags_are_ignored(self) -> None:
        entry = _wrapped("<hr/><div>note</div><p><b>A</b></p><table></table>")
        (section,) = assemble_sections(entry)
        assert section.title == "A"

    def test_unparsable_item_keeps_placeholder(self) -> None:
        entry = _wrapped("<p><b>A</b></p><ul><li>Heute geschlossen</li></ul>")
        (section,) = assemble_sections(entry)
        assert section.items[0].name == "No description"

    def test_list_before_heading(self) -> None:
        """A meal list with no preceding heading cannot be assigned."""
        entry = _wrapped("<ul><li>X 1 EUR - 2 EUR</li></ul><p><b>A</b></p>")
        with pytest.raises(OrphanListError):
            assemble_sections(entry)

    def test_orphan_list_is_assembly_error(self) -> None:
        with pytest.raises(AssemblyError):
            assemble_sections(_wrapped("<ul></ul>"))


class TestMissingContent:
    """Tests for entries without usable content."""

    def test_no_content(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="akafoe_menu.sections"):
            assert assemble_sections(_entry("<summary>x</summary>")) == []
        assert "No meals found" in caplog.text

    def test_content_without_wrapper(self) -> None:
        assert assemble_sections(_entry("<content>just text</content>")) == []

    def test_empty_wrapper(self) -> None:
        assert assemble_sections(_wrapped("")) == []
