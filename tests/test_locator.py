"""Tests for gtkdoc2ctk.locator."""

from __future__ import annotations

from bs4 import BeautifulSoup

from gtkdoc2ctk.locator import SectionKind, SectionLocator
from tests._fixtures.doc_builder import DocPageBuilder


def _locator(html: str, name: str = "Frobnicator") -> SectionLocator:
    return SectionLocator(BeautifulSoup(html, "html.parser"), name)


def test_locates_sections_in_document_order(doc_builder: DocPageBuilder) -> None:
    doc_builder.hierarchy("GObject", "GtkFrobnicator")
    doc_builder.description("A frobnicator.")
    doc_builder.property("label", "gchar")
    doc_builder.function("get_label", returns="const gchar")

    locator = _locator(doc_builder.render())

    assert locator.kinds() == [
        SectionKind.HIERARCHY,
        SectionKind.DESCRIPTION,
        SectionKind.PROPERTIES,
        SectionKind.FUNCTIONS,
    ]
    assert locator.locate(SectionKind.SIGNALS) is None


def test_accepts_gdk_prefixed_anchors() -> None:
    builder = DocPageBuilder("Window", prefix="Gdk").description("A window.")

    locator = _locator(builder.render(), "Window")

    assert locator.locate(SectionKind.DESCRIPTION) is not None


def test_first_block_per_kind_wins() -> None:
    html = """
    <div class="refsect1"><a name="GtkFrobnicator.description"></a><p>first</p></div>
    <div class="refsect1"><a name="GtkFrobnicator.description"></a><p>second</p></div>
    """

    section = _locator(html).locate(SectionKind.DESCRIPTION)

    assert section is not None
    assert section.p.get_text() == "first"


def test_ignores_other_types_and_unknown_anchors() -> None:
    html = """
    <div class="refsect1"><a name="GtkButton.description"></a><p>button</p></div>
    <div class="refsect1"><a name="GtkFrobnicator.style-properties"></a><p>style</p></div>
    <div class="refsect1"><p>no anchor</p></div>
    """

    assert _locator(html).kinds() == []
