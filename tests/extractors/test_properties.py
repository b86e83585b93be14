"""Tests for property detail extraction."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from gtkdoc2ctk.assembler import ModelAssembler
from gtkdoc2ctk.extractors import PropertiesExtractor, normalize_default
from tests._fixtures.doc_builder import DocPageBuilder, run_extractor

DEPRECATED = "GtkFrobnicator:tint has been deprecated since version 2.20 and should not be used."


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, None),
        ("FALSE", "false"),
        ("TRUE", "true"),
        ('""', '""'),
        ("&quot;&quot;", '""'),
        (" 42 ", "42"),
        ("-1", "-1"),
        ("0.5", "0.5"),
        ('"hello"', None),
        ("NULL", None),
        ("GTK_RELIEF_NORMAL", None),
    ],
)
def test_normalize_default(raw, expected) -> None:
    assert normalize_default(raw) == expected


def test_flags_write_and_false_default(doc_builder: DocPageBuilder) -> None:
    doc_builder.property(
        "visible", "gboolean", prose=["Whether the frobnicator is visible."], default="FALSE"
    )

    model = run_extractor(doc_builder, PropertiesExtractor())

    assert len(model.properties) == 1
    prop = model.properties[0]
    assert prop.name == "Visible"
    assert prop.tag == "visible"
    assert prop.type.name == "bool"
    assert prop.writable is True
    assert prop.default == "false"
    assert prop.decl == "\n".join(
        [
            "// Whether the frobnicator is visible.",
            "// Flags: Read / Write",
            "// Default value: FALSE",
            'const PropertyVisible cdk.Property = "visible"',
        ]
    )


def test_read_only_property_without_literal_default(doc_builder: DocPageBuilder) -> None:
    doc_builder.property("parent-window", "GtkWindow", flags="Read", default="NULL")

    prop = run_extractor(doc_builder, PropertiesExtractor()).properties[0]

    assert prop.name == "ParentWindow"
    assert prop.type.name == "Window"
    assert prop.writable is False
    assert prop.default is None
    assert prop.default_literal == "nil"


def test_properties_keep_document_order(doc_builder: DocPageBuilder) -> None:
    doc_builder.property("label", "gchar", default='""')
    doc_builder.property("xalign", "gfloat", default="0.5")
    doc_builder.property("width-chars", "gint", default="-1")

    model = run_extractor(doc_builder, PropertiesExtractor())

    assert [prop.name for prop in model.properties] == ["Label", "Xalign", "WidthChars"]
    assert [prop.default for prop in model.properties] == ['""', "0.5", "-1"]


def test_deprecated_property_is_dropped_by_default(doc_builder: DocPageBuilder) -> None:
    doc_builder.property("tint", "gint", warning=DEPRECATED)

    model = run_extractor(doc_builder, PropertiesExtractor())

    assert model.properties == []


def test_deprecated_property_is_kept_with_warning_when_included(doc_builder: DocPageBuilder) -> None:
    doc_builder.property("tint", "gint", warning=DEPRECATED)

    model = run_extractor(doc_builder, PropertiesExtractor(), include_deprecated=True)

    prop = model.properties[0]
    assert "WARNING:" in prop.docs
    assert "\tFrobnicator:tint has been deprecated since version 2.20" in prop.docs
    assert "GtkFrobnicator" not in prop.decl


def test_non_deprecation_warning_does_not_gate(doc_builder: DocPageBuilder) -> None:
    doc_builder.property("tint", "gint", warning="Setting this is slow.")

    prop = run_extractor(doc_builder, PropertiesExtractor()).properties[0]

    assert prop.docs.endswith("WARNING:\n\tSetting this is slow.")


def test_block_without_literal_heading_leaves_model_untouched() -> None:
    model = ModelAssembler.new_model("frobnicator")
    section = BeautifulSoup(
        '<div class="refsect1"><div class="refsect2"><h3>The tint property</h3>'
        '<pre class="programlisting">  tint  <span class="type">gint</span></pre>'
        "<p>Flags: Read / Write</p></div></div>",
        "html.parser",
    ).div

    PropertiesExtractor().extract(model, section)

    assert model == ModelAssembler.new_model("frobnicator")
