"""Tests for description extraction."""

from __future__ import annotations

from bs4 import BeautifulSoup

from gtkdoc2ctk.assembler import ModelAssembler
from gtkdoc2ctk.extractors import DescriptionExtractor
from tests._fixtures.doc_builder import DocPageBuilder, run_extractor


def test_description_is_localised_wrapped_and_commented(doc_builder: DocPageBuilder) -> None:
    doc_builder.description(
        "The GtkFrobnicator widget calls gtk_frobnicator_get_label() in GTK+.",
        "It embeds a GtkLabel.",
    )

    model = run_extractor(doc_builder, DescriptionExtractor())

    assert model.description == "\n".join(
        [
            "// The Frobnicator widget calls GetLabel in CTK.",
            "// It embeds a Label.",
        ]
    )


def test_long_description_lines_fit_comment_width(doc_builder: DocPageBuilder) -> None:
    doc_builder.description(" ".join(["frobnication"] * 40))

    model = run_extractor(doc_builder, DescriptionExtractor())

    lines = model.description.split("\n")
    assert len(lines) > 1
    assert all(len(line) <= 76 + len("// ") for line in lines)


def test_other_packages_reference_ctk(doc_builder: DocPageBuilder) -> None:
    doc_builder.description("Pack it into a GtkBox.")

    model = run_extractor(doc_builder, DescriptionExtractor(), package_name="widgets")

    assert model.description == "// Pack it into a ctk.Box."


def test_blank_description_is_discarded(doc_builder: DocPageBuilder) -> None:
    doc_builder.description("   ")

    model = run_extractor(doc_builder, DescriptionExtractor())

    assert model.description == ""


def test_section_without_paragraphs_leaves_model_untouched() -> None:
    model = ModelAssembler.new_model("frobnicator")
    section = BeautifulSoup(
        '<div class="refsect1"><h2>Description</h2><pre class="programlisting">frob ();</pre></div>',
        "html.parser",
    ).div

    DescriptionExtractor().extract(model, section)

    assert model == ModelAssembler.new_model("frobnicator")
