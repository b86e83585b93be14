"""Tests for signal detail extraction."""

from __future__ import annotations

from bs4 import BeautifulSoup

from gtkdoc2ctk.assembler import ModelAssembler
from gtkdoc2ctk.extractors import SignalsExtractor
from tests._fixtures.doc_builder import DocPageBuilder, run_extractor


def test_listener_arguments_skip_emitter_and_user_data(doc_builder: DocPageBuilder) -> None:
    doc_builder.signal(
        "frobbed",
        [("gint", "count", "how many times"), ("GtkWidget", "*child", "the affected child")],
        prose=["Emitted when the GtkFrobnicator is frobbed."],
    )

    model = run_extractor(doc_builder, SignalsExtractor())

    assert len(model.signals) == 1
    signal = model.signals[0]
    assert signal.name == "Frobbed"
    assert signal.tag == "frobbed"
    assert [param.declaration(with_note=True) for param in signal.params] == [
        "count int\thow many times",
        "child Widget\tthe affected child",
    ]
    assert signal.docs == "Emitted when the Frobnicator is frobbed."


def test_dashed_signal_tags_are_camel_cased(doc_builder: DocPageBuilder) -> None:
    doc_builder.signal("size-allocate")

    signal = run_extractor(doc_builder, SignalsExtractor()).signals[0]

    assert signal.name == "SizeAllocate"
    assert signal.params == []
    assert signal.docs == ""


def test_deprecated_signal_gating(doc_builder: DocPageBuilder) -> None:
    doc_builder.signal("frobbed", warning="GtkFrobnicator::frobbed is deprecated and should not be used.")

    assert run_extractor(doc_builder, SignalsExtractor()).signals == []

    included = run_extractor(doc_builder, SignalsExtractor(), include_deprecated=True).signals
    assert included[0].docs == "WARNING:\n\tFrobnicator::frobbed is deprecated and should not be used."


def _section(markup: str):
    return BeautifulSoup(f'<div class="refsect1">{markup}</div>', "html.parser").div


def test_block_without_literal_heading_leaves_model_untouched() -> None:
    model = ModelAssembler.new_model("frobnicator")
    section = _section(
        '<div class="refsect2"><h3>The frobbed signal</h3>'
        '<pre class="programlisting"><span class="returnvalue">void</span>\n'
        "user_function (GtkFrobnicator *frobnicator, gpointer user_data)</pre></div>"
    )

    SignalsExtractor().extract(model, section)

    assert model == ModelAssembler.new_model("frobnicator")


def test_missing_listener_signature_adds_no_parameters() -> None:
    model = ModelAssembler.new_model("frobnicator")
    section = _section(
        '<div class="refsect2"><h3><code class="literal">“frobbed”</code></h3>'
        '<pre class="programlisting">gboolean frobbed;</pre>'
        "<p>Emitted on frob.</p><p>Flags: Run Last</p></div>"
    )

    SignalsExtractor().extract(model, section)

    assert [signal.name for signal in model.signals] == ["Frobbed"]
    assert model.signals[0].params == []
    assert model.signals[0].docs == "Emitted on frob."
