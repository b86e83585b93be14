"""CLI parser and entrypoint behaviour tests."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from gtkdoc2ctk.cli import _build_parser, main
from tests._fixtures.doc_builder import DocPageBuilder


def _page(tmp_path: Path) -> Path:
    builder = DocPageBuilder()
    builder.hierarchy("GObject", "GtkWidget", "GtkFrobnicator")
    builder.property("label", "gchar", default='""')
    builder.function("get_label", returns="const gchar")
    return builder.write(tmp_path)


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()

    assert parser.parse_args(["--verbose", "generate", "--page", "GtkButton"]).verbose is True
    assert parser.parse_args(["generate", "--page", "GtkButton", "-v"]).verbose is True


def test_cli_generate_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(
        ["generate", "--path", "button.html", "--package-name", "cdk", "--output-path", "out", "-f", "-D"]
    )

    assert args.command == "generate"
    assert args.path == Path("button.html")
    assert args.page is None
    assert args.package_name == "cdk"
    assert args.output_path == Path("out")
    assert args.force is True
    assert args.include_deprecated is True


def test_cli_rejects_conflicting_selectors() -> None:
    parser = _build_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["generate", "--page", "GtkButton", "--path", "button.html"])
    with pytest.raises(SystemExit):
        parser.parse_args(["generate", "--page", "GtkButton", "--output", "a.go", "--output-path", "out"])


def test_generate_without_selector_exits_one(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "generate"])

    assert excinfo.value.code == 1
    assert "missing --page or --path" in capsys.readouterr().err


def test_generate_prints_source(tmp_path: Path, capsys) -> None:
    main(["--config", str(tmp_path), "generate", "--path", str(_page(tmp_path))])

    out = capsys.readouterr().out
    assert out.startswith("package ctk\n")
    assert 'const PropertyLabel cdk.Property = "label"' in out


def test_generate_honours_config_and_flags(tmp_path: Path, capsys) -> None:
    page = _page(tmp_path)
    (tmp_path / "out").mkdir()
    (tmp_path / ".gtkdoc2ctk.yml").write_text("package_name: cdk\noutput_path: out\n", encoding="utf-8")

    main(["--config", str(tmp_path), "generate", "--path", str(page)])

    target = tmp_path.resolve() / "out" / "frobnicator.go"
    assert capsys.readouterr().out == f"wrote: {target}\n"
    assert target.read_text(encoding="utf-8").startswith("package cdk\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "generate", "--path", str(page)])
    assert excinfo.value.code == 1
    assert "use --force" in capsys.readouterr().err

    main(["--config", str(tmp_path), "generate", "--path", str(page), "--package-name", "ctk", "--force"])
    assert capsys.readouterr().out == f"overwrote: {target}\n"
    assert target.read_text(encoding="utf-8").startswith("package ctk\n")


def test_generate_missing_output_directory_exits_one(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(
            [
                "--config",
                str(tmp_path),
                "generate",
                "--path",
                str(_page(tmp_path)),
                "--output-path",
                str(tmp_path / "missing"),
            ]
        )

    assert excinfo.value.code == 1


def test_generate_missing_input_file_exits_one(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "generate", "--path", str(tmp_path / "GtkNothing.html")])

    assert excinfo.value.code == 1
    assert "documentation file not found" in capsys.readouterr().err


def test_invalid_config_exits_one(tmp_path: Path) -> None:
    (tmp_path / ".gtkdoc2ctk.yml").write_text("- not a mapping\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "generate", "--page", "GtkButton"])

    assert excinfo.value.code == 1


def test_fmt_updates_files_and_reports_failures(tmp_path: Path, capsys) -> None:
    good = tmp_path / "frobnicator.go"
    good.write_text(
        textwrap.dedent(
            """\
            package ctk

            type Frobnicator interface {
            \tOld()
            }

            type CFrobnicator struct {
            }

            func (f *CFrobnicator) Show() {}
            """
        ),
        encoding="utf-8",
    )
    bad = tmp_path / "empty.go"
    bad.write_text("package ctk\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["fmt", str(good), str(bad)])

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert f"updated: {good}" in captured.out
    assert f"error processing file: {bad}" in captured.out
    assert "\tShow()\n" in good.read_text(encoding="utf-8")

    main(["fmt", str(good)])
    assert capsys.readouterr().out == f"skipped: {good}\n"


def test_generate_runs_only_configured_extractors(tmp_path: Path, capsys) -> None:
    page = _page(tmp_path)
    (tmp_path / ".gtkdoc2ctk.yml").write_text(
        "extractors:\n  enabled: [hierarchy, functions]\n", encoding="utf-8"
    )

    main(["--config", str(tmp_path), "generate", "--path", str(page)])

    out = capsys.readouterr().out
    assert out.startswith("package ctk\n")
    assert "GetLabel" in out
    assert "PropertyLabel" not in out


def test_unknown_configured_extractor_exits_one(tmp_path: Path, capsys) -> None:
    (tmp_path / ".gtkdoc2ctk.yml").write_text("extractors:\n  enabled: [styles]\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "generate", "--path", str(_page(tmp_path))])

    assert excinfo.value.code == 1
    assert "Unknown extractors" in capsys.readouterr().err
