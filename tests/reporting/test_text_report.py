from __future__ import annotations

from pathlib import Path

from fileprobe.analyzer import analyze_file
from fileprobe.reporting.text import render_sections, render_text_report


def test_full_text_report_layout(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("aab\n", encoding="utf-8")

    rendered = render_text_report(analyze_file(target, ["aab", "zzz", "aab"], encoding="utf-8"))

    assert rendered == (
        f"File Analysis: {target}\n"
        "File Type: Plain Text\n"
        "File Size: 4 bytes\n"
        "\n"
        "Character Analysis:\n"
        "  'a': 2 occurrences\n"
        "  'b': 1 occurrences\n"
        "  \\n (newline): 1 occurrences\n"
        "\n"
        "Word Matches:\n"
        "  'aab': 1 occurrences\n"
        "  'zzz': 0 occurrences\n"
        "  'aab': 1 occurrences\n"
    )


def test_word_section_omitted_without_words(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("hello", encoding="utf-8")

    rendered = render_text_report(analyze_file(target, encoding="utf-8"))

    assert "Character Analysis:" in rendered
    assert "Word Matches:" not in rendered


def test_binary_container_replaces_analysis_with_notice(tmp_path: Path) -> None:
    target = tmp_path / "paper.pdf"
    target.write_bytes(b"%PDF-1.4 cat cat")

    sections = render_sections(analyze_file(target, ["cat"], encoding="utf-8"))

    assert sections[0][1] == "File Type: PDF"
    assert sections[1] == ["Text analysis skipped: PDF is a binary container format."]
    assert len(sections) == 2


def test_analysis_error_line_follows_header(tmp_path: Path) -> None:
    target = tmp_path / "pic.gif"
    target.write_bytes(b"GIF89a\x01\x00\x01\x00\x80\xff\x00")

    rendered = render_text_report(analyze_file(target, ["x"], encoding="utf-8"))

    assert "File Type: GIF Image" in rendered
    assert "Error analyzing file content:" in rendered
    assert "Character Analysis:" not in rendered
    assert "Word Matches:" not in rendered


def test_details_section_lists_detection_reasons(tmp_path: Path) -> None:
    target = tmp_path / "data.xml"
    target.write_text("<?xml version=\"1.0\"?>\n<root/>\n", encoding="utf-8")

    sections = render_sections(analyze_file(target, encoding="utf-8"), details=True)

    details = sections[1]
    assert details[0] == "Detection Details:"
    assert "  Plugin: markers" in details
    assert "  Confidence: 0.85" in details
    assert "  Reason: Document parsed as well-formed XML" in details
    assert details[-1] == "  Metadata keys: marker, xml_well_formed"


def test_report_is_deterministic(tmp_path: Path) -> None:
    target = tmp_path / "story.txt"
    target.write_text("the quick brown fox jumps over the lazy dog\n" * 3, encoding="utf-8")

    first = render_text_report(analyze_file(target, ["the", "fox"], encoding="utf-8"))
    second = render_text_report(analyze_file(target, ["the", "fox"], encoding="utf-8"))

    assert first == second
