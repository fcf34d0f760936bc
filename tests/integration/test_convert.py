#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_convert.py
"""Integration tests for loading pandoc JSON and rendering it through the API."""

import io
import json
from pathlib import Path

import pytest

from txtdoc import TxtRendererOptions, UnsupportedConstructError, convert, load_document, render
from txtdoc.ast import Document
from txtdoc.utils.alignment import center


@pytest.mark.integration
class TestConvert:
    """Tests for the convert API on the sample document."""

    def test_sample_document_layout(self, sample_json_path: Path) -> None:
        """Test the order and content of every section of the output."""
        text = convert(sample_json_path)
        assert text is not None

        lines = text.split("\n")
        assert lines[0] == "/" + "=" * 78 + "\\"
        assert lines[1] == "|" + center("Sample Document", 78) + "|"
        assert "|" + center("by", 78) + "|" in lines
        assert "|" + center("2024-01-01", 78) + "|" in lines

        expected_order = [
            "| Table of Contents",
            "1 - Introduction\n    1.1 - Details\n2 - References\n",
            "| 1 - Introduction",
            "See pandoc [1].",
            "| 1.1 - Details",
            "-  one\n\n-  two\n",
            center(" START PYTHON ", 80, "-") + "\n\nprint(1)\n\n" + center(" END PYTHON ", 80, "-"),
            "_done_ [2]",
            "| 2 - References",
            "[1] https://pandoc.org\n[2] A note.",
        ]
        positions = [text.index(part) for part in expected_order]
        assert positions == sorted(positions)
        assert text.endswith("[2] A note.")

    def test_every_line_fits(self, sample_json_path: Path) -> None:
        """Test that no line of the sample output exceeds the width."""
        text = convert(sample_json_path, max_width=40)
        assert all(len(line) <= 40 for line in text.split("\n"))

    def test_sources_are_equivalent(self, sample_json_path: Path, sample_json: dict) -> None:
        """Test that paths, JSON strings, dicts and streams give the same output."""
        raw = sample_json_path.read_text(encoding="utf-8")
        expected = convert(sample_json_path)
        assert convert(str(sample_json_path)) == expected
        assert convert(raw) == expected
        assert convert(sample_json) == expected
        assert convert(io.StringIO(raw)) == expected
        assert convert(io.BytesIO(raw.encode("utf-8"))) == expected

    def test_byte_order_mark_is_ignored(self, sample_json_path: Path, tmp_path: Path) -> None:
        """Test that input starting with a UTF-8 byte order mark loads normally."""
        raw = sample_json_path.read_text(encoding="utf-8")
        expected = convert(sample_json_path)
        bom_path = tmp_path / "bom.json"
        bom_path.write_bytes(b"\xef\xbb\xbf" + raw.encode("utf-8"))
        assert convert(bom_path) == expected
        assert convert("\ufeff" + raw) == expected
        assert convert(io.BytesIO(bom_path.read_bytes())) == expected
        assert convert(io.StringIO("\ufeff" + raw)) == expected

    def test_write_to_file(self, sample_json_path: Path, tmp_path: Path) -> None:
        """Test writing the output to a path."""
        out_path = tmp_path / "out.txt"
        assert convert(sample_json_path, output=out_path) is None
        assert out_path.read_text(encoding="utf-8") == convert(sample_json_path)

    def test_write_to_binary_stream(self, sample_json_path: Path) -> None:
        """Test writing UTF-8 bytes to a binary stream."""
        buffer = io.BytesIO()
        convert(sample_json_path, output=buffer)
        assert buffer.getvalue().decode("utf-8") == convert(sample_json_path)

    def test_options_object(self, sample_json_path: Path) -> None:
        """Test passing an options object."""
        text = convert(sample_json_path, options=TxtRendererOptions(max_width=50))
        assert text.split("\n")[0] == "/" + "=" * 48 + "\\"

    def test_unsupported_construct(self, fixtures_dir: Path) -> None:
        """Test that math input fails."""
        with pytest.raises(UnsupportedConstructError):
            convert(fixtures_dir / "math.json")


@pytest.mark.integration
class TestRender:
    """Tests for the render API."""

    def test_render_is_independent_per_call(self, sample_json_path: Path) -> None:
        """Test that consecutive renders do not share reference numbering."""
        document = load_document(sample_json_path)
        assert render(document) == render(document)
        assert render(document).count("[1] https://pandoc.org") == 1

    def test_load_document_passthrough(self) -> None:
        """Test that a Document is returned unchanged."""
        document = Document()
        assert load_document(document) is document

    def test_output_is_json_independent(self, sample_json: dict) -> None:
        """Test that loading does not modify the decoded JSON."""
        before = json.dumps(sample_json, sort_keys=True)
        convert(sample_json)
        assert json.dumps(sample_json, sort_keys=True) == before
