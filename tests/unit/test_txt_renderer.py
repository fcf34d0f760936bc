#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_txt_renderer.py
"""Unit tests for TxtRenderer block and inline rendering.

Tests cover:
- Inline markers and reference substitution
- Paragraph wrapping and hard line breaks
- Headings, quotes, rules and code blocks
- Bullet, ordered and definition lists
- Table layout
- Raw content and unsupported constructs

"""

import pytest

from txtdoc.ast import (
    Attr,
    BlockQuote,
    BulletList,
    CaptionedImage,
    Cite,
    Code,
    CodeBlock,
    DefinitionList,
    DisplayMath,
    Div,
    Document,
    Emph,
    Heading,
    HorizontalRule,
    Image,
    InlineMath,
    LineBlock,
    LineBreak,
    Link,
    Note,
    OrderedList,
    Paragraph,
    Plain,
    RawBlock,
    RawInline,
    SmallCaps,
    SoftBreak,
    Space,
    Span,
    Str,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
)
from txtdoc.exceptions import InvalidOptionsError, UnsupportedConstructError
from txtdoc.options import TxtRendererOptions
from txtdoc.renderers.txt import TxtRenderer


def words(text: str) -> list:
    """Build Str/Space inlines from a string."""
    nodes: list = []
    for i, word in enumerate(text.split()):
        if i:
            nodes.append(Space())
        nodes.append(Str(word))
    return nodes


@pytest.fixture
def renderer() -> TxtRenderer:
    """Provide a renderer with a 20 character line width."""
    return TxtRenderer(TxtRendererOptions(max_width=20))


@pytest.mark.unit
class TestRendererConstruction:
    """Tests for renderer construction."""

    def test_default_options(self) -> None:
        """Test that a renderer without options uses an 80 column width."""
        assert TxtRenderer().max_width == 80

    def test_rejects_wrong_options_type(self) -> None:
        """Test that options of another class are rejected."""
        with pytest.raises(InvalidOptionsError):
            TxtRenderer(options=object())  # type: ignore[arg-type]


@pytest.mark.unit
class TestInlineRendering:
    """Tests for inline node rendering."""

    def test_str_and_spaces(self, renderer: TxtRenderer) -> None:
        """Test text, spaces and soft breaks."""
        nodes = [Str("a"), Space(), Str("b"), SoftBreak(), Str("c")]
        assert renderer._render_inline_content(nodes) == "a b c"

    def test_line_break(self, renderer: TxtRenderer) -> None:
        """Test that a hard line break becomes a paragraph break."""
        assert LineBreak().accept(renderer) == "\n\n"

    @pytest.mark.parametrize(
        "node,expected",
        [
            (Emph([Str("x")]), "_x_"),
            (Strong([Str("x")]), "*x*"),
            (Strikeout([Str("x")]), "-x-"),
            (SmallCaps([Str("Abc")]), "ABC"),
            (Subscript([Str("2")]), "2"),
            (Superscript([Str("2")]), "2"),
            (Code("a = 1"), "`a = 1`"),
            (Span([Str("x")], Attr(classes=["c"])), "x"),
            (RawInline("latex", "\\LaTeX"), "\\LaTeX"),
        ],
    )
    def test_markers(self, renderer: TxtRenderer, node, expected: str) -> None:
        """Test the plain text form of each formatting inline."""
        assert node.accept(renderer) == expected

    def test_nested_markers(self, renderer: TxtRenderer) -> None:
        """Test that nested formatting composes."""
        node = Strong([Str("a"), Space(), Emph([Str("b")])])
        assert node.accept(renderer) == "*a _b_*"

    def test_link_registers_reference(self, renderer: TxtRenderer) -> None:
        """Test that a link becomes its text and a reference number."""
        node = Link(target="https://pandoc.org", content=[Str("pandoc")], title="Pandoc")
        assert node.accept(renderer) == "pandoc [1]"
        assert renderer._context.references.render_list() == "[1] Pandoc - https://pandoc.org"

    def test_image_uses_alt_text(self, renderer: TxtRenderer) -> None:
        """Test that an image becomes its alternative text and a reference number."""
        node = Image(target="cat.png", alt=[Str("A"), Space(), Str("cat")])
        assert node.accept(renderer) == "A cat [1]"
        assert renderer._context.references.render_list() == "[1] cat.png"

    def test_cite(self, renderer: TxtRenderer) -> None:
        """Test that a citation registers its source."""
        node = Cite(content=[Str("[@knuth]")], source="knuth")
        assert node.accept(renderer) == "[@knuth] [1]"
        assert renderer._context.references.render_list() == "[1] knuth"

    def test_note(self, renderer: TxtRenderer) -> None:
        """Test that a note leaves a bare number and moves its text to the list."""
        node = Note([Paragraph(words("A  short note."))])
        assert node.accept(renderer) == " [1]"
        assert renderer._context.references.render_list() == "[1] A short note."

    def test_references_numbered_in_order(self, renderer: TxtRenderer) -> None:
        """Test that references are numbered in document order."""
        para = Paragraph(
            [Link("https://a", [Str("a")]), Space(), Link("https://b", [Str("b")]), Space(), Link("https://a", [Str("c")])]
        )
        assert para.accept(renderer) == "a [1] b [2] c [3]"

    @pytest.mark.parametrize(
        "node,construct",
        [(InlineMath("x^2"), "InlineMath"), (DisplayMath("x^2"), "DisplayMath")],
    )
    def test_math_unsupported(self, renderer: TxtRenderer, node, construct: str) -> None:
        """Test that math raises UnsupportedConstructError."""
        with pytest.raises(UnsupportedConstructError) as exc_info:
            node.accept(renderer)
        assert exc_info.value.construct == construct


@pytest.mark.unit
class TestParagraphs:
    """Tests for paragraph rendering."""

    def test_wraps_to_width(self, renderer: TxtRenderer) -> None:
        """Test that paragraphs wrap to the line width."""
        para = Paragraph(words("the quick brown fox jumps over the lazy dog"))
        assert para.accept(renderer) == "the quick brown fox\njumps over the lazy\ndog"

    def test_line_break_splits_paragraph(self, renderer: TxtRenderer) -> None:
        """Test that a hard break survives wrapping as a blank line."""
        para = Paragraph([Str("one"), LineBreak(), Str("two")])
        assert para.accept(renderer) == "one\n\ntwo"

    def test_plain_wraps_like_paragraph(self, renderer: TxtRenderer) -> None:
        """Test that Plain is rendered like Paragraph."""
        content = words("the quick brown fox jumps")
        assert Plain(content).accept(renderer) == Paragraph(content).accept(renderer)


@pytest.mark.unit
class TestBlocks:
    """Tests for heading, quote, rule, code and raw blocks."""

    def test_heading_banner(self, renderer: TxtRenderer) -> None:
        """Test the numbered heading banner."""
        assert Heading(1, [Str("Intro")]).accept(renderer) == "\n| 1 - Intro\n\\" + "=" * 19
        assert Heading(2, [Str("Scope")]).accept(renderer) == "\n| 1.1 - Scope\n\\" + "=" * 19

    def test_heading_collapses_whitespace(self, renderer: TxtRenderer) -> None:
        """Test that a heading title stays on one line."""
        heading = Heading(1, [Str("a"), LineBreak(), Str("b")])
        assert heading.accept(renderer) == "\n| 1 - a b\n\\" + "=" * 19

    def test_heading_level_validated(self) -> None:
        """Test that heading levels outside 1..6 are rejected."""
        with pytest.raises(ValueError):
            Heading(7, [Str("x")])

    def test_block_quote(self, renderer: TxtRenderer) -> None:
        """Test quote prefixes, including on the blank separator line."""
        quote = BlockQuote([Paragraph([Str("a")]), Paragraph([Str("b")])])
        assert quote.accept(renderer) == "> a\n> \n> b"

    def test_block_quote_wraps_narrower(self, renderer: TxtRenderer) -> None:
        """Test that quoted text is wrapped to leave room for the prefix."""
        quote = BlockQuote([Paragraph(words("the quick brown fox jumps"))])
        lines = quote.accept(renderer).split("\n")
        assert lines == ["> the quick brown", "> fox jumps"]
        assert all(len(line) <= 20 for line in lines)

    def test_horizontal_rule(self, renderer: TxtRenderer) -> None:
        """Test that a rule spans the line width."""
        assert HorizontalRule().accept(renderer) == "-" * 20

    def test_code_block_default_label(self, renderer: TxtRenderer) -> None:
        """Test the CODE banners around a classless code block."""
        block = CodeBlock("x = 1")
        assert block.accept(renderer) == "---- START CODE ----\n\nx = 1\n\n----- END CODE -----"

    def test_code_block_class_label(self, renderer: TxtRenderer) -> None:
        """Test that the code block class names the banners."""
        block = CodeBlock("print(1)", Attr(classes=["python"]))
        lines = block.accept(renderer).split("\n")
        assert lines[0] == "--- START PYTHON ---"
        assert lines[-1] == "---- END PYTHON ----"

    def test_code_block_keeps_indentation(self) -> None:
        """Test that code keeps its line breaks and indentation."""
        renderer = TxtRenderer(TxtRendererOptions(max_width=40))
        text = CodeBlock("def f():\n    return 1").accept(renderer)
        assert "\n\ndef f():\n    return 1\n\n" in text

    def test_raw_html_passes_through(self, renderer: TxtRenderer) -> None:
        """Test that raw HTML is emitted verbatim."""
        assert RawBlock("html", "<br/>").accept(renderer) == "<br/>"
        assert RawBlock("HTML5", "<hr>").accept(renderer) == "<hr>"

    def test_raw_other_formats_dropped(self, renderer: TxtRenderer) -> None:
        """Test that raw content in other formats is dropped."""
        assert RawBlock("latex", "\\newpage").accept(renderer) == ""

    def test_div_is_transparent(self, renderer: TxtRenderer) -> None:
        """Test that a div renders its children separated by blank lines."""
        div = Div([Paragraph([Str("a")]), RawBlock("tex", "x"), Paragraph([Str("b")])])
        assert div.accept(renderer) == "a\n\nb"

    @pytest.mark.parametrize(
        "node,construct",
        [
            (CaptionedImage(target="fig.png", caption=[Plain([Str("Figure")])]), "CaptionedImage"),
            (LineBlock([[Str("a")], [Str("b")]]), "LineBlock"),
        ],
    )
    def test_unsupported_blocks(self, renderer: TxtRenderer, node, construct: str) -> None:
        """Test that figures and line blocks raise UnsupportedConstructError."""
        with pytest.raises(UnsupportedConstructError) as exc_info:
            node.accept(renderer)
        assert exc_info.value.construct == construct


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_bullet_list(self, renderer: TxtRenderer) -> None:
        """Test bullet markers and the blank line after each item."""
        node = BulletList([[Plain([Str("a")])], [Plain([Str("b")])]])
        assert node.accept(renderer) == "-  a\n\n-  b\n"

    def test_bullet_continuation_lines(self) -> None:
        """Test that wrapped item lines are indented under the text."""
        renderer = TxtRenderer(TxtRendererOptions(max_width=13))
        node = BulletList([[Plain(words("one two three four"))]])
        assert node.accept(renderer) == "-  one two\n   three four\n"

    def test_ordered_list_ignores_start(self, renderer: TxtRenderer) -> None:
        """Test that ordered lists are numbered from 1."""
        node = OrderedList([[Plain([Str("a")])], [Plain([Str("b")])]], start=5)
        assert node.accept(renderer) == "1. a\n\n2. b\n"

    def test_item_with_several_blocks(self, renderer: TxtRenderer) -> None:
        """Test that blocks inside one item are separated by an empty line."""
        node = BulletList([[Paragraph([Str("a")]), Paragraph([Str("b")])]])
        assert node.accept(renderer) == "-  a\n\n   b\n"

    def test_items_may_hold_inlines(self, renderer: TxtRenderer) -> None:
        """Test that list items can be inline sequences."""
        node = BulletList([words("a b")])
        assert node.accept(renderer) == "-  a b\n"

    def test_definition_list(self, renderer: TxtRenderer) -> None:
        """Test terms, indented definitions and separators between entries."""
        node = DefinitionList(
            [
                ([Str("Term")], [[Plain([Str("Def")])]]),
                ([Str("T2")], [[Plain([Str("D2")])], [Plain([Str("D3")])]]),
            ]
        )
        assert node.accept(renderer) == "Term\n    Def\n\nT2\n    D2\n\n    D3"

    def test_definition_list_empty_term(self, renderer: TxtRenderer) -> None:
        """Test that an empty term line is omitted."""
        node = DefinitionList([([], [[Plain([Str("D")])]])])
        assert node.accept(renderer) == "    D"


@pytest.mark.unit
class TestTables:
    """Tests for table rendering."""

    def test_basic_table(self, renderer: TxtRenderer) -> None:
        """Test column widths, separator and padding."""
        table = Table(header=[[Str("A")], [Str("Bee")]], rows=[[[Str("1")], [Str("22")]]])
        assert table.accept(renderer) == "| A | Bee |\n|---|-----|\n| 1 | 22  |"

    def test_block_cells(self, renderer: TxtRenderer) -> None:
        """Test that cells holding blocks render like inline cells."""
        table = Table(header=[[Plain([Str("A")])], [Plain([Str("Bee")])]], rows=[[[Plain([Str("1")])], [Plain([Str("22")])]]])
        assert table.accept(renderer) == "| A | Bee |\n|---|-----|\n| 1 | 22  |"

    def test_alignments(self, renderer: TxtRenderer) -> None:
        """Test right and center aligned columns."""
        table = Table(
            header=[[Str("left")], [Str("right")], [Str("mid")]],
            rows=[[[Str("a")], [Str("b")], [Str("c")]]],
            alignments=["AlignLeft", "AlignRight", "AlignCenter"],
        )
        lines = table.accept(renderer).split("\n")
        assert lines[2] == "| a    |     b |  c  |"

    def test_ragged_rows_padded(self, renderer: TxtRenderer) -> None:
        """Test that short rows are padded with empty cells."""
        table = Table(header=[[Str("A")], [Str("B")]], rows=[[[Str("1")]], [[Str("2")], [Str("3")], [Str("4")]]])
        assert table.accept(renderer) == "| A | B |   |\n|---|---|---|\n| 1 |   |   |\n| 2 | 3 | 4 |"

    def test_cell_newlines_become_spaces(self, renderer: TxtRenderer) -> None:
        """Test that line breaks inside a cell are flattened."""
        table = Table(header=[[Str("a"), LineBreak(), Str("b")]], rows=[])
        assert table.accept(renderer) == "| a b |\n|-----|"

    def test_table_may_exceed_width(self, renderer: TxtRenderer) -> None:
        """Test that cells are not wrapped."""
        long_text = "x" * 30
        table = Table(header=[[Str(long_text)]], rows=[])
        assert table.accept(renderer).split("\n")[0] == f"| {long_text} |"

    def test_headerless_table(self, renderer: TxtRenderer) -> None:
        """Test that a table without header cells has no separator."""
        table = Table(header=[], rows=[[[Str("1")], [Str("2")]]])
        assert table.accept(renderer) == "| 1 | 2 |"

    def test_empty_table(self, renderer: TxtRenderer) -> None:
        """Test that a table without cells renders nothing."""
        assert Table().accept(renderer) == ""

    def test_blank_header_without_rows(self, renderer: TxtRenderer) -> None:
        """Test that a header of empty cells and no body still renders."""
        table = Table(header=[[Str("")], []], rows=[])
        assert table.accept(renderer) == "|  |  |\n|--|--|"

    def test_blank_header_is_kept(self, renderer: TxtRenderer) -> None:
        """Test that empty header cells still produce a header row and separator."""
        table = Table(header=[[Str("")]], rows=[[[Str("1")]]])
        assert table.accept(renderer) == "|   |\n|---|\n| 1 |"

    def test_blank_header_in_document(self, renderer: TxtRenderer) -> None:
        """Test that a table without body rows does not abort the document."""
        document = Document(children=[Table(header=[[Str("")], []], rows=[]), Paragraph([Str("after")])])
        assert renderer.render_to_string(document).endswith("|--|--|\n\nafter")

    def test_caption_not_rendered(self, renderer: TxtRenderer) -> None:
        """Test that table captions are dropped."""
        table = Table(header=[[Str("A")]], rows=[], caption=[Str("Caption")])
        assert "Caption" not in table.accept(renderer)
