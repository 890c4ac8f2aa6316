"""Tests for the high-level conversion API."""

from lineblocks import Converter, Document, FilterConfig, bulleted, convert


class TestConvertFunction:
    """convert() runs every configured flavor."""

    def test_bulleted(self) -> None:
        assert convert("- a\n- b") == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>"

    def test_numbered(self) -> None:
        assert convert("1. a\n2. b") == "<ol>\n<li>a</li>\n<li>b</li>\n</ol>"

    def test_both_flavors_in_one_document(self) -> None:
        html = convert("- a\n\n\n1. b")
        assert html == "<ul>\n<li>a</li>\n</ul>\n\n\n<ol>\n<li>b</li>\n</ol>"

    def test_surrounding_text_untouched(self) -> None:
        html = convert("Intro\n\n- a\n- b\n\n\nOutro")
        assert html.startswith("Intro\n\n<ul>")
        assert html.endswith("</ul>\n\n\nOutro")

    def test_plain_text(self) -> None:
        assert convert("just text") == "just text"

    def test_explicit_config(self) -> None:
        assert convert("- a", FilterConfig(flavors=("numbered",))) == "- a"


class TestConverterClass:
    """Converter pipeline."""

    def test_default_flavor_order(self) -> None:
        assert [f.tag for f in Converter().flavors] == ["ul", "ol"]

    def test_explicit_flavors(self) -> None:
        converter = Converter(flavors=(bulleted(),))
        assert converter("1. a") == "1. a"
        assert converter("* a") == "<ul>\n<li>a</li>\n</ul>"

    def test_run_mutates_document(self) -> None:
        doc = Document.from_text("+ a\ntext")
        assert Converter().run(doc) is doc
        assert doc.to_text() == "<ul>\n<li>a\ntext</li>\n</ul>"

    def test_empty_source(self) -> None:
        assert Converter()("") == ""
