"""Tests for the HTML document adapter."""

from pathlib import Path

import pytest

from scrolltoc.document.html import HtmlDocument, read_markup
from scrolltoc.exceptions import (
    AlreadyIdentifiedError,
    AmbiguousTargetError,
    EmptyTextError,
    NoHeadingsError,
    NoTargetError,
)
from scrolltoc.toc.hierarchy import generate_hierarchy

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def document() -> HtmlDocument:
    return HtmlDocument.from_file(FIXTURES_DIR / "page.html")


class TestGetHeadings:
    def test_missing_target_raises(self, document: HtmlDocument) -> None:
        with pytest.raises(NoTargetError, match="Target element does not exist."):
            document.get_headings("#does-not-exist")

    def test_target_without_headings_raises(self, document: HtmlDocument) -> None:
        with pytest.raises(
            NoHeadingsError, match="Target element does not contain heading elements."
        ):
            document.get_headings("#get-headings-no-heading-elements")

    def test_reads_all_headings_from_target(self, document: HtmlDocument) -> None:
        headings = document.get_headings("#get-headings")
        assert len(headings) == 6
        assert [h.level for h in headings] == [1, 2, 3, 4, 5, 6]
        assert headings[0].text == "get headings h1"

    def test_whole_document_when_no_target(self, document: HtmlDocument) -> None:
        headings = document.get_headings()
        assert headings[0].text == "get headings h1"
        assert len(headings) > 6

    def test_levels_filter(self, document: HtmlDocument) -> None:
        headings = document.get_headings("#get-headings", levels=[2, 3])
        assert [h.level for h in headings] == [2, 3]

    def test_reads_existing_identifier(self, document: HtmlDocument) -> None:
        headings = document.get_headings("#give-id")
        assert [h.identifier for h in headings] == [None, None, "give-id-baz"]

    def test_empty_id_attribute_counts_as_missing(self) -> None:
        document = HtmlDocument('<body><h2 id="">Blank</h2></body>')
        assert document.get_headings()[0].identifier is None

    def test_text_is_trimmed(self) -> None:
        document = HtmlDocument("<body><h2>\n  Spaced <em>out</em>  \n</h2></body>")
        assert document.get_headings()[0].text == "Spaced out"


class TestSelectHeadings:
    def test_ignores_non_heading_elements(self, document: HtmlDocument) -> None:
        assert document.select_headings("#get-headings p") == []

    def test_returns_matches(self, document: HtmlDocument) -> None:
        assert len(document.select_headings("#derive-id h3")) == 2


class TestDocumentDeriveId:
    def test_multiple_elements_raise(self, document: HtmlDocument) -> None:
        with pytest.raises(AmbiguousTargetError):
            document.derive_id(document.select_headings("#derive-id h3"))

    def test_no_elements_raise(self, document: HtmlDocument) -> None:
        with pytest.raises(AmbiguousTargetError):
            document.derive_id(document.select_headings("#derive-id h6"))

    def test_heading_without_text_raises(self, document: HtmlDocument) -> None:
        with pytest.raises(EmptyTextError):
            document.derive_id(document.select_headings("#derive-id h2"))

    def test_heading_with_id_raises(self, document: HtmlDocument) -> None:
        with pytest.raises(AlreadyIdentifiedError):
            document.derive_id(document.select_headings("#derive-id #not-unique"))

    def test_returns_derived_id(self, document: HtmlDocument) -> None:
        assert document.derive_id(document.select_headings("#derive-id h1")) == (
            "derive-id-foo"
        )

    def test_derives_unique_id(self, document: HtmlDocument) -> None:
        target = document.select_headings("#derive-id h3:not([id])")
        assert document.derive_id(target) == "not-unique-2"

    def test_custom_slug_filter(self, document: HtmlDocument) -> None:
        target = document.select_headings("#derive-id h1")
        assert document.derive_id(target, lambda text: "custom-filter") == "custom-filter"

    def test_does_not_write_markup(self, document: HtmlDocument) -> None:
        document.derive_id(document.select_headings("#derive-id h1"))
        assert "derive-id-foo" not in document.existing_ids()


class TestDocumentGiveId:
    def test_gives_id_to_elements_without_one(self, document: HtmlDocument) -> None:
        document.give_id(document.get_headings("#give-id"))

        children = document.soup.select_one("#give-id").find_all(recursive=False)
        assert [tag.get("id") for tag in children] == [
            "give-id-foo-special",
            "give-id-bar",
            "give-id-baz",
        ]

    def test_avoids_ids_elsewhere_in_document(self, document: HtmlDocument) -> None:
        document.give_id(document.get_headings("#give-id-collisions"))
        ids = [h.identifier for h in document.get_headings("#give-id-collisions")]
        assert ids == ["derive-id-foo", "derive-id-foo-2"]

    def test_avoids_non_heading_ids(self) -> None:
        document = HtmlDocument('<body><div id="intro"></div><h2>Intro</h2></body>')
        headings = document.get_headings()
        document.give_id(headings)
        assert headings[0].identifier == "intro-2"

    def test_ids_are_written_to_markup(self, document: HtmlDocument) -> None:
        document.give_id(document.get_headings("#give-id"))
        assert 'id="give-id-bar"' in document.to_html()

    def test_default_decorator_after_give_id(self, document: HtmlDocument) -> None:
        headings = document.get_headings("#generate-heading-hierarchy-list-flat")
        document.give_id(headings)
        root = generate_hierarchy(headings)
        assert [(n.label, n.href) for n in root.children] == [
            (
                "generate heading hierarchy list flat foo",
                "#generate-heading-hierarchy-list-flat-foo",
            ),
            (
                "generate heading hierarchy list flat bar",
                "#generate-heading-hierarchy-list-flat-bar",
            ),
            (
                "generate heading hierarchy list flat tar",
                "#generate-heading-hierarchy-list-flat-tar",
            ),
        ]

    def test_assign_id_writes_markup(self, document: HtmlDocument) -> None:
        heading = document.select_headings("#derive-id h1")[0]
        document.assign_id(heading, "manual")
        assert heading.identifier == "manual"
        assert "manual" in document.existing_ids()


class TestHierarchyFromDocument:
    def test_multidimensional_fixture(self, document: HtmlDocument) -> None:
        headings = document.get_headings(
            "#generate-heading-hierarchy-list-multidimensional"
        )
        root = generate_hierarchy(headings, lambda node: None)

        def shape(node):  # type: ignore[no-untyped-def]
            return [shape(child) for child in node.children]

        assert shape(root) == [[[[], []], [[[]], []]]]


class TestReadMarkup:
    def test_reads_utf8(self, tmp_path: Path) -> None:
        f = tmp_path / "page.html"
        f.write_text("<h1>Überblick</h1>", encoding="utf-8")
        assert "Überblick" in read_markup(f)

    def test_reads_utf16(self, tmp_path: Path) -> None:
        f = tmp_path / "page.html"
        f.write_bytes("<h1>Überblick</h1>".encode("utf-16"))
        assert "Überblick" in read_markup(f)

    def test_missing_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            HtmlDocument.from_file("/nonexistent/page.html")
