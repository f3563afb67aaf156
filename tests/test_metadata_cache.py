"""Tests for reading document tags from markdown files."""

from anki_bridge.obsidian.metadata_cache import (
    FrontmatterMetadataCache,
    frontmatter_tags,
    inline_tags,
)


class TestFrontmatterTags:
    def test_list(self) -> None:
        assert frontmatter_tags({"tags": ["lang/es", "#verbs"]}) == ["#lang/es", "#verbs"]

    def test_string(self) -> None:
        assert frontmatter_tags({"tags": "a, b c"}) == ["#a", "#b", "#c"]

    def test_singular_key(self) -> None:
        assert frontmatter_tags({"tag": "solo"}) == ["#solo"]

    def test_missing(self) -> None:
        assert frontmatter_tags({"title": "x"}) == []


class TestInlineTags:
    def test_finds_tags(self) -> None:
        assert inline_tags("Some #verbs and #lang/es here") == ["#verbs", "#lang/es"]

    def test_ignores_headings_numbers_and_anchors(self) -> None:
        body = "# Heading\n## Sub\nIssue #123, see page#anchor and &#39;"

        assert inline_tags(body) == []

    def test_ignores_code(self) -> None:
        body = "```python\n# comment #notatag\n```\nuse `#nope` but #yes"

        assert inline_tags(body) == ["#yes"]


class TestFrontmatterMetadataCache:
    def test_reads_front_matter_and_body(self, tmp_path) -> None:
        doc = tmp_path / "verbs.md"
        doc.write_text(
            "---\ntags: [lang/es, verbs]\n---\n\nPractice #verbs and #grammar\n",
            encoding="utf-8",
        )

        tags = FrontmatterMetadataCache().get_tags(doc)

        assert tags == ["#lang/es", "#verbs", "#grammar"]

    def test_missing_file(self, tmp_path) -> None:
        assert FrontmatterMetadataCache().get_tags(tmp_path / "nope.md") is None

    def test_malformed_front_matter(self, tmp_path) -> None:
        doc = tmp_path / "broken.md"
        doc.write_text("---\ntags: [unclosed\n---\nbody\n", encoding="utf-8")

        assert FrontmatterMetadataCache().get_tags(doc) is None

    def test_cached_until_invalidated(self, tmp_path) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("#first\n", encoding="utf-8")
        cache = FrontmatterMetadataCache()

        assert cache.get_tags(doc) == ["#first"]

        doc.write_text("#second\n", encoding="utf-8")
        assert cache.get_tags(doc) == ["#first"]

        cache.invalidate(doc)
        assert cache.get_tags(doc) == ["#second"]
