"""Unit tests for the frontmatter codec."""

from datetime import date

from blog.util import frontmatter


class TestSplit:
    """Tests for frontmatter.split."""

    def test_document_with_frontmatter(self):
        text = "---\ntitle: Hello\ntags: [a, b]\n---\n# Body\n"

        meta, body = frontmatter.split(text)

        assert meta == {"title": "Hello", "tags": ["a", "b"]}
        assert body == "# Body\n"

    def test_document_without_frontmatter(self):
        text = "# Just markdown\n"

        assert frontmatter.split(text) == ({}, text)

    def test_invalid_yaml_is_ignored(self):
        text = "---\ntitle: [unclosed\n---\nbody"

        assert frontmatter.split(text) == ({}, text)

    def test_non_mapping_frontmatter_is_ignored(self):
        text = "---\n- a\n- b\n---\nbody"

        assert frontmatter.split(text) == ({}, text)

    def test_crlf_line_endings(self):
        meta, body = frontmatter.split("---\r\ntitle: Hi\r\n---\r\nbody")

        assert meta == {"title": "Hi"}
        assert body == "body"

    def test_unquoted_date_is_parsed_by_yaml(self):
        meta, _ = frontmatter.split("---\ndate: 2024-01-15\n---\n")

        assert meta["date"] == date(2024, 1, 15)


class TestDump:
    """Tests for frontmatter.dump."""

    def test_body_is_preserved_exactly(self):
        """Reading back a dumped document should give the same data."""
        # Arrange
        body = "# Title\n\n---\n\nA rule above, trailing spaces  \n"
        meta = {"title": "你好", "date": "2024-01-15", "tags": ["a"]}

        # Act
        meta_out, body_out = frontmatter.split(frontmatter.dump(meta, body))

        # Assert
        assert meta_out == meta
        assert body_out == body

    def test_unicode_is_written_verbatim(self):
        text = frontmatter.dump({"title": "大江东去"}, "")

        assert "大江东去" in text


class TestAsIsoDate:
    """Tests for frontmatter.as_iso_date."""

    def test_date_object(self):
        value = frontmatter.as_iso_date(date(2024, 1, 2), date(2000, 1, 1))

        assert value == "2024-01-02"

    def test_text_is_kept(self):
        assert frontmatter.as_iso_date("2024-01-02", date(2000, 1, 1)) == "2024-01-02"

    def test_missing_uses_fallback(self):
        assert frontmatter.as_iso_date(None, date(2000, 1, 1)) == "2000-01-01"
