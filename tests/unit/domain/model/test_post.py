"""Unit tests for the Post aggregate."""

import pytest
from pydantic import ValidationError

from blog.domain.model.post import Post, PostPatch, reading_time
from blog.domain.value import PostCategory, split_sub_category


def _post(**overrides) -> Post:
    fields = {
        "slug": "hello",
        "title": "Hello",
        "date": "2024-01-15",
        "excerpt": "Hi",
        "tags": ["a"],
        "category": PostCategory.TECH,
        "sub_category": "frontend",
        "content": "one two three",
    }
    fields.update(overrides)
    return Post(**fields)


class TestSubCategoryNormalization:
    """A post's sub-category must agree with its category."""

    def test_tech_post_without_sub_category_defaults_to_other(self):
        post = _post(sub_category=None)

        assert post.sub_category == "other"

    def test_non_tech_post_drops_sub_category(self):
        post = _post(category=PostCategory.LIFE, sub_category="frontend")

        assert post.sub_category is None

    def test_unknown_category_is_rejected(self):
        with pytest.raises(ValidationError):
            _post(category="music")


class TestApply:
    """Tests for Post.apply."""

    def test_unset_fields_are_kept(self):
        """A patch only changes the fields it carries."""
        # Arrange
        post = _post()

        # Act
        updated = post.apply(PostPatch(title="New title"))

        # Assert
        assert updated.title == "New title"
        assert updated.excerpt == "Hi"
        assert updated.tags == ["a"]
        assert updated.sub_category == "frontend"
        assert updated.date == "2024-01-15"

    def test_empty_tag_list_clears_tags(self):
        """An explicit empty list is a change, not an omission."""
        updated = _post().apply(PostPatch(tags=[]))

        assert updated.tags == []

    def test_moving_to_life_drops_sub_category(self):
        updated = _post().apply(PostPatch(category=PostCategory.LIFE))

        assert updated.category is PostCategory.LIFE
        assert updated.sub_category is None

    def test_moving_to_tech_without_sub_category_files_under_other(self):
        post = _post(category=PostCategory.LIFE, sub_category=None)

        updated = post.apply(PostPatch(category=PostCategory.TECH))

        assert updated.sub_category == "other"


class TestReadingTime:
    """Tests for reading_time."""

    def test_short_text_takes_one_minute(self):
        assert reading_time("") == 1
        assert reading_time("just a few words") == 1

    def test_rounds_up_per_two_hundred_words(self):
        assert reading_time("word " * 200) == 1
        assert reading_time("word " * 201) == 2


class TestSplitSubCategory:
    """Tests for split_sub_category."""

    def test_single_and_nested_paths(self):
        assert split_sub_category("backend") == ["backend"]
        assert split_sub_category("backend/python") == ["backend", "python"]

    @pytest.mark.parametrize("value", ["a/b/c", "../etc", "Backend", "back end", ""])
    def test_invalid_paths_are_rejected(self, value):
        with pytest.raises(ValueError):
            split_sub_category(value)
