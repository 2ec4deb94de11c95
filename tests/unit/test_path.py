"""tests/unit/test_path.py"""

import pytest

from scanurl.exceptions import NoSlashError
from scanurl.parser.path import read_fragment, read_path, read_query


class TestReadPath:
    """Tests for read_path function."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("/", ("", 1)),
            ("/a/b/c", ("a/b/c", 6)),
            ("/index.html?x=1", ("index.html", 11)),
            ("/page#top", ("page", 5)),
            ("/?x", ("", 1)),
            ("//double", ("/double", 8)),
        ],
    )
    def test_path(self, text, expected):
        """Test paths ending at '?', '#' or the end."""
        assert read_path(text, 0) == expected

    @pytest.mark.parametrize("text", ["x/path", "?q=1", "#frag"])
    def test_missing_slash(self, text):
        """Test that the path must start with '/'."""
        with pytest.raises(NoSlashError) as exc_info:
            read_path(text, 0)
        assert exc_info.value.position == 0


class TestReadQuery:
    """Tests for read_query function."""

    def test_query(self):
        """Test reading a query up to '#'."""
        assert read_query("?a=1&b=2#frag", 0) == ("a=1&b=2", True, 8)

    def test_query_to_end(self):
        """Test reading a query up to the end."""
        assert read_query("?a=1", 0) == ("a=1", True, 4)

    def test_empty_query(self):
        """Test that a bare '?' is a present, empty query."""
        assert read_query("?", 0) == ("", True, 1)

    def test_query_keeps_question_marks(self):
        """Test that later '?' belong to the query."""
        assert read_query("?a=?&b", 0) == ("a=?&b", True, 6)

    def test_no_query(self):
        """Test that nothing is consumed without '?'."""
        assert read_query("#frag", 0) == ("", False, 0)
        assert read_query("", 0) == ("", False, 0)


class TestReadFragment:
    """Tests for read_fragment function."""

    def test_fragment(self):
        """Test that the fragment is the rest of the input."""
        assert read_fragment("#top", 0) == ("top", True, 4)

    def test_fragment_keeps_delimiters(self):
        """Test that no delimiter ends a fragment."""
        assert read_fragment("#a?b#c/d", 0) == ("a?b#c/d", True, 8)

    def test_empty_fragment(self):
        """Test that a bare '#' is a present, empty fragment."""
        assert read_fragment("#", 0) == ("", True, 1)

    def test_no_fragment(self):
        """Test that nothing is consumed without '#'."""
        assert read_fragment("", 0) == ("", False, 0)
