"""
Tests for the S3Path value model.

Covers construction forms, invariants, equality and hashing, the
attribute cache, and string/URI rendering.
"""
from __future__ import annotations

import pickle
import threading

import pytest

from s3fs_paths import HierarchicalPath, S3Path
from s3fs_paths.errors import IllegalState, IndexOutOfRange, InvalidPath, Unsupported
from s3fs_paths.storage.attributes import S3ObjectAttributes


class TestConstruction:
    """Test the construction forms."""

    def test_parse_absolute(self):
        """Test the textual absolute form."""
        path = S3Path.parse("/bucket//key")
        assert path.bucket == "bucket"
        assert path.parts == ("key",)
        assert path.is_absolute()

    def test_parse_relative(self):
        """Test the textual relative form."""
        path = S3Path.parse("a/b")
        assert path.bucket is None
        assert path.parts == ("a", "b")
        assert not path.is_absolute()

    def test_canonical_constructor_normalizes(self):
        """Test that raw segments are normalized."""
        path = S3Path("bucket", ["", "a", "/b/", None])
        assert path.parts == ("a", "b")

    def test_of_varargs(self):
        """Test the bucket + varargs form."""
        assert S3Path.of("bucket", "a", "b") == S3Path.parse("/bucket/a/b")
        assert S3Path.of(None, "a") == S3Path.parse("a")

    def test_empty_bucket_is_relative(self):
        """Test that an empty bucket string means no bucket."""
        assert not S3Path("", ["a"]).is_absolute()

    def test_bucket_with_separator_rejected(self):
        """Test that a bucket containing '/' is rejected."""
        with pytest.raises(InvalidPath):
            S3Path("a/b")

    def test_str_parts_rejected(self):
        """Test that a bare string is not accepted as a segment list."""
        with pytest.raises(TypeError, match="S3Path.parse"):
            S3Path("bucket", "a/b")  # type: ignore[arg-type]

    def test_parse_invalid(self):
        """Test that malformed absolute paths are rejected."""
        with pytest.raises(InvalidPath):
            S3Path.parse("/")
        with pytest.raises(InvalidPath):
            S3Path.parse("//key")

    def test_from_uri(self):
        """Test building a path from an s3:// URI."""
        assert S3Path.from_uri("s3://bucket/a/b") == S3Path.parse("/bucket/a/b")
        assert S3Path.from_uri("s3://bucket/") == S3Path.parse("/bucket")
        assert S3Path.from_uri("s3://bucket") == S3Path.parse("/bucket")

    def test_implements_protocol(self):
        """Test that S3Path satisfies the hierarchical path protocol."""
        assert isinstance(S3Path.parse("/bucket/a"), HierarchicalPath)


class TestImmutability:
    """Test that paths cannot be mutated."""

    def test_attribute_assignment_rejected(self):
        """Test that setting fields raises AttributeError."""
        path = S3Path.parse("/bucket/a")
        with pytest.raises(AttributeError):
            path._bucket = "other"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            path.bucket = "other"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            del path._parts

    def test_operations_return_new_instances(self):
        """Test that algebra operations leave the receiver untouched."""
        path = S3Path.parse("/bucket/a/b")
        path.resolve("c")
        path.get_parent()
        path.resolve_sibling("x")
        assert str(path) == "/bucket/a/b"

    def test_pickle_round_trip(self):
        """Test that paths survive pickling (the cache is not carried over)."""
        path = S3Path.parse("/bucket/a")
        path.file_attributes = S3ObjectAttributes(key="a", size=1)
        restored = pickle.loads(pickle.dumps(path))
        assert restored == path
        assert restored.file_attributes is None


class TestEquality:
    """Test equality and hashing."""

    def test_equal_paths(self):
        """Test that equal bucket and segments compare equal."""
        assert S3Path.parse("/bucket/a/b") == S3Path.parse("/bucket//a/b/")
        assert S3Path.parse("a") == S3Path.parse("a")
        assert S3Path.parse("") == S3Path()

    def test_bucket_presence_matters(self):
        """Test that absolute and relative paths are never equal."""
        assert S3Path.parse("/a/b") != S3Path.parse("a/b")
        assert S3Path.parse("/bucket") != S3Path.parse("bucket")

    def test_bucket_value_matters(self):
        """Test that different buckets are not equal."""
        assert S3Path.parse("/b1/a") != S3Path.parse("/b2/a")

    def test_hash_consistent(self):
        """Test that equal paths hash equally."""
        assert hash(S3Path.parse("/bucket/a/b")) == hash(S3Path.of("bucket", "a", "b"))
        assert len({S3Path.parse("/bucket/a"), S3Path.parse("/bucket//a")}) == 1

    def test_cache_ignored(self):
        """Test that equality and hash never consult the attribute cache."""
        first = S3Path.parse("/bucket/a")
        second = S3Path.parse("/bucket/a")
        first.file_attributes = S3ObjectAttributes(key="a", size=10)
        assert first == second
        assert hash(first) == hash(second)
        assert first.compare_to(second) == 0

    def test_not_equal_to_strings(self):
        """Test that paths do not compare equal to their string form."""
        assert S3Path.parse("/bucket/a") != "/bucket/a"


class TestAttributeCache:
    """Test the attribute cache field."""

    def test_initially_empty(self):
        """Test that a new path has no cached attributes."""
        assert S3Path.parse("/bucket/a").file_attributes is None

    def test_set_and_clear(self):
        """Test setting and clearing cached attributes."""
        path = S3Path.parse("/bucket/a")
        attributes = S3ObjectAttributes(key="a", size=3)
        path.file_attributes = attributes
        assert path.file_attributes is attributes
        path.clear_file_attributes()
        assert path.file_attributes is None

    def test_derived_paths_do_not_share_cache(self):
        """Test that results of algebra operations start with no cache."""
        path = S3Path.parse("/bucket/a")
        path.file_attributes = S3ObjectAttributes(key="a", size=3)
        assert path.resolve("b").get_parent().file_attributes is None

    def test_concurrent_writers(self):
        """Test that concurrent cache writes leave one of the written values."""
        path = S3Path.parse("/bucket/a")
        values = [S3ObjectAttributes(key="a", size=i) for i in range(20)]
        threads = [threading.Thread(target=setattr, args=(path, "file_attributes", v)) for v in values]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert path.file_attributes in values


class TestSerialization:
    """Test string, URI and ordering behavior."""

    @pytest.mark.parametrize("raw,expected", [
        ("/bucket", "/bucket"),
        ("/bucket/", "/bucket"),
        ("/bucket/key", "/bucket/key"),
        ("/bucket//a///b/", "/bucket/a/b"),
        ("a/b", "a/b"),
        ("a//b/", "a/b"),
        ("", ""),
    ])
    def test_round_trip(self, raw, expected):
        """Test that parse then str normalizes separators only."""
        path = S3Path.parse(raw)
        assert str(path) == expected
        assert path.to_string() == expected
        assert S3Path.parse(str(path)) == path

    def test_repr(self):
        """Test the debugging representation."""
        assert repr(S3Path.parse("/bucket/a")) == "S3Path('/bucket/a')"

    def test_key(self):
        """Test the object key."""
        assert S3Path.parse("/bucket/a/b.txt").key == "a/b.txt"
        assert S3Path.parse("/bucket").key == ""

    def test_to_uri(self):
        """Test URI rendering."""
        assert S3Path.parse("/bucket/a/b").to_uri() == "s3://bucket/a/b"
        assert S3Path.parse("/bucket").to_uri() == "s3://bucket/"

    def test_to_uri_relative_is_none(self):
        """Test that relative paths have no URI."""
        assert S3Path.parse("a/b").to_uri() is None

    def test_uri_round_trip(self):
        """Test that from_uri inverts to_uri."""
        path = S3Path.parse("/bucket/a/b")
        assert S3Path.from_uri(path.to_uri()) == path

    def test_to_absolute_path(self):
        """Test that absolute paths are returned as-is."""
        path = S3Path.parse("/bucket/a")
        assert path.to_absolute_path() is path
        assert path.to_real_path() is path

    def test_to_absolute_path_relative_fails(self):
        """Test that relative paths cannot be made absolute."""
        with pytest.raises(IllegalState, match="Relative path cannot be made absolute: a/b"):
            S3Path.parse("a/b").to_absolute_path()
        with pytest.raises(IllegalState):
            S3Path.parse("a/b").to_real_path()

    def test_compare_to(self):
        """Test lexical comparison of string forms."""
        a = S3Path.parse("/bucket/a")
        b = S3Path.parse("/bucket/b")
        assert a.compare_to(b) < 0
        assert b.compare_to(a) > 0
        assert a.compare_to(S3Path.parse("/bucket/a")) == 0

    def test_ordering_operators(self):
        """Test that sorting follows compare_to."""
        paths = [S3Path.parse(p) for p in ["/b/z", "x", "/a/c", "/b/a"]]
        assert [str(p) for p in sorted(paths)] == ["/a/c", "/b/a", "/b/z", "x"]
        assert S3Path.parse("/a") <= S3Path.parse("/a")

    def test_unsupported_operations(self):
        """Test that watch registration and file conversion are rejected."""
        path = S3Path.parse("/bucket/a")
        with pytest.raises(Unsupported):
            path.register(object(), "create")
        with pytest.raises(Unsupported):
            path.to_file()
        with pytest.raises(NotImplementedError):
            path.to_file()


class TestIteration:
    """Test iteration over segments."""

    def test_iterates_single_segment_relative_paths(self):
        """Test that each element is a relative one-segment path."""
        path = S3Path.parse("/bucket/a/b/c")
        names = list(path)
        assert names == [S3Path.parse("a"), S3Path.parse("b"), S3Path.parse("c")]
        assert all(not name.is_absolute() for name in names)
        assert len(names) == path.get_name_count() == len(path)

    def test_iterator_is_restartable(self):
        """Test that iteration can be repeated."""
        path = S3Path.parse("a/b")
        assert list(path.iterator()) == list(path.iterator())

    def test_resolve_back_to_original(self):
        """Test that resolving the elements rebuilds the segment list."""
        path = S3Path.parse("/bucket/a/b/c")
        rebuilt = path.get_root()
        for name in path:
            rebuilt = rebuilt.resolve(name)
        assert rebuilt == path

    def test_empty(self):
        """Test that a bucket root yields nothing."""
        assert list(S3Path.parse("/bucket")) == []


class TestIndexing:
    """Test get_name and subpath."""

    def test_get_name(self):
        """Test indexing single segments."""
        path = S3Path.parse("/bucket/a/b/c")
        assert path.get_name(0) == S3Path.parse("a")
        assert path.get_name(2) == S3Path.parse("c")

    def test_get_name_out_of_range(self):
        """Test that out-of-range indices raise."""
        path = S3Path.parse("/bucket/a")
        with pytest.raises(IndexOutOfRange):
            path.get_name(1)
        with pytest.raises(IndexOutOfRange):
            path.get_name(-1)
        with pytest.raises(IndexError):
            S3Path.parse("/bucket").get_name(0)

    def test_subpath(self):
        """Test slicing into a relative path."""
        path = S3Path.parse("/bucket/a/b/c/d")
        assert path.subpath(1, 3) == S3Path.parse("b/c")
        assert path.subpath(0, 4) == S3Path.parse("a/b/c/d")
        assert not path.subpath(0, 1).is_absolute()

    def test_subpath_out_of_range(self):
        """Test that invalid slices raise."""
        path = S3Path.parse("/bucket/a/b")
        with pytest.raises(IndexOutOfRange):
            path.subpath(0, 3)
        with pytest.raises(IndexOutOfRange):
            path.subpath(1, 1)
        with pytest.raises(IndexOutOfRange):
            path.subpath(2, 2)
        with pytest.raises(IndexOutOfRange):
            path.subpath(-1, 1)
