"""Hash utilities tests."""

import hashlib
import pytest
from gitlet.core.hash import hash_object, hash_file


def test_hash_object_empty():
    """Test hashing empty bytes."""
    result = hash_object(b'')
    assert len(result) == 40
    assert result == 'da39a3ee5e6b4b0d3255bfef95601890afd80709'


def test_hash_object_deterministic():
    """Test hash consistency for same input."""
    data = b'hello world'
    assert hash_object(data) == hash_object(data)


def test_hash_object_different_data():
    """Test different data produces different hashes."""
    assert hash_object(b'hello') != hash_object(b'world')


def test_hash_file_matches_content_hash(temp_dir):
    """A file hashes to the SHA-1 of its bytes."""
    path = temp_dir / 'data.txt'
    path.write_bytes(b'test content')
    assert hash_file(path) == hashlib.sha1(b'test content').hexdigest()
    assert hash_file(str(path)) == hash_object(b'test content')
