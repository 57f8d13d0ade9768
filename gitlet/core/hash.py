"""SHA-1 content ids for blobs and commits."""

import hashlib

HASH_LENGTH = 40
CHUNK_SIZE = 64 * 1024


def hash_object(data: bytes) -> str:
    """Return the 40-character hex SHA-1 of data."""
    return hashlib.sha1(data).hexdigest()


def hash_file(filepath) -> str:
    """
    Hash a file's content without loading it all at once.

    The result equals hash_object() of the file's bytes, which is the id
    the file's blob would get.

    Args:
        filepath: Path to file
    """
    digest = hashlib.sha1()
    with open(filepath, 'rb') as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b''):
            digest.update(chunk)
    return digest.hexdigest()
