import hashlib

from typing import Protocol


class ContentHasher(Protocol):
    def hash(self, data: bytes) -> str: ...


class Blake2bContentHasher:
    def __init__(self, digest_size: int = 32):
        self.digest_size = digest_size

    def hash(self, data: bytes) -> str:
        hasher = hashlib.blake2b(digest_size=self.digest_size)
        hasher.update(data)
        return hasher.hexdigest()
