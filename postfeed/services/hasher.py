import hashlib


class Hasher:
    """Deterministic one-way hash used for salts and salted passwords."""

    def hash(self, value: str) -> str:
        return hashlib.sha256(value.encode("utf-8")).hexdigest()


hasher = Hasher()
