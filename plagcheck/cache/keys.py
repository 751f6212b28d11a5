import hashlib

_NAMESPACE = "plagcheck:v1"


def _digest(*parts: str) -> str:
    hasher = hashlib.sha256()
    for part in parts:
        hasher.update(part.encode("utf-8"))
        hasher.update(b"\x1f")
    return hasher.hexdigest()


def sources_cache_key(chunk_text: str) -> str:
    """Key for web-search candidates of a chunk."""
    return f"{_NAMESPACE}:sources:{_digest(chunk_text)}"


def similarity_cache_key(chunk_text: str, snippet: str) -> str:
    """Key for the similarity score of a (chunk, snippet) pair."""
    return f"{_NAMESPACE}:similarity:{_digest(chunk_text, snippet)}"


def authorship_cache_key(text: str) -> str:
    """Key for the authorship judgment of the classified text."""
    return f"{_NAMESPACE}:authorship:{_digest(text)}"
