from rapidfuzz.distance import Levenshtein

def levenshtein_distance(a: str, b: str) -> int:
    """Unit-weight insert/delete/substitute edit distance."""
    return Levenshtein.distance(a, b)

def similarity(a: str, b: str) -> float:
    """(max_len - distance) / max_len, so 1.0 means identical. Two empty strings score 1.0."""
    max_len = max(len(a), len(b))
    if max_len == 0: return 1.0
    return (max_len - levenshtein_distance(a, b)) / max_len
