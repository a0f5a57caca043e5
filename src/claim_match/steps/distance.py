from __future__ import annotations


def levenshtein(left: str, right: str) -> int:
    """Minimum number of single-character edits turning ``left`` into ``right``."""
    if not left:
        return len(right)
    if not right:
        return len(left)

    # rows follow ``right``, columns follow ``left``
    matrix = [[0] * (len(left) + 1) for _ in range(len(right) + 1)]
    for i in range(len(right) + 1):
        matrix[i][0] = i
    for j in range(len(left) + 1):
        matrix[0][j] = j

    for i, c2 in enumerate(right, start=1):
        for j, c1 in enumerate(left, start=1):
            cost = 0 if c1 == c2 else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )
    return matrix[len(right)][len(left)]


def calculate_string_similarity(left: str | None = None, right: str | None = None) -> float:
    """Case-insensitive similarity in [0, 1]; 0 when either value is missing."""
    if left is None or right is None:
        return 0.0

    left = left.lower()
    right = right.lower()
    if left == right:
        return 1.0

    distance = levenshtein(left, right)
    return 1.0 - distance / max(len(left), len(right))
