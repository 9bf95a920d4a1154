"""
Damerau-Levenshtein edit distance (optimal string alignment).

Insertions, deletions, substitutions and transpositions of two adjacent
characters all cost 1.
"""


def damerau_levenshtein_distance(a: str, b: str) -> int:
    """
    Compute the edit distance between two strings.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Minimum number of edits turning a into b.
    """
    rows = len(a) + 1
    cols = len(b) + 1
    d = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        d[i][0] = i
    for j in range(cols):
        d[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1

            d[i][j] = min(
                d[i - 1][j] + 1,  # deletion
                d[i][j - 1] + 1,  # insertion
                d[i - 1][j - 1] + cost,  # substitution
            )

            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                d[i][j] = min(d[i][j], d[i - 2][j - 2] + 1)  # transposition

    return d[rows - 1][cols - 1]
