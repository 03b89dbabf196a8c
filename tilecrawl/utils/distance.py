"""Distance calculations on the tile grid."""


def chebyshev_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Calculate Chebyshev distance between two tiles.

    Chebyshev distance is the maximum absolute difference of coordinates.
    Two units are adjacent (including diagonals) when this distance is at
    most 1.

    Args:
        x1: X coordinate of first tile
        y1: Y coordinate of first tile
        x2: X coordinate of second tile
        y2: Y coordinate of second tile

    Returns:
        Chebyshev distance between the two tiles

    Examples:
        >>> chebyshev_distance(2, 2, 3, 3)
        1  # Diagonal neighbour
        >>> chebyshev_distance(0, 0, 5, 0)
        5
    """
    return max(abs(x2 - x1), abs(y2 - y1))
