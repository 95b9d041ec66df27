"""
Utility functions
"""


def parse_team_id(raw: str) -> int:
    """
    Parse a team id taken from a URL path

    Args:
        raw: Path segment, e.g. "3"

    Returns:
        Positive integer id

    Raises:
        ValueError: If the segment is not a positive integer

    Example:
        >>> parse_team_id("12")
        12
    """
    text = raw.strip()
    if not text.isdigit():
        raise ValueError(f"Invalid team ID: {raw!r}")

    team_id = int(text)
    if team_id < 1:
        raise ValueError(f"Invalid team ID: {raw!r}")
    return team_id
