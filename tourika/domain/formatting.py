def format_rating(rating: int) -> str:
    """Render a rating stored in tenths of a star, e.g. 48 -> "4.8"."""
    return f"{rating / 10:.1f}"
