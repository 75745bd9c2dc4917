"""Display helpers shared by the CLI and the HTTP API."""


def relevance_percent(score: float) -> str:
    """Similarity score as a truncated whole percentage, e.g. ``'73%'``."""
    return f"{int(score * 100)}%"
