"""Query string helpers shared by routes."""


def split_csv(value: str | None) -> list[str]:
    """Split a comma separated query parameter, dropping blank items.

    Example:
        "python, fastapi,," -> ["python", "fastapi"]
    """
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]
