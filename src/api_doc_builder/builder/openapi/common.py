"""Helpers shared by the OpenAPI builders."""


def compact(fields: dict) -> dict:
    """Drop unset (None) fields."""
    return {key: value for key, value in fields.items() if value is not None}


def external_docs(url: str | None, description: str | None) -> dict | None:
    if url is None:
        return None
    return compact({"url": url, "description": description})
