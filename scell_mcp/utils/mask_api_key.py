"""Mask an API key for log and display output."""


def mask_api_key(api_key: str | None) -> str:
    """Keep the first 4 and last 4 characters of ``api_key`` and hide the rest.

    Keys of 8 characters or fewer are hidden entirely.
    """
    if not api_key:
        return ""
    if len(api_key) <= 8:
        return "*" * len(api_key)
    return f"{api_key[:4]}{'*' * (len(api_key) - 8)}{api_key[-4:]}"
