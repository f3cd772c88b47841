"""Name normalization shared by the uniquely named models."""


def normalize_name(name: str) -> str:
    """Return the key used for case-insensitive name uniqueness."""
    return name.lower()
