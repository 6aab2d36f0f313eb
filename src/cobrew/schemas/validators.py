"""Reusable field normalizers shared by request schemas."""


def require_text(value: str, field_name: str) -> str:
    """Strip whitespace and reject blank values."""
    value = value.strip()
    if not value:
        raise ValueError(f"{field_name} cannot be empty or whitespace only")
    return value


def optional_text(value: str | None) -> str | None:
    """Strip whitespace; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def clean_string_list(values: list[str]) -> list[str]:
    """Strip entries, drop blanks and duplicates, keep first-seen order."""
    seen: set[str] = set()
    cleaned: list[str] = []
    for value in values:
        value = value.strip()
        if value and value not in seen:
            seen.add(value)
            cleaned.append(value)
    return cleaned
