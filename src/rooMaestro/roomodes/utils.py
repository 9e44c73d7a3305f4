import re


def slugify(name: str) -> str:
    """Create the configuration key for a mode from its name."""
    return name.lower()


def normalize_slug(name: str) -> str:
    """Slug for a heading-derived mode name, e.g. "Code Analyst" -> "code-analyst"."""
    # Lowercase, collapse every run of non-alphanum into one hyphen, strip
    slug = re.sub(r'[^a-z0-9]+', '-', name.lower())
    return slug.strip('-')
