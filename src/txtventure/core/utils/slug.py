"""Identifier normalization for section headers and link labels"""

import re


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated section id."""
    text = text.lower()
    text = re.sub(r"['’]", '', text)
    text = re.sub(r'[\W_]+', '-', text)
    return text.strip('-')
