"""Document splitting on asterisk horizontal rules"""

import re


HR_RE = re.compile(r'^\*{3,}\r?$', re.MULTILINE | re.IGNORECASE)


def split_text(text: str) -> list[str]:
    """Split text into raw section blocks; the rule lines themselves are dropped."""
    return HR_RE.split(text)
