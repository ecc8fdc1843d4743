"""
Asset tag normalization.

The vision model answers in free text: it may wrap the number in quotes, add
whitespace, or reply with a sentence. Only a bare digit sequence is accepted
as a tag; everything else means "no tag found", which is a normal outcome
rather than an error.
"""
import re
from typing import Optional

# ASCII digits only; str.isdigit() and \d would also accept other scripts' digits
_TAG_PATTERN = re.compile(r"^[0-9]+$")

_QUOTE_CHARACTERS = "\"'`‘’“”"
_QUOTE_TABLE = str.maketrans("", "", _QUOTE_CHARACTERS)


def normalize_tag(raw_text: Optional[str]) -> Optional[str]:
    """
    Turn raw model output into a digit-only asset tag.

    Args:
        raw_text: Untrusted text returned by the vision model

    Returns:
        The digit string with leading zeros preserved, or None if the text
        is empty or contains anything besides digits
    """
    if raw_text is None:
        return None

    candidate = raw_text.strip().translate(_QUOTE_TABLE).strip()
    if not candidate or not _TAG_PATTERN.match(candidate):
        return None
    return candidate
