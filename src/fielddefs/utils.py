"""Small string helpers."""

import re

_ID_SUFFIX = re.compile(r"_id$")


def humanize(name: str) -> str:
    """
    Turn a field name into a label for end users.

    A trailing ``_id`` is dropped, underscores become spaces and only the
    first letter is capitalized::

        >>> humanize("auspicious_fortune")
        'Auspicious fortune'
        >>> humanize("author_id")
        'Author'

    """
    text = _ID_SUFFIX.sub("", str(name)).replace("_", " ").strip().lower()
    return text[:1].upper() + text[1:]
