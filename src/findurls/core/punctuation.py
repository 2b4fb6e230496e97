"""Trimming of natural-language punctuation around matched URLs."""

PUNCTUATION_PAIRS = {
    "(": ")",
    "[": "]",
    "{": "}",
    "<": ">",
    "`": "`",
    "'": "'",
    '"': '"',
    "‘": "’",  # smart single quotes
    "“": "”",  # smart double quotes
}

PUNCTUATION_SINGLES = frozenset([
    ".",
    "!",
    "?",
    ",",
    ":",
    ";",
    "-",
    "–",  # en dash
    "—",  # em dash
])

ALL_PUNCTUATION = frozenset(PUNCTUATION_PAIRS) | frozenset(PUNCTUATION_PAIRS.values()) | PUNCTUATION_SINGLES

OPENER_FOR_CLOSER = {closer: opener for opener, closer in PUNCTUATION_PAIRS.items()}


def _trim_once(url: str) -> str:
    first_char = url[0]
    last_char = url[-1]

    remove_leading = first_char in ALL_PUNCTUATION

    opener = OPENER_FOR_CLOSER.get(last_char)
    if opener is not None:
        # Closers are only dropped when they have no partner inside the URL
        remove_trailing = url.count(last_char) > url.count(opener)
    else:
        remove_trailing = last_char in PUNCTUATION_SINGLES

    start = 1 if remove_leading else 0
    end = len(url) - 1 if remove_trailing else len(url)
    return url[start:end]


def remove_punctuation(url: str) -> str:
    """
    Strip punctuation surrounding a matched URL.

    Leading punctuation is always removed. A trailing closing bracket or
    quote is removed only when it is unbalanced, so
    ``wiki/Stack_(data_structure)`` keeps its parentheses while
    ``(example.com)`` and ``example.com)`` lose theirs. Trailing sentence
    punctuation (``.``, ``,``, ``!`` and so on) is always removed.

    Runs until nothing changes, so the result is stable under reapplication.

    Args:
        url: Matched text

    Returns:
        Trimmed text, possibly empty
    """
    while url:
        trimmed = _trim_once(url)
        if trimmed == url:
            break
        url = trimmed
    return url
