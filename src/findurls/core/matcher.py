"""
Candidate matching for URL-like text.

The pattern is deliberately permissive: it accepts anything shaped like a
URL, including filenames such as ``readme.txt`` and email addresses. Those
are filtered out later by the extractor.
"""

import logging
from typing import Iterable, Iterator

import regex

from .models import Candidate

logger = logging.getLogger(__name__)

PROTOCOL = r"(?:[a-zA-Z][a-zA-Z0-9+.-]*://|//)?"
WWW = r"(?:www\.)?"
USER_INFO = r"(?:[a-zA-Z0-9._~!$&'()*+,;=%-]+(?::[a-zA-Z0-9._~!$&'()*+,;=%-]*)?@)?"
LABEL = r"[\p{L}\p{N}](?:[\p{L}\p{N}-]{0,61}[\p{L}\p{N}])?"
TLD = r"\p{L}{2,}"  # any run of letters stands in for a real TLD
FQDN = rf"(?:(?:{LABEL}\.)+{TLD})"
OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IPV4 = rf"(?:{OCTET}\.){{3}}{OCTET}"
PORT = r"(?::[0-9]{1,5})?"
PATH = r"(?:/[^\s<>?#]*)?"
QUERY = r"(?:\?[^\s<>#]*)?"
FRAGMENT = r"(?:#[^\s<>]*)?"


def build_pattern(allowed_bare_hostnames: Iterable[str] = ()) -> "regex.Pattern":
    """
    Compile the candidate pattern.

    Args:
        allowed_bare_hostnames: Dotless hostnames to match literally (e.g. localhost)

    Returns:
        Case-insensitive, Unicode-aware compiled pattern
    """
    host_parts = [FQDN, IPV4]
    host_parts.extend(regex.escape(name) for name in allowed_bare_hostnames if name)
    host = "(?:" + "|".join(host_parts) + ")"
    logger.debug(f"Building candidate pattern with {len(host_parts) - 2} bare hostname(s)")

    pattern = f"({PROTOCOL}{WWW}{USER_INFO}{host}{PORT}{PATH}{QUERY}{FRAGMENT})"
    return regex.compile(pattern, regex.IGNORECASE | regex.UNICODE)


def iter_candidates(text: str, pattern: "regex.Pattern") -> Iterator[Candidate]:
    """Yield non-overlapping candidates from left to right."""
    for match in pattern.finditer(text):
        yield Candidate(match.group(0), match.start())
