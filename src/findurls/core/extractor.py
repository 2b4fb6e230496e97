"""
URL extraction pipeline.

Each candidate found by the matcher goes through the same steps, and any
step can reject it:

1. Email addresses are skipped
2. Surrounding punctuation is trimmed
3. A protocol is resolved (explicit, protocol-relative, or default)
4. The protocol-qualified URL is parsed and normalized
5. Exclusion rules are applied (protocol policy, filename-like hosts, bad hostnames)
6. Duplicates are dropped when requested

Rejection is never an error. Callers only see accepted matches.
"""

import logging
import re
from typing import Any, List, Mapping, Optional, Union

from ada_url import URL

from ..config.loader import ExtractOptions, merge_options
from .link_utils import has_file_extension, is_email_address, is_valid_hostname, try_parse_url
from .matcher import build_pattern, iter_candidates
from .models import ProtocolResolution, UrlMatch
from .punctuation import remove_punctuation

logger = logging.getLogger(__name__)

MIN_URL_LENGTH = 4

SCHEME_PREFIX = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*)://")


def resolve_protocol(url: str, options: ExtractOptions) -> ProtocolResolution:
    """
    Decide which protocol a cleaned candidate should be parsed with.

    Args:
        url: Candidate with punctuation already removed
        options: Active extraction options

    Returns:
        ProtocolResolution; ``resolved_protocol`` is None if the candidate
        has no protocol and none may be inferred
    """
    match = SCHEME_PREFIX.match(url)
    if match:
        return ProtocolResolution(
            has_protocol=True,
            resolved_protocol=match.group(1),
            is_default_protocol=False,
        )

    # Protocol-relative counts as explicit
    if url.startswith("//") and options.default_protocol:
        return ProtocolResolution(
            has_protocol=True,
            resolved_protocol=options.default_protocol,
            is_default_protocol=False,
        )

    if not options.require_protocol and options.default_protocol:
        return ProtocolResolution(
            has_protocol=False,
            resolved_protocol=options.default_protocol,
            is_default_protocol=True,
        )

    return ProtocolResolution(has_protocol=False, resolved_protocol=None, is_default_protocol=False)


def build_url_to_parse(url: str, resolution: ProtocolResolution) -> str:
    """Prefix a cleaned candidate with its resolved protocol."""
    if url.startswith("//"):
        return f"{resolution.resolved_protocol}:{url}"
    if resolution.has_protocol:
        return url
    return f"{resolution.resolved_protocol}://{url}"


def should_exclude_url(
    parsed: URL,
    raw_url: str,
    is_default_protocol: bool,
    options: ExtractOptions,
) -> bool:
    """
    Apply the exclusion rules to a parsed candidate.

    Args:
        parsed: Parsed, protocol-qualified URL
        raw_url: Candidate as written (no protocol added)
        is_default_protocol: Whether the protocol was filled in from the defaults
        options: Active extraction options

    Returns:
        True if the candidate must be dropped
    """
    if options.require_protocol and is_default_protocol:
        logger.debug(f"Excluding {raw_url!r}: protocol required")
        return True

    protocol = parsed.protocol[:-1]
    if not options.allows_protocol(protocol):
        logger.debug(f"Excluding {raw_url!r}: protocol {protocol!r} not allowed")
        return True

    # "notes.txt" is a filename, "site.com/notes.txt" and "https://notes.txt" are URLs
    if (
        is_default_protocol
        and parsed.pathname == "/"
        and has_file_extension(raw_url, options.extensions_requiring_protocol)
    ):
        logger.debug(f"Excluding {raw_url!r}: looks like a filename")
        return True

    if not is_valid_hostname(parsed.hostname, options.allowed_bare_hostnames):
        logger.debug(f"Excluding {raw_url!r}: invalid hostname {parsed.hostname!r}")
        return True

    return False


def extract_urls(
    text: str,
    options: Optional[Union[ExtractOptions, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> List[UrlMatch]:
    """
    Find URLs in text.

    Args:
        text: Text to search
        options: ExtractOptions or a mapping of option values, merged over the defaults
        **overrides: Individual option values, e.g. ``deduplicate=True``

    Returns:
        Matches in order of appearance
    """
    config = merge_options(options, **overrides)
    if not text:
        return []

    pattern = build_pattern(config.allowed_bare_hostnames)
    seen_urls = set()
    matches: List[UrlMatch] = []

    for candidate in iter_candidates(text, pattern):
        raw_match = candidate.text

        if is_email_address(raw_match):
            logger.debug(f"Skipping email address {raw_match!r}")
            continue

        clean_url = remove_punctuation(raw_match)
        if len(clean_url) < MIN_URL_LENGTH:
            logger.debug(f"Skipping {raw_match!r}: too short after trimming")
            continue

        resolution = resolve_protocol(clean_url, config)
        if resolution.resolved_protocol is None:
            logger.debug(f"Skipping {clean_url!r}: no protocol")
            continue

        parsed = try_parse_url(build_url_to_parse(clean_url, resolution))
        if parsed is None:
            continue

        if should_exclude_url(parsed, clean_url, resolution.is_default_protocol, config):
            continue

        normalized = parsed.href
        if config.deduplicate and normalized in seen_urls:
            logger.debug(f"Skipping duplicate {normalized}")
            continue

        matches.append(
            UrlMatch(
                raw=clean_url,
                normalized=normalized,
                index=candidate.index + raw_match.find(clean_url),
            )
        )

        if config.deduplicate:
            seen_urls.add(normalized)

    return matches
