"""Core extraction pipeline for findurls."""

from .models import Candidate, ProtocolResolution, UrlMatch
from .link_utils import (
    has_file_extension,
    is_allowed_hostname,
    is_email_address,
    is_valid_hostname,
    try_parse_url,
)
from .punctuation import remove_punctuation
from .matcher import build_pattern, iter_candidates
from .extractor import MIN_URL_LENGTH, extract_urls, resolve_protocol, should_exclude_url

__all__ = [
    "Candidate",
    "ProtocolResolution",
    "UrlMatch",
    "has_file_extension",
    "is_allowed_hostname",
    "is_email_address",
    "is_valid_hostname",
    "try_parse_url",
    "remove_punctuation",
    "build_pattern",
    "iter_candidates",
    "MIN_URL_LENGTH",
    "extract_urls",
    "resolve_protocol",
    "should_exclude_url",
]
