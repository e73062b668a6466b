"""
Query parameter redaction for request URLs.

Matching is done on the raw query string: a parameter matches a rule when
it starts with the URL-encoded rule name followed by `=`.
"""

from typing import Iterable
from urllib.parse import quote

from elblog.core.models import RedactionRule

__all__ = ["TRUNCATION_MARKER", "obscure_url_parameter", "redact_url"]

TRUNCATION_MARKER = "..."

# Characters encodeURIComponent leaves alone
_UNRESERVED = "-_.!~*'()"


def _split_params(query: str) -> list[str]:
    """Split a query string on `&` and `;`."""
    return query.replace(";", "&").split("&")


def obscure_url_parameter(url: str, parameter: str, max_length: int | None) -> str:
    """
    Obscure one query parameter in a URL.

    Args:
        url: Request URL, possibly with a query string
        parameter: Parameter name to look for
        max_length: Characters of the value to keep; None or <= 0 removes
            the parameter

    Returns:
        The URL with matching parameters truncated or removed. The path
        and the order of other parameters are unchanged.

    Example:
        obscure_url_parameter("/a?p=abcdefgh&x=1", "p", 5)
        # -> "/a?p=abcde...&x=1"
    """
    return _apply_rule(url, RedactionRule(parameter, max_length))


def _apply_rule(url: str, rule: RedactionRule) -> str:
    path, sep, query = url.partition("?")
    if not sep:
        return url

    prefix = quote(rule.name, safe=_UNRESERVED) + "="
    params = _split_params(query)
    if not any(param.startswith(prefix) for param in params):
        return url

    kept = []
    for param in params:
        if not param.startswith(prefix):
            kept.append(param)
        elif not rule.drops:
            value = param[len(prefix):]
            kept.append(prefix + value[:rule.max_length] + TRUNCATION_MARKER)

    return path + "?" + "&".join(kept)


def redact_url(url: str, rules: Iterable[RedactionRule]) -> str:
    """Apply each rule in order to the URL."""
    for rule in rules:
        url = _apply_rule(url, rule)
    return url
