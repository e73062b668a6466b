"""
Run configuration for elblog.

Configuration comes from tags on the log source (as a bucket's tag set),
falling back to defaults supplied on the command line or environment.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping

from elblog.core.exceptions import ConfigurationError
from elblog.core.models import RedactionRule

__all__ = [
    "LOGGLY_URL_BASE",
    "TOKEN_TAG",
    "GROUP_TAG",
    "PRIVATE_URL_PARAMS_TAG",
    "ShipperConfig",
    "build_endpoint_url",
    "parse_redaction_rules",
]

logger = logging.getLogger(__name__)

LOGGLY_URL_BASE = "https://logs-01.loggly.com/bulk/"

# Tag keys read from the source's tag set
TOKEN_TAG = "loggly-customer-token"
GROUP_TAG = "loggly-tag"
PRIVATE_URL_PARAMS_TAG = "elb2loggly-private-url-params"

RULE_SEPARATOR = "//"


def build_endpoint_url(
    token: str,
    tag: str | None = None,
    base_url: str = LOGGLY_URL_BASE,
) -> str:
    """
    Build the bulk ingestion URL for a customer token.

    Example:
        build_endpoint_url("abc", "aws-elb-logs")
        # -> "https://logs-01.loggly.com/bulk/abc/tag/aws-elb-logs"
    """
    url = base_url + token
    if tag:
        url += "/tag/" + tag
    return url


def parse_redaction_rules(value: str | None) -> list[RedactionRule]:
    """
    Parse a `name/maxLength//name/maxLength` string into rules.

    Order is preserved. Empty entries are ignored.
    """
    if not value:
        return []

    rules = []
    for entry in value.split(RULE_SEPARATOR):
        if not entry.strip():
            continue
        rule = RedactionRule.parse(entry.strip())
        logger.info(
            "Private url parameter %s will be obscured with max length %s.",
            rule.name,
            rule.max_length,
        )
        rules.append(rule)
    return rules


@dataclass
class ShipperConfig:
    """
    Resolved configuration for a single run.

    Attributes:
        token: Ingestion endpoint identity (customer token)
        tag: Optional grouping label appended to the endpoint
        redaction_rules: Query parameters to obscure, in order
        base_url: Bulk endpoint prefix
    """
    token: str
    tag: str | None = None
    redaction_rules: list[RedactionRule] = field(default_factory=list)
    base_url: str = LOGGLY_URL_BASE

    def __post_init__(self):
        if not self.token:
            raise ConfigurationError(
                f"No Loggly customer token. Set tag {TOKEN_TAG}",
                config_key=TOKEN_TAG,
            )

    @property
    def endpoint_url(self) -> str:
        return build_endpoint_url(self.token, self.tag, self.base_url)

    @classmethod
    def from_tags(
        cls,
        tags: Mapping[str, str] | None,
        default_token: str | None = None,
        default_tag: str | None = None,
        base_url: str = LOGGLY_URL_BASE,
    ) -> "ShipperConfig":
        """
        Resolve configuration from a tag mapping.

        A token tag wins over the defaults and brings its own group tag.
        Without one, the default token and default tag are used together.

        Raises:
            ConfigurationError: If no token can be resolved
        """
        tags = tags or {}

        if tags.get(TOKEN_TAG):
            token = tags[TOKEN_TAG]
            tag = tags.get(GROUP_TAG) or None
        else:
            token = default_token
            tag = default_tag

        if not token:
            raise ConfigurationError(
                f"No Loggly customer token. Set tag {TOKEN_TAG}",
                config_key=TOKEN_TAG,
            )

        return cls(
            token=token,
            tag=tag,
            redaction_rules=parse_redaction_rules(tags.get(PRIVATE_URL_PARAMS_TAG)),
            base_url=base_url,
        )
