"""
Tag lookup adapters for elblog.

Provide per-source configuration tags, as a bucket tag set would.
"""

import json
from pathlib import Path
from typing import Any, Mapping

from elblog.core.exceptions import ConfigurationError

__all__ = ["StaticTagLookup", "JsonTagFileLookup", "tags_from_tag_set"]


def tags_from_tag_set(data: Any) -> dict[str, str]:
    """
    Flatten a tag document into a key/value mapping.

    Accepts the `{"TagSet": [{"Key": ..., "Value": ...}]}` shape returned
    for bucket tagging, or a plain object.
    """
    if isinstance(data, dict) and "TagSet" in data:
        return {item["Key"]: item["Value"] for item in data["TagSet"]}
    if isinstance(data, dict):
        return {str(k): str(v) for k, v in data.items()}
    raise ConfigurationError("Tag document must be an object or contain a TagSet")


class StaticTagLookup:
    """Tag lookup returning the same tags for every source."""

    def __init__(self, tags: Mapping[str, str] | None = None):
        self.tags = dict(tags or {})

    def get_tags(self, source: str) -> dict[str, str]:
        return dict(self.tags)


class JsonTagFileLookup:
    """
    Tag lookup backed by a JSON file.

    Tags given as overrides replace the ones read from the file.

    Example:
        lookup = JsonTagFileLookup("tags.json")
        lookup.get_tags("elb.log.gz")
    """

    def __init__(self, path: str | Path, overrides: Mapping[str, str] | None = None):
        self.path = Path(path)
        self.overrides = dict(overrides or {})

    def get_tags(self, source: str) -> dict[str, str]:
        """
        Load tags from the file.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Unable to read tags from {self.path}: {e}",
                config_key=str(self.path),
            ) from e
        try:
            tags = tags_from_tag_set(data)
        except (KeyError, TypeError) as e:
            raise ConfigurationError(
                f"Invalid TagSet in {self.path}: {e}",
                config_key=str(self.path),
            ) from e
        tags.update(self.overrides)
        return tags
