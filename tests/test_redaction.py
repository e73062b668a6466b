"""
Tests for query parameter redaction.
"""

import pytest

from elblog.core.models import RedactionRule
from elblog.parsers.redaction import obscure_url_parameter, redact_url

URL = "https://host/path?a=1&p=abcdefgh&z=26"


class TestObscureUrlParameter:
    """Tests for obscure_url_parameter."""

    def test_truncates_value(self):
        assert obscure_url_parameter(URL, "p", 5) == "https://host/path?a=1&p=abcde...&z=26"

    def test_zero_length_removes(self):
        assert obscure_url_parameter(URL, "p", 0) == "https://host/path?a=1&z=26"

    def test_none_length_removes(self):
        assert obscure_url_parameter(URL, "p", None) == "https://host/path?a=1&z=26"

    def test_negative_length_removes(self):
        assert obscure_url_parameter(URL, "p", -3) == "https://host/path?a=1&z=26"

    def test_no_query_unchanged(self):
        assert obscure_url_parameter("https://host/path", "p", 0) == "https://host/path"

    def test_unmatched_parameter_unchanged(self):
        url = "https://host/path?a=1;b=2"
        assert obscure_url_parameter(url, "p", 0) == url

    def test_prefix_match_requires_equals(self):
        """Test a longer parameter name sharing the prefix is not matched."""
        url = "https://host/path?pp=1&p=2"
        assert obscure_url_parameter(url, "p", 0) == "https://host/path?pp=1"

    def test_removes_every_occurrence(self):
        url = "/a?p=1&x=2&p=3"
        assert obscure_url_parameter(url, "p", 0) == "/a?x=2"

    def test_semicolon_separators(self):
        url = "/a?x=1;p=secret;y=2"
        assert obscure_url_parameter(url, "p", 0) == "/a?x=1&y=2"

    def test_name_is_url_encoded(self):
        url = "/a?my%20key=secret&x=1"
        assert obscure_url_parameter(url, "my key", 2) == "/a?my%20key=se...&x=1"

    def test_path_preserved(self):
        url = "https://host:443/a/b/c?p=1234567"
        assert obscure_url_parameter(url, "p", 3).startswith("https://host:443/a/b/c?")

    def test_short_value_still_marked(self):
        assert obscure_url_parameter("/a?p=ab", "p", 5) == "/a?p=ab..."


class TestRedactUrl:
    """Tests for applying several rules."""

    def test_rules_apply_cumulatively(self):
        rules = [RedactionRule("p", 3), RedactionRule("a")]
        assert redact_url(URL, rules) == "https://host/path?p=abc...&z=26"

    def test_rules_apply_in_order(self):
        """Test a later rule sees the output of an earlier one."""
        rules = [RedactionRule("p", 6), RedactionRule("p", 2)]
        assert redact_url("/a?p=abcdefgh", rules) == "/a?p=ab..."

    def test_no_rules(self):
        assert redact_url(URL, []) == URL

    def test_token_truncated_to_four_characters(self):
        rules = [RedactionRule("token", 4)]
        url = "https://host/api?token=secret123&x=1"
        assert redact_url(url, rules) == "https://host/api?token=secr...&x=1"


class TestRedactionRule:
    """Tests for RedactionRule parsing."""

    @pytest.mark.parametrize("entry,expected", [
        ("token/4", RedactionRule("token", 4)),
        ("sig/0", RedactionRule("sig", 0)),
        ("bare", RedactionRule("bare", None)),
        ("bad/xyz", RedactionRule("bad", None)),
    ])
    def test_parse(self, entry, expected):
        assert RedactionRule.parse(entry) == expected

    def test_drops(self):
        assert RedactionRule("a").drops
        assert RedactionRule("a", 0).drops
        assert not RedactionRule("a", 1).drops

    @pytest.mark.parametrize("rule", [
        RedactionRule("p"),
        RedactionRule("p", 0),
        RedactionRule("p", -3),
    ])
    def test_dropping_rule_removes_parameter(self, rule):
        assert rule.drops
        assert redact_url(URL, [rule]) == "https://host/path?a=1&z=26"
