# SPDX-License-Identifier: MIT
"""
Tests for key/value fragment parsing.
"""
from pwfilter.postprocess.keyvalue import parse_key_value, Delimiter


class TestParseKeyValue:
    """Test splitting fragments on their first delimiter."""

    def test_equals_delimited(self):
        kv = parse_key_value("my.property=propertyEqualDelimitedPassword")
        assert kv.key == "my.property"
        assert kv.value == "propertyEqualDelimitedPassword"
        assert kv.delimiter is Delimiter.EQUALS
        assert kv.is_bare is False

    def test_colon_delimited_with_whitespace(self):
        kv = parse_key_value("  PASSWORD_DB   :   password_db  ")
        assert kv.key == "PASSWORD_DB"
        assert kv.value == "password_db"
        assert kv.delimiter is Delimiter.COLON

    def test_first_delimiter_wins(self):
        """Test that later delimiters stay in the value."""
        kv = parse_key_value("password: ignoreme==please")
        assert kv.key == "password"
        assert kv.value == "ignoreme==please"
        assert kv.delimiter is Delimiter.COLON

        kv = parse_key_value("url=https://example.com")
        assert kv.key == "url"
        assert kv.value == "https://example.com"
        assert kv.delimiter is Delimiter.EQUALS

    def test_bare_value(self):
        """Test fragments without any delimiter."""
        kv = parse_key_value("  VeryStrong857#  ")
        assert kv.key == ""
        assert kv.value == "VeryStrong857#"
        assert kv.delimiter is None
        assert kv.is_bare is True

    def test_empty_fragment(self):
        kv = parse_key_value("")
        assert kv.key == ""
        assert kv.value == ""
        assert kv.is_bare is True

    def test_quotes_are_trimmed(self):
        kv = parse_key_value('"my.property": "sample%3YmlPassword"')
        assert kv.key == "my.property"
        assert kv.value == "sample%3YmlPassword"
        assert kv.key_quoted is True
        assert kv.value_quoted is True
        assert kv.value_quote_char == '"'
        assert kv.is_json_style is True

    def test_trailing_punctuation_is_trimmed(self):
        """Test JSON and code lines ending in a comma or semicolon."""
        assert parse_key_value('"password": "Sup3rS3cret",').value == "Sup3rS3cret"
        assert parse_key_value("password = 'Sup3rS3cret';").value == "Sup3rS3cret"

    def test_single_quotes_are_not_json_style(self):
        kv = parse_key_value("'password': 'Sup3rS3cret'")
        assert kv.value == "Sup3rS3cret"
        assert kv.value_quote_char == "'"
        assert kv.is_json_style is False

    def test_equals_pair_is_not_json_style(self):
        kv = parse_key_value('"password"= "Sup3rS3cret"')
        assert kv.delimiter is Delimiter.EQUALS
        assert kv.is_json_style is False

    def test_unbalanced_quotes_are_stripped(self):
        kv = parse_key_value('password: "Sup3rS3cret')
        assert kv.value == "Sup3rS3cret"
        assert kv.value_quoted is False

    def test_enclosing_braces_are_trimmed(self):
        """Test a whole JSON object matched as the fragment."""
        kv = parse_key_value('{"password": "VeryStrong857#"}')
        assert kv.key == "password"
        assert kv.value == "VeryStrong857#"
        assert kv.key_quote_char == '"'
        assert kv.value_quote_char == '"'
        assert kv.is_json_style is True

    def test_enclosing_brackets_are_trimmed(self):
        kv = parse_key_value('[ "password": "VeryStrong857#" ],')
        assert kv.key == "password"
        assert kv.value == "VeryStrong857#"
        assert kv.is_json_style is True

    def test_unpaired_closing_brace_is_kept(self):
        """Test that a value only loses a brace opened before the key."""
        kv = parse_key_value("password=Very}Strong}")
        assert kv.value == "Very}Strong}"
