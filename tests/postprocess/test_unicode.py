# SPDX-License-Identifier: MIT
"""
Tests for unicode artifact detection.
"""
import pytest

from pwfilter.postprocess.unicode import (
    has_foreign_unicode,
    inspect_unicode,
    UnicodeOutcome,
)


UNICODE_CASES = [
    # (description, fragment, ignore)
    (
        "unicode which is not ASCII",
        '"password": "\\u0049\\u0044\\u306e\\u78ba\\u8a8d\\u3001\\u30d1\\u30b9\\u30ef\\u30fc\\u30c9\\u306e\\u5909\\u66f4"',
        True,
    ),
    (
        "password that has non ASCII chars",
        '"password": "VeryStrong$$\\u306e\\u78ba"',
        True,
    ),
    (
        "unicode that converts to valid ASCII",
        '"password": "VeryStrong$$\\u0049\\u0044"',
        False,
    ),
    ("real password finding", "password: VeryStrong857!@$^&*#", False),
    ("real secret finding", "secret: VeryStrong857#", False),
    (
        "invalid string due to unicode escape being in caps",
        r'"password"= "Informationsb\U00e4rare"',
        True,
    ),
]


class TestHasForeignUnicode:
    """Test detection of localized strings in password matches."""

    @pytest.mark.parametrize(
        "fragment,ignore",
        [case[1:] for case in UNICODE_CASES],
        ids=[case[0] for case in UNICODE_CASES],
    )
    def test_unicode_cases(self, fragment, ignore):
        """Test the known unicode outcomes."""
        assert has_foreign_unicode(fragment) is ignore

    def test_literal_non_ascii(self):
        """Test characters that are already decoded."""
        assert has_foreign_unicode("password: пароль123") is True
        assert has_foreign_unicode("password: Informationsbärare") is True

    def test_control_characters_are_foreign(self):
        """Test that non-printable ASCII is outside the allowed range."""
        assert has_foreign_unicode("password:\tVeryStrong857#") is True

    def test_empty_fragment(self):
        """Test that an empty fragment is plain ASCII."""
        assert has_foreign_unicode("") is False

    def test_malformed_escapes(self):
        """Test that escapes that cannot be decoded are treated as foreign."""
        for fragment in [
            "password: abc\\u12",
            "password: abc\\uZZZZ",
            "password: abc\\U00e4",
            "password: abc\\UFFFFFFFF",
            "password: trailing\\u",
        ]:
            assert has_foreign_unicode(fragment) is True, f"{fragment!r} should be ignored"


class TestInspectUnicode:
    """Test the typed inspection outcomes."""

    def test_plain(self):
        """Test fragments without escapes."""
        result = inspect_unicode("secret: VeryStrong857#")
        assert result.outcome == UnicodeOutcome.PLAIN
        assert result.escapes == 0
        assert result.decoded == "secret: VeryStrong857#"

    def test_escaped_ascii(self):
        """Test escapes that decode to printable ASCII."""
        result = inspect_unicode("password: VeryStrong$$\\u0049\\u0044")
        assert result.outcome == UnicodeOutcome.ESCAPED_ASCII
        assert result.escapes == 2
        assert result.decoded == "password: VeryStrong$$ID"
        assert result.outcome.is_foreign is False

    def test_long_escape_form(self):
        """Test eight digit escapes."""
        assert inspect_unicode("pw: a\\U00000041b").outcome == UnicodeOutcome.ESCAPED_ASCII
        assert inspect_unicode("pw: a\\U0001F600b").outcome == UnicodeOutcome.NON_ASCII

    def test_non_ascii(self):
        """Test escapes that decode outside printable ASCII."""
        result = inspect_unicode("password: VeryStrong$$\\u306e")
        assert result.outcome == UnicodeOutcome.NON_ASCII
        assert result.decoded == "password: VeryStrong$$の"
        assert result.outcome.is_foreign is True

    def test_malformed_is_distinct_from_non_ascii(self):
        """Test that decode failures keep their own outcome."""
        result = inspect_unicode(r'"password"= "Informationsb\U00e4rare"')
        assert result.outcome == UnicodeOutcome.MALFORMED
        assert result.outcome.is_foreign is True
        assert result.decoded == r'"password"= "Informationsb\U00e4rare"'
