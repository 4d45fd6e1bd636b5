# SPDX-License-Identifier: MIT
"""Unit tests for version string tokenizing."""

import tracemalloc

import pytest

from version_sorter import (
    MAX_COMPONENTS,
    NumericComponent,
    ParsedVersion,
    TextComponent,
    VersionOverflowError,
    VersionSorterError,
    parse_version,
    tokenize,
)


class TestTokenize:
    """Tests for splitting strings into components."""

    def test_dotted_numbers(self):
        """Test a plain dotted release."""
        assert tokenize("1.0.2") == [1, 0, 2]

    def test_letters_and_numbers(self):
        """Test letters adjacent to digits form their own components."""
        assert tokenize("v10.3a") == ["v", 10, 3, "a"]
        assert tokenize("rc1") == ["rc", 1]

    def test_hyphen_attached_to_text(self):
        """Test a hyphen directly before letters is part of the text."""
        assert tokenize("2.1-beta") == [2, 1, "-beta"]
        assert tokenize("abc-def") == ["abc", "-def"]

    def test_hyphen_before_digit_is_delimiter(self):
        """Test a hyphen followed by a digit is skipped."""
        assert tokenize("1-2") == [1, 2]

    def test_trailing_hyphen_is_delimiter(self):
        """Test a hyphen at the end of the string is skipped."""
        assert tokenize("1.0-") == [1, 0]

    def test_double_hyphen(self):
        """Test only the hyphen touching the letters is kept."""
        assert tokenize("1.0--beta") == [1, 0, "-beta"]

    def test_other_delimiters(self):
        """Test punctuation and whitespace separate components."""
        assert tokenize("1_2 3+4/5") == [1, 2, 3, 4, 5]

    def test_leading_zeros(self):
        """Test numbers are read by value."""
        assert tokenize("1.007") == [1, 7]

    def test_case_preserved(self):
        """Test text keeps its case."""
        assert tokenize("1.0-RC") == [1, 0, "-RC"]

    def test_non_ascii_is_delimiter(self):
        """Test non-ASCII letters are not treated as text."""
        assert tokenize("ünïcode") == ["n", "code"]

    def test_empty_string(self):
        """Test an empty string has no components."""
        assert tokenize("") == []

    def test_only_delimiters(self):
        """Test a string without digits or letters has no components."""
        assert tokenize("...--__") == []

    def test_bytes_input(self):
        """Test bytes are scanned byte by byte."""
        assert tokenize(b"1.0-beta") == [1, 0, b"-beta"]


class TestParseVersion:
    """Tests for parse_version function."""

    def test_numeric_components(self):
        """Test digit runs become numeric components."""
        parsed = parse_version("1.10")
        assert parsed.components == (NumericComponent(1), NumericComponent(10))

    def test_text_component_is_slice(self):
        """Test text components reference the original string."""
        original = "1.0-beta"
        parsed = parse_version(original)
        text = parsed.components[2]

        assert isinstance(text, TextComponent)
        assert text.source is original
        assert text.offset == 3
        assert text.length == 5
        assert text.text == "-beta"

    def test_original_and_index(self):
        """Test the original string and index are kept."""
        original = "2.0"
        parsed = parse_version(original, index=7)
        assert parsed.original is original
        assert parsed.index == 7
        assert len(parsed) == 2

    def test_is_numeric(self):
        """Test the component variant flag."""
        numeric, text = parse_version("1a").components
        assert numeric.is_numeric is True
        assert text.is_numeric is False

    def test_empty_string(self):
        """Test an empty string is a valid version."""
        parsed = parse_version("")
        assert isinstance(parsed, ParsedVersion)
        assert parsed.components == ()

    def test_component_limit(self):
        """Test parsing stops after MAX_COMPONENTS components."""
        parsed = parse_version(".".join(["1"] * 100))
        assert len(parsed.components) == MAX_COMPONENTS

    def test_component_limit_mixed(self):
        """Test the limit counts text and numeric components alike."""
        parsed = parse_version("a1" * 40)
        assert len(parsed.components) == MAX_COMPONENTS
        assert parsed.components[-1] == NumericComponent(1)

    def test_input_after_limit_ignored(self):
        """Test an oversized number past the limit is never read."""
        parsed = parse_version("1." * MAX_COMPONENTS + "99999999999")
        assert len(parsed.components) == MAX_COMPONENTS

    def test_invalid_type(self):
        """Test non-string input is rejected."""
        with pytest.raises(TypeError):
            parse_version(10)

    def test_long_input_past_limit_not_copied(self):
        """Test scanning a huge string past the limit uses little memory."""
        version = "1." * MAX_COMPONENTS + "x" * 5_000_000

        tracemalloc.start()
        try:
            parsed = parse_version(version)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        assert len(parsed.components) == MAX_COMPONENTS
        assert peak < 1_000_000

    def test_long_bytes_input_past_limit_not_copied(self):
        """Test the same bound holds for bytes input."""
        version = b"a." * MAX_COMPONENTS + b"9" * 5_000_000

        tracemalloc.start()
        try:
            parsed = parse_version(version)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        assert len(parsed.components) == MAX_COMPONENTS
        assert peak < 1_000_000


class TestOverflow:
    """Tests for numbers outside the unsigned 32-bit range."""

    def test_max_value(self):
        """Test the largest 32-bit value is accepted."""
        assert tokenize("4294967295") == [4294967295]

    def test_max_value_with_leading_zeros(self):
        """Test leading zeros do not count towards overflow."""
        assert tokenize("0000004294967295") == [4294967295]

    def test_one_past_max(self):
        """Test the first value above the range fails."""
        with pytest.raises(VersionOverflowError):
            parse_version("4294967296")

    def test_overflow_in_later_component(self):
        """Test overflow anywhere in the string fails."""
        with pytest.raises(VersionOverflowError):
            parse_version("1.2.99999999999")

    def test_error_attributes(self):
        """Test the error names the version and its index."""
        with pytest.raises(VersionOverflowError) as exc_info:
            parse_version("1.99999999999", index=3)

        assert exc_info.value.version == "1.99999999999"
        assert exc_info.value.index == 3
        assert "overflow" in str(exc_info.value).lower()

    def test_error_hierarchy(self):
        """Test the error is both a package error and an OverflowError."""
        with pytest.raises(VersionSorterError):
            parse_version("99999999999")
        with pytest.raises(OverflowError):
            parse_version("99999999999")


class TestComponentEquality:
    """Tests for equality between components."""

    def test_text_equal_across_sources(self):
        """Test equal text from different strings is equal."""
        first = parse_version("1.0-beta").components[2]
        second = parse_version("2-beta").components[1]

        assert first == second
        assert hash(first) == hash(second)

    def test_text_equal_across_str_and_bytes(self):
        """Test str and bytes slices with the same text are equal."""
        assert parse_version("1-rc").components[1] == parse_version(b"1-rc").components[1]

    def test_text_different(self):
        """Test differing text is not equal."""
        assert parse_version("beta").components[0] != parse_version("Beta").components[0]

    def test_numeric_equal_by_value(self):
        """Test numeric components compare by value."""
        assert parse_version("1.007").components[1] == parse_version("7").components[0]
