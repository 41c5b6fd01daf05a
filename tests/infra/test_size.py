"""
Tests for size.py.

Tests key functionality including:
- parse_size suffix handling
- parse_size error cases
- size_str formatting
"""

import pytest

from multipartcfg.exceptions import InvalidArgumentError, SizeFormatError
from multipartcfg.size import (
    BYTES_PER_KB,
    BYTES_PER_MB,
    MAX_PARSED_SIZE,
    parse_size,
    size_str,
)

# =============================================================================
# Test parse_size
# =============================================================================


@pytest.mark.unit
class TestParseSize:
    """Test parse_size parsing."""

    def test_plain_bytes(self):
        """Test string without suffix is a byte count."""
        assert parse_size("0") == 0
        assert parse_size("512") == 512

    def test_kilobytes(self):
        """Test KB suffix multiplies by 1024."""
        assert parse_size("10KB") == 10 * 1024
        assert parse_size("1KB") == BYTES_PER_KB

    def test_megabytes(self):
        """Test MB suffix multiplies by 1024*1024."""
        assert parse_size("100MB") == 104857600
        assert parse_size("1MB") == BYTES_PER_MB

    def test_suffix_case_insensitive(self):
        """Test lowercase and mixed-case suffixes."""
        assert parse_size("5kb") == parse_size("5KB") == 5120
        assert parse_size("10Mb") == parse_size("10mB") == 10 * BYTES_PER_MB

    def test_leading_zeros(self):
        """Test leading zeros are accepted."""
        assert parse_size("007KB") == 7 * 1024

    def test_large_value(self):
        """Test values beyond 32 bits are kept exactly."""
        assert parse_size("8192MB") == 8192 * BYTES_PER_MB


# =============================================================================
# Test parse_size Errors
# =============================================================================


@pytest.mark.unit
class TestParseSizeErrors:
    """Test parse_size error handling."""

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_rejected(self, value):
        """Test empty and None input raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="Size must not be empty"):
            parse_size(value)

    def test_non_string_rejected(self):
        """Test non-string input raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            parse_size(10)

    @pytest.mark.parametrize(
        "value",
        ["abcMB", "abc", "KB", "MB", "1.5MB", "-5KB", "-5", "+5", " 5", "5 KB", "1GB"],
    )
    def test_invalid_format_rejected(self, value):
        """Test malformed numbers and unknown suffixes raise SizeFormatError."""
        with pytest.raises(SizeFormatError):
            parse_size(value)

    def test_format_error_is_value_error(self):
        """Test SizeFormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_size("abcMB")

    def test_format_error_context(self):
        """Test SizeFormatError carries the offending string."""
        with pytest.raises(SizeFormatError) as exc_info:
            parse_size("abcMB")
        assert exc_info.value.context == {"size": "abcMB"}


# =============================================================================
# Test parse_size Range
# =============================================================================


@pytest.mark.unit
class TestParseSizeRange:
    """Test parse_size 64-bit range limits."""

    def test_max_value_accepted(self):
        """Test the signed 64-bit maximum parses."""
        assert parse_size(str(2**63 - 1)) == MAX_PARSED_SIZE

    def test_above_max_rejected(self):
        """Test one past the 64-bit maximum raises SizeFormatError."""
        with pytest.raises(SizeFormatError, match="out of range"):
            parse_size(str(2**63))

    def test_twenty_digits_rejected(self):
        """Test a 20-digit number raises SizeFormatError."""
        with pytest.raises(SizeFormatError):
            parse_size("99999999999999999999")

    def test_multiplied_value_over_max_rejected(self):
        """Test overflow after applying the suffix multiplier."""
        assert parse_size(f"{MAX_PARSED_SIZE // BYTES_PER_MB}MB") <= MAX_PARSED_SIZE
        with pytest.raises(SizeFormatError):
            parse_size(f"{MAX_PARSED_SIZE // BYTES_PER_MB + 1}MB")
        with pytest.raises(SizeFormatError):
            parse_size(f"{MAX_PARSED_SIZE // BYTES_PER_KB + 1}kb")

    def test_very_long_digit_string(self):
        """Test inputs beyond int() digit limits stay in the package hierarchy."""
        with pytest.raises(SizeFormatError):
            parse_size("1" * 5000)
        with pytest.raises(SizeFormatError):
            parse_size("1" * 5000 + "KB")

    def test_leading_zeros_not_counted(self):
        """Test long zero padding is accepted."""
        assert parse_size("0" * 5000 + "1KB") == 1024
        assert parse_size("0" * 30) == 0


# =============================================================================
# Test size_str
# =============================================================================


@pytest.mark.unit
class TestSizeStr:
    """Test size_str formatting."""

    def test_zero_bytes(self):
        """Test zero bytes."""
        assert size_str(0) == "0B"

    def test_bytes_under_kb(self):
        """Test bytes under 1KB."""
        assert size_str(1) == "1B"
        assert size_str(1023) == "1023B"

    def test_kilobytes(self):
        """Test KB values."""
        assert size_str(1024) == "1KB"
        assert size_str(1536) == "1.5KB"

    def test_megabytes_and_gigabytes(self):
        """Test MB and GB values."""
        assert size_str(100 * BYTES_PER_MB) == "100MB"
        assert size_str(2 * 1024**3) == "2GB"

    def test_precise_mode(self):
        """Test precise mode shows 3 decimal places."""
        assert size_str(1536, precise=True) == "1.500KB"

    def test_none_returns_empty(self):
        """Test None input returns empty string."""
        assert size_str(None) == ""

    @pytest.mark.parametrize("value", [-1, float("nan"), float("inf"), "10", True])
    def test_invalid_input(self, value):
        """Test invalid input raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            size_str(value)

    def test_parse_formatted_whole_units(self):
        """Test whole-unit output of size_str parses back."""
        assert parse_size(size_str(10 * BYTES_PER_KB)) == 10 * BYTES_PER_KB
        assert parse_size(size_str(3 * BYTES_PER_MB)) == 3 * BYTES_PER_MB
