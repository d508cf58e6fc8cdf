# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tests for tensorlayout Error Handling

Validates:
- Error hierarchy
- Error message formatting
- Suggestions in error messages
- Context information
"""

import pytest

from tensorlayout.core import DataType
from tensorlayout.errors import (
    ConfigurationError,
    TensorLayoutError,
    UnsupportedDataTypeError,
    UnsupportedOperandError,
    ValidationError,
    format_buffer_size_mismatch,
)
from tensorlayout.operands import OperandType


class TestTensorLayoutError:
    """Tests for TensorLayoutError base class."""

    def test_basic_error(self):
        """Test basic error creation."""
        error = TensorLayoutError("Test error")
        assert "Test error" in str(error)

    def test_error_with_suggestions(self):
        """Test error with suggestions."""
        error = TensorLayoutError("Test error", suggestions=["Fix A", "Fix B"])
        msg = str(error)
        assert "Suggestions:" in msg
        assert "1. Fix A" in msg
        assert "2. Fix B" in msg

    def test_error_with_context(self):
        """Test error with context."""
        error = TensorLayoutError("Test error", context={"key1": "value1"})
        msg = str(error)
        assert "Context:" in msg
        assert "key1: value1" in msg

    def test_error_attributes(self):
        """Test error attributes."""
        error = TensorLayoutError(
            "Test error", suggestions=["Fix A"], context={"key": "value"}
        )
        assert error.message == "Test error"
        assert error.suggestions == ["Fix A"]
        assert error.context == {"key": "value"}


class TestValidationError:
    """Tests for ValidationError."""

    def test_message_and_context(self):
        """Test validation error formatting."""
        error = ValidationError(
            "Bad rank", parameter="shape", expected="4", received="3"
        )
        msg = str(error)
        assert "Validation failed: Bad rank" in msg
        assert "parameter: shape" in msg
        assert "expected: 4" in msg
        assert "received: 3" in msg

    def test_is_tensorlayout_error(self):
        """Test inheritance."""
        assert isinstance(ValidationError("x"), TensorLayoutError)


class TestUnsupportedDataTypeError:
    """Tests for UnsupportedDataTypeError."""

    def test_type_code_in_message(self):
        """Test the integer type code is reported."""
        error = UnsupportedDataTypeError(DataType.Signed32, operation="swizzle")
        msg = str(error)
        assert "Unsupported data type 3" in msg
        assert "Signed32 (3)" in msg
        assert "operation: swizzle" in msg
        assert error.dtype == DataType.Signed32

    def test_supported_types_suggested(self):
        """Test supported types are listed as a suggestion."""
        error = UnsupportedDataTypeError(
            DataType.Float16, supported=(DataType.Float32, DataType.QuantisedAsymm8)
        )
        assert "Float32, QuantisedAsymm8" in str(error)


class TestUnsupportedOperandError:
    """Tests for UnsupportedOperandError."""

    def test_operand_type_named(self):
        """Test the operand type name is reported."""
        error = UnsupportedOperandError(OperandType.UINT32)
        assert "UINT32" in str(error)
        assert error.operand_type == OperandType.UINT32


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_config_key_in_context(self):
        """Test key and value are reported."""
        error = ConfigurationError("bad", config_key="K", config_value="v")
        msg = str(error)
        assert "Configuration error: bad" in msg
        assert "config_key: K" in msg
        assert "config_value: v" in msg


class TestFormatHelpers:
    """Tests for mismatch helpers."""

    def test_buffer_size_mismatch(self):
        """Test buffer size helper."""
        error = format_buffer_size_mismatch(48, 47, "destination")
        assert "need 48 bytes, got 47" in str(error)
        with pytest.raises(ValidationError):
            raise error
