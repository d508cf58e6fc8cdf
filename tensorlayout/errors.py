# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
tensorlayout Error Hierarchy

Error Categories:
- TensorLayoutError: Base class for all tensorlayout errors
- ValidationError: Precondition violations (rank, buffer size, indices)
- UnsupportedDataTypeError: Element type the swizzle engine cannot copy
- UnsupportedOperandError: Operand type with no tensor mapping
- ConfigurationError: Invalid environment configuration

Precondition violations and unsupported types are caller bugs and are
raised to the caller. The dump serializer never raises them; it logs.
"""

from typing import Optional


class TensorLayoutError(Exception):
    """
    Base class for all tensorlayout errors.

    Attributes:
        message: Human-readable error message
        suggestions: List of suggestions to fix the error
        context: Optional context dictionary for debugging
    """

    def __init__(
        self,
        message: str,
        suggestions: Optional[list[str]] = None,
        context: Optional[dict] = None,
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.context = context or {}

        full_message = self._format_message()
        super().__init__(full_message)

    def _format_message(self) -> str:
        """Format the error message with suggestions."""
        lines = [self.message]

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                lines.append(f"  {i}. {suggestion}")

        if self.context:
            lines.append("")
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        return "\n".join(lines)


class ValidationError(TensorLayoutError):
    """
    Precondition violation.

    Raised when:
    - A tensor has the wrong rank for the operation
    - A buffer is smaller than its descriptor requires
    - A permutation vector is not a bijection
    - A coordinate falls outside the tensor extents
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
    ):
        context = {}
        if parameter:
            context["parameter"] = parameter
        if expected:
            context["expected"] = expected
        if received:
            context["received"] = received

        super().__init__(
            message=f"Validation failed: {message}",
            suggestions=[
                "Check the tensor descriptor against the buffer passed in",
                "Review the caller that built the descriptor",
            ],
            context=context,
        )


class UnsupportedDataTypeError(TensorLayoutError):
    """
    Data type the operation cannot handle.

    Copying with a guessed element width would corrupt the destination,
    so this is never recovered from inside the library.
    """

    def __init__(self, dtype, operation: Optional[str] = None, supported=None):
        self.dtype = dtype
        self.operation = operation

        type_code = int(dtype)
        type_name = getattr(dtype, "name", str(dtype))
        context = {"data_type": f"{type_name} ({type_code})"}
        if operation:
            context["operation"] = operation

        suggestions = []
        if supported:
            names = ", ".join(getattr(s, "name", str(s)) for s in supported)
            suggestions.append(f"Supported data types: {names}")

        super().__init__(
            message=f"Unsupported data type {type_code}",
            suggestions=suggestions,
            context=context,
        )


class UnsupportedOperandError(TensorLayoutError):
    """Operand type that has no tensor mapping."""

    def __init__(self, operand_type):
        self.operand_type = operand_type
        type_name = getattr(operand_type, "name", str(operand_type))

        super().__init__(
            message=f"Operand type '{type_name}' is not supported",
            suggestions=[
                "Supported operand types: TENSOR_FLOAT32, "
                "TENSOR_QUANT8_ASYMM, TENSOR_INT32",
            ],
            context={"operand_type": type_name},
        )


class ConfigurationError(TensorLayoutError):
    """
    Configuration or setup error.

    Raised when an environment variable holds a value that cannot be parsed.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
    ):
        context = {}
        if config_key:
            context["config_key"] = config_key
        if config_value:
            context["config_value"] = str(config_value)

        super().__init__(
            message=f"Configuration error: {message}",
            suggestions=[
                "Check configuration parameters",
                "Review the environment variables set for this process",
            ],
            context=context,
        )


def format_buffer_size_mismatch(
    required_bytes: int,
    actual_bytes: int,
    buffer_name: Optional[str] = None,
) -> ValidationError:
    """Create a ValidationError for a buffer too small for its descriptor."""
    msg = f"Buffer too small: need {required_bytes} bytes, got {actual_bytes}"
    return ValidationError(
        message=msg,
        parameter=buffer_name or "buffer",
        expected=f">= {required_bytes} bytes",
        received=f"{actual_bytes} bytes",
    )
