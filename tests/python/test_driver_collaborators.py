# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tests for operand mapping, memory pool resolution and model summaries.
"""

import numpy as np
import pytest

from tensorlayout.core import DataType, Shape
from tensorlayout.errors import UnsupportedOperandError, ValidationError
from tensorlayout.memory import DataLocation, RunTimePoolInfo, get_memory_from_pool
from tensorlayout.model import Model, Operation, get_model_summary
from tensorlayout.operands import (
    Operand,
    OperandType,
    get_const_tensor_for_operand,
    get_operand_summary,
    get_tensor_info_for_operand,
)


class TestOperandMapping:
    """Tests for get_tensor_info_for_operand."""

    @pytest.mark.parametrize(
        "operand_type,dtype",
        [
            (OperandType.TENSOR_FLOAT32, DataType.Float32),
            (OperandType.TENSOR_QUANT8_ASYMM, DataType.QuantisedAsymm8),
            (OperandType.TENSOR_INT32, DataType.Signed32),
        ],
    )
    def test_tensor_types(self, operand_type, dtype):
        """Test each tensor operand type maps to its data type."""
        info = get_tensor_info_for_operand(Operand(operand_type, [1, 2, 2, 3]))
        assert info.dtype == dtype
        assert info.shape == Shape((1, 2, 2, 3))

    def test_quantization_copied(self):
        """Test scale and zero point are carried over."""
        operand = Operand(
            OperandType.TENSOR_QUANT8_ASYMM, [4], scale=0.25, zero_point=128
        )
        info = get_tensor_info_for_operand(operand)
        assert info.quantization_scale == 0.25
        assert info.quantization_offset == 128

    @pytest.mark.parametrize(
        "operand_type", [OperandType.FLOAT32, OperandType.INT32, OperandType.UINT32]
    )
    def test_scalar_types_rejected(self, operand_type):
        """Test scalar operands have no tensor mapping."""
        with pytest.raises(UnsupportedOperandError):
            get_tensor_info_for_operand(Operand(operand_type))

    def test_operand_summary(self):
        """Test the one-line operand summary."""
        operand = Operand(OperandType.TENSOR_FLOAT32, [1, 224, 224, 3])
        assert get_operand_summary(operand) == "[1, 224, 224, 3] TENSOR_FLOAT32"


class TestMemoryPool:
    """Tests for get_memory_from_pool."""

    def test_resolves_slice(self):
        """Test the view covers exactly the requested bytes."""
        pools = [RunTimePoolInfo(bytearray(range(16)))]
        view = get_memory_from_pool(DataLocation(0, 4, 8), pools)
        assert bytes(view) == bytes(range(4, 12))

    def test_view_aliases_pool(self):
        """Test writes through the view reach the pool."""
        buffer = bytearray(8)
        view = get_memory_from_pool(DataLocation(0, 2, 2), [RunTimePoolInfo(buffer)])
        view[0] = 7
        assert buffer[2] == 7

    def test_second_pool(self):
        """Test the pool index selects the pool."""
        pools = [RunTimePoolInfo(bytes(4)), RunTimePoolInfo(b"abcd")]
        assert bytes(get_memory_from_pool(DataLocation(1, 1, 2), pools)) == b"bc"

    def test_bad_pool_index(self):
        """Test an out-of-range pool index is rejected."""
        with pytest.raises(ValidationError):
            get_memory_from_pool(DataLocation(1, 0, 1), [RunTimePoolInfo(bytes(4))])

    def test_range_past_end(self):
        """Test a byte range past the pool end is rejected."""
        with pytest.raises(ValidationError):
            get_memory_from_pool(DataLocation(0, 2, 3), [RunTimePoolInfo(bytes(4))])

    def test_const_tensor_for_operand(self):
        """Test an operand's values are read from its pool."""
        values = np.array([1.5, -2.0, 3.25], dtype=np.float32)
        pool = bytearray(4) + bytearray(values.tobytes())
        operand = Operand(
            OperandType.TENSOR_FLOAT32,
            [3],
            location=DataLocation(0, 4, 12),
        )
        tensor = get_const_tensor_for_operand(operand, [RunTimePoolInfo(pool)])
        assert tensor.elements().tolist() == [1.5, -2.0, 3.25]


class TestModelSummary:
    """Tests for get_model_summary."""

    def test_summary_lines(self):
        """Test counts and per-section listings."""
        model = Model(
            operands=[
                Operand(OperandType.TENSOR_FLOAT32, [1, 2, 2, 3]),
                Operand(OperandType.TENSOR_FLOAT32, [1, 2, 2, 3]),
                Operand(OperandType.INT32),
                Operand(OperandType.TENSOR_FLOAT32, [1, 2, 2, 3]),
            ],
            operations=[Operation("ADD", inputs=[0, 1, 2], outputs=[3])],
            input_indexes=[0, 1],
            output_indexes=[3],
        )
        assert get_model_summary(model) == (
            "2 input(s), 1 operation(s), 1 output(s), 4 operand(s)\n"
            "Inputs: [1, 2, 2, 3] TENSOR_FLOAT32, [1, 2, 2, 3] TENSOR_FLOAT32, \n"
            "Operations: ADD, \n"
            "Outputs: [1, 2, 2, 3] TENSOR_FLOAT32, \n"
        )

    def test_empty_model(self):
        """Test an empty model still has every line."""
        assert get_model_summary(Model()) == (
            "0 input(s), 0 operation(s), 0 output(s), 0 operand(s)\n"
            "Inputs: \n"
            "Operations: \n"
            "Outputs: \n"
        )
