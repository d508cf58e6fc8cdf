# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Runtime model description and its text summary.
"""

from dataclasses import dataclass, field

from .operands import Operand, get_operand_summary


@dataclass
class Operation:
    """A single operation of a runtime model."""

    type: str
    inputs: list[int] = field(default_factory=list)
    outputs: list[int] = field(default_factory=list)


@dataclass
class Model:
    """Operands, operations and the indexes of the model inputs and outputs."""

    operands: list[Operand] = field(default_factory=list)
    operations: list[Operation] = field(default_factory=list)
    input_indexes: list[int] = field(default_factory=list)
    output_indexes: list[int] = field(default_factory=list)


def get_model_summary(model: Model) -> str:
    """
    Multi-line summary of a model.

    Example:
        1 input(s), 1 operation(s), 1 output(s), 3 operand(s)
        Inputs: [1, 2, 2, 3] TENSOR_FLOAT32,
        Operations: ADD,
        Outputs: [1, 2, 2, 3] TENSOR_FLOAT32,
    """
    lines = [
        f"{len(model.input_indexes)} input(s), "
        f"{len(model.operations)} operation(s), "
        f"{len(model.output_indexes)} output(s), "
        f"{len(model.operands)} operand(s)",
        "Inputs: "
        + "".join(
            get_operand_summary(model.operands[i]) + ", " for i in model.input_indexes
        ),
        "Operations: " + "".join(op.type + ", " for op in model.operations),
        "Outputs: "
        + "".join(
            get_operand_summary(model.operands[i]) + ", " for i in model.output_indexes
        ),
    ]
    return "\n".join(lines) + "\n"
