# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tensor Dump Serializer

Writes a tensor's shape and element values to
``<dump_dir>/<request_name>_<tensor_name>.dump`` for offline inspection.

The buffer is assumed to be stored channel-last: the innermost axis is
the channel axis whatever the rank. Output is grouped channel-major
(batch, then channel, then rows of a height x width block), so the
traversal walks memory with a stride of ``channels`` along each row and
rewinds to the next channel offset after every block.

Dumping is a debugging aid. Nothing in this module raises to the caller;
I/O failures are logged as warnings and unsupported element types produce
a one-line diagnostic artifact.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional

import numpy as np

from .config import DumpConfig
from .core import ConstTensor, DataType
from .layout import memory_layout_string
from .observability import get_logger


@dataclass(frozen=True)
class ElementPrinter:
    """How elements of one data type are rendered."""

    printable_type: type
    format: Callable[[object], str]


def _format_float(value: float) -> str:
    # Six significant digits, the same as a default C++ ostream
    return format(value, "g")


# Quantised bytes are widened to uint32 so they print as numbers
_ELEMENT_PRINTERS = {
    DataType.Float32: ElementPrinter(np.float32, _format_float),
    DataType.QuantisedAsymm8: ElementPrinter(np.uint32, str),
    DataType.Signed32: ElementPrinter(np.int32, str),
}


def dump_file_name(dump_dir, request_name: str, tensor_name: str) -> Path:
    """Path of the artifact for one tensor of one request."""
    return Path(dump_dir) / f"{request_name}_{tensor_name}.dump"


def unsupported_type_line(dtype: DataType) -> str:
    return f"Cannot dump tensor elements: Unsupported data type {int(dtype)}"


def render_tensor_dump(tensor: ConstTensor) -> str:
    """
    Render the text body of a dump artifact.

    Returns a single diagnostic line when the element type has no printer.
    """
    printer = _ELEMENT_PRINTERS.get(tensor.dtype)
    if printer is None:
        return unsupported_type_line(tensor.dtype) + "\n"

    shape = tensor.shape
    rank = tensor.num_dimensions()

    batch = shape[0] if rank == 4 else 1
    if rank >= 3:
        height, width, channels = shape[rank - 3], shape[rank - 2], shape[rank - 1]
    elif rank == 2:
        height, width, channels = shape[0], shape[1], 1
    else:
        height, width, channels = 1, shape[0], 1

    values = tensor.elements().astype(printer.printable_type).tolist()

    lines = [
        f"# Number of elements {tensor.num_elements()}",
        f"# Dimensions {memory_layout_string(rank)}[{','.join(str(d) for d in shape)}]",
    ]

    batch_size = height * width * channels
    for b in range(batch):
        if rank >= 4:
            lines.append(f"# Batch {b}")

        # Each batch starts at its own block, not where the last one ended
        e = b * batch_size
        for c in range(channels):
            if rank >= 3:
                lines.append(f"# Channel {c}")
            for _ in range(height):
                row = []
                for _ in range(width):
                    row.append(printer.format(values[e]) + ",")
                    e += channels
                lines.append("".join(row))

            # Back to the start of the block, one channel further on
            e -= channels - 1
            e -= (height * width - 1) * channels
        lines.append("")
    lines.append("")

    return "\n".join(lines) + "\n"


def dump_tensor(
    dump_dir,
    request_name: str,
    tensor_name: str,
    tensor: ConstTensor,
) -> Optional[Path]:
    """
    Write one tensor to its dump artifact.

    The dump directory must already exist; it is never created here. When
    the file cannot be opened nothing is written and a warning is logged.

    Returns:
        Path of the written artifact, or None if it could not be written.
    """
    logger = get_logger()
    file_name = dump_file_name(dump_dir, request_name, tensor_name)

    if tensor.dtype not in _ELEMENT_PRINTERS:
        logger.warning(
            f"Unsupported data type {int(tensor.dtype)} for dumping",
            component="dump",
            path=str(file_name),
        )
    content = render_tensor_dump(tensor)

    try:
        stream = open(file_name, "w", encoding="utf-8")
    except OSError as e:
        logger.warning(
            f"Could not open file {file_name} for writing",
            component="dump",
            error=str(e),
        )
        return None

    try:
        with stream:
            stream.write(content)
    except OSError as e:
        logger.warning(
            f"An error occurred when writing to file {file_name}",
            component="dump",
            error=str(e),
        )
        return None

    logger.debug(f"Dumped tensor to {file_name}", component="dump")
    return file_name


def dump_request_tensors(
    config: DumpConfig,
    request_name: str,
    tensors: Mapping[str, ConstTensor],
) -> list[Path]:
    """
    Dump every named tensor of a request when dumping is enabled.

    Returns:
        Paths of the artifacts that were written.
    """
    if not config.enabled:
        return []

    written = []
    for tensor_name, tensor in tensors.items():
        path = dump_tensor(config.dump_dir, request_name, tensor_name, tensor)
        if path is not None:
            written.append(path)
    return written
