# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Network graph export.

Writes an optimized network to ``<dump_dir>/networkgraph_<HEX>.dot``
where HEX is the uppercase hexadecimal identity of the model the network
was built from. Serialization itself is delegated to the network.
"""

from pathlib import Path
from typing import Optional, Protocol, TextIO

from .observability import get_logger


class DotSerializable(Protocol):
    """A network that can write itself in Graphviz DOT format."""

    def serialize_to_dot(self, stream: TextIO) -> bool:
        """Write the graph to ``stream``; return False on failure."""
        ...


def graph_file_name(dump_dir, model: object) -> Path:
    return Path(dump_dir) / f"networkgraph_{id(model):X}.dot"


def export_network_graph_to_dot_file(
    network: DotSerializable,
    dump_dir,
    model: object,
) -> Optional[Path]:
    """
    Export ``network`` to a DOT file in an existing directory.

    An empty ``dump_dir`` disables the export. Failures are logged as
    warnings and never raised.

    Returns:
        Path of the DOT file, or None if nothing was written.
    """
    if not dump_dir:
        return None

    logger = get_logger()
    file_name = graph_file_name(dump_dir, model)
    logger.debug(
        f"Exporting the optimized network graph to file: {file_name}",
        component="graph_export",
    )

    try:
        stream = open(file_name, "w", encoding="utf-8")
    except OSError as e:
        logger.warning(
            f"Could not open file {file_name} for writing",
            component="graph_export",
            error=str(e),
        )
        return None

    # Failures raised by the serializer are absorbed like I/O errors
    try:
        with stream:
            ok = network.serialize_to_dot(stream)
    except Exception as e:
        logger.warning(
            f"An error occurred when writing to file {file_name}",
            component="graph_export",
            error=str(e),
        )
        _remove_partial(file_name)
        return None

    if not ok:
        logger.warning(
            f"An error occurred when writing to file {file_name}",
            component="graph_export",
        )
        _remove_partial(file_name)
        return None
    return file_name


def _remove_partial(file_name: Path) -> None:
    try:
        file_name.unlink()
    except OSError as e:
        get_logger().debug(
            f"Could not remove partial file {file_name}",
            component="graph_export",
            error=str(e),
        )
