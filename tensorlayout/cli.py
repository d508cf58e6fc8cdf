# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
tensorlayout Command Line Interface

Works on raw tensor buffers saved to disk:

    tensorlayout dump input.bin --shape 1,2,2,3 --dtype float32 \\
        --dump-dir /tmp/dumps --request req0 --name input
    tensorlayout swizzle in.bin out.bin --shape 1,2,2,3 --dtype float32 \\
        --perm 0,2,3,1
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .core import (
    ConstTensor,
    PermutationVector,
    Shape,
    TensorDescriptor,
    dtype_from_string,
)
from .config import DUMP_DIR_ENV_VAR, DumpConfig
from .errors import TensorLayoutError
from .observability import get_logger


def _int_list(text: str) -> list[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"expected comma-separated integers, got {text!r}"
        ) from e


def _add_tensor_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--shape",
        type=_int_list,
        required=True,
        help="Tensor extents, comma-separated (e.g. 1,224,224,3)",
    )
    parser.add_argument(
        "--dtype",
        default="float32",
        help="Element type: float32, uint8 (quantised) or int32 (default: float32)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tensorlayout",
        description="tensorlayout - tensor layout conversion and dump tools",
    )

    parser.add_argument(
        "--version",
        "-v",
        action="store_true",
        help="Show version information",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Write log entries as JSON lines",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Dump command
    dump_parser = subparsers.add_parser(
        "dump",
        help="Write a raw tensor file as a .dump text artifact",
    )
    dump_parser.add_argument("input", help="Raw tensor file")
    _add_tensor_arguments(dump_parser)
    dump_parser.add_argument(
        "--dump-dir",
        default=None,
        help=f"Existing directory for the artifact (default: ${DUMP_DIR_ENV_VAR})",
    )
    dump_parser.add_argument("--request", default="request", help="Request name")
    dump_parser.add_argument("--name", default="tensor", help="Tensor name")

    # Swizzle command
    swizzle_parser = subparsers.add_parser(
        "swizzle",
        help="Permute the axes of a raw 4D tensor file",
    )
    swizzle_parser.add_argument("input", help="Raw tensor file")
    swizzle_parser.add_argument("output", help="File for the permuted tensor")
    _add_tensor_arguments(swizzle_parser)
    swizzle_parser.add_argument(
        "--perm",
        type=_int_list,
        required=True,
        help="Destination axis for each source axis (e.g. 0,2,3,1)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for tensorlayout CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from tensorlayout import __version__

        print(f"tensorlayout v{__version__}")
        return 0

    try:
        config = DumpConfig.from_env()
        config.apply()
        if args.log_json:
            get_logger().set_json_format(True)

        if args.command == "dump":
            return _run_dump(args, config)

        if args.command == "swizzle":
            return _run_swizzle(args)
    except (TensorLayoutError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Default: show help
    parser.print_help()
    return 0


def _load_tensor(args) -> ConstTensor:
    info = TensorDescriptor(Shape(tuple(args.shape)), dtype_from_string(args.dtype))
    data = Path(args.input).read_bytes()
    return ConstTensor(info, data)


def _run_dump(args, config: DumpConfig) -> int:
    """Dump a raw tensor file."""
    from .dump import dump_tensor

    dump_dir = args.dump_dir or config.dump_dir
    if not dump_dir:
        print(
            f"Error: no dump directory given (use --dump-dir or {DUMP_DIR_ENV_VAR})",
            file=sys.stderr,
        )
        return 1

    tensor = _load_tensor(args)
    path = dump_tensor(dump_dir, args.request, args.name, tensor)
    if path is None:
        return 1
    print(path)
    return 0


def _run_swizzle(args) -> int:
    """Swizzle a raw tensor file."""
    from .swizzle import swizzle_to_buffer

    tensor = _load_tensor(args)
    permuted_info, data = swizzle_to_buffer(
        tensor.info, tensor.memory, PermutationVector(tuple(args.perm))
    )
    Path(args.output).write_bytes(bytes(data))
    print(",".join(str(d) for d in permuted_info.shape))
    return 0


if __name__ == "__main__":
    sys.exit(main())
