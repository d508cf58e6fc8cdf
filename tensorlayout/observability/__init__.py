# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
tensorlayout Observability Module

Structured logging shared by the swizzle engine, the dump serializer
and the graph exporter.
"""

from .logger import (
    VERBOSITY_ENV_VAR,
    Verbosity,
    LogEntry,
    LayoutLogger,
    get_logger,
    set_verbosity,
)

__all__ = [
    "VERBOSITY_ENV_VAR",
    "Verbosity",
    "LogEntry",
    "LayoutLogger",
    "get_logger",
    "set_verbosity",
]
