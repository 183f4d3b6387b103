# utils/__init__.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Utility module exports

from .logger import (
    LogLevel,
    get_logger,
    set_log_level,
    configure_logging,
)
from .table_writer import (
    format_consensus_table,
    write_consensus_csv,
    table_rows,
)

__all__ = [
    "LogLevel",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "format_consensus_table",
    "write_consensus_csv",
    "table_rows",
]
