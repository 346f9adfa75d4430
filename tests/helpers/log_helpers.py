# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Log filtering helpers for test assertions.

Example usage:
    >>> from tests.helpers.log_helpers import filter_error_records
    >>>
    >>> errors = filter_error_records(
    ...     caplog.records,
    ...     module_name="bics_agent.diagnostics.error_classifier",
    ... )
    >>> assert len(errors) == 1
"""

import logging
from collections.abc import Sequence


def filter_error_records(
    records: Sequence[logging.LogRecord],
    module_name: str,
    min_level: int = logging.ERROR,
) -> list[logging.LogRecord]:
    """Filter log records at or above ``min_level`` from one module.

    Args:
        records: Sequence of log records (typically ``caplog.records``)
        module_name: Logger name to filter for; records are included if the
            logger name contains this string
        min_level: Minimum log level to include (default ERROR)

    Returns:
        Matching log records in emission order.
    """
    return [
        record
        for record in records
        if record.levelno >= min_level and module_name in record.name
    ]


def get_error_messages(
    records: Sequence[logging.LogRecord],
    module_name: str,
) -> list[str]:
    """Return the formatted messages of ERROR records from one module."""
    return [record.getMessage() for record in filter_error_records(records, module_name)]


__all__ = ["filter_error_records", "get_error_messages"]
