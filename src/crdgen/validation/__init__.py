# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for type tables (dangling edges, arity, cycles)."""

from crdgen.validation.checks import CheckError, CheckResult, CheckWarning, check_type_table

__all__ = [
    "CheckError",
    "CheckResult",
    "CheckWarning",
    "check_type_table",
]
