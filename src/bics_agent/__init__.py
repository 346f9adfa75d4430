# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""BICS Agent - capability adapters for the BICS telecom REST APIs.

Each backend API is exposed as a set of discoverable, callable operations
with uniform input validation, request marshalling, response handling and
error classification.

Key Components:
    - ResourceAdapter: generic five-step executor driven by static tables
    - resources: binding tables for Connect, MyNumbers (and its extended
      APIs) and SMS
    - classify_fault: turns every failure into one diagnosis string and one
      structured log record
    - OperationRegistry: explicit lookup table built at startup
    - HttpTransport: httpx-based transport shared by all adapters
"""

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
