"""Modular pieces for the OpenAPI document builder.

Constants, the schema dialect and small helpers live here so the registry,
resolver and assembler modules stay readable.
"""

__all__ = [
    "constants",
    "dialect",
    "helpers",
]
