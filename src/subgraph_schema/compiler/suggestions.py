# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Suggestions for commonly misspelled or foreign scalar type names.

The table is ordered and the first matching entry wins. Several regex entries
overlap (``uint32`` would match a generic width pattern), so the sized rules
are listed before the generic ones and the order must not change.
"""

from __future__ import annotations

import re

# ###############
# Public Interface
# ###############

TYPE_SUGGESTIONS: list[tuple[str | re.Pattern[str], str]] = [
    ("Address", "Bytes"),
    ("address", "Bytes"),
    ("bytes", "Bytes"),
    ("string", "String"),
    ("bool", "Boolean"),
    ("boolean", "Boolean"),
    ("Bool", "Boolean"),
    ("float", "BigDecimal"),
    ("Float", "BigDecimal"),
    ("int", "Int"),
    ("uint", "BigInt"),
    (re.compile(r"^(u|uint)(8|16|24)$"), "Int"),
    (re.compile(r"^(i|int)(8|16|24|32)$"), "Int"),
    (re.compile(r"^(u|uint)32$"), "BigInt"),
    (
        re.compile(
            r"^(u|uint|i|int)(40|48|56|64|72|80|88|96|104|112|120|128|136|144|152|160|168"
            r"|176|184|192|200|208|216|224|232|240|248|256)$"
        ),
        "BigInt",
    ),
]


def suggest_type(name: str) -> str | None:
    """Return the built-in scalar a mistyped type name most likely means.

    Args:
        name: The type name as written in the schema.

    Returns:
        The suggested scalar name, or None if no table entry matches.
    """
    for pattern, suggestion in TYPE_SUGGESTIONS:
        if isinstance(pattern, str):
            if pattern == name:
                return suggestion
        elif pattern.search(name):
            return suggestion
    return None
