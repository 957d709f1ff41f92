#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/utils/styles.py
"""Inline style serialization."""

from __future__ import annotations

from typing import Any, Mapping, Optional


def style_value(declarations: Mapping[str, Any]) -> Optional[str]:
    """Serialize CSS-like declarations into a ``style`` attribute value.

    Parameters
    ----------
    declarations : Mapping[str, Any]
        Property names (``_`` separated) to values. A value is either a plain
        value, ``None`` (skipped) or a ``(value, unit)`` pair whose unit is
        appended unless the value already ends with it. Pairs with a ``None``
        value are skipped.

    Returns
    -------
    str or None
        ``"prop: value; prop2: value2;"``, or None if no declaration survives

    Examples
    --------
        >>> style_value({"text_align": None, "float": "left"})
        'float: left;'
        >>> style_value({"width": (90, "%")})
        'width: 90%;'
        >>> style_value({"width": (None, "px")}) is None
        True

    """
    decls: list[str] = []

    for prop, value in declarations.items():
        if value is None:
            continue
        if isinstance(value, (tuple, list)):
            value, unit = value
            if value is None:
                continue
            value = str(value)
            if unit and not value.endswith(unit):
                value += unit
        decls.append(f"{prop.replace('_', '-')}: {value}")

    if not decls:
        return None
    return "; ".join(decls) + ";"
