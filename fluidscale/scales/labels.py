"""
Step labels for type and space scales.

Type scales look labels up in fixed tables keyed by step index; steps a
table does not cover fall back to the numeric label. Space scales derive
their T-shirt labels arithmetically because their step count is open-ended.
"""

from __future__ import annotations

from types import MappingProxyType

from fluidscale.schemas.config import LabelStyle

TSHIRT_LABELS: MappingProxyType[int, str] = MappingProxyType(
    {
        -5: "4xs",
        -4: "3xs",
        -3: "2xs",
        -2: "xs",
        -1: "s",
        0: "m",
        1: "l",
        2: "xl",
        3: "2xl",
        4: "3xl",
        5: "4xl",
        6: "5xl",
        7: "6xl",
        8: "7xl",
        9: "8xl",
        10: "9xl",
    }
)

# Tailwind's text-* utility names.
TAILWIND_LABELS: MappingProxyType[int, str] = MappingProxyType(
    {
        -5: "4xs",
        -4: "3xs",
        -3: "2xs",
        -2: "xs",
        -1: "sm",
        0: "base",
        1: "lg",
        2: "xl",
        3: "2xl",
        4: "3xl",
        5: "4xl",
        6: "5xl",
        7: "6xl",
        8: "7xl",
        9: "8xl",
        10: "9xl",
    }
)

_TYPE_LABEL_TABLES: MappingProxyType[LabelStyle, MappingProxyType[int, str]] = MappingProxyType(
    {
        LabelStyle.TSHIRT: TSHIRT_LABELS,
        LabelStyle.TAILWIND: TAILWIND_LABELS,
    }
)


def type_step_label(step: int, style: LabelStyle | None = None) -> str:
    """Label for a type scale step; numeric when style is None or NUMERIC."""
    table = _TYPE_LABEL_TABLES.get(style)
    if table is None:
        return str(step)
    return table.get(step, str(step))


def space_step_label(step: int) -> str:
    """
    Label for a space scale step.

    0 → s, 1 → m, 2 → l, 3 → xl, 4 → 2xl, …; -1 → xs, -2 → 2xs, ….
    """
    if step == 0:
        return "s"
    if step == 1:
        return "m"
    if step == 2:
        return "l"
    if step == 3:
        return "xl"
    if step > 3:
        return f"{step - 2}xl"
    if step == -1:
        return "xs"
    return f"{abs(step)}xs"
