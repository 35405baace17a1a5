"""Type and space scale generators built on the clamp formatter."""

from .labels import TAILWIND_LABELS, TSHIRT_LABELS, space_step_label, type_step_label
from .space_scale import (
    calculate_custom_pairs,
    calculate_one_up_pairs,
    calculate_space_scale,
    calculate_space_size,
)
from .type_scale import calculate_type_scale, calculate_type_size, calculate_type_step

__all__ = [
    # labels
    "TSHIRT_LABELS",
    "TAILWIND_LABELS",
    "type_step_label",
    "space_step_label",
    # type
    "calculate_type_size",
    "calculate_type_step",
    "calculate_type_scale",
    # space
    "calculate_space_size",
    "calculate_one_up_pairs",
    "calculate_custom_pairs",
    "calculate_space_scale",
]
