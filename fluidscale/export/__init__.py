"""Plain-data export of generator results."""

from .serialize import OutputProfile, to_dict

__all__ = ["OutputProfile", "to_dict"]
