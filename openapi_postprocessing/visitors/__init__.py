"""Built-in visitors for document post-processing."""

from .composition import length1_all_of_to_one_of
from .nullable import move_nullable_to_one_of
from .operations import drop_deprecated, drop_methods, drop_paths, drop_tagged

__all__ = [
    "length1_all_of_to_one_of",
    "move_nullable_to_one_of",
    "drop_deprecated",
    "drop_methods",
    "drop_paths",
    "drop_tagged",
]
