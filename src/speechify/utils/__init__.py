"""Utility helpers for speechify services."""

from .filenames import (
    build_gcs_path,
    contains_language_tag,
    derive_output_name,
    has_input_suffix,
)

__all__ = [
    "build_gcs_path",
    "contains_language_tag",
    "derive_output_name",
    "has_input_suffix",
]
