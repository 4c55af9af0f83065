"""Object name helpers for matching inputs and naming synthesized outputs."""

from __future__ import annotations


def has_input_suffix(name: str | None, input_suffix: str) -> bool:
    """Return True when ``name`` is an object this service should convert."""

    if not name or not input_suffix:
        return False
    return name.endswith(input_suffix)


def derive_output_name(name: str, input_suffix: str, output_suffix: str) -> str:
    """Construct the output object name for an input object.

    Only the trailing ``input_suffix`` is replaced, so an earlier occurrence of
    the suffix text inside the name is left untouched::

        >>> derive_output_name("notes.es-US.speechify_me", ".speechify_me", ".wav")
        'notes.es-US.wav'
    """

    if not has_input_suffix(name, input_suffix):
        raise ValueError(f"{name!r} does not end with {input_suffix!r}")
    return name[: -len(input_suffix)] + output_suffix


def contains_language_tag(name: str, language_code: str) -> bool:
    """Return True when ``name`` carries ``.<language_code>.`` as a dotted tag."""

    if not name or not language_code:
        return False
    return f".{language_code}." in name


def build_gcs_path(bucket: str, name: str) -> str:
    return f"gs://{bucket}/{name}"


__all__ = [
    "build_gcs_path",
    "contains_language_tag",
    "derive_output_name",
    "has_input_suffix",
]
