"""Validation models and utilities for play tools."""

from typing import Annotated, Optional

from pydantic import Field
from pydantic.functional_validators import AfterValidator


def normalize_input(value: Optional[str]) -> str:
    """Strip surrounding whitespace; inner spacing is matched literally."""
    if value is None:
        return ""
    return value.strip()


def validate_non_empty_string(value: str) -> str:
    """Validate that a string is not empty after stripping whitespace."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("Value cannot be empty or whitespace only")
    return stripped


# Play key or title fragment
PlayName = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(
        ...,
        min_length=1,
        description=(
            "Play key or a fragment of its title. Examples: 'hamlet', "
            "'Midsummer', 'Henry the Fifth'. Keys win over titles; a fragment "
            "matching several titles is rejected with the candidate list."
        ),
    ),
]

ActNumber = Annotated[
    Optional[int],
    Field(ge=1, description="Act number (1-based). Omit for the play outline."),
]

SceneNumber = Annotated[
    Optional[int],
    Field(ge=1, description="Scene number within the act (1-based). Requires act."),
]

Materialize = Annotated[
    bool,
    Field(
        description=(
            "Register an unmatched name as an external play when it is the "
            "path of an existing file"
        ),
    ),
]
