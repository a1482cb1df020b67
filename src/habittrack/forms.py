"""Habit form definitions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants.palette import DEFAULT_COLOR, DEFAULT_ICON


class HabitForm(BaseModel):
    """Form model for creating a habit.

    The store does not validate its inputs; callers run submissions through
    this form before calling ``HabitStore.create``.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(default="", description="Short label for the habit", max_length=100)
    icon: str = Field(default=DEFAULT_ICON, description="Display icon from the palette")
    target: float = Field(default=1, gt=0, description="Goal per day")
    unit: str = Field(default="", description="Unit of the target", max_length=40)
    color: str = Field(default=DEFAULT_COLOR, description="Display color from the palette")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        """Ensure the habit name is present."""

        if not value:
            raise ValueError("Please provide a habit name.")
        return value

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, value: str) -> str:
        if not value:
            raise ValueError("Please provide a unit, e.g. glasses or minutes.")
        return value

    @field_validator("icon", "color")
    @classmethod
    def validate_token(cls, value: str) -> str:
        if not value:
            raise ValueError("Pick one of the offered options.")
        return value

    def create_kwargs(self) -> dict[str, object]:
        """Return keyword arguments for ``HabitStore.create``."""

        return self.model_dump(include={"name", "icon", "target", "unit", "color"})


def validation_errors(data: dict[str, object]) -> dict[str, list[str]]:
    """Validate raw form data and return errors grouped by field (empty when valid)."""

    try:
        HabitForm.model_validate(data)
    except ValidationError as exc:
        structured: dict[str, list[str]] = {}
        for error in exc.errors(include_url=False):
            loc = error.get("loc", ())
            key = str(loc[0]) if loc else "__root__"
            structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
        return structured
    return {}


__all__ = ["HabitForm", "validation_errors"]
