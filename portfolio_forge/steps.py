"""
Static table of the six wizard steps: which profile fields each step owns,
which of them are required and how they are validated.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple

EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

FIRST_STEP = 1
LAST_STEP = 6


def is_valid_email(value: str) -> bool:
    return bool(EMAIL.match(value or ""))


@dataclass(frozen=True)
class FieldSpec:
    field_id: str
    target: Tuple[str, ...]
    label: str
    required: bool = False
    validator: Optional[Callable[[str], bool]] = None
    empty: Any = ""


@dataclass(frozen=True)
class StepSpec:
    number: int
    title: str
    fields: Tuple[FieldSpec, ...] = ()

    @property
    def field_ids(self) -> Tuple[str, ...]:
        return tuple(f.field_id for f in self.fields)

    def field(self, field_id: str) -> FieldSpec:
        for f in self.fields:
            if f.field_id == field_id:
                return f
        raise KeyError(f"Step {self.number} has no field {field_id!r}")


def _personal(field_id, key, label, required=False, validator=None):
    return FieldSpec(field_id, ("personal", key), label, required, validator)


def _social(key, label):
    return FieldSpec(f"social-{key}", ("social", key), label)


STEP_SCHEMA: Mapping[int, StepSpec] = MappingProxyType({
    1: StepSpec(1, "Personal Information", (
        _personal("fullName", "full_name", "Full name", required=True),
        _personal("title", "title", "Professional title", required=True),
        _personal("email", "email", "Email", required=True, validator=is_valid_email),
        _personal("phone", "phone", "Phone"),
        _personal("location", "location", "Location"),
        _personal("profileImage", "profile_image", "Profile image URL"),
        _personal("about", "about", "About you", required=True),
    )),
    2: StepSpec(2, "Skills"),
    3: StepSpec(3, "Education"),
    4: StepSpec(4, "Projects"),
    5: StepSpec(5, "Social Links", (
        _social("github", "GitHub"),
        _social("linkedin", "LinkedIn"),
        _social("twitter", "Twitter"),
        _social("website", "Website"),
        _social("resume", "Resume"),
    )),
    6: StepSpec(6, "Choose Template", (
        FieldSpec("template", ("selected_variant",), "Template", empty=None),
    )),
})


def is_known_step(step: Any) -> bool:
    return isinstance(step, int) and not isinstance(step, bool) and step in STEP_SCHEMA
