"""
Step state machine for the portfolio wizard.

Forward navigation validates the current step and commits its fields into the
profile; backward navigation does neither, so a user can always go back.
Add/remove operations on skills, education and projects work on any step.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from portfolio_forge.cleaner import clean_text, key_of
from portfolio_forge.compiler import Bundle
from portfolio_forge.errors import ErrorKind, StepOrderError, UnknownStepError
from portfolio_forge.proficiency import normalise_level
from portfolio_forge.schema_profile import SKILL_DEFAULTS
from portfolio_forge.steps import FIRST_STEP, LAST_STEP, STEP_SCHEMA, StepSpec, is_known_step
from portfolio_forge.store import ProfileStore
from portfolio_forge.variants import get_compiler, resolve_variant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """Outcome of a navigation or add operation."""

    step: int
    error: Optional[ErrorKind] = None
    fields: Tuple[str, ...] = field(default_factory=tuple)
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


class StepController:
    def __init__(self, store: ProfileStore | None = None, schema: Mapping[int, StepSpec] = STEP_SCHEMA):
        self.store = store if store is not None else ProfileStore()
        self.schema = schema
        self.current_step = FIRST_STEP
        self._drafts: Dict[int, Dict[str, str]] = {n: {} for n in schema}
        self._lock = threading.RLock()

    # ───────────────────────────────────────── state ──
    @property
    def profile(self) -> dict:
        return self.store.snapshot()

    @property
    def progress(self) -> int:
        return round(self.current_step / LAST_STEP * 100)

    @property
    def spec(self) -> StepSpec:
        return self.schema[self.current_step]

    def draft(self, step: int | None = None) -> Dict[str, str]:
        return dict(self._drafts[self._checked(step if step is not None else self.current_step)])

    def set_fields(self, values: Mapping[str, str], step: int | None = None) -> None:
        """Stage form values for a step (the current one by default)."""
        number = self._checked(step if step is not None else self.current_step)
        spec = self.schema[number]
        for field_id in values:
            spec.field(field_id)  # KeyError for fields the step does not own
        with self._lock:
            self._drafts[number].update(values)

    # ───────────────────────────────────────── navigation ──
    def validate_current_step(self) -> StepResult:
        spec = self.spec
        values = {f.field_id: clean_text(self._drafts[spec.number].get(f.field_id)) for f in spec.fields}

        missing = tuple(f.field_id for f in spec.fields if f.required and not values[f.field_id])
        if missing:
            return StepResult(spec.number, ErrorKind.MISSING_FIELDS, missing,
                              "Please fill in all required fields")

        invalid = tuple(
            f.field_id for f in spec.fields
            if f.validator is not None and values[f.field_id] and not f.validator(values[f.field_id])
        )
        if invalid:
            labels = ", ".join(spec.field(i).label.lower() for i in invalid)
            return StepResult(spec.number, ErrorKind.INVALID_FORMAT, invalid,
                              f"Please enter a valid {labels}")
        return StepResult(spec.number)

    def next_step(self, target: int) -> StepResult:
        self._checked(target)
        with self._lock:
            result = self.validate_current_step()
            if not result.ok:
                logger.info("Step %s blocked: %s %s", self.current_step, result.error.value, result.fields)
                return result
            self.commit()
            logger.debug("Step %s -> %s", self.current_step, target)
            self.current_step = target
            return StepResult(target)

    def previous_step(self, target: int) -> StepResult:
        self._checked(target)
        with self._lock:
            logger.debug("Step %s -> %s (back)", self.current_step, target)
            self.current_step = target
            return StepResult(target)

    def commit(self) -> None:
        """Copy the current step's draft into the profile. Safe to repeat."""
        with self._lock:
            draft = self._drafts[self.current_step]
            for f in self.spec.fields:
                value = clean_text(draft.get(f.field_id))
                self.store.set(f.target, value if value else f.empty)

    def select_variant(self, variant_id: str) -> Bundle:
        """Final transition: store the template choice and compile the site."""
        with self._lock:
            if self.current_step != LAST_STEP:
                raise StepOrderError(
                    f"Template can only be chosen on step {LAST_STEP}, current step is {self.current_step}"
                )
            variant = resolve_variant(variant_id)
            self._drafts[LAST_STEP]["template"] = variant.value
            self.commit()
            snapshot = self.store.snapshot()
        logger.info("Compiling %s portfolio", variant.value)
        return get_compiler(variant).compile(snapshot)

    def start_over(self) -> None:
        with self._lock:
            self.store.reset()
            self._drafts = {n: {} for n in self.schema}
            self.current_step = FIRST_STEP
        logger.info("Session reset")

    # ───────────────────────────────────────── collections ──
    def add_skill(self, name: str, category: str = "Other", proficiency: str = "intermediate") -> StepResult:
        name = clean_text(name)
        if not name:
            return self._rejected(ErrorKind.MISSING_FIELDS, ("name",), "Please enter a skill name")
        skill = {
            "name": name,
            "category": clean_text(category) or SKILL_DEFAULTS["category"],
            "proficiency": normalise_level(proficiency),
        }
        return self._append("skills", skill, _skill_key, "Skill already added")

    def add_education(self, institution: str, degree: str, year: str, description: str = "") -> StepResult:
        entry = {
            "institution": clean_text(institution),
            "degree": clean_text(degree),
            "year": clean_text(year),
            "description": clean_text(description),
        }
        missing = tuple(k for k in ("institution", "degree", "year") if not entry[k])
        if missing:
            return self._rejected(ErrorKind.MISSING_FIELDS, missing,
                                  "Please fill in institution, degree, and year")
        return self._append("education", entry, _education_key, "Education already added")

    def add_project(self, title: str, description: str, technologies: str,
                    github: str = "", demo: str = "", image: str = "") -> StepResult:
        project = {
            "title": clean_text(title),
            "description": clean_text(description),
            "technologies": clean_text(technologies),
            "github": clean_text(github),
            "demo": clean_text(demo),
            "image": clean_text(image),
        }
        missing = tuple(k for k in ("title", "description", "technologies") if not project[k])
        if missing:
            return self._rejected(ErrorKind.MISSING_FIELDS, missing,
                                  "Please fill in title, description, and technologies")
        return self._append("projects", project, _project_key, "Project already added")

    def remove_skill(self, name: str) -> bool:
        return self._remove("skills", _skill_key, key_of(name))

    def remove_education(self, institution: str, degree: str) -> bool:
        return self._remove("education", _education_key, key_of(institution, degree))

    def remove_project(self, title: str) -> bool:
        return self._remove("projects", _project_key, key_of(title))

    # ───────────────────────────────────────── helpers ──
    def _checked(self, step) -> int:
        if not is_known_step(step) or step not in self.schema:
            raise UnknownStepError(step)
        return step

    def _rejected(self, kind: ErrorKind, fields: Tuple[str, ...], message: str) -> StepResult:
        logger.info("Rejected on step %s: %s %s", self.current_step, kind.value, fields)
        return StepResult(self.current_step, kind, fields, message)

    def _append(self, collection: str, entry: dict, key, message: str) -> StepResult:
        with self._lock:
            items = self.store.data[collection]
            if any(key(existing) == key(entry) for existing in items):
                return self._rejected(ErrorKind.DUPLICATE, tuple(_KEY_FIELDS[collection]), message)
            items.append(entry)
            return StepResult(self.current_step)

    def _remove(self, collection: str, key, target: tuple) -> bool:
        with self._lock:
            items = self.store.data[collection]
            kept = [item for item in items if key(item) != target]
            removed = len(kept) != len(items)
            self.store.data[collection] = kept
            return removed


_KEY_FIELDS = {
    "skills": ("name",),
    "education": ("institution", "degree"),
    "projects": ("title",),
}


def _skill_key(skill: dict) -> tuple:
    return key_of(skill.get("name", ""))


def _education_key(entry: dict) -> tuple:
    return key_of(entry.get("institution", ""), entry.get("degree", ""))


def _project_key(project: dict) -> tuple:
    return key_of(project.get("title", ""))
