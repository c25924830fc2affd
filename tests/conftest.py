from __future__ import annotations

import pytest

from portfolio_forge.controller import StepController
from portfolio_forge.schema_profile import new_profile

PERSONAL_FIELDS = {
    "fullName": "Ada Lovelace",
    "title": "Analytical Engineer",
    "email": "ada@example.com",
    "phone": "+44 20 7946 0000",
    "location": "London",
    "profileImage": "",
    "about": "I write programs for engines that do not exist yet.",
}

SOCIAL_FIELDS = {
    "social-github": "https://github.com/ada",
    "social-linkedin": "",
    "social-twitter": "",
    "social-website": "https://ada.dev",
    "social-resume": "",
}


def make_profile(skills=True, education=True, projects=True, social=True) -> dict:
    profile = new_profile()
    profile["personal"].update({
        "full_name": "Ada Lovelace",
        "title": "Analytical Engineer",
        "email": "ada@example.com",
        "location": "London",
        "about": "I write programs for engines that do not exist yet.",
    })
    if skills:
        profile["skills"] = [
            {"name": "Python", "category": "Backend", "proficiency": "expert"},
            {"name": "SQL", "category": "Data", "proficiency": "advanced"},
            {"name": "CSS", "category": "Frontend", "proficiency": "intermediate"},
            {"name": "Rust", "category": "Systems", "proficiency": "beginner"},
            {"name": "Whistling", "category": "Other", "proficiency": "guru"},
        ]
    if education:
        profile["education"] = [
            {"institution": "University of London", "degree": "BSc Mathematics",
             "year": "1835", "description": "Studied with De Morgan."},
        ]
    if projects:
        profile["projects"] = [
            {"title": "Note G", "description": "Bernoulli numbers on the Analytical Engine.",
             "technologies": "Punch cards, Mathematics", "github": "https://github.com/ada/note-g",
             "demo": "", "image": ""},
        ]
    if social:
        profile["social"]["github"] = "https://github.com/ada"
    return profile


@pytest.fixture
def controller():
    return StepController()


@pytest.fixture
def full_profile():
    return make_profile()


@pytest.fixture
def bare_profile():
    return make_profile(skills=False, education=False, projects=False, social=False)


@pytest.fixture
def last_step_controller(controller):
    """Controller walked through every step with valid input, sitting on step 6."""
    controller.set_fields(PERSONAL_FIELDS)
    assert controller.next_step(2).ok
    controller.add_skill("Python", "Backend", "expert")
    assert controller.next_step(3).ok
    controller.add_education("University of London", "BSc Mathematics", "1835")
    assert controller.next_step(4).ok
    controller.add_project("Note G", "Bernoulli numbers.", "Punch cards")
    assert controller.next_step(5).ok
    controller.set_fields(SOCIAL_FIELDS)
    assert controller.next_step(6).ok
    return controller


@pytest.fixture
def profile_factory():
    return make_profile
