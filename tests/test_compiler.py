import copy

import pytest
from bs4 import BeautifulSoup

from portfolio_forge.compiler import Bundle, CreativeCompiler, ModernCompiler
from portfolio_forge.schema_profile import DEFAULT_VARIANT, Variant, new_profile
from portfolio_forge.variants import (
    REGISTRY,
    available_variants,
    compile_profile,
    get_compiler,
    resolve_variant,
)

ALL_VARIANTS = [v.value for v in Variant]


def soup_of(bundle: Bundle) -> BeautifulSoup:
    return BeautifulSoup(bundle.markup, "html.parser")


def projects_id(variant: str) -> str:
    return "work" if variant == "minimal" else "projects"


class TestRegistry:
    def test_total(self):
        assert set(REGISTRY) == set(Variant)
        assert len(ALL_VARIANTS) == 8

    @pytest.mark.parametrize("value,expected", [
        ("modern", Variant.MODERN),
        ("DARK-NEON", Variant.DARK_NEON),
        (" particle-nexus ", Variant.PARTICLE_NEXUS),
        (Variant.CYBERPUNK, Variant.CYBERPUNK),
        ("vaporwave", DEFAULT_VARIANT),
        ("", DEFAULT_VARIANT),
        (None, DEFAULT_VARIANT),
    ])
    def test_resolve_variant(self, value, expected):
        assert resolve_variant(value) is expected

    def test_unknown_compiles_like_modern(self, full_profile):
        assert get_compiler("vaporwave").compile(full_profile) == ModernCompiler().compile(full_profile)

    def test_compile_profile_uses_stored_variant(self, full_profile):
        full_profile["selected_variant"] = "creative"
        assert compile_profile(full_profile) == CreativeCompiler().compile(full_profile)

    def test_explicit_variant_wins(self, full_profile):
        full_profile["selected_variant"] = "creative"
        bundle = compile_profile(full_profile, variant="cyberpunk")
        assert 'class="glitch' in bundle.markup

    def test_available_variants(self):
        listed = available_variants()
        assert [v[0] for v in listed] == ALL_VARIANTS
        assert all(name and desc for _, name, desc in listed)


@pytest.mark.parametrize("variant", ALL_VARIANTS)
class TestEveryVariant:
    def test_deterministic(self, variant, full_profile):
        first = get_compiler(variant).compile(full_profile)
        second = get_compiler(variant).compile(copy.deepcopy(full_profile))
        assert first == second

    def test_does_not_touch_profile(self, variant, full_profile):
        before = copy.deepcopy(full_profile)
        get_compiler(variant).compile(full_profile)
        assert full_profile == before

    def test_links_style_and_script(self, variant, full_profile):
        markup = get_compiler(variant).compile(full_profile).markup
        assert '<link rel="stylesheet" href="style.css">' in markup
        assert '<script src="script.js"></script>' in markup
        assert markup.startswith("<!DOCTYPE html>")

    def test_sections_present_when_filled(self, variant, full_profile):
        soup = soup_of(get_compiler(variant).compile(full_profile))
        for section_id in ("skills", "education", projects_id(variant), "social-links", "contact"):
            assert soup.find(id=section_id) is not None, section_id

    def test_sections_absent_when_empty(self, variant, bare_profile):
        soup = soup_of(get_compiler(variant).compile(bare_profile))
        for section_id in ("skills", "education", projects_id(variant), "social-links"):
            assert soup.find(id=section_id) is None, section_id
            assert soup.select_one(f'a[href="#{section_id}"]') is None
        assert soup.find(id="contact") is not None

    @pytest.mark.parametrize("missing", ["skills", "education", "projects"])
    def test_each_section_gated_on_its_own(self, variant, profile_factory, missing):
        profile = profile_factory(**{missing: False})
        soup = soup_of(get_compiler(variant).compile(profile))
        target = projects_id(variant) if missing == "projects" else missing
        assert soup.find(id=target) is None
        others = {"skills", "education", projects_id(variant)} - {target}
        assert all(soup.find(id=i) is not None for i in others)

    def test_skill_percentages(self, variant, full_profile):
        soup = soup_of(get_compiler(variant).compile(full_profile))
        values = [el["data-skill"] for el in soup.select("[data-skill]")]
        assert values == ["90", "75", "50", "25", "50"]

    def test_no_skill_markup_without_skills(self, variant, bare_profile):
        bundle = get_compiler(variant).compile(bare_profile)
        assert "data-skill" not in bundle.markup

    def test_user_text_escaped(self, variant, full_profile):
        full_profile["personal"]["about"] = "<b>bold</b> & more"
        markup = get_compiler(variant, escape=True).compile(full_profile).markup
        assert "<b>bold</b>" not in markup
        assert "&lt;b&gt;bold&lt;/b&gt; &amp; more" in markup

    def test_escaping_can_be_switched_off(self, variant, full_profile):
        full_profile["personal"]["about"] = "<b>bold</b> & more"
        markup = get_compiler(variant, escape=False).compile(full_profile).markup
        assert "<b>bold</b> & more" in markup

    def test_project_image_only_when_given(self, variant, full_profile):
        markup = get_compiler(variant).compile(full_profile).markup
        assert "cover.png" not in markup
        full_profile["projects"][0]["image"] = "https://img.example.com/cover.png"
        markup = get_compiler(variant).compile(full_profile).markup
        assert "https://img.example.com/cover.png" in markup


class TestContext:
    def test_defaults_fill_blank_hero(self):
        bundle = CreativeCompiler().compile(new_profile())
        assert CreativeCompiler.defaults["about"] in bundle.markup

    def test_modern_greets_by_first_name(self, full_profile):
        markup = ModernCompiler().compile(full_profile).markup
        assert 'Hi, I\'m <span class="text-blue-600">Ada</span>' in markup

    def test_social_links_in_fixed_order(self, full_profile):
        full_profile["social"].update({"website": "https://ada.dev", "linkedin": "https://linkedin.com/in/ada"})
        ctx = ModernCompiler().context(full_profile)
        assert [link["key"] for link in ctx["social_links"]] == ["github", "linkedin", "website"]

    def test_blank_social_links_dropped(self, full_profile):
        full_profile["social"]["twitter"] = "   "
        ctx = ModernCompiler().context(full_profile)
        assert "twitter" not in [link["key"] for link in ctx["social_links"]]

    def test_project_tech_list_and_initial(self, full_profile):
        project = ModernCompiler().context(full_profile)["projects"][0]
        assert project["tech_list"] == ["Punch cards", "Mathematics"]
        assert project["initial"] == "N"

    def test_skill_category_defaults(self, full_profile):
        full_profile["skills"] = [{"name": "Go", "category": "", "proficiency": ""}]
        skill = ModernCompiler().context(full_profile)["skills"][0]
        assert skill["category"] == "Other"
        assert skill["level"] == "intermediate"
        assert skill["percent"] == 50
