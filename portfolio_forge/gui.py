import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="Portfolio Forge")

import atexit
import logging

from portfolio_forge import config
from portfolio_forge.controller import StepController
from portfolio_forge.packaging import archive_name, write_bundle, zip_bundle
from portfolio_forge.preview import inline_bundle
from portfolio_forge.proficiency import DEFAULT_LEVEL, LEVELS
from portfolio_forge.steps import FIRST_STEP, LAST_STEP
from portfolio_forge.temp_server import cleanup_temp_server, serve_html_temporarily
from portfolio_forge.validator import validate_bundle
from portfolio_forge.variants import available_variants

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("portfolio_forge.gui")

# Register cleanup function to run when Streamlit exits
atexit.register(cleanup_temp_server)

# Initialize session state variables
if "controller" not in st.session_state:
    st.session_state.controller = StepController()
if "bundle" not in st.session_state:
    st.session_state.bundle = None
if "flash" not in st.session_state:
    st.session_state.flash = None
if "temp_server_url" not in st.session_state:
    st.session_state.temp_server_url = None

ctl: StepController = st.session_state.controller


def flash(result):
    """Keep a failed StepResult around for the next render."""
    st.session_state.flash = None if result.ok else result.message


def show_flash():
    if st.session_state.flash:
        st.error(st.session_state.flash)
        st.session_state.flash = None


def field_value(spec):
    staged = ctl.draft().get(spec.field_id)
    if staged is not None:
        return staged
    return ctl.store.get(spec.target) or ""


def nav_buttons(values=None):
    col_back, col_next = st.columns(2)
    step = ctl.current_step
    with col_back:
        if step > FIRST_STEP and st.button("← Back", use_container_width=True, key=f"back-{step}"):
            if values:
                ctl.set_fields(values)
            flash(ctl.previous_step(step - 1))
            st.rerun()
    with col_next:
        if step < LAST_STEP and st.button("Next →", type="primary", use_container_width=True, key=f"next-{step}"):
            if values:
                ctl.set_fields(values)
            flash(ctl.next_step(step + 1))
            st.rerun()


# ───────────────────────────────────────── steps ──
def render_fields():
    values = {}
    for spec in ctl.spec.fields:
        label = f"{spec.label} *" if spec.required else spec.label
        key = f"field-{spec.field_id}"
        if spec.field_id == "about":
            values[spec.field_id] = st.text_area(label, value=field_value(spec), key=key, height=120)
        else:
            values[spec.field_id] = st.text_input(label, value=field_value(spec), key=key)
    return values


def render_skills():
    with st.form("add-skill", clear_on_submit=True):
        col_name, col_cat, col_level = st.columns([2, 2, 1])
        name = col_name.text_input("Skill name *")
        category = col_cat.text_input("Category", placeholder="e.g. Frontend, Backend")
        level = col_level.selectbox("Proficiency", LEVELS, index=LEVELS.index(DEFAULT_LEVEL))
        if st.form_submit_button("Add skill"):
            flash(ctl.add_skill(name, category, level))
            st.rerun()

    for i, skill in enumerate(ctl.profile["skills"]):
        col_text, col_rm = st.columns([5, 1])
        col_text.markdown(f"**{skill['name']}** · {skill['category']} · {skill['proficiency']}")
        if col_rm.button("Remove", key=f"rm-skill-{i}"):
            ctl.remove_skill(skill["name"])
            st.rerun()


def render_education():
    with st.form("add-education", clear_on_submit=True):
        col_inst, col_deg, col_year = st.columns([2, 2, 1])
        institution = col_inst.text_input("Institution *")
        degree = col_deg.text_input("Degree *")
        year = col_year.text_input("Year *")
        description = st.text_area("Description", height=80)
        if st.form_submit_button("Add education"):
            flash(ctl.add_education(institution, degree, year, description))
            st.rerun()

    for i, edu in enumerate(ctl.profile["education"]):
        col_text, col_rm = st.columns([5, 1])
        col_text.markdown(f"**{edu['degree']}**, {edu['institution']} ({edu['year']})")
        if col_rm.button("Remove", key=f"rm-edu-{i}"):
            ctl.remove_education(edu["institution"], edu["degree"])
            st.rerun()


def render_projects():
    with st.form("add-project", clear_on_submit=True):
        title = st.text_input("Project title *")
        description = st.text_area("Description *", height=80)
        technologies = st.text_input("Technologies *", placeholder="React, Node.js, MongoDB")
        col_gh, col_demo, col_img = st.columns(3)
        github = col_gh.text_input("GitHub URL")
        demo = col_demo.text_input("Live demo URL")
        image = col_img.text_input("Image URL")
        if st.form_submit_button("Add project"):
            flash(ctl.add_project(title, description, technologies, github, demo, image))
            st.rerun()

    for i, project in enumerate(ctl.profile["projects"]):
        col_text, col_rm = st.columns([5, 1])
        col_text.markdown(f"**{project['title']}** · {project['technologies']}")
        if col_rm.button("Remove", key=f"rm-project-{i}"):
            ctl.remove_project(project["title"])
            st.rerun()


def render_template_picker():
    variants = available_variants()
    labels = {vid: f"{name} – {desc}" for vid, name, desc in variants}
    current = ctl.profile["selected_variant"] or variants[0][0]
    chosen = st.radio(
        "Template",
        options=list(labels),
        index=list(labels).index(current),
        format_func=labels.get,
    )
    if st.button("✨ Generate Portfolio", type="primary", use_container_width=True):
        bundle = ctl.select_variant(chosen)
        for problem in validate_bundle(bundle):
            logger.debug(problem)
        st.session_state.bundle = bundle
        try:
            st.session_state.temp_server_url = serve_html_temporarily(inline_bundle(bundle))
        except OSError as e:
            st.warning(f"Could not start preview server: {e}")
        st.rerun()


# ───────────────────────────────────────── result ──
def render_result(bundle):
    profile = ctl.profile
    st.subheader("🎯 Your Portfolio")

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        if st.session_state.temp_server_url:
            st.link_button("🌐 Open New Tab", st.session_state.temp_server_url, use_container_width=True)
        else:
            st.button("🌐 New Tab", disabled=True, use_container_width=True)
    with col2:
        st.download_button(
            label="📥 Download ZIP",
            data=zip_bundle(bundle, profile),
            file_name=archive_name(profile, bundle),
            mime="application/zip",
            use_container_width=True,
        )
    with col3:
        if st.button("💾 Save to folder", use_container_width=True):
            try:
                paths = write_bundle(bundle, profile)
                st.success(f"Saved {len(paths)} files to {paths[0].parent}")
            except OSError as e:
                st.error(f"Could not write files: {e}")
    with col4:
        if st.button("🔄 Start Over", use_container_width=True):
            ctl.start_over()
            st.session_state.bundle = None
            for key in [k for k in st.session_state if str(k).startswith("field-")]:
                del st.session_state[key]
            st.rerun()

    tab_preview, tab_html, tab_css, tab_js = st.tabs(["Preview", "index.html", "style.css", "script.js"])
    with tab_preview:
        st.components.v1.html(inline_bundle(bundle), height=700, scrolling=True)
    with tab_html:
        st.code(bundle.markup, language="html")
    with tab_css:
        st.code(bundle.style, language="css")
    with tab_js:
        st.code(bundle.script, language="javascript")


# ───────────────────────────────────────── page ──
st.title("🧑‍💻 Portfolio Forge")
st.markdown("Build a personal portfolio site in six steps")

st.progress(ctl.progress, text=f"Step {ctl.current_step} of {LAST_STEP} · {ctl.spec.title}")
show_flash()

if st.session_state.bundle is not None:
    render_result(st.session_state.bundle)
else:
    st.header(ctl.spec.title)
    values = None
    if ctl.current_step == 2:
        render_skills()
    elif ctl.current_step == 3:
        render_education()
    elif ctl.current_step == 4:
        render_projects()
    elif ctl.current_step == LAST_STEP:
        render_template_picker()
    else:
        values = render_fields()
    st.divider()
    nav_buttons(values)
