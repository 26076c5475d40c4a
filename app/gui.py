import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="AI Résumé Builder")

import logging

import streamlit.components.v1 as components

import config
import editor
from extractor import ACCEPTED_TYPES
from preview import print_page, resume_to_html
from schema_resume import SECTIONS, entry_fields
from session import ResumeSession

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Available models for each provider
MODEL_OPTIONS = {
    "openai": [
        "gpt-4o-mini",
        "gpt-4o",
        "gpt-4.1-mini",
    ],
    "ollama": [
        "llama3.1:8b",
        "qwen2.5:7b",
        "mistral:7b",
    ]
}

SECTION_TITLES = {"education": "🎓 Education", "experience": "💼 Experience", "projects": "🛠️ Projects"}
PERSONAL_LABELS = {
    "name": "Full Name",
    "email": "Email",
    "phone": "Phone",
    "linkedin": "LinkedIn",
    "github": "GitHub",
}
SKILL_LABELS = {
    "languages": "Skills: Languages",
    "frameworks": "Skills: Frameworks",
    "tools": "Skills: Developer Tools",
    "libraries": "Skills: Libraries",
}

# Initialize session state variables
if "builder" not in st.session_state:
    st.session_state.builder = ResumeSession()
if "selected_provider" not in st.session_state:
    st.session_state.selected_provider = config.LLM_PROVIDER if config.LLM_PROVIDER in MODEL_OPTIONS else "openai"
if "selected_model" not in st.session_state:
    st.session_state.selected_model = config.get_model_for_provider(st.session_state.selected_provider)
# Bumped on structural edits so positional widget keys never show stale values
if "form_rev" not in st.session_state:
    st.session_state.form_rev = 0

builder: ResumeSession = st.session_state.builder


def _key(*parts) -> str:
    return "_".join(str(p) for p in (st.session_state.form_rev, *parts))


def structural_edit(operation, *args):
    builder.edit(operation, *args)
    st.session_state.form_rev += 1


# --- Widget callbacks (run before the next script pass) ---
def on_personal_change(field):
    builder.set_personal(field, st.session_state[_key("personal", field)])


def on_skill_change(field):
    builder.set_skill(field, st.session_state[_key("skills", field)])


def on_entry_change(section, index, field):
    value = st.session_state[_key(section, index, field)]
    builder.edit(editor.update_entry, section, index, {field: value})


def on_bullet_change(section, index, bullet_index):
    text = st.session_state[_key(section, index, "bullet", bullet_index)]
    builder.edit(editor.update_bullet, section, index, bullet_index, text)


# --- SIDEBAR: LLM PROVIDER AND MODEL SELECTION ---
with st.sidebar:
    st.markdown("### 🤖 AI Model Configuration")
    provider = st.selectbox(
        "Provider",
        options=list(MODEL_OPTIONS.keys()),
        index=list(MODEL_OPTIONS.keys()).index(st.session_state.selected_provider),
        format_func=lambda p: {"openai": "OpenAI", "ollama": "Ollama"}[p],
        help="Choose between OpenAI API or local Ollama models",
    )
    if provider != st.session_state.selected_provider:
        st.session_state.selected_provider = provider
        # Reset to first model of new provider
        st.session_state.selected_model = MODEL_OPTIONS[provider][0]

    options = MODEL_OPTIONS[provider]
    model = st.selectbox(
        "Model",
        options=options,
        index=options.index(st.session_state.selected_model) if st.session_state.selected_model in options else 0,
        help="Model used to extract structured résumé data",
    )
    st.session_state.selected_model = model

col_input, col_preview = st.columns([2, 3])

with col_input:
    st.title("📄 AI Résumé Builder")
    st.markdown("Transform any text into a professional resume.")

    # --- SOURCE DOCUMENT ---
    uploaded = st.file_uploader(
        "Upload Doc",
        type=ACCEPTED_TYPES,
        key=f"uploader_{builder.uploader_generation}",
        disabled=builder.busy,
        help="Supports .txt, .md, .docx, and .pdf files",
    )
    if uploaded is not None:
        with st.spinner("Reading file..."):
            if builder.load_file(uploaded.name, uploaded.getvalue()):
                st.session_state.source_text = builder.input_text
        # New uploader key so the same file can be picked again
        st.rerun()

    if "source_text" not in st.session_state:
        st.session_state.source_text = builder.input_text
    st.text_area(
        "Source Document",
        key="source_text",
        height=220,
        placeholder="Paste your Bio / LinkedIn / Old CV or upload a document...",
    )
    builder.input_text = st.session_state.source_text

    if st.button("✨ Generate Resume", type="primary", disabled=not builder.can_generate,
                 use_container_width=True):
        with st.spinner("🔍 Analyzing your text with AI..."):
            ok = builder.generate(
                provider=st.session_state.selected_provider,
                model=st.session_state.selected_model,
            )
        if ok:
            st.session_state.form_rev += 1
            st.rerun()

    if builder.error:
        st.error(builder.error)

    st.divider()

    # --- QUICK EDIT ---
    st.subheader("✏️ Quick Edit")
    resume = builder.resume

    for field, label in PERSONAL_LABELS.items():
        st.text_input(
            label,
            value=getattr(resume.personal_info, field),
            key=_key("personal", field),
            on_change=on_personal_change,
            args=(field,),
        )

    for field, label in SKILL_LABELS.items():
        st.text_area(
            label,
            value=getattr(resume.skills, field),
            key=_key("skills", field),
            height=68,
            on_change=on_skill_change,
            args=(field,),
        )

    for section in SECTIONS:
        st.markdown(f"#### {SECTION_TITLES[section]}")
        for i, entry in enumerate(getattr(resume, section)):
            first = entry_fields(section)[0]
            title = getattr(entry, first) or f"(untitled {i + 1})"
            with st.expander(title, expanded=False):
                for field in entry_fields(section):
                    st.text_input(
                        field.title(),
                        value=getattr(entry, field),
                        key=_key(section, i, field),
                        on_change=on_entry_change,
                        args=(section, i, field),
                    )
                for j, bullet in enumerate(entry.description):
                    col_text, col_remove = st.columns([6, 1])
                    with col_text:
                        st.text_input(
                            f"Bullet {j + 1}",
                            value=bullet,
                            key=_key(section, i, "bullet", j),
                            on_change=on_bullet_change,
                            args=(section, i, j),
                        )
                    with col_remove:
                        st.button("✖", key=_key(section, i, "rm_bullet", j),
                                  on_click=structural_edit,
                                  args=(editor.remove_bullet, section, i, j),
                                  help="Remove bullet")
                col_add, col_del = st.columns(2)
                with col_add:
                    st.button("➕ Bullet", key=_key(section, i, "add_bullet"),
                              on_click=structural_edit,
                              args=(editor.add_bullet, section, i),
                              use_container_width=True)
                with col_del:
                    st.button("🗑️ Remove entry", key=_key(section, i, "rm_entry"),
                              on_click=structural_edit,
                              args=(editor.remove_entry, section, i),
                              use_container_width=True)
        st.button(f"➕ Add {section.rstrip('s')}", key=_key(section, "add"),
                  on_click=structural_edit, args=(editor.add_entry, section))

# --- PREVIEW ---
with col_preview:
    html = resume_to_html(builder.resume, inline=True)
    components.html(print_page(html), height=1150, scrolling=True)

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            label="📥 Download HTML",
            data=html,
            file_name="resume.html",
            mime="text/html",
            use_container_width=True,
        )
    with col2:
        st.download_button(
            label="🧾 Download JSON",
            data=builder.resume.to_json(),
            file_name="resume.json",
            mime="application/json",
            use_container_width=True,
        )
