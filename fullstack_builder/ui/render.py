from __future__ import annotations

from typing import List

from fullstack_builder.project_state.models import GeneratedProject
from fullstack_builder.ui.entry_screen import EntryScreen, EntryState
from fullstack_builder.ui.result_screen import ResultScreen, Tab

RULE = "-" * 72


def _indent(text: str, prefix: str = "    ") -> str:
    # Keeps blank lines and leading whitespace of preformatted blocks intact.
    return "\n".join(prefix + line if line else line for line in text.splitlines())


def render_entry(screen: EntryScreen) -> str:
    lines: List[str] = [
        "Full-Stack Project Builder",
        "Convert any idea into a mandatory Python Flask + HTML/JS application.",
        RULE,
        f"Idea: {screen.idea or '(empty)'}",
    ]

    if screen.state is EntryState.SUBMITTING:
        lines.append("[ Architecting... ]")
    elif screen.can_submit:
        lines.append("[ Build Full-Stack ]  (:build)")
    else:
        lines.append("[ Build Full-Stack ]  (enter an idea first)")

    if screen.state is EntryState.ERROR and screen.error:
        lines += ["", "Generation Failed", f"  {screen.error}"]

    lines += ["", "Try these academic ideas:"]
    for i, idea in enumerate(screen.presets, start=1):
        lines.append(f"  :{i}  {idea}")
    return "\n".join(lines)


def render_sidebar(screen: ResultScreen) -> str:
    project = screen.project
    lines = ["PROJECT STRUCTURE", project.folder_structure.rstrip(), "", "FILES"]
    for i, f in enumerate(project.files, start=1):
        marker = ">" if i - 1 == screen.active_file_index and screen.active_tab is Tab.CODE else " "
        lines.append(f" {marker} {i}. {f.file_name}")
    return "\n".join(lines)


def render_code_tab(screen: ResultScreen) -> str:
    active = screen.active_file
    label = "Copied" if screen.copy_feedback else "Copy Content"
    return "\n".join([f"{active.file_name}  [{label}]", RULE, active.code])


def render_guide(project: GeneratedProject) -> str:
    lines: List[str] = ["HOW TO RUN"]
    for n, step in enumerate(project.how_to_run, start=1):
        lines.append(f"  {n}. {step}")

    lines += ["", "API ARCHITECTURE", _indent(project.api_flow_explanation)]
    lines += ["", "PROJECT LOGIC", _indent(project.concept_explanation)]

    lines += ["", "VIVA QUESTIONS"]
    for q in project.viva_questions:
        lines.append(f"  Q: {q.question}")
        lines.append(f"     {q.answer}")
        lines.append("")

    lines.append("FUTURE ENHANCEMENTS")
    for item in project.future_enhancements:
        lines.append(f"  [x] {item}")
    return "\n".join(lines)


def render_result(screen: ResultScreen) -> str:
    project = screen.project
    code_tab = "[Code]" if screen.active_tab is Tab.CODE else " Code "
    guide_tab = "[Guide & Viva]" if screen.active_tab is Tab.GUIDE else " Guide & Viva "
    header = [
        f"{project.project_title}  (Full-Stack)",
        "Stack: HTML/JS + Python Flask",
        f"{code_tab} {guide_tab}",
        RULE,
    ]
    body = render_code_tab(screen) if screen.active_tab is Tab.CODE else render_guide(project)
    return "\n".join(header + [render_sidebar(screen), RULE, body])


def render_project(project: GeneratedProject) -> str:
    """Whole project in one document, for non-interactive output."""
    parts = [
        f"# {project.project_title}",
        f"Domain: {project.domain}",
        f"Tech stack: {project.tech_stack}",
        "",
        project.folder_structure.rstrip(),
        "",
        render_guide(project),
    ]
    for f in project.files:
        parts += ["", RULE, f"{f.file_name} ({f.language})", RULE, f.code]
    return "\n".join(parts)
