"""Render the instruction snippet that asks an LLM for unfence-friendly output."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .extractor import DEFAULT_FENCE

TEMPLATES_DIR = Path(__file__).with_name("templates")
INSTRUCTIONS_TEMPLATE = "instructions.j2"


def _create_env(templates_dir: Path | None = None) -> Environment:
    directories = []
    if templates_dir:
        directories.append(str(templates_dir))
    directories.append(str(TEMPLATES_DIR))
    loader = FileSystemLoader(directories)
    return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


def render_instructions(
    fence: str = DEFAULT_FENCE,
    *,
    language: str = "ts",
    example_path: str = "src/types.ts",
    example_body: str = "export type EditorMode = 'edit' | 'preview' | 'mindmap';",
    templates_dir: Path | None = None,
) -> str:
    """Return the prompt suffix describing the `file:` + fenced block format."""
    template = _create_env(templates_dir).get_template(INSTRUCTIONS_TEMPLATE)
    return template.render(
        fence=fence,
        language=language,
        example_path=example_path,
        example_body=example_body,
    ).rstrip() + "\n"


__all__ = ["render_instructions"]
