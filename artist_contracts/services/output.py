"""HTML and plain-text output for rendered contracts"""

from typing import Iterable, Optional, Union

from jinja2 import Environment, PackageLoader

from artist_contracts.models.template import RenderedSection

SectionLike = Union[RenderedSection, dict]

HTML_TEMPLATE = "contract.html"

TEXT_DIVIDER = "=" * 60

_env: Optional[Environment] = None


def get_environment() -> Environment:
    """Lazy-loaded Jinja2 environment for the package templates"""
    global _env
    if _env is None:
        _env = Environment(
            loader=PackageLoader("artist_contracts", "templates"),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
    return _env


def _as_pair(section: SectionLike) -> tuple[str, str]:
    if isinstance(section, dict):
        return section["heading"], section["content"]
    return section.heading, section.content


def split_paragraphs(text: str) -> list[list[str]]:
    """Blank lines split paragraphs; each paragraph is a list of lines"""
    return [block.strip("\n").split("\n") for block in text.split("\n\n")]


def generate_html(
    title: str,
    sections: Iterable[SectionLike],
    include_styles: bool = True,
) -> str:
    """Build a standalone HTML document.

    All text goes through the template's autoescaping. With
    ``include_styles=False`` only the semantic markup is emitted, for
    embedding in another page.
    """
    context_sections = []
    for section in sections:
        heading, content = _as_pair(section)
        context_sections.append({"heading": heading, "paragraphs": split_paragraphs(content)})

    template = get_environment().get_template(HTML_TEMPLATE)
    return template.render(
        title=title,
        sections=context_sections,
        include_styles=include_styles,
    )


def generate_text(title: str, sections: Iterable[SectionLike]) -> str:
    """Plain-text rendering: uppercased title, underlined headings, no markup"""
    parts = []
    for section in sections:
        heading, content = _as_pair(section)
        parts.append(f"{heading}\n{'-' * len(heading)}\n\n{content}")

    return f"{TEXT_DIVIDER}\n{title.upper()}\n{TEXT_DIVIDER}\n\n" + "\n\n".join(parts)
