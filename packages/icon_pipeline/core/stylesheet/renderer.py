"""Template rendering with Jinja2."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
    select_autoescape,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

STYLESHEET_TEMPLATE = "icons.css.j2"
PREVIEW_TEMPLATE = "preview.html.j2"


class RenderError(Exception):
    """Raised when template rendering fails."""

    pass


class TemplateRenderer:
    """Renders output templates using Jinja2.

    Features:
    - Jinja2 strict mode (StrictUndefined)
    - Fail-fast on missing variables
    - HTML templates autoescaped, CSS templates verbatim
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=select_autoescape(enabled_extensions=("html.j2",), default=False),
        )
        logger.debug(f"TemplateRenderer initialized: templates_dir={self.templates_dir}")

    def render(self, template_name: str, variables: dict[str, Any]) -> str:
        """Render a named template with variables.

        Args:
            template_name: Template filename inside the templates directory
            variables: Variables for template rendering

        Returns:
            Rendered text

        Raises:
            RenderError: If rendering fails (missing template or variables, syntax errors)
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**variables)

        except TemplateNotFound as e:
            raise RenderError(f"Template not found: {e}") from e

        except UndefinedError as e:
            raise RenderError(f"Missing variable in template: {e}") from e

        except TemplateSyntaxError as e:
            raise RenderError(f"Invalid template syntax: {e}") from e
