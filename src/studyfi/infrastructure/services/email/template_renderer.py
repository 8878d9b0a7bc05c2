"""Jinja2 template renderer for email bodies.

HTML bodies are rendered with autoescaping; plain text bodies are not, so
links keep their literal characters.
"""

from jinja2 import StrictUndefined, TemplateSyntaxError, UndefinedError
from jinja2.sandbox import SandboxedEnvironment

from studyfi.core.logging import get_logger

logger = get_logger(__name__)


class TemplateRenderer:
    """Sandboxed Jinja2 renderer with separate HTML and text environments."""

    def __init__(self) -> None:
        """Initialize the sandboxed environments."""
        self.html_env = SandboxedEnvironment(
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.text_env = SandboxedEnvironment(
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_string: str, variables: dict[str, str], html: bool = False) -> str:
        """Render a template string with variables.

        Args:
            template_string: Jinja2 template string.
            variables: Dictionary of variables to substitute.
            html: Escape variables for HTML output.

        Returns:
            Rendered template string.

        Raises:
            TemplateSyntaxError: If template syntax is invalid.
            UndefinedError: If required variable is missing.
        """
        env = self.html_env if html else self.text_env
        try:
            return env.from_string(template_string).render(**variables)
        except TemplateSyntaxError as e:
            logger.error("Template syntax error", error=str(e), line=e.lineno)
            raise
        except UndefinedError as e:
            logger.error("Undefined variable in template", error=str(e))
            raise
