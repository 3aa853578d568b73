"""Jinja2 template loader for blog pages."""

from importlib.resources import files
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, Template, select_autoescape

from quire.site import filters


class TemplateLoader:
    """Loads and renders the HTML page templates.

    User templates in ``override_dir`` take precedence over the packaged ones,
    so a site can replace a single page (e.g. ``post.html``) and inherit the rest.
    """

    def __init__(self, override_dir: Path | None = None, globals_: dict[str, Any] | None = None) -> None:
        # Works in both development and packaged deployments
        self.template_dir = Path(str(files("quire.site").joinpath("templates")))
        self.override_dir = override_dir

        search_path = [FileSystemLoader(self.template_dir)]
        if override_dir is not None:
            search_path.insert(0, FileSystemLoader(override_dir))

        self.env = Environment(
            loader=ChoiceLoader(search_path),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals.update(globals_ or {})
        self._register_filters()

    def _register_filters(self) -> None:
        self.env.filters["format_date"] = filters.format_date
        self.env.filters["isoformat"] = filters.isoformat
        self.env.filters["reading_time"] = filters.reading_time

    def load_template(self, template_name: str) -> Template:
        """Load a template by name.

        Raises:
            TemplateNotFound: If template does not exist

        """
        return self.env.get_template(template_name)

    def render_template(self, template_name: str, **context: Any) -> str:
        """Load and render a template with context."""
        return self.load_template(template_name).render(**context)
