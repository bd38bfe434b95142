from pathlib import Path

from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import settings
from .version import __version__

# filmshelf/core/templates.py -> filmshelf/core -> filmshelf
package_root = Path(__file__).resolve().parent.parent
templates_dir = package_root / "templates"

jinja_env = Environment(
    loader=FileSystemLoader(str(templates_dir)),
    autoescape=select_autoescape(["html"]),
)


def render(template_name: str, status_code: int = 200, **context) -> HTMLResponse:
    template = jinja_env.get_template(template_name)
    html_content = template.render(app_name=settings.APP_NAME, app_version=__version__, **context)
    return HTMLResponse(content=html_content, status_code=status_code, media_type="text/html")
