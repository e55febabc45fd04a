"""site_mirror.report: Сохранение отчёта об обходе в JSON и HTML."""

from .html_report import render_html
from .json_report import render_json

__all__ = ["render_json", "render_html"]
