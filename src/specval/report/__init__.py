"""Render validation results as JSON, YAML, HTML or Markdown reports.

HTML and Markdown are rendered from the Jinja2 templates in
``report/templates/``; JSON and YAML are serialised directly from the same
report dictionary.
"""

from specval.report.reporter import build_report, generate_report, save_report

__all__ = ["build_report", "generate_report", "save_report"]
