"""
SiteMirror package initializer.
Defines package version and exposes CLI.
"""
__version__ = "0.1.0"

# site_mirror.cli остаётся модулем, группа команд доступна как main_cli
from site_mirror.cli import cli as main_cli  # noqa: E402

__all__ = ["__version__", "main_cli"]
