"""Template tree rendering."""

from .tree import create_application, list_project_types, render_tree
from .walker import TemplateSourceError

__all__ = [
    "TemplateSourceError",
    "create_application",
    "list_project_types",
    "render_tree",
]
