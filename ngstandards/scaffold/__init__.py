"""Angular project scaffolding building blocks.

``ProjectCreator`` lives in ``ngstandards.scaffold.core``; it is not
re-exported here because it depends on the pipeline, which in turn
renders through this package.
"""

from .templates import TemplateEngine, to_title_case
from .tree import FolderSpec, ProjectTreeBuilder

__all__ = [
    "TemplateEngine",
    "FolderSpec",
    "ProjectTreeBuilder",
    "to_title_case",
]
