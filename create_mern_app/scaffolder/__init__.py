"""create-mern-app scaffolder -- materializes the project tree.

Quick usage::

    from create_mern_app.scaffolder import GenerateOptions, ProjectConfig, ProjectGenerator

    config = ProjectConfig(
        name="blog",
        options=GenerateOptions(typescript=True, redux=True),
    )
    report = ProjectGenerator(config).generate()
"""

from .catalog import PHASES, FileEntry, Phase, UnknownTemplateError, select_template
from .generator import FilesystemError, GenerationReport, ProjectGenerator
from .models import GenerateOptions, ProjectConfig
from .templates import TemplateRenderer

__all__ = [
    "PHASES",
    "FileEntry",
    "FilesystemError",
    "GenerateOptions",
    "GenerationReport",
    "Phase",
    "ProjectConfig",
    "ProjectGenerator",
    "TemplateRenderer",
    "UnknownTemplateError",
    "select_template",
]
