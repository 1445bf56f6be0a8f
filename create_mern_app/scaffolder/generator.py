"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and materializes the MERN project tree: the
client, server and shared tiers plus the root-level files, in that order.
Every phase first creates its fixed directory list and then writes its file
list, each file's content coming from :func:`select_template`.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape

from ..utils import console, ensure_dir, print_phase_header, write_file
from .catalog import PHASES, Phase, select_template
from .models import ProjectConfig


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class FilesystemError(Exception):
    """Raised when a directory or file cannot be created.

    The run stops at the first failure; anything already written stays on
    disk.
    """

    def __init__(self, phase: str, path: Path, message: str) -> None:
        self.phase = phase
        self.path = path
        super().__init__(f"{phase} phase: cannot write {path}: {message}")


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class GenerationReport:
    """What a run created, in creation order."""

    project_root: Path
    directories: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)

    def relative_files(self) -> list[str]:
        """Written files as POSIX paths relative to the project root."""
        return [p.relative_to(self.project_root).as_posix() for p in self.files]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Materializes a project tree from a ``ProjectConfig``.

    The tree is a pure function of the config: :meth:`plan` returns it
    without touching the disk, :meth:`generate` writes it.  Existing files at
    the target paths are overwritten.
    """

    def __init__(self, config: ProjectConfig, *, verbose: bool = False) -> None:
        self.config = config
        self.verbose = verbose
        self.project_root = config.root

    # -- Public API --------------------------------------------------------

    def generate(self) -> GenerationReport:
        """Generate the complete project structure.

        Returns:
            A report listing every directory and file created.

        Raises:
            FilesystemError: On the first directory or file that cannot be
                written.
        """
        report = GenerationReport(project_root=self.project_root)
        self._ensure_dir("root", self.project_root)

        for phase in PHASES:
            self._generate_phase(phase, report)

        return report

    def iter_phase(self, phase: Phase) -> Iterator[tuple[str, str]]:
        """Yield ``(relative path, content)`` for every file *phase* writes.

        Paths are relative to the phase root.  Files gated on a disabled
        option are skipped.
        """
        options = self.config.options
        for entry in phase.files:
            if not entry.applies(options):
                continue
            yield entry.resolve_path(options), select_template(entry.kind, self.config)

    def plan(self) -> dict[str, str]:
        """Return the whole tree as ``{project-relative path: content}``.

        Keys are POSIX paths in write order.
        """
        tree: dict[str, str] = {}
        for phase in PHASES:
            for rel_path, content in self.iter_phase(phase):
                key = f"{phase.subdir}/{rel_path}" if phase.subdir else rel_path
                tree[key] = content
        return tree

    # -- Phases ------------------------------------------------------------

    def phase_root(self, phase: Phase) -> Path:
        return self.project_root / phase.subdir if phase.subdir else self.project_root

    def _generate_phase(self, phase: Phase, report: GenerationReport) -> None:
        if self.verbose:
            print_phase_header(phase.name)

        root = self.phase_root(phase)
        for directory in phase.directories:
            path = root / directory
            self._ensure_dir(phase.name, path)
            report.directories.append(path)

        for rel_path, content in self.iter_phase(phase):
            path = root / rel_path
            self._write_file(phase.name, path, content)
            report.files.append(path)
            if self.verbose:
                console.print(f"  [dim]created[/dim] {escape(path.relative_to(self.project_root).as_posix())}")

    # -- Filesystem primitives ---------------------------------------------

    def _ensure_dir(self, phase: str, path: Path) -> None:
        try:
            ensure_dir(path)
        except OSError as exc:
            raise FilesystemError(phase, path, exc.strerror or str(exc)) from exc

    def _write_file(self, phase: str, path: Path, content: str) -> None:
        try:
            write_file(path, content)
        except OSError as exc:
            raise FilesystemError(phase, path, exc.strerror or str(exc)) from exc
