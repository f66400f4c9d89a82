from __future__ import annotations

from pathlib import Path

from ..domain.ports import DirFinder


class LocalDirFinder(DirFinder):
    """Resolve output folders below a data root, creating them on demand."""

    def __init__(self, root_dir: str, export_subdir: str = "exports") -> None:
        self.root = Path(root_dir)
        self.export_subdir = export_subdir

    def get_csv_output_dir(self) -> Path:
        path = (self.root / self.export_subdir).resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path


__all__ = ["LocalDirFinder"]
