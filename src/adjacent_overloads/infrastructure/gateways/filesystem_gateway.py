"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from adjacent_overloads.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def collect_files(self, path: str, suffixes: list[str]) -> list[str]:
        """Get all files ending with one of suffixes in path (recursive if directory)."""
        path_obj = Path(path)
        if path_obj.is_dir():
            candidates = (p for p in path_obj.rglob("*") if p.is_file())
        elif path_obj.is_file():
            candidates = iter([path_obj])
        else:
            return []
        return sorted(
            str(p) for p in candidates if any(p.name.endswith(s) for s in suffixes)
        )
