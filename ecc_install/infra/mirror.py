"""
Directory mirroring infrastructure for ecc-install.

A mirror copies every file that is missing at the destination or newer
in the source, keeps permissions and timestamps, and never deletes
anything at the destination. Each adapter reports which files it
created and which it overwrote.

Both adapters use the same rule: a file is copied when it is absent at
the destination or its source mtime is strictly greater. Equal mtimes
never trigger a copy, whatever the sizes.

Adapters:
- RsyncMirror: hands the selected files to ``rsync -a --files-from``
- CopyMirror: the same semantics with shutil, for hosts without rsync
"""

import logging
import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Iterator, List, Optional, Tuple

from ..exit_codes import ConfigError, MirrorError

logger = logging.getLogger(__name__)


class ChangeKind(Enum):
    """How a copied file relates to what was at the destination."""
    NEW = "new"            # Did not exist at the destination
    UPDATED = "updated"    # Existed and was overwritten


@dataclass(frozen=True)
class MirrorEntry:
    """One file copied by a mirror run."""
    path: str  # relative to the mirrored directory, '/'-separated
    kind: ChangeKind


class Mirror(ABC):
    """Interface for one-way, copy-if-newer directory mirroring."""

    name = "mirror"

    @abstractmethod
    def mirror(self, source: Path, dest: Path) -> List[MirrorEntry]:
        """
        Copy new and newer files from source into dest.

        Args:
            source: Existing directory to read from
            dest: Directory to write into (created if missing)

        Returns:
            One entry per regular file copied, in traversal order
        """


def change_kind(src: Path, dst: Path) -> Optional[ChangeKind]:
    """NEW if dst is missing, UPDATED if src is strictly newer, else None."""
    if not os.path.lexists(dst):
        return ChangeKind.NEW
    if src.lstat().st_mtime_ns > dst.lstat().st_mtime_ns:
        return ChangeKind.UPDATED
    return None


def walk_source(source: Path) -> Iterator[Tuple[Path, List[str], List[str]]]:
    """
    Walk source top-down, yielding ``(rel_dir, dirnames, names)``.

    ``names`` holds files plus symlinks to directories, which are copied
    as links rather than descended into. Both lists are sorted.
    """
    for dirpath, dirnames, filenames in os.walk(source):
        src_dir = Path(dirpath)
        links = [d for d in dirnames if (src_dir / d).is_symlink()]
        dirnames[:] = sorted(d for d in dirnames if d not in links)
        yield src_dir.relative_to(source), dirnames, sorted(filenames + links)


def select_changed(source: Path, dest: Path) -> List[str]:
    """Relative paths under source that need copying into dest."""
    selected = []
    for rel_dir, _, names in walk_source(source):
        for name in names:
            rel_path = rel_dir / name
            if change_kind(source / rel_path, dest / rel_path) is not None:
                selected.append(rel_path.as_posix())
    return selected


def parse_itemized_changes(output: str) -> List[MirrorEntry]:
    """
    Parse the output of ``rsync --itemize-changes``.

    Only regular-file transfers count: ``>f+++++++++ path`` is a new
    file, any other ``>f`` line (``>f.st......``, ``>fcst......``) is an
    update. Directory, symlink and attribute-only lines are ignored.
    """
    entries = []
    for line in output.splitlines():
        if not line.startswith('>f'):
            continue
        flags, _, path = line.partition(' ')
        if not path:
            continue
        kind = ChangeKind.NEW if flags.startswith('>f+++') else ChangeKind.UPDATED
        entries.append(MirrorEntry(path=path, kind=kind))
    return entries


class RsyncMirror(Mirror):
    """
    Mirror backed by the rsync command.

    rsync's own quick check copies a file whose mtime equals the
    destination's when the sizes differ, so the files to copy are
    chosen here with ``select_changed`` and passed on stdin as a
    NUL-separated ``--files-from`` list. rsync still does the copying
    and its ``--itemize-changes`` output gives the new/updated split.
    """

    name = "rsync"
    OPTIONS = ["-a", "--update", "--itemize-changes", "--from0", "--files-from=-"]

    def __init__(self, binary: str = "rsync"):
        self.binary = binary

    def mirror(self, source: Path, dest: Path) -> List[MirrorEntry]:
        source = Path(source)
        dest = Path(dest)
        dest.mkdir(parents=True, exist_ok=True)

        selected = select_changed(source, dest)
        logger.debug(f"{len(selected)} file(s) selected under {source}")

        # Trailing slashes: paths in the list are relative to source
        cmd = [self.binary] + self.OPTIONS + [f"{source}/", f"{dest}/"]
        logger.debug(f"Running {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd, input='\0'.join(selected), capture_output=True, text=True
            )
        except FileNotFoundError as e:
            raise MirrorError(cmd, stderr=f"{self.binary} executable not found") from e

        if result.returncode != 0:
            raise MirrorError(cmd, result.returncode, result.stderr)

        entries = parse_itemized_changes(result.stdout)
        for entry in entries:
            logger.debug(f"{entry.kind.value}: {entry.path}")
        return entries


class CopyMirror(Mirror):
    """
    Mirror implemented with shutil.copy2.

    A file is copied when it is absent at the destination or its source
    mtime is strictly greater than the destination's. Symlinks are
    recreated as symlinks and, like rsync's itemized ``>f`` lines, are
    not reported.
    """

    name = "copy"

    def mirror(self, source: Path, dest: Path) -> List[MirrorEntry]:
        source = Path(source)
        dest = Path(dest)
        dest.mkdir(parents=True, exist_ok=True)

        entries: List[MirrorEntry] = []
        directories = [(source, dest)]

        for rel_dir, dirnames, names in walk_source(source):
            src_dir = source / rel_dir
            dst_dir = dest / rel_dir

            for name in dirnames:
                (dst_dir / name).mkdir(exist_ok=True)
                directories.append((src_dir / name, dst_dir / name))

            for name in names:
                src_file = src_dir / name
                dst_file = dst_dir / name

                kind = change_kind(src_file, dst_file)
                if kind is None:
                    continue

                if dst_file.is_symlink() or (src_file.is_symlink() and os.path.lexists(dst_file)):
                    dst_file.unlink()
                shutil.copy2(src_file, dst_file, follow_symlinks=False)

                if src_file.is_symlink():
                    continue

                rel_path = (rel_dir / name).as_posix()
                logger.debug(f"{kind.value}: {rel_path}")
                entries.append(MirrorEntry(path=rel_path, kind=kind))

        # Directory metadata last, deepest first, so file writes don't bump it
        for src_dir, dst_dir in reversed(directories):
            shutil.copystat(src_dir, dst_dir)

        return entries


MIRROR_BACKENDS = {
    RsyncMirror.name: RsyncMirror,
    CopyMirror.name: CopyMirror,
}


def create_mirror(config: Dict[str, Any]) -> Mirror:
    """
    Build the mirror adapter selected by ``mirror.backend``.

    Raises:
        ConfigError: unknown backend name
    """
    mirror_config = config.get('mirror', {})
    backend = mirror_config.get('backend', RsyncMirror.name)

    if backend == RsyncMirror.name:
        return RsyncMirror(binary=mirror_config.get('rsync_binary', 'rsync'))
    if backend == CopyMirror.name:
        return CopyMirror()

    valid = ', '.join(sorted(MIRROR_BACKENDS))
    raise ConfigError(f"Unknown mirror backend '{backend}' (expected one of: {valid})")
