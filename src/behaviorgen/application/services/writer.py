"""Fragment writer with change detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from behaviorgen.domain.model.fragment import GeneratedFragment

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class WriteReport:
    """Which output files changed.

    Attributes:
        written: Files created or rewritten
        unchanged: Files whose content already matched
    """

    written: tuple[Path, ...]
    unchanged: tuple[Path, ...]


class FragmentWriter:
    """Writes fragments to an output directory.

    A file whose current content is byte-identical to the fragment is left
    alone, so downstream builds see no spurious change.
    """

    def __init__(self, out_dir: Path) -> None:
        """Initialize writer.

        Args:
            out_dir: Output directory (created on first write)

        Raises:
            TypeError: If out_dir is None (FAIL-FIRST)
        """
        if out_dir is None:
            raise TypeError("out_dir must not be None")
        self._out_dir = out_dir

    def write(self, fragments: Iterable[GeneratedFragment]) -> WriteReport:
        """Write every fragment as out_dir/<hint_name>.

        Raises:
            ValueError: If two fragments share a hint_name
        """
        written: list[Path] = []
        unchanged: list[Path] = []
        seen: set[str] = set()

        for fragment in fragments:
            if fragment.hint_name in seen:
                raise ValueError(f"duplicate output name '{fragment.hint_name}'")
            seen.add(fragment.hint_name)

            target = self._out_dir / fragment.hint_name
            data = fragment.source.encode("utf-8")

            if target.is_file() and target.read_bytes() == data:
                unchanged.append(target)
                continue

            self._out_dir.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
            written.append(target)
            log.debug("fragment_written", path=str(target), artifact=fragment.artifact_id)

        return WriteReport(written=tuple(written), unchanged=tuple(unchanged))
