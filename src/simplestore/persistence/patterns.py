"""Filename patterns for numbered documents (``order-1.json``, ``order-2.json``...)."""

import re
from dataclasses import dataclass

SEQUENCE_ID = r"[1-9][0-9]*"
_SEQUENCE_ID_RE = re.compile(SEQUENCE_ID)


def parse_sequence_id(text: str | None) -> int | None:
    """Parse an ASCII decimal id without leading zeros; None for anything else."""
    if not text or _SEQUENCE_ID_RE.fullmatch(text) is None:
        return None
    return int(text)


@dataclass(frozen=True)
class DecimalFilePattern:
    """Matches names built as ``prefix + decimal id + suffix``."""

    prefix: str
    suffix: str

    def __post_init__(self):
        regex = re.compile(rf"{re.escape(self.prefix)}({SEQUENCE_ID}){re.escape(self.suffix)}")
        object.__setattr__(self, "_regex", regex)

    def filename_for(self, id_: int) -> str:
        if id_ < 1:
            raise ValueError(f"Sequence ids start at 1, got {id_}")
        return f"{self.prefix}{id_}{self.suffix}"

    def match(self, name: str) -> int | None:
        """Return the id encoded in ``name`` or None when it does not match."""
        m = self._regex.fullmatch(name.rsplit("/", 1)[-1])
        if m is None:
            return None
        return int(m.group(1))

    def last(self, names) -> int:
        """Return the highest id among ``names`` (0 when none match)."""
        ids = [id_ for id_ in (self.match(name) for name in names) if id_ is not None]
        return max(ids, default=0)
