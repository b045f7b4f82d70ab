"""Link check finding (UNO: single model)."""

from dataclasses import asdict, dataclass
from pathlib import Path


@dataclass(frozen=True)
class CheckFinding:
    """A broken or placeholder link occurrence in a content file."""

    file: Path
    line: int
    id: str

    def to_dict(self) -> dict[str, object]:
        data = asdict(self)
        data["file"] = str(self.file)
        return data
