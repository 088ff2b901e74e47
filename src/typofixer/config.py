from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_EXTENSIONS: Tuple[str, ...] = (".php", ".phtml", ".inc", ".py", ".js", ".ts")


@dataclass
class Settings:
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    variables_only: bool = False
    dry_run: bool = False
    encoding: str = "utf-8"
    config_path: Optional[Path] = None
    # None picks the language from each file's extension
    language: Optional[str] = None

    def __post_init__(self) -> None:
        self.extensions = tuple(
            ext if ext.startswith(".") else f".{ext}"
            for ext in (e.strip() for e in self.extensions)
            if ext
        )

    def accepts(self, path: Path) -> bool:
        """Whether a file found while walking a directory should be processed."""
        return path.suffix.lower() in {ext.lower() for ext in self.extensions}
