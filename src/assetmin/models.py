# src/assetmin/models.py
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple


class Classification(Enum):
    COMPILE = "compile"
    COMPRESS = "compress"
    SKIP = "skip"


class FailureKind(Enum):
    TOOL_MISSING = "tool missing"
    PROCESS_FAILURE = "process failure"
    SPAWN_OR_IO_ERROR = "spawn or io error"
    TIMEOUT = "timeout"
    READ_FAILURE = "read failure"
    WRITE_FAILURE = "write failure"


@dataclass(frozen=True)
class SourceFile:
    """A discovered file and what to do with it."""
    path: Path
    classification: Classification


@dataclass(frozen=True)
class ToolSpec:
    """An external minifier started as `launcher + executable name + options`."""
    name: str
    executable: Path
    options: str = ""
    requires_transcoding: bool = False
    launcher: Tuple[str, ...] = ()

    @property
    def working_dir(self) -> Path:
        return self.executable.parent


@dataclass(frozen=True)
class ToolResult:
    ok: bool
    text: Optional[str] = None
    diagnostic: Optional[str] = None
    kind: Optional[FailureKind] = None
    stderr: str = ""

    @classmethod
    def success(cls, text: str, stderr: str = "") -> "ToolResult":
        return cls(ok=True, text=text, stderr=stderr)

    @classmethod
    def failure(cls, kind: FailureKind, diagnostic: str, stderr: str = "") -> "ToolResult":
        return cls(ok=False, diagnostic=diagnostic, kind=kind, stderr=stderr)


@dataclass(frozen=True)
class RunContext:
    """Everything a run reads but never changes: charset, tools, timeout."""
    charset: str
    js_tool: ToolSpec
    css_tool: ToolSpec
    timeout: Optional[float] = None


@dataclass(frozen=True)
class FileOutcome:
    path: Path
    classification: Classification
    ok: bool = True
    diagnostic: Optional[str] = None
    kind: Optional[FailureKind] = None


@dataclass
class BatchReport:
    outcomes: List[FileOutcome] = field(default_factory=list)

    def _select(self, classification: Classification) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.ok and o.classification is classification]

    @property
    def compiled(self) -> List[FileOutcome]:
        return self._select(Classification.COMPILE)

    @property
    def compressed(self) -> List[FileOutcome]:
        return self._select(Classification.COMPRESS)

    @property
    def skipped(self) -> List[FileOutcome]:
        return self._select(Classification.SKIP)

    @property
    def failed(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if not o.ok]
