# src/assetmin/core/batch.py
import os
from pathlib import Path
from typing import Iterable, List, Optional

from assetmin.core.ignore import find_ignore_file, load_ignore_spec
from assetmin.core.pipeline import invoke
from assetmin.core.walker import classify, walk
from assetmin.models import (
    BatchReport,
    Classification,
    FailureKind,
    FileOutcome,
    RunContext,
    SourceFile,
)
from assetmin.utils.textio import read_text, write_text

BANNER = "*" * 50

_VERBS = {
    Classification.COMPILE: ("compile js", "compile"),
    Classification.COMPRESS: ("compress css", "compress"),
}


class BatchRunner:
    """
    Runs every selected file through its minifier and writes the result back.
    A failing file is reported and left untouched; the batch carries on.
    """

    def __init__(self, context: RunContext, exclude: Optional[List[str]] = None,
                 ignore_file: Optional[Path] = None, show_skipped: bool = True):
        self.context = context
        self.exclude = list(exclude or [])
        self.ignore_file = ignore_file
        self.show_skipped = show_skipped

    def echo(self, msg: str):
        print(msg)

    def run(self, paths: Iterable[Path]) -> BatchReport:
        report = BatchReport()
        for path in paths:
            path = Path(path)
            ignore_spec = None
            if os.path.isdir(path):
                self.echo(f"search in dir: {os.path.abspath(path)}")
                ignore_spec = load_ignore_spec(self.ignore_file or find_ignore_file(path), self.exclude)
            try:
                for source in walk(path, ignore_spec):
                    report.outcomes.append(self._process_guarded(source))
            except OSError as e:
                report.outcomes.append(self._failed(SourceFile(path, classify(path.name)), "process",
                                                    FailureKind.READ_FAILURE, str(e)))
        return report

    def _process_guarded(self, source: SourceFile) -> FileOutcome:
        try:
            return self.process(source)
        except OSError as e:
            return self._failed(source, _VERBS.get(source.classification, ("", "process"))[1],
                                FailureKind.READ_FAILURE, str(e))

    def process(self, source: SourceFile) -> FileOutcome:
        path = source.path
        if source.classification is Classification.SKIP:
            if self.show_skipped:
                self.echo(f"skip file: {os.path.abspath(path)}")
            return FileOutcome(path, source.classification)

        action, verb = _VERBS[source.classification]
        tool = self.context.js_tool if source.classification is Classification.COMPILE else self.context.css_tool
        self.echo(f"{action}: {os.path.abspath(path)}")

        text = read_text(path, self.context.charset)
        if text is None:
            return self._failed(source, verb, FailureKind.READ_FAILURE,
                                f"cannot read {path} as {self.context.charset}")

        result = invoke(tool, text, self.context.charset, timeout=self.context.timeout)
        if not result.ok:
            return self._failed(source, verb, result.kind, result.diagnostic)

        if not write_text(path, result.text, self.context.charset):
            return self._failed(source, verb, FailureKind.WRITE_FAILURE,
                                f"cannot write {path} as {self.context.charset}")

        self.echo(f"success {verb} file {os.path.abspath(path)}")
        return FileOutcome(path, source.classification)

    def _failed(self, source: SourceFile, verb: str, kind: FailureKind, diagnostic: str) -> FileOutcome:
        self.echo(f"failed {verb} file {os.path.abspath(source.path)} ({kind.value})")
        self.echo(BANNER)
        self.echo(diagnostic)
        self.echo(BANNER)
        return FileOutcome(source.path, source.classification, ok=False, diagnostic=diagnostic, kind=kind)
