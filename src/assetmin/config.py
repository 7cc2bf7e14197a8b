# src/assetmin/config.py
from pathlib import Path
from typing import Optional, Sequence

from assetmin.models import RunContext, ToolSpec

CLOSURE_JAR = "closure.jar"
YUI_JAR = "yui.jar"

CLOSURE_OPTIONS = "--charset {charset}"
YUI_OPTIONS = "--type css --charset {charset}"

DEFAULT_JAVA = "java"

IGNORE_FILE_NAME = ".minifyignore"

DEFAULT_IGNORE_PATTERNS = [
    "# Default ignore patterns",
    ".git/",
    ".svn/",
    ".hg/",
]


def build_run_context(
    charset: str,
    tool_dir: Path,
    closure: Optional[Path] = None,
    yui: Optional[Path] = None,
    java: str = DEFAULT_JAVA,
    timeout: Optional[float] = None,
    launcher: Optional[Sequence[str]] = None,
) -> RunContext:
    """Builds the two fixed tool specs for a run, with the charset baked into their options."""
    if launcher is None:
        launcher = (java, "-jar")

    js_tool = ToolSpec(
        name="closure",
        executable=Path(closure) if closure else tool_dir / CLOSURE_JAR,
        options=CLOSURE_OPTIONS.format(charset=charset),
        requires_transcoding=True,
        launcher=tuple(launcher),
    )
    css_tool = ToolSpec(
        name="yui",
        executable=Path(yui) if yui else tool_dir / YUI_JAR,
        options=YUI_OPTIONS.format(charset=charset),
        requires_transcoding=False,
        launcher=tuple(launcher),
    )
    return RunContext(charset=charset, js_tool=js_tool, css_tool=css_tool, timeout=timeout)
