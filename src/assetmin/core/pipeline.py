# src/assetmin/core/pipeline.py
import os
import shlex
import subprocess
from typing import List, Optional

from assetmin.models import FailureKind, ToolResult, ToolSpec
from assetmin.utils.transcoder import escape


def build_command(tool: ToolSpec) -> List[str]:
    """
    Command line for a tool. The executable is referenced by name only since
    the process runs inside the tool's own directory.
    """
    cmd = list(tool.launcher)
    cmd.append(tool.executable.name if tool.launcher else str(tool.executable.resolve()))
    if tool.options:
        cmd += shlex.split(tool.options)
    return cmd


def invoke(tool: ToolSpec, source_text: Optional[str], charset: str,
           timeout: Optional[float] = None) -> ToolResult:
    """
    Pipes `source_text` through an external tool and returns its output.

    Stdin is written while stdout and stderr are drained, so a tool that
    fills its output pipe before reading its input does not stall the run.
    Never raises: every problem comes back as a failed ToolResult.
    """
    if not os.path.isfile(tool.executable):
        return ToolResult.failure(FailureKind.TOOL_MISSING,
                                  f"compress tool not found: {tool.executable}")

    source_text = source_text or ""
    if tool.requires_transcoding:
        source_text = escape(source_text)

    try:
        payload = source_text.encode(charset)
        proc = subprocess.Popen(
            build_command(tool),
            cwd=str(tool.working_dir),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except (OSError, ValueError, UnicodeEncodeError) as e:
        return ToolResult.failure(FailureKind.SPAWN_OR_IO_ERROR, str(e))

    try:
        # communicate() feeds stdin and reads both output pipes together
        stdout, stderr = proc.communicate(payload, timeout=timeout)
    except subprocess.TimeoutExpired:
        proc.kill()
        _, stderr = proc.communicate()
        return ToolResult.failure(FailureKind.TIMEOUT,
                                  f"{tool.name} did not finish within {timeout} seconds",
                                  stderr=stderr.decode(charset, errors="replace"))
    except OSError as e:
        proc.kill()
        proc.wait()
        return ToolResult.failure(FailureKind.SPAWN_OR_IO_ERROR, str(e))

    err_text = stderr.decode(charset, errors="replace")
    if proc.returncode != 0:
        return ToolResult.failure(FailureKind.PROCESS_FAILURE, err_text, stderr=err_text)

    try:
        out_text = stdout.decode(charset)
    except UnicodeDecodeError as e:
        return ToolResult.failure(FailureKind.SPAWN_OR_IO_ERROR, str(e), stderr=err_text)

    if tool.requires_transcoding:
        out_text = escape(out_text)
    return ToolResult.success(out_text, stderr=err_text)
