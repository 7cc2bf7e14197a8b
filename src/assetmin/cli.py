# src/assetmin/cli.py
import sys
import argparse
import os
from pathlib import Path

# Module imports
from assetmin.config import DEFAULT_JAVA, build_run_context
from assetmin.core.batch import BatchRunner
from assetmin.utils.textio import resolve_charset

USAGE_NOTES = """\
Files ending in ".js" are compiled with Google Closure Compiler,
files ending in ".css" are compressed with YUI Compressor.
Files ending in "-min.js" or "-min.css" are skipped.
Each processed file is overwritten with its minified version.
"""


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="assetmin",
        description="Minify JavaScript and CSS files in place using external minifier tools.",
        epilog=USAGE_NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("paths", type=str, nargs="*", help="Files or directories to minify")
    parser.add_argument("--charset", type=str, default=None,
                        help="Charset for reading/writing files and talking to the tools (default: platform default)")
    parser.add_argument("--tool-dir", type=str, default=os.getcwd(),
                        help="Directory holding closure.jar and yui.jar (default: current directory)")
    parser.add_argument("--closure", type=str, default=None, help="Path to the Closure Compiler jar")
    parser.add_argument("--yui", type=str, default=None, help="Path to the YUI Compressor jar")
    parser.add_argument("--java", type=str, default=DEFAULT_JAVA, help="Java executable used to run the jars")
    parser.add_argument("--timeout", type=float, default=None, help="Seconds to wait for a single tool run")
    parser.add_argument("-x", "--exclude", action="append", default=[],
                        help="Gitignore-style pattern to leave out of directory walks (repeatable)")
    parser.add_argument("--ignore-file", type=str, default=None,
                        help="Ignore file to use instead of each directory's .minifyignore")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not list skipped files")
    return parser


def main(argv=None) -> int:
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)

        if not args.paths:
            parser.print_help()
            return 0

        try:
            charset = resolve_charset(args.charset)
        except LookupError:
            parser.error(f"unknown charset '{args.charset}'")

        context = build_run_context(
            charset,
            Path(args.tool_dir).resolve(),
            closure=Path(args.closure).resolve() if args.closure else None,
            yui=Path(args.yui).resolve() if args.yui else None,
            java=args.java,
            timeout=args.timeout,
        )

        print(f"--- assetmin ---")
        print(f"Work in dir: {os.getcwd()}")
        print(f"Charset:     {charset}")
        for tool in (context.js_tool, context.css_tool):
            if not os.path.isfile(tool.executable):
                print(f"Warning: {tool.name} not found at {tool.executable}", file=sys.stderr)

        # 2. Run the batch
        runner = BatchRunner(
            context,
            exclude=args.exclude,
            ignore_file=Path(args.ignore_file) if args.ignore_file else None,
            show_skipped=not args.quiet,
        )
        report = runner.run(Path(p) for p in args.paths)

        # 3. Summary
        print("-" * 60)
        print(f"Compiled:   {len(report.compiled)}")
        print(f"Compressed: {len(report.compressed)}")
        print(f"Skipped:    {len(report.skipped)}")
        print(f"Failed:     {len(report.failed)}")
        print("-" * 60)
        for outcome in report.failed:
            print(f"  {outcome.path} ({outcome.kind.value})")

        return 1 if report.failed else 0

    except KeyboardInterrupt:
        print("\nCancelled.")
        return 1

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
