import argparse
import json
import sys
from pathlib import Path

from plagcheck.config.settings import Settings
from plagcheck.logging.logger import Log
from plagcheck.pipeline.models import PipelineInput
from plagcheck.pipeline.orchestrator import build_orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plagcheck",
        description="Estimate web overlap and AI authorship of a document.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", type=Path, help="PDF, DOCX or TXT document to analyze")
    source.add_argument("--text", help="raw text to analyze ('-' reads stdin)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build pipeline -> run once -> print JSON result."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    if args.file is not None:
        try:
            file_bytes = args.file.read_bytes()
        except OSError as exc:
            parser.error(f"cannot read {args.file}: {exc.strerror or exc}")
        pipeline_input = PipelineInput(file_bytes=file_bytes, file_name=args.file.name)
    elif args.text == "-":
        pipeline_input = PipelineInput(text=sys.stdin.read())
    else:
        pipeline_input = PipelineInput(text=args.text)

    result = build_orchestrator(settings).run(pipeline_input)
    json.dump(result.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
