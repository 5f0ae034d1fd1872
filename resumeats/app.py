import argparse
import json
import logging
import mimetypes
from pathlib import Path

from .env import load_env

from . import __version__
from .config import load_settings
from .errors import ResumeAtsError
from .logger import get_logger
from .normalize import DOCX_MIME, PDF_MIME, TEXT_MIME
from .pipeline import analyze, parse
from .relevance import extract_keywords
from .schema import JobDescriptionInput, validate_job_description

SUFFIX_MIME_TYPES = {
    ".pdf": PDF_MIME,
    ".docx": DOCX_MIME,
    ".txt": TEXT_MIME,
    ".md": TEXT_MIME,
}


def guess_mime_type(path: Path) -> str:
    mt = SUFFIX_MIME_TYPES.get(path.suffix.lower())
    if mt:
        return mt
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or TEXT_MIME


def _read_document(path: Path, mime_type=None):
    if not path.exists():
        raise SystemExit(f"Input file not found: {path}")
    mime_type = mime_type or guess_mime_type(path)
    try:
        return parse(path.read_bytes(), mime_type)
    except ResumeAtsError as e:
        raise SystemExit(str(e))


def _read_json(path: Path):
    if not path.exists():
        raise SystemExit(f"Input file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise SystemExit(f"Invalid JSON in {path}: {e}")


def load_job(path: Path) -> JobDescriptionInput:
    data = _read_json(path)
    errors = validate_job_description(data)
    if errors:
        raise SystemExit("Invalid job description: " + "; ".join(errors))
    job = JobDescriptionInput.from_dict(data)
    if not job.keywords:
        # No keyword list supplied: derive one from the description
        job = job.model_copy(update={"keywords": tuple(extract_keywords(job.description))})
    return job


def _print_json(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def cmd_parse(args: argparse.Namespace) -> None:
    resume = _read_document(Path(args.input), args.mime_type)
    _print_json(resume.to_dict())


def cmd_analyze(args: argparse.Namespace) -> None:
    resume = _read_document(Path(args.resume), args.mime_type)
    job = load_job(Path(args.job))
    result = analyze(resume, job, weights=args.weights)
    _print_json(result.to_dict())
    get_logger().log_metrics_summary()


def cmd_validate(args: argparse.Namespace) -> None:
    data = _read_json(Path(args.input))
    errors = validate_job_description(data)
    if errors:
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    print("Valid")


def cmd_keywords(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")
    text = input_path.read_text(encoding="utf-8", errors="ignore")
    for keyword in extract_keywords(text, limit=args.limit):
        print(keyword)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="resumeats", description="Resume ATS scoring CLI")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    prs = subparsers.add_parser("parse", help="Extract and segment a resume, print ParsedResume JSON")
    prs.add_argument("--input", required=True, help="Path to resume (.pdf, .docx or plain text)")
    prs.add_argument("--mime-type", help="Override the MIME type guessed from the file suffix")
    prs.set_defaults(func=cmd_parse)

    ana = subparsers.add_parser("analyze", help="Score a resume against a job description JSON")
    ana.add_argument("--resume", required=True, help="Path to resume (.pdf, .docx or plain text)")
    ana.add_argument("--job", required=True, help="Path to job description JSON")
    ana.add_argument("--mime-type", help="Override the MIME type guessed from the file suffix")
    ana.set_defaults(func=cmd_analyze)

    val = subparsers.add_parser("validate", help="Validate a job description JSON")
    val.add_argument("--input", required=True, help="Path to job description JSON")
    val.set_defaults(func=cmd_validate)

    kw = subparsers.add_parser("keywords", help="Extract candidate keywords from a job description text")
    kw.add_argument("--input", required=True, help="Path to job description text")
    kw.add_argument("--limit", type=int, default=30, help="Maximum keywords to print (default 30)")
    kw.set_defaults(func=cmd_keywords)

    return parser


def main(argv=None):
    # Load .env if present (RESUMEATS_LOG_LEVEL, RESUMEATS_WEIGHTS, etc.)
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"Invalid configuration: {e}")
    get_logger(
        level=settings.log_level,
        log_dir=settings.log_dir,
        enable_file=settings.log_dir is not None,
    )
    # pypdf logs a warning for every malformed object it skips
    logging.getLogger("pypdf").setLevel(logging.ERROR)
    args.weights = settings.weights

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
