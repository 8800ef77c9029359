"""TranslatePlus CLI -- translate text, documents and i18n files from your terminal.

Usage::

    translateplus translate "Hello world" --to fr
    translateplus batch "Sign up" "Log in" --to de
    translateplus subtitles movie.srt --to es -o movie.es.srt
    translateplus detect "Bonjour le monde"
    translateplus jobs create locales/en.json --to fr,de
    translateplus jobs download JOB_ID fr -o locales/fr.json
    echo "Hello" | translateplus translate --to fr
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from ._version import __version__


def _get_client():
    from . import TranslatePlus
    return TranslatePlus()


def _json_out(obj) -> str:
    if is_dataclass(obj):
        obj = asdict(obj)
    elif isinstance(obj, list):
        obj = [asdict(o) if is_dataclass(o) else o for o in obj]
    return json.dumps(obj, indent=2, ensure_ascii=False)


def _read_stdin_texts() -> Optional[List[str]]:
    if not sys.stdin.isatty():
        text = sys.stdin.read().strip()
        if text:
            return [text]
    return None


def _text_arg(value: Optional[str]) -> Optional[str]:
    if value is None or value == "-":
        stdin = _read_stdin_texts()
        return stdin[0] if stdin else None
    return value


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_translate(args: argparse.Namespace) -> int:
    text = _text_arg(args.text)
    if text is None:
        print("Error: provide text as argument or pipe via stdin", file=sys.stderr)
        return 1

    client = _get_client()
    try:
        result = client.translate(text, args.to, source=args.source)
    finally:
        client.close()

    if args.json:
        print(_json_out(result))
    else:
        print(result.translation)
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    texts = list(args.texts)
    if not texts:
        stdin = _read_stdin_texts()
        if stdin:
            texts = stdin[0].splitlines()
    if not texts:
        print("Error: provide texts as arguments or pipe via stdin (one per line)", file=sys.stderr)
        return 1

    client = _get_client()
    try:
        if args.concurrent:
            results = client.translate_concurrent(texts, args.to, source=args.source)
        else:
            results = client.translate_batch(texts, args.to, source=args.source).translations
    finally:
        client.close()

    if args.json:
        print(_json_out(results))
        return 0

    failed = 0
    for orig, result in zip(texts, results):
        translation = getattr(result, "translation", None)
        if translation is None or getattr(result, "success", True) is False:
            failed += 1
            print(f"{orig}  !!  {result.error}")
        else:
            print(f"{orig}  ->  {translation}")
    return 1 if failed else 0


def cmd_html(args: argparse.Namespace) -> int:
    html = _text_arg(args.html)
    if html is None:
        print("Error: provide HTML as argument or pipe via stdin", file=sys.stderr)
        return 1

    client = _get_client()
    try:
        result = client.translate_html(html, args.to, source=args.source)
    finally:
        client.close()

    print(_json_out(result) if args.json else result.html)
    return 0


def cmd_email(args: argparse.Namespace) -> int:
    client = _get_client()
    try:
        result = client.translate_email(args.subject, args.body, args.to, source=args.source)
    finally:
        client.close()

    if args.json:
        print(_json_out(result))
    else:
        print(f"Subject: {result.subject}\n")
        print(result.html_body)
    return 0


def cmd_subtitles(args: argparse.Namespace) -> int:
    path = Path(args.file)
    fmt = args.format or path.suffix.lstrip(".").lower()
    content = path.read_text(encoding="utf-8")

    client = _get_client()
    try:
        result = client.translate_subtitles(content, args.to, subtitle_format=fmt, source=args.source)
    finally:
        client.close()

    if args.output:
        Path(args.output).write_text(result.content, encoding="utf-8")
        print(f"Wrote {args.output}")
    elif args.json:
        print(_json_out(result))
    else:
        print(result.content)
    return 0


def cmd_detect(args: argparse.Namespace) -> int:
    text = _text_arg(args.text)
    if text is None:
        print("Error: provide text as argument or pipe via stdin", file=sys.stderr)
        return 1

    client = _get_client()
    try:
        result = client.detect_language(text)
    finally:
        client.close()

    if args.json:
        print(_json_out(result))
    else:
        print(f"{result.language}  ({result.confidence:.0%})")
    return 0


def cmd_languages(args: argparse.Namespace) -> int:
    client = _get_client()
    try:
        result = client.get_supported_languages()
    finally:
        client.close()

    if args.json:
        print(_json_out(result))
    else:
        for code, name in sorted(result.languages.items()):
            print(f"{code:<8}{name}")
    return 0


def cmd_account(args: argparse.Namespace) -> int:
    client = _get_client()
    try:
        summary = client.get_account_summary()
    finally:
        client.close()

    if args.json:
        print(_json_out(summary))
    else:
        print(f"Plan:        {summary.plan_name}")
        print(f"Credits:     {summary.credits_remaining} / {summary.total_credits}")
        print(f"Concurrency: {summary.concurrency_limit}")
    return 0


def cmd_jobs_create(args: argparse.Namespace) -> int:
    targets = [t.strip() for t in args.to.split(",") if t.strip()]
    client = _get_client()
    try:
        job = client.create_i18n_job(
            args.file, targets,
            source_language=args.source,
            webhook_url=args.webhook,
        )
    finally:
        client.close()

    if args.json:
        print(_json_out(job))
    else:
        print(f"Created job {job.job_id} ({job.status})")
    return 0


def cmd_jobs_status(args: argparse.Namespace) -> int:
    client = _get_client()
    try:
        job = client.get_i18n_job_status(args.id)
    finally:
        client.close()

    if args.json:
        print(_json_out(job))
    else:
        line = f"{job.id}  {job.status}  {job.source_language} -> {','.join(job.target_languages)}"
        if job.progress is not None:
            line += f"  {job.progress:.0f}%"
        print(line)
        if job.error:
            print(f"  Error: {job.error}")
    return 0


def cmd_jobs_list(args: argparse.Namespace) -> int:
    client = _get_client()
    try:
        result = client.list_i18n_jobs(page=args.page, page_size=args.page_size)
    finally:
        client.close()

    if args.json:
        print(_json_out(result))
    else:
        print(f"Page {result.page} of {result.total_pages} ({result.count} jobs)\n")
        for job in result.results:
            print(f"  {job.id}  [{job.status}]  {','.join(job.target_languages)}")
    return 0


def cmd_jobs_download(args: argparse.Namespace) -> int:
    client = _get_client()
    try:
        content = client.download_i18n_file(args.id, args.lang, dest=args.output)
    finally:
        client.close()

    if args.output:
        print(f"Wrote {len(content)} bytes to {args.output}")
    else:
        sys.stdout.buffer.write(content)
        sys.stdout.flush()
    return 0


def cmd_jobs_delete(args: argparse.Namespace) -> int:
    client = _get_client()
    try:
        client.delete_i18n_job(args.id)
    finally:
        client.close()

    print(f"Deleted {args.id}")
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def _add_output_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", action="store_true", help="output as JSON")


def _add_lang_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--to", required=True, metavar="CODE",
                        help="target language code (e.g. fr, de)")
    parser.add_argument("--from", dest="source", default="auto", metavar="CODE",
                        help="source language code (default: auto)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="translateplus",
        description="TranslatePlus CLI -- translation from your terminal",
    )
    parser.add_argument(
        "--version", action="version", version=f"translateplus {__version__}"
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log requests and retries to stderr")
    sub = parser.add_subparsers(dest="command")

    # -- translate -------------------------------------------------------
    p = sub.add_parser("translate", aliases=["t"], help="translate text")
    p.add_argument("text", nargs="?", default=None,
                   help='text to translate (or pipe via stdin, or "-")')
    _add_lang_flags(p)
    _add_output_flag(p)
    p.set_defaults(func=cmd_translate)

    # -- batch -----------------------------------------------------------
    p = sub.add_parser("batch", aliases=["b"],
                       help="translate multiple texts")
    p.add_argument("texts", nargs="*",
                   help="texts to translate (or pipe via stdin, one per line)")
    _add_lang_flags(p)
    p.add_argument("--concurrent", action="store_true",
                   help="one request per text instead of a single batch request")
    _add_output_flag(p)
    p.set_defaults(func=cmd_batch)

    # -- html ------------------------------------------------------------
    p = sub.add_parser("html", help="translate HTML, keeping tags")
    p.add_argument("html", nargs="?", default=None,
                   help='HTML to translate (or pipe via stdin, or "-")')
    _add_lang_flags(p)
    _add_output_flag(p)
    p.set_defaults(func=cmd_html)

    # -- email -----------------------------------------------------------
    p = sub.add_parser("email", help="translate an email subject and body")
    p.add_argument("--subject", required=True)
    p.add_argument("--body", required=True, help="HTML body")
    _add_lang_flags(p)
    _add_output_flag(p)
    p.set_defaults(func=cmd_email)

    # -- subtitles -------------------------------------------------------
    p = sub.add_parser("subtitles", aliases=["subs"],
                       help="translate an SRT or VTT file")
    p.add_argument("file", help="path to subtitle file")
    p.add_argument("--format", choices=["srt", "vtt"],
                   help="subtitle format (default: from file extension)")
    p.add_argument("-o", "--output", metavar="PATH",
                   help="write translated subtitles here")
    _add_lang_flags(p)
    _add_output_flag(p)
    p.set_defaults(func=cmd_subtitles)

    # -- detect ----------------------------------------------------------
    p = sub.add_parser("detect", help="detect the language of a text")
    p.add_argument("text", nargs="?", default=None,
                   help='text to inspect (or pipe via stdin, or "-")')
    _add_output_flag(p)
    p.set_defaults(func=cmd_detect)

    # -- languages -------------------------------------------------------
    p = sub.add_parser("languages", aliases=["lang"],
                       help="list supported languages")
    _add_output_flag(p)
    p.set_defaults(func=cmd_languages)

    # -- account ---------------------------------------------------------
    p = sub.add_parser("account", help="show credits and plan")
    _add_output_flag(p)
    p.set_defaults(func=cmd_account)

    # -- jobs (i18n) -----------------------------------------------------
    jobs = sub.add_parser("jobs", help="i18n file translation jobs")
    jobs_sub = jobs.add_subparsers(dest="jobs_command")

    # jobs create
    p = jobs_sub.add_parser("create", help="upload a file and start a job")
    p.add_argument("file", help="path to i18n file (JSON, YAML, PO, ...)")
    p.add_argument("--to", required=True, metavar="CODES",
                   help="comma-separated target language codes")
    p.add_argument("--from", dest="source", default="auto", metavar="CODE",
                   help="source language code (default: auto)")
    p.add_argument("--webhook", metavar="URL",
                   help="URL to notify when the job finishes")
    _add_output_flag(p)
    p.set_defaults(func=cmd_jobs_create)

    # jobs status
    p = jobs_sub.add_parser("status", help="show job status")
    p.add_argument("id", help="job ID")
    _add_output_flag(p)
    p.set_defaults(func=cmd_jobs_status)

    # jobs list
    p = jobs_sub.add_parser("list", aliases=["ls"], help="list jobs")
    p.add_argument("--page", type=int, default=1)
    p.add_argument("--page-size", type=int, default=20)
    _add_output_flag(p)
    p.set_defaults(func=cmd_jobs_list)

    # jobs download
    p = jobs_sub.add_parser("download", help="download a translated file")
    p.add_argument("id", help="job ID")
    p.add_argument("lang", help="target language code")
    p.add_argument("-o", "--output", metavar="PATH",
                   help="write file here instead of stdout")
    p.set_defaults(func=cmd_jobs_download)

    # jobs delete
    p = jobs_sub.add_parser("delete", aliases=["rm"], help="delete a job")
    p.add_argument("id", help="job ID")
    p.set_defaults(func=cmd_jobs_delete)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "jobs" and not getattr(args, "jobs_command", None):
        parser.parse_args(["jobs", "--help"])
        return 0

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def cli_entry() -> None:
    """Entry point for the ``translateplus`` console script."""
    sys.exit(main())
