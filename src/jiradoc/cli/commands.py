"""CLI command implementations"""

import json
import logging
import sys
from enum import Enum
from typing import Annotated, Any, Optional

import typer

from jiradoc.config import Settings, load_config
from jiradoc.core.pipeline import run_decode, run_encode, run_preview


class ErrorCode(str, Enum):
    INVALID_ARGS = "INVALID_ARGS"
    UNKNOWN = "UNKNOWN"


EXIT_CODES = {ErrorCode.UNKNOWN: 1, ErrorCode.INVALID_ARGS: 2}

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


PathArg = Annotated[str, typer.Argument(help="Input file, or '-' for stdin")]
JsonOpt = Annotated[bool, typer.Option("--json", help="Wrap output in an ok/data/error envelope")]
IndentOpt = Annotated[Optional[int], typer.Option("--indent", help="Indent for document JSON; 0 = compact")]
MentionOpt = Annotated[Optional[list[str]], typer.Option("--mention", "-m", help="ACCOUNT_ID:Display Name to mention (repeatable)")]
DebugOpt = Annotated[bool, typer.Option("--debug", help="Log debug detail to stderr")]
QuietOpt = Annotated[bool, typer.Option("--quiet", "-q", help="Only log errors")]


def _fail(msg: str, cause: Exception = None, code: ErrorCode = ErrorCode.INVALID_ARGS, as_json: bool = False) -> None:
    """Report a user-friendly error (stderr, or a JSON envelope on stdout) and exit non-zero."""
    if as_json:
        message = f"{msg}: {cause}" if cause else msg
        typer.echo(json.dumps({"ok": False, "data": None, "error": {"code": code.value, "message": message}}))
    else:
        typer.echo(f"Error: {msg}", err=True)
        if cause:
            typer.echo(f"  {cause}", err=True)
    raise typer.Exit(EXIT_CODES[code])


def _settings(overrides: dict, debug: bool = False, quiet: bool = False) -> Settings:
    """Load config with standard CLI error handling and configure logging from it."""
    if debug:
        overrides["log_level"] = "DEBUG"
    elif quiet:
        overrides["log_level"] = "ERROR"
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e, as_json=bool(overrides.get("json_output")))
    logging.basicConfig(level=settings.log_level, stream=sys.stderr, format=LOG_FORMAT, force=True)
    return settings


def _dumps(data: Any, indent: int) -> str:
    return json.dumps(data, indent=indent or None, ensure_ascii=False)


def _emit(settings: Settings, data: Any, text: str) -> None:
    """Print text, or data inside a success envelope in JSON mode."""
    if settings.json_output:
        typer.echo(_dumps({"ok": True, "data": data, "error": None}, settings.json_indent))
    else:
        typer.echo(text)


def encode_cmd(
    path: PathArg = "-",
    mention: MentionOpt = None,
    indent: IndentOpt = None,
    json_output: JsonOpt = False,
    debug: DebugOpt = False,
    quiet: QuietOpt = False,
    ):
    """Convert plain/markup text into a document JSON payload."""
    settings = _settings({"json_indent": indent, "json_output": json_output or None}, debug, quiet)
    try:
        doc = run_encode(path, mention or [])
    except ValueError as e:
        _fail(str(e), as_json=settings.json_output)
    except Exception as e:
        _fail("Encode failed", e, ErrorCode.UNKNOWN, settings.json_output)

    payload = doc.to_payload()
    _emit(settings, payload, _dumps(payload, settings.json_indent))


def decode_cmd(
    path: PathArg = "-",
    json_output: JsonOpt = False,
    debug: DebugOpt = False,
    quiet: QuietOpt = False,
    ):
    """Render a document JSON payload as readable text."""
    settings = _settings({"json_output": json_output or None}, debug, quiet)
    try:
        text = run_decode(path)
    except ValueError as e:
        _fail(str(e), as_json=settings.json_output)
    except Exception as e:
        _fail("Decode failed", e, ErrorCode.UNKNOWN, settings.json_output)

    _emit(settings, {"text": text}, text)


def preview_cmd(
    path: PathArg = "-",
    mention: MentionOpt = None,
    json_output: JsonOpt = False,
    debug: DebugOpt = False,
    quiet: QuietOpt = False,
    ):
    """Show how text will read once posted (encode, then render)."""
    settings = _settings({"json_output": json_output or None}, debug, quiet)
    try:
        doc, text = run_preview(path, mention or [])
    except ValueError as e:
        _fail(str(e), as_json=settings.json_output)
    except Exception as e:
        _fail("Preview failed", e, ErrorCode.UNKNOWN, settings.json_output)

    _emit(settings, {"text": text, "adf": doc.to_payload()}, text)
