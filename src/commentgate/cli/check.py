"""commentgate check - the post-tool-use hook entry point.

Reads the hook envelope from stdin. Exit code 2 with the warning on stderr
when new comments survive filtering; exit code 0 otherwise, including on
every kind of failure, so an uncertain gate never blocks an edit.
"""

from __future__ import annotations

import click
import structlog

from commentgate.config.loader import load_config
from commentgate.config.models import CommentGateConfig
from commentgate.core.errors import CommentGateError, InternalError
from commentgate.core.logging import bind_hook_context, clear_hook_context, configure_logging
from commentgate.hook.envelope import parse_hook_input
from commentgate.hook.runner import HookOutcome, check_hook_input

logger = structlog.get_logger()

EXIT_PASS = 0
EXIT_BLOCK = 2


def _load_effective_config(ctx: click.Context, include_docstrings: bool) -> CommentGateConfig:
    obj = ctx.obj or {}
    config = load_config(config_path=obj.get("config_path"))
    if obj.get("verbose"):
        config.logging.level = "DEBUG"
    if not include_docstrings:
        config.detection.include_docstrings = False
    return config


def run_check(
    ctx: click.Context, raw: str | bytes, prompt: str | None, include_docstrings: bool
) -> int:
    """Run the gate on one payload and return the exit code."""
    try:
        config = _load_effective_config(ctx, include_docstrings)
        configure_logging(config=config.logging)
        hook = parse_hook_input(raw)
        bind_hook_context(
            session_id=hook.session_id,
            tool=hook.tool_name,
            file_path=hook.tool_input.file_path,
        )
        outcome: HookOutcome = check_hook_input(hook, config, custom_prompt=prompt)
    except CommentGateError as e:
        logger.info("skipping", reason=e.message, error=e.error_name)
        return EXIT_PASS
    except Exception as e:  # noqa: BLE001
        err = InternalError.unexpected(str(e), exception=type(e).__name__)
        logger.warning(
            "skipping: internal error",
            reason=err.message,
            error=err.error_name,
            **err.details,
            exc_info=True,
        )
        return EXIT_PASS
    finally:
        clear_hook_context()

    if not outcome.blocking:
        return EXIT_PASS
    click.echo(outcome.message, err=True, nl=False)
    return EXIT_BLOCK


@click.command()
@click.option(
    "--prompt",
    default=None,
    help="Custom prompt replacing the default warning. "
    "Use {{comments}} for the detected comments listing.",
)
@click.option(
    "--no-docstrings",
    "no_docstrings",
    is_flag=True,
    help="Report plain comments only.",
)
@click.pass_context
def check_command(ctx: click.Context, prompt: str | None, no_docstrings: bool) -> None:
    """Check a hook payload on stdin for new comments and docstrings."""
    raw = click.get_binary_stream("stdin").read()
    ctx.exit(run_check(ctx, raw, prompt, include_docstrings=not no_docstrings))
