# bit_cli/main.py
"""Entry-point for the bit CLI."""
from __future__ import annotations

import logging
import signal
import sys

import typer

# ──────────────────────────────────────────────────────────────────────────────
# local imports
# ──────────────────────────────────────────────────────────────────────────────
from bit_cli.cli.commands import register_all_commands
from bit_cli.cli.invoker import TyperInvoker
from bit_cli.cli.registry import CommandRegistry
from bit_cli.ui.ui_helpers import restore_terminal

# ──────────────────────────────────────────────────────────────────────────────
# logging
# ──────────────────────────────────────────────────────────────────────────────
logging.basicConfig(
    format="%(asctime)s  %(levelname)-8s  %(message)s",
    level=logging.WARNING,
    stream=sys.stderr,
)

# ──────────────────────────────────────────────────────────────────────────────
# Typer root app
# ──────────────────────────────────────────────────────────────────────────────
app = typer.Typer(
    add_completion=False,
    help="Bit is a Git CLI that predicts what you want to do.",
)


@app.callback(invoke_without_command=True)
def main_callback(  # noqa: D401
    ctx: typer.Context,
    quiet: bool = typer.Option(
        False, "-q", "--quiet", help="Only log errors", is_flag=True, show_default=False
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Log debug output", is_flag=True, show_default=False
    ),
) -> None:
    """Start the interactive shell when no sub-command is given."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    elif quiet:
        logging.getLogger().setLevel(logging.ERROR)

    if ctx.invoked_subcommand is not None:
        return

    from bit_cli.interactive.shell import interactive_mode

    interactive_mode(TyperInvoker(app))


# ──────────────────────────────────────────────────────────────────────────────
# command registration
# ──────────────────────────────────────────────────────────────────────────────
register_all_commands()
CommandRegistry.register_with_typer(app)


# ──────────────────────────────────────────────────────────────────────────────
# graceful shutdown
# ──────────────────────────────────────────────────────────────────────────────
def _signal_handler(sig, _frame):
    logging.debug("Received signal %s, restoring terminal", sig)
    restore_terminal()
    sys.exit(0)


def _setup_signal_handlers() -> None:
    signal.signal(signal.SIGTERM, _signal_handler)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, _signal_handler)


# ──────────────────────────────────────────────────────────────────────────────
# main
# ──────────────────────────────────────────────────────────────────────────────
def main() -> None:
    _setup_signal_handlers()
    try:
        app(prog_name="bit")  # Typer dispatch; exits non-zero on framework errors
    finally:
        restore_terminal()


if __name__ == "__main__":
    main()
