"""Thin wrapper around subprocess for running the apt tools."""

import logging
import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from aptclient.exceptions import ExternalToolError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    args: list[str]
    returncode: int
    output: str
    stderr: str = ""


def run_command(args: Sequence[str], combined: bool = True, check: bool = True) -> CommandResult:
    """Run an external command to completion and capture its output.

    Args:
        args: The command line, executable first
        combined: Merge stderr into the returned output. If False only stdout is
            returned in `output` and stderr is kept separately.
        check: Raise ExternalToolError on a non-zero exit status

    Returns:
        The captured result of the command

    Raises:
        ExternalToolError: if the command cannot be started, or exits non-zero and `check` is set
    """
    args = list(args)
    cmdline = " ".join(args)
    logger.debug(f"Running: {cmdline}")

    env = os.environ.copy()
    env["DEBIAN_FRONTEND"] = "noninteractive"
    try:
        proc = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if combined else subprocess.PIPE,
            text=True,
            env=env,
            check=False,
        )
    except OSError as e:
        raise ExternalToolError(f"running {args[0]}: {e}", args) from e

    result = CommandResult(args=args, returncode=proc.returncode, output=proc.stdout or "", stderr=proc.stderr or "")
    if check and proc.returncode != 0:
        logger.debug(f"{cmdline} exited with status {proc.returncode}")
        raise ExternalToolError(
            f"running {args[0]}: exit status {proc.returncode}",
            args,
            returncode=proc.returncode,
            output=result.output + result.stderr,
        )
    return result
