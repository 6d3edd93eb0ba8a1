"""Console entry point for ``python -m lib_log_deferred``.

Purpose
-------
Wrap the Click group from :mod:`lib_log_deferred.cli` so both the module entry
point and the ``lib_log_deferred`` console script share one test-friendly
runner.
"""

from __future__ import annotations

from typing import Sequence

import click

from .cli import cli


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click command group and return the exit code.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Zero on success, the Click exception exit code otherwise.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name="lib_log_deferred", standalone_mode=False)
    except click.exceptions.Exit as exit_:
        return exit_.exit_code
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
