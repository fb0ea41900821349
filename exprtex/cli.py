"""
Command line interface.

Usage:
    python -m exprtex [expression ...]
    python -m exprtex --serve

Each expression is converted and printed on its own line. If no expressions are
given, they are read from standard input, one per line.
"""

import argparse
import asyncio
import logging
import sys
import typing
from . import config, parser, renderer, server, util
from .errors import ExpressionError


logger = logging.getLogger("exprtex")


def convert_all(exprs: typing.Iterable[str], out: typing.TextIO, err: typing.TextIO) -> bool:
    """
    Convert every expression, writing the results to out and errors to err.

    Returns whether all conversions succeeded.
    """
    ok = True
    for expr in exprs:
        expr = expr.rstrip("\n")
        if not expr.strip():
            continue
        try:
            print(renderer.render(parser.parse(expr)), file=out)
        except ExpressionError as e:
            logger.debug(f"Conversion of {expr!r} failed: {type(e).__name__}")
            print(util.highlight_error(expr, e), file=err)
            ok = False
    return ok


async def serve(version: str):
    """
    Run the web service until interrupted.
    """
    srv = server.Server(config.load_config(), version)
    await srv.start()
    try:
        await srv.wait_closed()
    finally:
        await srv.stop()
        logger.info("Server has been shut down. Goodbye.")


def main(argv: typing.Optional[typing.List[str]] = None, version: str = "") -> int:
    """
    Run the command line interface. Returns the exit status.
    """
    argparser = argparse.ArgumentParser(prog="exprtex", description="Convert simple math expressions into LaTeX.")
    argparser.add_argument("expressions", nargs="*", help="expressions to convert (default: read from stdin)")
    argparser.add_argument("--serve", action="store_true", help="run the conversion web service")
    argparser.add_argument("--version", action="version", version=f"exprtex {version}")
    args = argparser.parse_args(argv)

    if args.serve:
        logger.info(f"-------- Starting exprtex {version} --------")
        try:
            asyncio.run(serve(version))
        except KeyboardInterrupt:
            pass
        return 0
    exprs = args.expressions or sys.stdin
    return 0 if convert_all(exprs, sys.stdout, sys.stderr) else 1
