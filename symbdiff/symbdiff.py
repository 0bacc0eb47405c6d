import argparse
import logging
import sys

from symbdiff import graph
from symbdiff.config import load_settings, setup_logging
from symbdiff.grammar import parse
from symbdiff.lexer import ScanError, Session, scan
from symbdiff.pprinter import dump_tree

logger = logging.getLogger(__name__)

BANNER = "SymbDiff ('q'/'exit'/'quit'/CTRL-C to exit)"
EXIT_COMMANDS = ("q", "quit", "exit")
TERM_SEPARATOR = " + "


def differentiate_line(line, session):
    """Scan and parse one line. Raises ScanError, returns the AST otherwise.

    The returned AST is a BotchedExpr when the line does not parse.
    """
    tokens = scan(line, session)
    logger.debug("tokens: %s", tokens)
    ast = parse(tokens)
    if not ast.is_botched:
        logger.debug("parsed ast:\n%s", dump_tree(ast))
    return ast


def differentiate(ast):
    """Derivative of ast as a list of terms whose sum is the derivative."""
    if ast.is_botched:
        raise ValueError(f"cannot differentiate a botched expression: {ast.message}")
    return ast.derive_symbolic()


def format_terms(terms, var):
    return TERM_SEPARATOR.join(term.to_string(var) for term in terms)


def run_line(line, session, settings, graph_name="expression"):
    """Process one line, returning (ok, text) where text is what to show."""
    try:
        ast = differentiate_line(line, session)
    except ScanError as exc:
        logger.debug("scan failed: %s", exc.message)
        return False, f"Error: {exc.message}"

    if ast.is_botched:
        return False, f"Error: {ast.message}"

    terms = differentiate(ast)
    output = format_terms(terms, session.variable)
    if settings.show_ast:
        output = f"{ast.to_ast_string()}\n{output}"
    if settings.graph_dir:
        graph.render_line(settings.graph_dir, graph_name, ast, terms, session.variable)
    return True, output


def repl(stdin, stdout, settings, session=None):
    if session is None:
        session = Session()

    print(BANNER, file=stdout)
    count = 0
    while True:
        stdout.write(settings.prompt)
        stdout.flush()

        line = stdin.readline()
        if not line:
            print("quit...", file=stdout)
            return session

        line = line.rstrip("\r\n")
        command = line.strip()
        if command in EXIT_COMMANDS:
            print("quit.." if command == "q" else "quit...", file=stdout)
            return session
        if not command:
            continue

        count += 1
        _, output = run_line(line, session, settings, graph_name=f"line-{count}")
        print(output, file=stdout)


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="symbdiff",
        description="Differentiate single-variable polynomial expressions.")
    parser.add_argument("expression", nargs="?",
                        help="differentiate this expression and exit instead of "
                             "starting the interactive loop")
    parser.add_argument("--log-level", default=None,
                        help="logging level (default: $SYMBDIFF_LOG_LEVEL or WARNING)")
    parser.add_argument("--show-ast", action="store_true", default=None,
                        help="print the parsed AST before the derivative")
    parser.add_argument("--graph-dir", default=None,
                        help="render each expression and its derivative as SVG here")
    parser.add_argument("--prompt", default=None,
                        help="prompt shown by the interactive loop")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    settings = load_settings()
    if args.log_level is not None:
        settings.log_level = args.log_level.upper()
    if args.show_ast is not None:
        settings.show_ast = args.show_ast
    if args.graph_dir is not None:
        settings.graph_dir = args.graph_dir
    if args.prompt is not None:
        settings.prompt = args.prompt

    setup_logging(settings.log_level)
    logger.debug("settings: %s", settings)

    if args.expression is not None:
        ok, output = run_line(args.expression, Session(), settings)
        print(output)
        return 0 if ok else 1

    try:
        repl(sys.stdin, sys.stdout, settings)
    except KeyboardInterrupt:
        print("\nquit...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
