#! /usr/bin/env python3

# --------------------------------------------------------------------
# Requires Python3 >= 3.10

# --------------------------------------------------------------------
import argparse
import os
import sys

from arith.errors   import ArithError
from arith.lexer    import Lexer
from arith.parser   import Parser
from arith.reporter import Reporter

# ====================================================================
# Parse command line arguments

def parse_args(argv = None):
    parser = argparse.ArgumentParser(prog = os.path.basename(sys.argv[0]))

    source = parser.add_mutually_exclusive_group(required = True)
    source.add_argument('input', nargs = '?', help = 'input file')
    source.add_argument('-e', '--expr', help = 'expression to parse')

    parser.add_argument('--tokens', action = 'store_true',
                        help = 'print the tokens instead of the tree')
    parser.add_argument('--all', action = 'store_true',
                        help = 'print every top-level expression, not only the last')

    return parser.parse_args(argv)

# ====================================================================
# Main entry point

def read_source(args, reporter):
    if args.expr is not None:
        return args.expr

    try:
        with open(args.input, 'r', encoding = 'utf-8') as stream:
            return stream.read().rstrip('\n')

    except (OSError, UnicodeDecodeError) as e:
        reporter.crash(f'cannot read input file {args.input}: {e}')

def print_tokens(source, reporter):
    try:
        for token in Lexer(source):
            print(f'{token} {token.text(source)}')
    except ArithError as e:
        reporter.log(e)

def main(argv = None):
    args     = parse_args(argv)
    reporter = Reporter()

    reporter.checkpoint("input")
    source = read_source(args, reporter)
    reporter.source = source

    if args.tokens:
        reporter.checkpoint("lexing")
        print_tokens(source, reporter)
        reporter.checkpoint("end")
        return 0

    reporter.checkpoint("parsing")
    pool = Parser(reporter).parse(source)

    reporter.checkpoint("printing")
    try:
        root = pool.root()
        for ref in (pool.roots if args.all else [root]):
            print(pool.pprint(source, ref))
    except ArithError as e:
        reporter.log(e)

    reporter.checkpoint("end")
    return 0

# --------------------------------------------------------------------
if __name__ == '__main__':
    sys.exit(main())
