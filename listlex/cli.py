"""
Command-line harness for the list lexer.

Tokenizes strings given on the command line (or files with --file) and
prints either the token stream or the error for each one. Without input it
runs the demonstration inputs below.
"""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional, Tuple

from . import __version__
from .lexer import Token, LexerError, tokenize, tokenize_file

logger = logging.getLogger(__name__)

DEMO_INPUTS = [
    "",
    ",",
    ";",
    "[]",
    "[[[",
    "foo",
    "[foo]",
    "[foo, bar]",
]


def format_tokens(tokens: List[Token]) -> str:
    return "[" + ", ".join(str(token) for token in tokens) + "]"


def _outcome_as_dict(label: str, tokens: Optional[List[Token]], error: Optional[LexerError]) -> Dict:
    if error is not None:
        return {
            "input": label,
            "ok": False,
            "error": {
                "message": error.message,
                "character": getattr(error, "character", None),
                "location": str(error.location),
                "code": error.diagnostic.code,
            },
        }
    return {
        "input": label,
        "ok": True,
        "tokens": [
            {"type": token.type.name, "value": token.value} for token in tokens
        ],
    }


def _run_one(source: Optional[str], path: Optional[str]) -> Tuple[Optional[List[Token]], Optional[LexerError]]:
    try:
        if path is not None:
            return tokenize_file(path), None
        return tokenize(source), None
    except LexerError as e:
        return None, e


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the listlex command"""
    
    parser = argparse.ArgumentParser(
        prog="listlex",
        description="Tokenize bracketed lists such as '[foo, bar]'",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    listlex                          # Run the demonstration inputs
    listlex "[foo, bar]"             # Tokenize a string
    listlex --file items.txt --json  # Tokenize a file, JSON output
        """
    )
    
    parser.add_argument('inputs', nargs='*',
                      help='Strings to tokenize')
    parser.add_argument('--file', action='append', default=[], dest='files', metavar='PATH',
                      help='Tokenize the contents of a file (repeatable)')
    parser.add_argument('--json', action='store_true',
                      help='Output results in JSON format')
    parser.add_argument('-v', '--verbose', action='store_true',
                      help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    
    args = parser.parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    
    jobs = [(repr(text), text, None) for text in args.inputs]
    jobs += [(path, None, path) for path in args.files]
    if not jobs:
        logger.debug("No input given, running %d demonstration inputs", len(DEMO_INPUTS))
        jobs = [(repr(text), text, None) for text in DEMO_INPUTS]
    
    failed = False
    results = []
    for label, source, path in jobs:
        try:
            tokens, error = _run_one(source, path)
        except OSError as e:
            print(f"{label} -> cannot read file: {e}", file=sys.stderr)
            failed = True
            continue
        
        failed = failed or error is not None
        if args.json:
            results.append(_outcome_as_dict(label, tokens, error))
        elif error is not None:
            print(f"{label} -> error: {error.message} at {error.location}")
        else:
            print(f"{label} -> {format_tokens(tokens)}")
    
    if args.json:
        print(json.dumps(results, indent=2))
    
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
