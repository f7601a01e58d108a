# src/rcat/cli.py
import sys
import argparse
import os
from typing import List, Optional

# Module imports
from rcat.config import DESCRIPTION, EPILOG, EXIT_FAILURE, PROG_NAME, USAGE
from rcat.core.concat import Concatenator

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        usage=USAGE,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="A path to a file. Repeat for more files.")
    return parser

def find_invalid_options(extras: List[str]) -> List[str]:
    """Returns the leftover arguments that look like options."""
    return [arg for arg in extras if arg.startswith("-") and arg != "-"]

def split_at_separator(argv: List[str]):
    """Splits argv at the first '--'. Everything after it is a literal path."""
    if "--" in argv:
        idx = argv.index("--")
        return argv[:idx], argv[idx + 1:]
    return argv, []

def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    option_args, literal_paths = split_at_separator(list(argv))

    parser = create_arg_parser()
    # -h/--help exits here, before any file is touched
    args, extras = parser.parse_known_args(option_args)

    # argparse keeps number-like tokens such as "-1" as positionals, so check the raw args
    invalid_opts = find_invalid_options(option_args)
    if invalid_opts:
        parser.error(f"Unrecognized option(s): {', '.join(invalid_opts)}\nSee {PROG_NAME} --help")

    # Anything else argparse could not place is still a path
    paths = args.paths + extras + literal_paths

    try:
        return Concatenator().run(paths)

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return EXIT_FAILURE

    except BrokenPipeError:
        # Reader went away (e.g. `rcat f | head`); silence the final flush at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
        return EXIT_FAILURE

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        return EXIT_FAILURE

if __name__ == "__main__":
    sys.exit(main())
