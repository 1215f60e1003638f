"""Entry point for `python -m brushgen`."""

import sys


def main():
    from brushgen.app import run_generator
    sys.exit(run_generator())


if __name__ == "__main__":
    main()
