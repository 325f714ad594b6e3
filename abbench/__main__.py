"""Main entry point for the abbench package.

Usage:
    python -m abbench sweep
    python -m abbench sweep -u http://127.0.0.1:8000/ -n 1000 -c 100 -s 10 -i 30
    python -m abbench sweep --tools ab,hey --interval 0 --chart throughput.png
    python -m abbench serve --port 8000
"""

import sys


def main():
    """Main entry point that dispatches to subcommands."""
    if len(sys.argv) < 2:
        print_help()
        sys.exit(1)

    command = sys.argv[1]

    if command in ["-h", "--help", "help"]:
        print_help()
        sys.exit(0)

    # Subcommand parsers only see their own arguments
    argv = sys.argv[2:]

    if command == "sweep":
        from .cli.sweep import main as sweep_main

        sys.exit(sweep_main(argv))
    elif command == "serve":
        from .cli.serve import main as serve_main

        sys.exit(serve_main(argv))
    else:
        print(f"Unknown command: {command}", file=sys.stderr)
        print_help()
        sys.exit(1)


def print_help():
    """Print help message."""
    print(
        """abbench - compare HTTP load-testing tools across concurrency levels

Usage: python -m abbench <command> [options]

Commands:
    sweep     Run ab, go-ab and hey at each concurrency level and print a TSV table
    serve     Run a 'Hello, world' HTTP server to benchmark against

Examples:
    # Default sweep: 1,10,...,100 concurrent clients, 1000 requests, 30s between levels
    python -m abbench sweep

    # Quick comparison of two tools without waiting between levels
    python -m abbench sweep --tools ab,hey -c 50 -s 25 -i 0

    # Save the table and a chart as well
    python -m abbench sweep --tsv-output results.tsv --chart throughput.png

For command-specific help:
    python -m abbench <command> --help
"""
    )


if __name__ == "__main__":
    main()
