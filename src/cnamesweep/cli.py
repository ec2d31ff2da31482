import argparse
import signal
import sys
import threading

from cnamesweep.config import logger, configure_logging, make_config, DEFAULT_CONCURRENCY, DEFAULT_TIMEOUT, DEFAULT_RETRIES
from cnamesweep.scanner import DanglingCnameScanner


def build_parser():
    parser = argparse.ArgumentParser(description="Detect dangling CNAME records and likely subdomain takeovers. "
                                                 "Reads one domain per line from stdin (or --input).")
    parser.add_argument("-c", "--concurrency", type=int, default=DEFAULT_CONCURRENCY,
                        help=f"Number of concurrent workers (default: {DEFAULT_CONCURRENCY}).")
    parser.add_argument("-t", "--timeout", type=float, default=DEFAULT_TIMEOUT,
                        help=f"DNS query timeout in seconds (default: {DEFAULT_TIMEOUT:g}).")
    parser.add_argument("-r", "--retries", type=int, default=DEFAULT_RETRIES,
                        help=f"Number of retries for failed queries (default: {DEFAULT_RETRIES}).")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Verbose output: show resolving CNAMEs and per-domain errors.")
    parser.add_argument("-i", "--input", help="Read domains from this file instead of stdin.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = make_config(concurrency=args.concurrency, timeout=args.timeout,
                             retries=args.retries, verbose=args.verbose)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.verbose)

    stop_event = threading.Event()

    def handle_interrupt(sig, frame):
        logger.warning("Interrupted. Finishing queued domains before exiting...")
        stop_event.set()
        # A second Ctrl-C falls through to the previous handler and aborts
        signal.signal(signal.SIGINT, previous_handler)

    previous_handler = signal.signal(signal.SIGINT, handle_interrupt)
    try:
        scanner = DanglingCnameScanner(config)
        if not args.input:
            scanner.run(sys.stdin, stop_event)
            return 0

        try:
            f = open(args.input, "r", encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not open input file {args.input}: {e}")
            return 1
        with f:
            scanner.run(f, stop_event)
        return 0
    finally:
        signal.signal(signal.SIGINT, previous_handler)


if __name__ == "__main__":
    sys.exit(main())
