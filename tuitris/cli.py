import argparse
import curses
import random
import sys

from tuitris import __version__
from tuitris.config import GRAVITY_RATE, INPUT_RATE, LOOP_RATE, POLL_TIMEOUT
from tuitris.game import App
from tuitris.log import setup_logging
from tuitris.screen import CursesScreen


def positive_seconds(value):
    seconds = float(value)
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive number of seconds")
    return seconds


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="tuitris", description="Terminal falling-block puzzle")
    p.add_argument("--gravity", type=positive_seconds, default=GRAVITY_RATE,
                   help=f"seconds between gravity steps (default: {GRAVITY_RATE})")
    p.add_argument("--input-rate", type=positive_seconds, default=INPUT_RATE,
                   help=f"seconds between input polls (default: {INPUT_RATE})")
    p.add_argument("--poll-timeout", type=positive_seconds, default=POLL_TIMEOUT,
                   help=f"longest wait for a key press (default: {POLL_TIMEOUT})")
    p.add_argument("--loop-rate", type=positive_seconds, default=LOOP_RATE,
                   help=f"fixed loop tick in seconds (default: {LOOP_RATE})")
    p.add_argument("--seed", type=int, default=None, help="seed the piece randomizer")
    p.add_argument("--log-file", default=None, help="write a log to this file")
    p.add_argument("--debug", action="store_true", help="log every action")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p.parse_args(argv)


def run(stdscr, args):
    screen = CursesScreen(stdscr)
    app = App(input_rate=args.input_rate, loop_rate=args.loop_rate,
              gravity_rate=args.gravity, poll_timeout=args.poll_timeout)
    app.board.spawn()
    app.game_loop(screen)


def main(argv=None):
    args = parse_args(argv)
    logger = setup_logging(args.log_file, args.debug)
    if args.seed is not None:
        random.seed(args.seed)

    # curses.wrapper restores the terminal on every way out, exceptions included
    try:
        curses.wrapper(run, args)
    except curses.error as e:
        logger.error("terminal I/O failed: %s", e)
        print(f"tuitris: terminal I/O failed: {e}", file=sys.stderr)
        return 1
    return 0
