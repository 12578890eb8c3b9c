# tracker.py
import argparse
import logging
import sys

from dotenv import load_dotenv

from earbud_tracker import __version__
from earbud_tracker.common.errors import TrackerError
from earbud_tracker.config import Settings, load_settings
from earbud_tracker.record_store import RecordStore
from earbud_tracker.shell_adapter import run_menu

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    # stderr keeps log lines out of the menu on stdout
    handlers = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        format=LOG_FORMAT,
        level=settings.log_level,
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Earbud Tracker: lost & found for wireless earbuds")
    parser.add_argument("--recent-limit", type=int, default=None,
                        help="How many reports 'View recent reports' shows")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None, read=input, write=print) -> int:
    """
    Load settings, build a fresh store and run the interactive menu
    """
    args = build_parser().parse_args(argv)

    # Load environment from .env
    load_dotenv()

    try:
        settings = load_settings(recent_limit=args.recent_limit, log_level=args.log_level)
    except TrackerError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    configure_logging(settings)
    logger.info(f"Starting Earbud Tracker {__version__} (recent limit {settings.recent_limit})")

    store = RecordStore()
    run_menu(store, read=read, write=write, recent_limit=settings.recent_limit)

    logger.info(f"Session ended with {len(store)} record(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
