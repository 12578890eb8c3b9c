# earbud_tracker/shell_adapter.py

import logging
from typing import Callable, List, Optional

from earbud_tracker.common.errors import InvalidInputError, TrackerError
from earbud_tracker.common.utils import format_record, summary_line
from earbud_tracker.config import DEFAULT_RECENT_LIMIT
from earbud_tracker.record_store import EarbudRecord, RecordStore

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

MENU_TEXT = (
    "\n=== Earbud Tracker ===\n"
    "1. Report Lost Earbuds\n"
    "2. Report Found Earbuds\n"
    "3. Search for Lost Earbuds\n"
    "4. Exit"
)
MENU_PROMPT = "Choose an option (1-4): "

SEARCH_MENU_TEXT = (
    "\n=== Search Lost Earbuds ===\n"
    "1. Search by brand/color\n"
    "2. View recent reports"
)
SEARCH_PROMPT = "Choose search option (1-2): "

REPORT_LOST, REPORT_FOUND, SEARCH, EXIT = 1, 2, 3, 4

FAREWELL = "Thank you for using Earbud Tracker!"


def parse_choice(text: str, low: int, high: int) -> int:
    """
    Parse a numeric menu answer in [low, high].

    Raises:
        InvalidInputError: on empty, non-numeric or out-of-range input
    """
    text = text.strip()
    if not text:
        raise InvalidInputError(f"Please enter a number between {low} and {high}.")
    try:
        choice = int(text)
    except ValueError:
        raise InvalidInputError("Please enter a valid number.") from None
    if not low <= choice <= high:
        raise InvalidInputError(f"Invalid option. Please enter a number between {low} and {high}.")
    return choice


def ask_choice(read: Reader, write: Writer, prompt: str, low: int, high: int) -> int:
    """Prompt until the answer parses, echoing the reason for every rejection"""
    while True:
        try:
            return parse_choice(read(prompt), low, high)
        except InvalidInputError as e:
            logger.debug(f"Rejected input for {prompt!r}: {e}")
            write(str(e))


def handle_lost_flow(store: RecordStore, read: Reader = input, write: Writer = print) -> EarbudRecord:
    write("\n=== Report Lost Earbuds ===")
    brand = read("Enter brand: ")
    color = read("Enter color: ")
    location = read("Enter location where lost: ")

    record = store.create(brand, color, location)

    write("\nEarbuds reported as lost. Here are the details:")
    write(format_record(record))
    return record


def handle_found_flow(store: RecordStore, read: Reader = input, write: Writer = print) -> Optional[EarbudRecord]:
    """
    List the lost records, numbered from 1, and mark the selected one found.
    Returns the updated record, or None when there was nothing to pick or the
    user cancelled with 0.
    """
    write("\n=== Report Found Earbuds ===")
    candidates = store.lost()
    if not candidates:
        write("No lost earbuds in the system.")
        return None

    write("Select which earbuds were found:")
    for position, record in enumerate(candidates, start=1):
        write(summary_line(position, record))

    choice = ask_choice(read, write, "Enter the number (or 0 to cancel): ", 0, len(candidates))
    if choice == 0:
        write("Cancelled.")
        return None

    record = store.mark_found(candidates[choice - 1].id)
    write("\nEarbuds marked as found!")
    write(format_record(record))
    return record


def handle_search_flow(
        store: RecordStore,
        read: Reader = input,
        write: Writer = print,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
) -> List[EarbudRecord]:
    """Run the search sub-menu and return the records that were shown"""
    write(SEARCH_MENU_TEXT)
    option = read(SEARCH_PROMPT).strip()

    if option == "1":
        brand = read("Enter brand to search (leave blank to skip): ")
        color = read("Enter color to search (leave blank to skip): ")

        matches = store.search(brand=brand, color=color)
        write("\nMatching lost earbuds:")
        if not matches:
            write("No matching lost earbuds found.")
        for record in matches:
            write(format_record(record))
        return matches

    if option == "2":
        recent = list(store.recent(recent_limit))
        write("\nMost recent reports:")
        if not recent:
            write("No recent lost earbud reports found.")
        for record in recent:
            write(format_record(record))
        return recent

    write("Invalid option. Please try again.")
    return []


def run_menu(
        store: RecordStore,
        read: Reader = input,
        write: Writer = print,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
) -> None:
    """
    Main menu loop. Returns when the user picks Exit or input ends
    (EOF / Ctrl+C); bad input only re-prompts.
    """
    try:
        while True:
            write(MENU_TEXT)
            try:
                choice = parse_choice(read(MENU_PROMPT), REPORT_LOST, EXIT)
            except InvalidInputError as e:
                write(str(e))
                continue

            if choice == EXIT:
                break

            try:
                if choice == REPORT_LOST:
                    handle_lost_flow(store, read, write)
                elif choice == REPORT_FOUND:
                    handle_found_flow(store, read, write)
                elif choice == SEARCH:
                    handle_search_flow(store, read, write, recent_limit)
            except TrackerError as e:
                logger.error(f"Menu option {choice} failed: {e}")
                write(f"An error occurred: {e}")
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, leaving the menu")
        write("")

    write(FAREWELL)
