"""Sample catalog and a command-line walkthrough of the inventory."""

import logging

from library_inventory.core.logging import setup_logging
from library_inventory.domain import Book, BookCategory
from library_inventory.repositories.in_memory import InMemoryInventoryRepository
from library_inventory.services import LibraryService

logger = logging.getLogger(__name__)

ODYSSEY = Book("9780140449136", "The Odyssey", "Homer", BookCategory.NORMAL)
ILIAD = Book("9780140449181", "The Iliad", "Homer", BookCategory.NORMAL)
DICTIONARY = Book(
    "9780199535569", "Oxford English Dictionary", "Oxford", BookCategory.REFERENCE
)

SAMPLE_CATALOG: tuple[tuple[Book, int], ...] = (
    (ODYSSEY, 3),
    (ILIAD, 2),
    (DICTIONARY, 1),
)


def seed_sample_data(service: LibraryService) -> None:
    """Stock the sample catalog."""
    for book, copies in SAMPLE_CATALOG:
        service.add_book(book, copies)
    logger.info(f"Seeded {len(SAMPLE_CATALOG)} sample books")


def run(service: LibraryService) -> list[str]:
    """Exercise the service against the sample catalog.

    Returns:
        The report lines, in order
    """
    seed_sample_data(service)
    lines = ["By author Homer:"]

    by_author = sorted(service.find_by_author("Homer"), key=lambda a: a.book.isbn)
    if not by_author:
        lines.append("- no matches")
    for availability in by_author:
        lines.append(
            f"- {availability.book.title} (available {availability.available_copies})"
        )

    lines.extend(
        [
            f"Can borrow The Odyssey: {service.can_borrow(ODYSSEY.isbn)}",
            f"Borrow The Odyssey: {service.borrow(ODYSSEY.isbn)}",
            f"Borrow Reference Book: {service.borrow(DICTIONARY.isbn)}",
            f"Total borrowed: {service.total_borrowed_count()}",
            f"Remaining by ISBN (The Odyssey): {service.remaining_by_isbn(ODYSSEY.isbn)}",
            f"Remaining by Title (The Iliad): {service.remaining_by_title(ILIAD.title)}",
            f"Remaining by Author (Homer): {service.remaining_by_author('Homer')}",
        ]
    )

    odyssey = service.find_by_isbn(ODYSSEY.isbn)
    lines.append(
        f"By ISBN: {odyssey.book.title} available {odyssey.available_copies}"
    )
    return lines


def main() -> None:
    """Entry point for the ``library-inventory-demo`` script."""
    setup_logging(level="WARNING")
    service = LibraryService(InMemoryInventoryRepository())
    for line in run(service):
        print(line)


if __name__ == "__main__":
    main()
