"""Lesson Shop management CLI.

Usage:
    python src/manage.py seed-lessons             # Load the default catalogue
    python src/manage.py seed-lessons --spaces 8  # ...with 8 spaces per lesson
    python src/manage.py list-lessons             # Print the catalogue
"""

import argparse
import sys


def seed_catalogue(spaces):
    """Load the default lessons into an empty catalogue."""
    from catalogue.domain import catalogue
    from catalogue.lesson.seed import seed_lessons

    print("Initializing catalogue domain...")
    catalogue.init()
    with catalogue.domain_context():
        added = seed_lessons(spaces=spaces)

    if added:
        print(f"  Added {added} lessons.")
    else:
        print("  Catalogue already has lessons; nothing added.")
    print("Done.")


def list_catalogue():
    """Print every lesson in the catalogue."""
    from catalogue.domain import catalogue
    from catalogue.lesson.lesson import Lesson
    from protean.utils.globals import current_domain

    catalogue.init()
    with catalogue.domain_context():
        lessons = current_domain.repository_for(Lesson).list_all()

    for lesson in sorted(lessons, key=lambda lesson: lesson.subject.lower()):
        print(f"{lesson.id}  {lesson.subject:<20} {lesson.location:<15} {lesson.price:>8.2f}  spaces={lesson.spaces}")
    print(f"{len(lessons)} lessons.")


def main():
    parser = argparse.ArgumentParser(description="Lesson Shop management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    seed_parser = subparsers.add_parser("seed-lessons", help="Load the default lesson catalogue")
    seed_parser.add_argument(
        "--spaces",
        type=int,
        default=5,
        help="Open spaces per lesson (default: 5)",
    )

    subparsers.add_parser("list-lessons", help="Print every lesson in the catalogue")

    args = parser.parse_args()

    if args.command == "seed-lessons":
        seed_catalogue(args.spaces)
    elif args.command == "list-lessons":
        list_catalogue()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
