from __future__ import annotations

import argparse
import sys
from datetime import datetime, timedelta, timezone

import uvicorn

from app.commands import CommandError, ParseError
from app.core.config import get_settings
from app.core.logging import configure_logging
from app.db.initializer import create_database_schema
from app.db.session import SessionLocal
from app.domain import Attendee, Meeting
from app.repositories import meetings as meetings_repo
from app.services.commands import CommandService
from app.services.storage import load_meeting_book, store_meetings

SAMPLE_MEETINGS = [
    ("Standup", "Room 1", ["Alice Pauline", "Benson Meier"]),
    ("Design review", "Room 2", ["Carl Kurz", "Daniel Meier", "Elle Meyer"]),
    ("Retrospective", "Zoom", ["Fiona Kunz"]),
]


def seed_meetings() -> int:
    base_start = datetime.now(tz=timezone.utc).replace(hour=9, minute=0, second=0, microsecond=0)
    meetings = [
        Meeting(
            title=title,
            location=location,
            start=base_start + timedelta(days=index),
            end=base_start + timedelta(days=index, hours=1),
            attendees=tuple(Attendee(name=name) for name in attendees),
        )
        for index, (title, location, attendees) in enumerate(SAMPLE_MEETINGS)
    ]

    with SessionLocal() as session:
        meetings_repo.save_meetings(session, meetings)
        session.commit()
    return len(meetings)


def print_meetings() -> None:
    book = load_meeting_book()
    for index, meeting in enumerate(book.get_filtered_meeting_list(), start=1):
        print(f"{index}. {meeting.title} @ {meeting.location} ({meeting.start:%Y-%m-%d %H:%M} - {meeting.end:%H:%M})")
        for attendee_index, attendee in enumerate(meeting.attendees, start=1):
            print(f"   {attendee_index}. {attendee.name}")


def run_command(command_text: str) -> int:
    service = CommandService(load_meeting_book(), store=store_meetings)
    try:
        result = service.execute(command_text)
    except (CommandError, ParseError) as exc:
        print(exc.message, file=sys.stderr)
        return 1
    print(result.feedback_to_user)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="meeting-book", description="Manage meeting attendees from the shell.")
    subparsers = parser.add_subparsers(dest="action", required=True)
    subparsers.add_parser("seed", help="replace stored meetings with sample data")
    subparsers.add_parser("list", help="print stored meetings with their positions")
    subparsers.add_parser("serve", help="start the HTTP API")
    run_parser = subparsers.add_parser("run", help="execute one command, e.g. 'rmmc 1 2'")
    run_parser.add_argument("command_text", nargs="+")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)
    create_database_schema()

    if args.action == "seed":
        print(f"Seeded {seed_meetings()} sample meetings.")
        return 0
    if args.action == "list":
        print_meetings()
        return 0
    if args.action == "serve":
        uvicorn.run("app.main:app", host="0.0.0.0", port=get_settings().app_port)
        return 0
    return run_command(" ".join(args.command_text))


if __name__ == "__main__":
    sys.exit(main())
