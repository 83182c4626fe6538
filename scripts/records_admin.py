#!/usr/bin/env python3
"""Operator commands for the interview_records table.

Usage:
    python scripts/records_admin.py count
    python scripts/records_admin.py list
    python scripts/records_admin.py set-type 이재원 오동욱 --type DEPTH

Environment Variables:
    DATABASE_URL: PostgreSQL connection string (read through the app settings)
"""

import argparse
import asyncio
from datetime import UTC, datetime

from interview_mate.core.database import db
from interview_mate.core.logging import setup_logging
from interview_mate.models.interview import InterviewType
from interview_mate.services.maintenance import (
    count_records,
    list_record_names,
    set_interview_type,
)


def _format_ms(value: int) -> str:
    return datetime.fromtimestamp(value / 1000, tz=UTC).strftime("%Y-%m-%d %H:%M")


async def run(args: argparse.Namespace) -> None:
    await db.connect()
    try:
        if args.command == "count":
            print(f"Total records: {await count_records()}")

        elif args.command == "list":
            for row in await list_record_names():
                print(f"{_format_ms(row['created_at'])}  {row['name'] or '(no name)'}  {row['id']}")

        elif args.command == "set-type":
            results = await set_interview_type(args.names, InterviewType(args.type))
            for name, count in results.items():
                status = f"updated {count}" if count else "no records found"
                print(f"{name}: {status}")
    finally:
        await db.disconnect()


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Interview record maintenance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("count", help="Count all records")
    subparsers.add_parser("list", help="List candidate names with created timestamps")

    set_type = subparsers.add_parser("set-type", help="Set the interview type by candidate name")
    set_type.add_argument("names", nargs="+", help="Candidate names to update")
    set_type.add_argument(
        "--type",
        choices=[t.value for t in InterviewType],
        default=InterviewType.DEPTH.value,
        help="Interview type to set (default: DEPTH)",
    )

    args = parser.parse_args()
    setup_logging()
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
