#!/usr/bin/env python3
"""
Delete a corporation and every collection it owns.

Usage:
    python delete_corporation.py 98000001             # Show counts, confirm, then delete
    python delete_corporation.py 98000001 --dry-run   # Only show what would be deleted
    python delete_corporation.py 98000001 -y          # Skip the confirmation prompt
"""
import argparse
import asyncio
import sys
from typing import Optional

from eveapi.database import AsyncSessionLocal
from eveapi.services import CorporationService


async def run_delete(
    corporation_id: int,
    dry_run: bool = False,
    verbose: bool = False,
    skip_confirmation: bool = False,
) -> Optional[dict[str, int]]:
    """
    Purge a corporation.

    Args:
        corporation_id: Corporation to purge
        dry_run: Show what would be deleted without actually deleting
        verbose: List tables with no rows as well
        skip_confirmation: Skip the confirmation prompt

    Returns:
        Deleted (or, for a dry run, matching) row counts per relationship,
        empty when the deletion is declined, None when the corporation is unknown
    """
    async with AsyncSessionLocal() as session:
        service = CorporationService(session)

        print("=" * 60)
        print(f"DELETE CORPORATION {corporation_id}")
        print("=" * 60)

        corporation = await service.get_corporation(corporation_id)
        if corporation is None:
            print(f"\nCorporation {corporation_id} not found.", file=sys.stderr)
            return None

        print(f"\n{corporation.name} [{corporation.ticker}]")
        if dry_run:
            print("\nDRY RUN MODE - No data will be deleted\n")

        counts = await service.count_related(corporation_id)
        for relation, count in counts.items():
            if count > 0 or verbose:
                print(f"  {relation}: {count}")
        print(f"\nRelated rows: {sum(counts.values())}")

        if dry_run:
            return counts

        if not skip_confirmation and sys.stdin and sys.stdin.isatty():
            confirm = input("\nDelete this corporation? (yes/no): ")
            if confirm.lower() not in ["yes", "y"]:
                print("Deletion skipped.")
                return {}

        try:
            deleted = await service.delete_corporation(corporation_id)
        except Exception as e:
            print(f"\nError during deletion: {e}", file=sys.stderr)
            raise

        print(f"\nDeleted: {sum(deleted.values())} total rows")
        return deleted


def main():
    """Main entry point for the corporation deletion script."""
    parser = argparse.ArgumentParser(
        description="Delete a corporation and all of its related data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s 98000001             # Show counts and ask before deleting
  %(prog)s 98000001 --dry-run   # Show what would be deleted
  %(prog)s 98000001 -y          # Delete without prompting
        """
    )
    parser.add_argument(
        "corporation_id",
        type=int,
        help="ID of the corporation to delete"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be deleted without actually deleting"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="List empty tables as well"
    )
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Skip confirmation prompt (for automated scripts)"
    )

    args = parser.parse_args()

    result = asyncio.run(run_delete(
        corporation_id=args.corporation_id,
        dry_run=args.dry_run,
        verbose=args.verbose,
        skip_confirmation=args.yes,
    ))

    if result is None:
        sys.exit(1)


if __name__ == "__main__":
    main()
