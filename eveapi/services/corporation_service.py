"""Corporation lookups and purging."""
import logging
from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from eveapi.models import CorporationInfo

logger = logging.getLogger(__name__)


class CorporationServiceError(RuntimeError):
    """Raised when a corporation operation fails."""


class CorporationNotFoundError(CorporationServiceError):
    """Raised when the requested corporation does not exist."""

    def __init__(self, corporation_id: int):
        super().__init__(f"Corporation {corporation_id} not found")
        self.corporation_id = corporation_id


class CorporationService:
    """Service for reading and purging corporation data."""

    # Related collections removed before the corporation row itself, in order
    CASCADE_ORDER = (
        "alliance_history",
        "assets",
        "blueprints",
        "bookmarks",
        "bookmark_folders",
        "contacts",
        "contact_labels",
        "container_logs",
        "contracts",
        "pocos",
        "divisions",
        "facilities",
        "industry_jobs",
        "mining_extractions",
        "issued_medals",
        "killmails",
        "medals",
        "member_limit",
        "member_titles",
        "member_tracking",
        "members",
        "orders",
        "roles",
        "role_history",
        "shareholders",
        "standings",
        "starbases",
        "structures",
        "titles",
        "title_roles",
        "wallet_balances",
        "wallet_journal",
        "wallet_transactions",
    )

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _related_model(relation: str):
        """Return the model class behind a CorporationInfo relationship."""
        return sa_inspect(CorporationInfo).relationships[relation].mapper.class_

    async def get_corporation(self, corporation_id: int, *relations: str) -> Optional[CorporationInfo]:
        """
        Load a corporation sheet.

        Args:
            corporation_id: Corporation to load
            *relations: Collection relationships to load alongside it

        Returns:
            The corporation, or None when it is unknown
        """
        stmt = select(CorporationInfo).where(CorporationInfo.corporation_id == corporation_id)
        for relation in relations:
            stmt = stmt.options(selectinload(getattr(CorporationInfo, relation)))

        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def count_related(self, corporation_id: int) -> dict[str, int]:
        """Count the rows a purge would remove, in purge order."""
        counts: dict[str, int] = {}
        for relation in self.CASCADE_ORDER:
            model = self._related_model(relation)
            result = await self.db.execute(
                select(func.count()).select_from(model).where(model.corporation_id == corporation_id)
            )
            counts[relation] = result.scalar() or 0

        return counts

    async def delete_corporation(self, corporation_id: int) -> dict[str, int]:
        """
        Delete a corporation and every collection it owns.

        Related collections are deleted in ``CASCADE_ORDER`` and the
        corporation row last, inside a single transaction. Shared reference
        data (characters, alliances, resolved names) is left untouched.

        Args:
            corporation_id: Corporation to purge

        Returns:
            Deleted row counts keyed by relationship name, ending with
            ``corporation_infos``

        Raises:
            CorporationNotFoundError: If no corporation row exists
        """
        exists = await self.db.execute(
            select(CorporationInfo.corporation_id).where(CorporationInfo.corporation_id == corporation_id)
        )
        if exists.scalar_one_or_none() is None:
            raise CorporationNotFoundError(corporation_id)

        deletion_counts: dict[str, int] = {}
        try:
            for relation in self.CASCADE_ORDER:
                model = self._related_model(relation)
                result = await self.db.execute(
                    delete(model).where(model.corporation_id == corporation_id)
                )
                deletion_counts[relation] = result.rowcount or 0
                logger.debug(
                    f"Deleted {deletion_counts[relation]} {relation} row(s) for corporation {corporation_id}"
                )

            result = await self.db.execute(
                delete(CorporationInfo).where(CorporationInfo.corporation_id == corporation_id)
            )
            deletion_counts[CorporationInfo.__tablename__] = result.rowcount or 0

            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.error(f"Failed to delete corporation {corporation_id}; changes rolled back")
            raise

        related_deleted = sum(deletion_counts[relation] for relation in self.CASCADE_ORDER)
        logger.info(f"Deleted corporation {corporation_id} and {related_deleted} related record(s)")

        return deletion_counts
