"""Base utilities for SQLAlchemy models."""
from datetime import datetime, UTC

from sqlalchemy import Column, DateTime
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import relationship


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TimestampMixin:
    """Adds ``created_at``/``updated_at`` bookkeeping columns."""

    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=True)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=True)


def has_many(owner: str, target: str, local_key: str, foreign_key: str | None = None, **kwargs):
    """Declare a collection of ``target`` rows keyed on ``owner.local_key``.

    Rows arrive from the game API in no particular order, so the tables carry
    no database-level foreign keys; the join is declared explicitly instead.
    Collections are never loaded implicitly (``lazy="raise"``). Request them
    with ``selectinload()`` when needed.

    Args:
        owner: Class name of the model declaring the relationship
        target: Class name of the related model
        local_key: Attribute on ``owner`` holding the key
        foreign_key: Attribute on ``target`` referencing it (defaults to ``local_key``)
        **kwargs: Extra keyword arguments passed to ``relationship()``

    Example:
        assets = has_many("CorporationInfo", "CorporationAsset", "corporation_id")
    """
    foreign_key = foreign_key or local_key
    kwargs.setdefault("lazy", "raise")
    return relationship(
        target,
        primaryjoin=f"{owner}.{local_key} == foreign({target}.{foreign_key})",
        uselist=True,
        viewonly=True,
        **kwargs,
    )


def has_one(owner: str, target: str, local_key: str, foreign_key: str | None = None, **kwargs):
    """Declare a single ``target`` row keyed on ``owner.local_key`` (eagerly loaded)."""
    foreign_key = foreign_key or local_key
    kwargs.setdefault("lazy", "selectin")
    return relationship(
        target,
        primaryjoin=f"{owner}.{local_key} == foreign({target}.{foreign_key})",
        uselist=False,
        viewonly=True,
        **kwargs,
    )


def belongs_to(owner: str, target: str, local_key: str, owner_key: str, **kwargs):
    """Declare the ``target`` row whose ``owner_key`` matches ``owner.local_key``."""
    kwargs.setdefault("lazy", "selectin")
    return relationship(
        target,
        primaryjoin=f"foreign({owner}.{local_key}) == {target}.{owner_key}",
        uselist=False,
        viewonly=True,
        **kwargs,
    )


def with_default(relation: str, **defaults):
    """Expose ``relation`` as a property that falls back to a placeholder.

    When no related row exists, a transient instance of the relationship's
    target class is built from ``defaults``. Callable defaults are evaluated
    on every access so that configuration changes are picked up. The
    placeholder is never attached to a session.

    Example:
        alliance_or_default = with_default("alliance", alliance_id=0, name="")
    """

    def _resolve(self):
        related = getattr(self, relation)
        if related is not None:
            return related
        target = sa_inspect(type(self)).relationships[relation].mapper.class_
        values = {key: value() if callable(value) else value for key, value in defaults.items()}
        return target(**values)

    _resolve.__doc__ = f"Return ``{relation}`` or a placeholder when no row exists."
    return property(_resolve)
