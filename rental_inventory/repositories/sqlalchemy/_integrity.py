"""Helpers to map database integrity errors onto domain errors."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rental_inventory.core.exceptions import DomainError


def constraint_name(exc: IntegrityError) -> str | None:
    """Best-effort constraint name for an IntegrityError.

    asyncpg exposes ``constraint_name`` on the driver exception, which SQLAlchemy
    chains as the cause of the adapted DBAPI error.
    """
    orig = getattr(exc, "orig", None)
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return str(name)
    return None


def matches_constraint(exc: IntegrityError, name: str) -> bool:
    found = constraint_name(exc)
    if found is not None:
        return found == name
    return name in str(getattr(exc, "orig", exc))


async def flush_or_raise(
    session: AsyncSession,
    errors: Mapping[str, Callable[[], DomainError]],
) -> None:
    """Flush pending changes; a violation of a constraint in ``errors`` raises its error."""
    try:
        await session.flush()
    except IntegrityError as exc:
        for constraint, error in errors.items():
            if matches_constraint(exc, constraint):
                raise error() from exc
        raise
