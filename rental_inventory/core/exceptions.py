"""Domain-level exception hierarchy for service and repository layers.

Every concrete error carries a stable ``code`` plus the structured fields a
presentation layer needs to build its own message (entity kind, offending id
or value). The four families map onto HTTP statuses in ``api.errors``.
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for domain-specific failures."""

    code = "domain_error"

    def __init__(self, message: str = "", **context: Any) -> None:
        super().__init__(message)
        self.context = context


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    code = "not_found"


class ConflictError(DomainError):
    """Raised when a state conflict occurs (e.g. duplicate entries)."""

    code = "conflict"


class ValidationError(DomainError):
    """Raised when input validation fails at the domain/service layer."""

    code = "validation_error"


class InfrastructureError(DomainError):
    """Raised when infrastructure (DB or external service) is unavailable."""

    code = "infrastructure_error"


# --- not found ---


class EntityNotFoundError(NotFoundError):
    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} {entity_id} not found", entity=entity, entity_id=entity_id)
        self.entity = entity
        self.entity_id = entity_id


# --- uniqueness ---


class DuplicateAddressError(ConflictError):
    code = "duplicate_address"

    def __init__(self, address: str) -> None:
        super().__init__(f"rental point with address {address!r} already exists", address=address)
        self.address = address


class DuplicateNameError(ConflictError):
    code = "duplicate_name"

    def __init__(self, type_name: str) -> None:
        super().__init__(
            f"equipment type named {type_name!r} already exists", type_name=type_name
        )
        self.type_name = type_name


class DuplicatePairError(ConflictError):
    code = "duplicate_pair"

    def __init__(self, rental_point_id: int, equipment_type_id: int) -> None:
        super().__init__(
            f"equipment type {equipment_type_id} is already listed at rental point "
            f"{rental_point_id}",
            rental_point_id=rental_point_id,
            equipment_type_id=equipment_type_id,
        )
        self.rental_point_id = rental_point_id
        self.equipment_type_id = equipment_type_id


class ReferencedEntityError(ConflictError):
    """Raised when deleting an entity that inventory rows still point at."""

    code = "restrict_delete"

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(
            f"{entity} {entity_id} is still referenced by inventory records",
            entity=entity,
            entity_id=entity_id,
        )
        self.entity = entity
        self.entity_id = entity_id


# --- stock arithmetic ---


class InsufficientStockError(ConflictError):
    code = "insufficient_stock"

    def __init__(self, available: int, requested: int) -> None:
        super().__init__(
            f"not enough units to rent: available {available}, requested {requested}",
            available=available,
            requested=requested,
        )
        self.available = available
        self.requested = requested


class ExceedsTotalError(ConflictError):
    code = "exceeds_total"

    def __init__(self, total: int, resulting: int) -> None:
        super().__init__(
            f"return exceeds total count: total {total}, would be {resulting}",
            total=total,
            resulting=resulting,
        )
        self.total = total
        self.resulting = resulting


# --- input validation ---


class InvalidReferenceError(ValidationError):
    code = "invalid_reference"

    def __init__(self, entity: str, entity_id: int | None) -> None:
        if entity_id is None:
            message = f"{entity} must be specified"
        else:
            message = f"{entity} {entity_id} does not exist"
        super().__init__(message, entity=entity, entity_id=entity_id)
        self.entity = entity
        self.entity_id = entity_id


class InvariantViolationError(ValidationError):
    code = "invariant_violation"

    def __init__(self, available: int, total: int) -> None:
        super().__init__(
            f"available count ({available}) cannot exceed total count ({total})",
            available=available,
            total=total,
        )
        self.available = available
        self.total = total


class InvalidQuantityError(ValidationError):
    code = "invalid_quantity"

    def __init__(self, quantity: int) -> None:
        super().__init__(f"quantity must be positive, got {quantity}", quantity=quantity)
        self.quantity = quantity
