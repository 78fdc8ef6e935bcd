"""Unified error codes and custom exceptions.

Only hardened inputs raise. Expected user conditions (not enough tickets,
duplicate category, unknown id on update/delete) stay silent no-ops in the
domain layer and never reach this module.

Error code ranges:
  7xxx: Raffle (70xx: draw/catalog, 71xx: lookups used by the HTTP layer)
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 70xx: Raffle ---

class InvalidRangeError(AppError):
    def __init__(self, start: int, end: int) -> None:
        super().__init__(7001, f"Invalid ticket range: end {end} < start {start}", 422)


class InvalidGroupSizeError(AppError):
    def __init__(self, group_size: object) -> None:
        super().__init__(7002, f"Group size must be a positive integer, got {group_size!r}", 422)


class PrizeAlreadyAssignedError(AppError):
    def __init__(self, prize_id: str) -> None:
        super().__init__(7003, f"Prize {prize_id} is already assigned and cannot be edited", 409)


class CategoryNotFoundError(AppError):
    def __init__(self, category: str) -> None:
        super().__init__(7004, f"Category not found: {category}", 404)


class CategoryInUseError(AppError):
    def __init__(self, category: str) -> None:
        super().__init__(7005, f"Category {category} still has prizes", 409)


class DuplicateCategoryError(AppError):
    def __init__(self, category: str) -> None:
        super().__init__(7006, f"Category is empty or already exists: {category!r}", 409)


class DrawCancelledError(AppError):
    def __init__(self, category: str) -> None:
        super().__init__(7007, f"Draw in category {category} was cancelled", 409)


# --- 71xx: Lookups ---

class OwnerNotFoundError(AppError):
    def __init__(self, owner_id: str) -> None:
        super().__init__(7101, f"Owner not found: {owner_id}", 404)


class PrizeNotFoundError(AppError):
    def __init__(self, prize_id: str) -> None:
        super().__init__(7102, f"Prize not found: {prize_id}", 404)

