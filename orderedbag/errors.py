from __future__ import annotations

from typing import Any


class OrderedBagError(Exception):
    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(OrderedBagError):
    def __init__(self, element: Any) -> None:  # noqa: ANN401
        super().__init__(f"element not found: {element!r}")
        self.element = element


class InvariantViolation(OrderedBagError):  # noqa: N818
    pass
