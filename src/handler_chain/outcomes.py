from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from handler_chain.base.handler import Handler


@dataclass(frozen=True)
class Handled:
    request: Any
    handler: Handler = field(repr=False)
    message: str = ""

    handled = True

    @property
    def handler_name(self) -> str:
        return self.handler.name

    def __str__(self):
        return self.message


@dataclass(frozen=True)
class Unhandled:
    request: Any
    message: str = ""

    handled = False

    def __str__(self):
        return self.message


Outcome = Union[Handled, Unhandled]
