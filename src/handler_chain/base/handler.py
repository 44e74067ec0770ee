from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

import loguru

from handler_chain.errors import ChainCycleError, ChainFrozenError
from handler_chain.locales.i18n import gettext as _
from handler_chain.outcomes import Handled, Outcome, Unhandled

logger = loguru.logger

DEFAULT_HANDLED_TEXT_FORMAT = "{handler} is handling the request: {request}"
DEFAULT_UNHANDLED_TEXT_FORMAT = "End of the chain. No handler found for the request: {request}"


class Handler(ABC):
    """
    The Handler interface declares a method for building the chain of handlers.
    It also declares a method for executing a request.

    A handler whose successor is ``None`` is the terminal link.
    """

    handled_text_format: str = DEFAULT_HANDLED_TEXT_FORMAT
    unhandled_text_format: str = DEFAULT_UNHANDLED_TEXT_FORMAT

    def __init__(self, handler: Optional[Handler] = None, name: Optional[str] = None):
        self._next_handler = handler
        self._frozen = False
        self.name = name or type(self).__name__

    @property
    def next_handler(self) -> Optional[Handler]:
        return self._next_handler

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        self._frozen = True

    def set_next(self, handler: Optional[Handler]) -> Optional[Handler]:
        """
        Link ``handler`` as the successor of this one.
        :param handler: the next handler, or None to make this the terminal link
        :return: ``handler``, so that links can be chained fluently
        """
        if self._frozen:
            raise ChainFrozenError(_("Cannot relink {} after the chain has been built.").format(self.name))
        self._next_handler = handler
        return handler

    @abstractmethod
    def can_handle(self, request: Any) -> bool:
        pass

    def process(self, request: Any) -> Handled:
        message = self.handled_text_format.format(handler=self.name, request=request)
        logger.success(message)
        return Handled(request=request, handler=self, message=message)

    def iter_chain(self) -> Iterator[Handler]:
        """
        Yield this handler and every successor in order.
        :raise ChainCycleError: if a handler is reached twice
        """
        visited = set()
        cur = self
        while cur is not None:
            if id(cur) in visited:
                raise ChainCycleError(cur)
            visited.add(id(cur))
            yield cur
            cur = cur.next_handler

    def handle(self, request: Any) -> Outcome:
        for handler in self.iter_chain():
            if handler.can_handle(request):
                return handler.process(request)
            logger.debug(_("{} passed the request {!r} on.").format(handler.name, request))
        return unhandled(request, self.unhandled_text_format)

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"


def unhandled(request: Any, text_format: str = DEFAULT_UNHANDLED_TEXT_FORMAT) -> Unhandled:
    message = text_format.format(request=request)
    logger.warning(message)
    return Unhandled(request=request, message=message)
