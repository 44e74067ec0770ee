"""
Build-then-freeze construction of handler chains.

``ChainBuilder`` collects handlers, ``build()`` links them in order and freezes
every link, so a ``HandlerChain`` cannot be relinked while requests walk it.
Concurrent ``handle`` calls are only safe on a built chain.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Iterator, Optional

import loguru

from handler_chain.base.handler import DEFAULT_UNHANDLED_TEXT_FORMAT, Handler, unhandled
from handler_chain.errors import ChainCycleError, ChainFrozenError, HandlerChainError
from handler_chain.handlers.tag_handlers import TagHandler
from handler_chain.locales.i18n import gettext as _
from handler_chain.outcomes import Outcome
from handler_chain.utils.text import normalize_tag

if TYPE_CHECKING:
    from handler_chain.config_models import Config

logger = loguru.logger


class ChainBuilder:
    def __init__(self):
        self._handlers: list[Handler] = []
        self._built = False

    def add(self, handler: Handler) -> ChainBuilder:
        if self._built:
            raise ChainFrozenError(_("The chain has already been built."))
        if handler.frozen:
            raise ChainFrozenError(_("{} already belongs to a built chain.").format(handler.name))
        if any(h is handler for h in self._handlers):
            raise ChainCycleError(handler)
        self._handlers.append(handler)
        return self

    def extend(self, handlers: Iterable[Handler]) -> ChainBuilder:
        for handler in handlers:
            self.add(handler)
        return self

    def build(self, unhandled_text_format: str = DEFAULT_UNHANDLED_TEXT_FORMAT,
              case_sensitive: bool = True) -> HandlerChain:
        if self._built:
            raise ChainFrozenError(_("The chain has already been built."))
        # Nothing is relinked unless every handler can be
        for handler in self._handlers:
            if handler.frozen:
                raise ChainFrozenError(_("{} already belongs to a built chain.").format(handler.name))
        for cur, nxt in zip(self._handlers, self._handlers[1:] + [None]):
            cur.set_next(nxt)
            cur.unhandled_text_format = unhandled_text_format
            cur.freeze()
        self._built = True
        logger.debug(_("Chain built: {}").format(" -> ".join(h.name for h in self._handlers) or "<empty>"))
        return HandlerChain(self._handlers, unhandled_text_format, case_sensitive)


class HandlerChain:
    """
    An immutable, ordered sequence of frozen handlers, normally created by ``ChainBuilder.build``.

    When ``case_sensitive`` is False, string requests are normalized with ``normalize_tag``
    before the first handler sees them.
    """

    __slots__ = ("_handlers", "_unhandled_text_format", "_case_sensitive")

    def __init__(self, handlers: Iterable[Handler], unhandled_text_format: str = DEFAULT_UNHANDLED_TEXT_FORMAT,
                 case_sensitive: bool = True):
        self._handlers = tuple(handlers)
        for cur, nxt in zip(self._handlers, self._handlers[1:] + (None,)):
            if not cur.frozen or cur.next_handler is not nxt:
                raise HandlerChainError(_("{} is not a frozen link of this chain, use ChainBuilder.").format(cur.name))
        self._unhandled_text_format = unhandled_text_format
        self._case_sensitive = case_sensitive

    @classmethod
    def from_config(cls, config: Config) -> HandlerChain:
        builder = ChainBuilder()
        for handler_config in config.handlers:
            tag = normalize_tag(handler_config.tag, config.case_sensitive)
            handler = TagHandler(tag, name=handler_config.name)
            handler.handled_text_format = config.handled_text_format
            builder.add(handler)
        return builder.build(config.unhandled_text_format, config.case_sensitive)

    @property
    def head(self) -> Optional[Handler]:
        return self._handlers[0] if self._handlers else None

    def handle(self, request: Any) -> Outcome:
        if not self._case_sensitive and isinstance(request, str):
            request = normalize_tag(request, case_sensitive=False)
        if self.head is None:
            return unhandled(request, self._unhandled_text_format)
        return self.head.handle(request)

    def handle_all(self, requests: Iterable[Any]) -> list[Outcome]:
        return [self.handle(request) for request in requests]

    def __len__(self):
        return len(self._handlers)

    def __iter__(self) -> Iterator[Handler]:
        return iter(self._handlers)

    def __repr__(self):
        return f"HandlerChain({list(self._handlers)!r})"
