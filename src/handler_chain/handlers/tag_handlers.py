from __future__ import annotations

from typing import Optional

from handler_chain.base.handler import Handler


class TagHandler(Handler):
    """
    Handles exactly one request tag.
    """

    def __init__(self, tag: str, handler: Optional[Handler] = None, name: Optional[str] = None):
        super().__init__(handler, name)
        self.tag = tag

    def can_handle(self, request: str) -> bool:
        return request == self.tag

    def __repr__(self):
        return f"{type(self).__name__}(tag={self.tag!r}, name={self.name!r})"


class ConcreteHandler1(TagHandler):
    def __init__(self, handler: Optional[Handler] = None):
        super().__init__("A", handler)


class ConcreteHandler2(TagHandler):
    def __init__(self, handler: Optional[Handler] = None):
        super().__init__("B", handler)


class ConcreteHandler3(TagHandler):
    def __init__(self, handler: Optional[Handler] = None):
        super().__init__("C", handler)
