"""
Exceptions raised while building or walking a chain of handlers.

A request that no handler matches is *not* an error, see ``outcomes.Unhandled``.
"""


class HandlerChainError(Exception):
    pass


class ChainCycleError(HandlerChainError):
    """
    A handler was reached twice while walking the chain.
    """

    def __init__(self, handler):
        self.handler = handler
        super().__init__(f"Handler {handler!r} appears more than once in the chain.")


class ChainFrozenError(HandlerChainError):
    """
    The chain has been built and its links can no longer be changed.
    """
