from handler_chain.base.handler import Handler
from handler_chain.chain import ChainBuilder, HandlerChain
from handler_chain.errors import ChainCycleError, ChainFrozenError, HandlerChainError
from handler_chain.handlers.tag_handlers import ConcreteHandler1, ConcreteHandler2, ConcreteHandler3, TagHandler
from handler_chain.outcomes import Handled, Outcome, Unhandled

__version__ = "0.1.0"
