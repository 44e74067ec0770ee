from pathlib import Path
from typing import Literal, Type, TypeVar

from pydantic import BaseModel, Field

T = TypeVar('T')


class MyBaseModel(BaseModel):
    @classmethod
    def load_from_json(cls: Type[T], path: Path) -> T:
        with open(path, encoding="utf-8") as f:
            json_data = f.read()
            return cls.model_validate_json(json_data)


class HandlerConfig(MyBaseModel):
    name: str
    tag: str = Field(min_length=1)


def _default_handlers() -> list[HandlerConfig]:
    return [HandlerConfig(name=f"ConcreteHandler{i}", tag=tag) for i, tag in enumerate("ABC", start=1)]


class Config(MyBaseModel):
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    debug: bool = False
    program_display_language: str = "en"
    # When False, request tags and handler tags are compared upper-cased by HandlerChain
    case_sensitive: bool = True
    handlers: list[HandlerConfig] = Field(default_factory=_default_handlers)
    handled_text_format: str = "{handler} is handling the request: {request}"
    unhandled_text_format: str = "End of the chain. No handler found for the request: {request}"
