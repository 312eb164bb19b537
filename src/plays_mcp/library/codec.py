"""Codecs for persisted parse artifacts."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class Codec(Protocol):
    def serialize(self, document: Any, path: Path) -> None: ...

    def deserialize(self, path: Path) -> Any: ...


class ModelJsonCodec(Generic[ModelT]):
    """Stores a pydantic model as a JSON file."""

    def __init__(self, model_type: type[ModelT]):
        self.model_type = model_type

    def serialize(self, document: ModelT, path: Path) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(document.model_dump_json())

    def deserialize(self, path: Path) -> ModelT:
        with open(path, encoding="utf-8") as f:
            return self.model_type.model_validate_json(f.read())
