from pathlib import Path
from typing import Type, TypeVar
from pydantic import BaseModel

ConfigT = TypeVar("ConfigT", bound="BaseConfig")


class BaseConfig(BaseModel):

    @classmethod
    def from_file(cls: Type[ConfigT], path: Path) -> ConfigT:
        data = path.read_bytes()
        return cls.model_validate_json(data)
