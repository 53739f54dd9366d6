from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..layer.layer import ConvDimError
from ..utils.env import ConvDimEnv
from .log import Color, Loggable

if TYPE_CHECKING:
    from ..layer.stack import LayerStack


class ConfigParseError(ConvDimError):
    pass


class LayerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    filter_size: int = Field(ge=1, strict=True)
    stride: int = Field(default=1, ge=1, strict=True)
    padding: int = Field(default=0, ge=0, strict=True)
    deconv: bool = Field(default=False, strict=True)
    name: Optional[str] = None


class StackConfig(Loggable, BaseModel):
    """Layer stack description read from a TOML or YAML file

    ```toml
    input_dim = 64

    [[layers]]
    name = "conv1"
    filter_size = 3
    padding = 1
    ```
    """

    model_config = ConfigDict(extra="forbid")

    log_name: ClassVar[str] = "config"
    color: ClassVar[str] = Color.magenta

    layers: list[LayerConfig]
    input_dim: Optional[int] = Field(default=None, ge=0)
    """Input dimension to use when none is given by the caller"""
    repeat: int = Field(default=1, ge=1)
    """Number of times the whole stack is applied"""

    @classmethod
    def from_file(cls, path: str | Path) -> StackConfig:
        path = Path(path)
        if not path.exists():
            raise ConfigParseError(f"Config file '{path}' does not exist")
        if not path.is_file():
            raise ConfigParseError(f"Config file '{path}' is not a file")

        try:
            data = ConvDimEnv.load(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            # Unreadable file, unsupported suffix and TOML/YAML decode errors
            raise ConfigParseError(f"Could not read '{path}': {e}") from e

        if not isinstance(data, dict):
            raise ConfigParseError(
                f"Could not read '{path}': expected a table of layers at the top level"
            )

        config = cls.from_config(data, source=path)
        cls.debug(f"Loaded {len(config.layers)} layers from {path}\n", config)
        return config

    @classmethod
    def from_config(cls, data: dict, source: str | Path = "config") -> StackConfig:
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigParseError(f"Invalid stack in '{source}':\n{e}") from e

    def to_stack(self) -> LayerStack:
        from ..layer.stack import LayerStack

        layers = [layer.model_dump() for layer in self.layers]
        return LayerStack.from_config(layers) * self.repeat
