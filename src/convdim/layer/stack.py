from __future__ import annotations

from typing import Iterable, Iterator, Self

from attr import define, field
from attr.validators import deep_iterable, instance_of

from .layer import (
    InvalidDimension,
    InvalidLayerParameter,
    LayerDescriptor,
    apply,
    check_dim,
    is_int,
)


@define(slots=False, frozen=True)
class LayerStack:
    """Ordered layers applied from left to right"""

    layers: tuple[LayerDescriptor, ...] = field(
        factory=tuple,
        converter=tuple,
        validator=deep_iterable(instance_of(LayerDescriptor)),
    )

    @classmethod
    def repeated(cls, layer: LayerDescriptor, repeat: int = 1) -> Self:
        """The same layer applied `repeat` times"""
        return cls([layer]) * repeat

    @classmethod
    def from_config(cls, config: list[dict]) -> Self:
        try:
            return cls([LayerDescriptor(**c) for c in config])
        except TypeError as e:
            # Unknown or missing keys
            raise InvalidLayerParameter(f"Invalid layer config: {e}") from e

    def __len__(self):
        return len(self.layers)

    def __iter__(self) -> Iterator[LayerDescriptor]:
        return iter(self.layers)

    def __getitem__(self, i):
        return self.layers[i]

    def __add__(self, other: LayerStack) -> Self:
        if not isinstance(other, LayerStack):
            return NotImplemented
        return type(self)(self.layers + other.layers)

    def __mul__(self, repeat: int) -> Self:
        if not is_int(repeat) or repeat < 1:
            raise InvalidLayerParameter(
                f"The repeat count must be an integer >= 1. Got {repeat!r}"
            )
        return type(self)(self.layers * repeat)

    __rmul__ = __mul__

    def apply(self, dim: int) -> int:
        return apply_stack(dim, self)

    def trace(self, dim: int) -> list[int]:
        return trace_stack(dim, self)


def trace_stack(initial_dim: int, layers: Iterable[LayerDescriptor]) -> list[int]:
    """Every dimension met along the stack, from `initial_dim` to the final output.

    Stops at the first layer that can't be applied. The raised `InvalidDimension`
    holds the position of that layer in `index`.
    """
    layers = list(layers)
    dims = [initial_dim]

    if not layers:
        check_dim(initial_dim)

    for i, layer in enumerate(layers):
        try:
            out = apply(dims[-1], layer)
        except InvalidDimension as e:
            raise InvalidDimension(
                f"Layer {i + 1}/{len(layers)} {layer}: {e}",
                dim=e.dim,
                layer=layer,
                index=i,
            ) from e
        dims.append(out)

    return dims


def apply_stack(initial_dim: int, layers: Iterable[LayerDescriptor]) -> int:
    """Fold `apply` over the layers, starting from `initial_dim`"""
    return trace_stack(initial_dim, layers)[-1]
