from typing import Optional

from attr import define, field


class ConvDimError(Exception):
    pass


class InvalidLayerParameter(ConvDimError, ValueError):
    pass


class InvalidDimension(ConvDimError, ValueError):
    """A dimension that can't go through a layer

    `index` is the 0-based position of the offending layer when raised from a stack.
    """

    def __init__(
        self,
        msg: str,
        dim: Optional[int] = None,
        layer: Optional["LayerDescriptor"] = None,
        index: Optional[int] = None,
    ):
        super().__init__(msg)
        self.dim = dim
        self.layer = layer
        self.index = index


def is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _at_least(minimum: int):
    def validator(_, attribute, value):
        if not is_int(value) or value < minimum:
            raise InvalidLayerParameter(
                f"'{attribute.name}' must be an integer >= {minimum}. Got {value!r}"
            )

    return validator


def _is_bool(_, attribute, value):
    if not isinstance(value, bool):
        raise InvalidLayerParameter(
            f"'{attribute.name}' must be a boolean. Got {value!r}"
        )


@define(slots=False, frozen=True)
class LayerDescriptor:
    filter_size: int = field(validator=_at_least(1))
    stride: int = field(default=1, validator=_at_least(1))
    padding: int = field(default=0, validator=_at_least(0))
    deconv: bool = field(default=False, validator=_is_bool)
    name: Optional[str] = field(default=None, eq=False, kw_only=True)

    @property
    def kind(self) -> str:
        return "deconv" if self.deconv else "conv"

    def apply(self, dim: int) -> int:
        return apply(dim, self)

    def __str__(self):
        name = f"{self.name} " if self.name else ""
        params = f"f={self.filter_size} s={self.stride} p={self.padding}"
        return f"{name}({self.kind} {params})"


def check_dim(dim: int, layer: Optional[LayerDescriptor] = None):
    if not is_int(dim) or dim < 0:
        raise InvalidDimension(
            f"The input dimension must be a non-negative integer. Got {dim!r}",
            dim=dim,
            layer=layer,
        )


def apply(dim: int, layer: LayerDescriptor) -> int:
    """Compute the output dimension of a layer.

    Convolution with input `dim` (n), filter size (f), padding (p) and stride (s):

        o = (n + 2p - f) // s + 1

    Transposed convolution:

        o = (n - 1) * s - 2p + f

    ## Example

    >>> apply(28, LayerDescriptor(5))
    24
    """
    check_dim(dim, layer)

    f, s, p = layer.filter_size, layer.stride, layer.padding

    if layer.deconv:
        out = (dim - 1) * s - 2 * p + f
        if out < 0:
            raise InvalidDimension(
                f"Padding ({p}) is too large for {layer} with input ({dim})",
                dim=dim,
                layer=layer,
            )
        return out

    if f > dim + 2 * p:
        raise InvalidDimension(
            f"Filter size ({f}) is larger than input ({dim}) with padding ({p})",
            dim=dim,
            layer=layer,
        )
    return (dim + 2 * p - f) // s + 1
