from functools import wraps
from pathlib import Path
from typing import Optional

from click import ClickException, UsageError, option

from ..configs.log import Color, Loggable
from ..configs.stack import StackConfig
from ..layer.layer import ConvDimError, LayerDescriptor
from ..layer.stack import LayerStack
from ..utils.env import ConvDimEnv


class Cli(Loggable):
    log_name = "convdim"
    color = Color.blue


def stack_options(func):
    """Options describing the input dimension and the layers to go through"""
    options = [
        option(
            "-i",
            "--input-dim",
            type=int,
            default=None,
            help="The dimension of the input",
        ),
        option("-f", "--filter-size", type=int, default=None, help="The filter size"),
        option(
            "-p",
            "--padding",
            type=int,
            default=None,
            help="The zero-padding applied on each side [default: 0]",
        ),
        option(
            "-s",
            "--stride",
            type=int,
            default=None,
            help="The stride used to slide the filter [default: 1]",
        ),
        option(
            "-r",
            "--repeat",
            type=int,
            default=1,
            show_default=True,
            help="The number of times the layer (or the whole stack) is applied",
        ),
        option(
            "-d",
            "--deconv",
            is_flag=True,
            default=False,
            help="The layer is a transposed convolution",
        ),
        option(
            "-c",
            "--config",
            type=str,
            default=None,
            help="A TOML/YAML stack file or the name of a bundled stack",
        ),
    ]
    for o in reversed(options):
        func = o(func)
    return func


def find_config(config: str) -> Path:
    path = Path(config)
    if path.exists():
        return path
    for stack_p in ConvDimEnv.stacks():
        if stack_p.stem == config:
            return stack_p
    # Let the loader report the missing file
    return path


def resolve_stack(
    input_dim: Optional[int],
    filter_size: Optional[int],
    padding: Optional[int],
    stride: Optional[int],
    repeat: int,
    deconv: bool,
    config: Optional[str],
) -> tuple[int, LayerStack]:
    """Build the input dimension and the stack from the command line options"""
    if config is not None:
        if filter_size is not None:
            raise UsageError("--filter-size and --config can't be used together")
        if padding is not None or stride is not None or deconv:
            raise UsageError(
                "--padding, --stride and --deconv only apply with --filter-size"
            )
        stack_config = StackConfig.from_file(find_config(config))
        stack = stack_config.to_stack() * repeat
        if input_dim is None:
            input_dim = stack_config.input_dim
    elif filter_size is not None:
        layer = LayerDescriptor(
            filter_size,
            1 if stride is None else stride,
            0 if padding is None else padding,
            deconv,
        )
        stack = LayerStack.repeated(layer, repeat)
    else:
        raise UsageError("One of --filter-size or --config is required")

    if input_dim is None:
        raise UsageError("Missing option '-i' / '--input-dim'")

    Cli.debug(f"Input dimension {input_dim} through {len(stack)} layers")
    return input_dim, stack


def trace(input_dim: int, stack: LayerStack) -> list[int]:
    """Dimensions along the stack, each layer logged to the debug file"""
    dims = stack.trace(input_dim)
    for i, layer in enumerate(stack):
        Cli.debug(f"{i + 1}/{len(stack)} {layer}: {dims[i]} -> {dims[i + 1]}")
    return dims


def exit_on_error(func):
    """Report library errors on stderr and exit with status 1"""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConvDimError as e:
            Cli.debug(f"{type(e).__name__}: {e}")
            raise ClickException(str(e)) from e

    return wrapper
