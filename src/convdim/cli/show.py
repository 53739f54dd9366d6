import rich.table
from click import command
from rich import console

from ._common import exit_on_error, resolve_stack, stack_options, trace


@command("show", help="Show the dimensions along a stack of layers as a table")
@stack_options
@exit_on_error
def main(**kwargs):
    input_dim, stack = resolve_stack(**kwargs)
    dims = trace(input_dim, stack)

    table = rich.table.Table(
        "#",
        "name",
        "kind",
        "filter",
        "stride",
        "padding",
        "in",
        "out",
        title=f"Stack of {len(stack)} layers",
    )
    for i, layer in enumerate(stack):
        table.add_row(
            str(i + 1),
            layer.name or "",
            layer.kind,
            str(layer.filter_size),
            str(layer.stride),
            str(layer.padding),
            str(dims[i]),
            str(dims[i + 1]),
        )

    console.Console().print(table)
