from click import command, echo, option

from ._common import exit_on_error, resolve_stack, stack_options, trace


@command("dim", help="Compute the output dimension of one or more layers")
@stack_options
@option(
    "-t",
    "--trace",
    "show_all",
    is_flag=True,
    default=False,
    help="Print every intermediate dimension",
)
@exit_on_error
def main(show_all: bool, **kwargs):
    """
    Assumes a square input. For a rectangular one, run the command once for the
    height and once for the width.
    """
    input_dim, stack = resolve_stack(**kwargs)
    dims = trace(input_dim, stack)

    if show_all:
        echo("\n".join(str(d) for d in dims))
    else:
        echo(dims[-1])


if __name__ == "__main__":
    main()
