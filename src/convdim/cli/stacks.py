from click import command, echo

from ..utils.env import ConvDimEnv


@command("stacks", help="List the bundled stack files")
def main():
    for stack_p in ConvDimEnv.stacks():
        echo(f"{stack_p.stem}\t{stack_p}")
