import importlib
import os

from click import Group, group


@group("convdim", cls=Group, help="Compute output dimensions of convolution layers")
def main():
    pass


command_lines = sorted(
    [
        os.path.splitext(f)[0]
        for f in os.listdir(os.path.join(os.path.dirname(__file__)))
        if f.endswith(".py") and not f.startswith("_") and not f == "convdim.py"
    ]
)

[
    main.add_command(importlib.import_module(f"{__package__}.{c}").main, c)
    for c in command_lines
]


if __name__ == "__main__":
    main()
