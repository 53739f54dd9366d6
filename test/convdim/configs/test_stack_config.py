from pathlib import Path

import pytest

from convdim.configs import ConfigParseError, StackConfig
from convdim.layer import LayerDescriptor
from convdim.utils import ConvDimEnv

AUTOENCODER = """
input_dim = 64

[[layers]]
filter_size = 3
stride = 1
padding = 1

[[layers]]
filter_size = 2
stride = 2
padding = 0

[[layers]]
filter_size = 3
stride = 1
padding = 1

[[layers]]
filter_size = 2
stride = 2
padding = 0

[[layers]]
filter_size = 2
stride = 2
padding = 0
deconv = true

[[layers]]
filter_size = 2
stride = 2
padding = 0
deconv = true
"""


@pytest.fixture
def write(tmp_path: Path):
    def _write(name: str, text: str) -> Path:
        p = tmp_path / name
        p.write_text(text)
        return p

    return _write


def test_load_toml(write):
    config = StackConfig.from_file(write("stack.toml", AUTOENCODER))

    assert config.input_dim == 64
    assert config.repeat == 1
    assert len(config.layers) == 6

    stack = config.to_stack()
    assert stack[0] == LayerDescriptor(3, 1, 1)
    assert stack[-1].deconv
    assert stack.apply(64) == 64


def test_load_yaml(write):
    config = StackConfig.from_file(
        write(
            "stack.yml",
            "layers:\n  - filter_size: 5\n  - filter_size: 5\n",
        )
    )

    assert config.input_dim is None
    assert config.to_stack().apply(28) == 20


def test_defaults(write):
    config = StackConfig.from_file(write("stack.toml", "[[layers]]\nfilter_size = 3\n"))

    assert config.to_stack()[0] == LayerDescriptor(3, stride=1, padding=0, deconv=False)


def test_repeat_whole_stack(write):
    config = StackConfig.from_file(
        write(
            "stack.toml",
            "repeat = 2\n[[layers]]\nfilter_size = 3\npadding = 1\n"
            "[[layers]]\nfilter_size = 2\nstride = 2\n",
        )
    )

    stack = config.to_stack()
    assert len(stack) == 4
    assert stack.apply(64) == 16


def test_from_config_dict():
    config = StackConfig.from_config(
        dict(layers=[dict(filter_size=2, stride=2, name="pool")])
    )

    assert config.to_stack()[0].name == "pool"


@pytest.mark.parametrize(
    "name, text",
    [
        ("stack.toml", "[[layers]\nfilter_size = 3\n"),
        ("stack.toml", "[[layers]]\nstride = 2\n"),
        ("stack.toml", "[[layers]]\nfilter_size = 0\n"),
        ("stack.toml", "[[layers]]\nfilter_size = 3\npadding = -1\n"),
        ("stack.toml", "[[layers]]\nfilter_size = 3.5\n"),
        ("stack.toml", '[[layers]]\nfilter_size = "3"\n'),
        ("stack.toml", "[[layers]]\nfilter_size = 3\nkernel = 2\n"),
        ("stack.toml", "input_dim = 64\n"),
        ("stack.toml", "repeat = 0\n[[layers]]\nfilter_size = 3\n"),
        ("stack.yml", "layers: [filter_size: 3\n"),
        ("stack.yml", "- filter_size: 3\n"),
        ("stack.json", '{"layers": []}'),
    ],
)
def test_invalid_config(write, name, text):
    with pytest.raises(ConfigParseError):
        StackConfig.from_file(write(name, text))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigParseError, match="does not exist"):
        StackConfig.from_file(tmp_path / "nope.toml")


def test_directory(tmp_path):
    (tmp_path / "stack.toml").mkdir()

    with pytest.raises(ConfigParseError, match="is not a file"):
        StackConfig.from_file(tmp_path / "stack.toml")


def test_unreadable_file(write, monkeypatch):
    p = write("stack.toml", "[[layers]]\nfilter_size = 3\n")

    def load(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(ConvDimEnv, "load", load)

    with pytest.raises(ConfigParseError, match="Permission denied"):
        StackConfig.from_file(p)


def test_bundled_stacks():
    stacks = {p.stem: p for p in ConvDimEnv.stacks()}

    assert {"autoencoder", "lenet"} <= set(stacks)

    autoencoder = StackConfig.from_file(stacks["autoencoder"])
    assert autoencoder.to_stack().trace(autoencoder.input_dim) == [
        64, 64, 32, 32, 16, 32, 64,
    ]

    lenet = StackConfig.from_file(stacks["lenet"])
    assert lenet.to_stack().apply(lenet.input_dim) == 5
