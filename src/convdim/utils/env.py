import tempfile
import tomllib
from pathlib import Path

import yaml


class ConvDimEnv:
    convdim_p = Path(__file__).parents[1].resolve()
    configs_p = convdim_p / "configs" / "stacks"

    sample_stack_p = configs_p / "autoencoder.toml"

    tmp_log_p = Path(tempfile.gettempdir()) / "convdim_log"

    SUFFIXES = [".toml", ".yml", ".yaml"]

    @classmethod
    def load(cls, path: str | Path) -> dict:
        path = Path(path)
        if path.suffix == ".toml":
            with path.open("rb") as f:
                return tomllib.load(f)
        elif path.suffix in [".yml", ".yaml"]:
            return yaml.safe_load(path.read_text())
        else:
            raise ValueError(
                f"Unsupported file type '{path.suffix}'. "
                f"Expected one of [{', '.join(cls.SUFFIXES)}]"
            )

    @classmethod
    def stacks(cls) -> list[Path]:
        """List the stack files bundled with the package"""
        return sorted(p for p in cls.configs_p.iterdir() if p.suffix in cls.SUFFIXES)


ConvDimEnv.tmp_log_p.mkdir(exist_ok=True, parents=True)
