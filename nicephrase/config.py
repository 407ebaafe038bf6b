import dataclasses
import json
from os import PathLike
from typing import Union

from .generator import MAX_PASSPHRASE_WORDS


@dataclasses.dataclass
class PassphraseConfig:
    num_words: int = 8
    separator: str = " "
    count: int = 1
    version: str = "v1"

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "num_words": self.num_words,
            "separator": self.separator,
            "count": self.count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PassphraseConfig":
        version = data.get("version", "v1")
        if version != "v1":
            raise ValueError(f"Unsupported config version: {version}")
        num_words = _int_field(data, "num_words", 8)
        if not 0 <= num_words <= MAX_PASSPHRASE_WORDS:
            raise ValueError(
                f"num_words must be between 0 and {MAX_PASSPHRASE_WORDS}"
            )
        count = _int_field(data, "count", 1)
        if count < 1:
            raise ValueError("count must be >= 1")
        separator = data.get("separator", " ")
        if not isinstance(separator, str):
            raise ValueError("separator must be a string")
        return cls(
            num_words=num_words,
            separator=separator,
            count=count,
            version=version,
        )


def _int_field(data: dict, name: str, default: int) -> int:
    value = data.get(name, default)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value

def save_config(config: PassphraseConfig, path: Union[str, PathLike]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
        f.write("\n")


def load_config(path: Union[str, PathLike]) -> PassphraseConfig:
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"config file {path} must contain a JSON object")
    return PassphraseConfig.from_dict(raw)


__all__ = ["PassphraseConfig", "load_config", "save_config"]
