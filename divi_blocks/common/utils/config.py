"""
Load configuration from `config.toml`.
"""

from pathlib import Path
from pydantic import BaseModel, field_validator

THIS_DIR = Path(__file__).parent.resolve()

CONFIG_FILE_PATH = THIS_DIR / "config.toml"


class Config(BaseModel):
    asset_prefix: str  # understood by the downstream asset resolver
    root_relative_scheme: str  # replaces the leading "/" of root-relative image paths
    key_length: int
    default_title: str
    markdown_column_separator: str

    @field_validator("key_length", mode="before")
    def reasonable_key_length(cls, value: int) -> int:
        if not (8 <= int(value) <= 32):
            raise ValueError("key_length must be between 8 and 32.")
        return int(value)

    @field_validator("asset_prefix", "root_relative_scheme", mode="before")
    def not_blank(cls, value: str) -> str:
        if not str(value).strip():
            raise ValueError("Value must not be blank.")
        return value


def load_config(path: Path = CONFIG_FILE_PATH) -> Config:
    import tomli

    with open(path, "rb") as f:
        data = tomli.load(f)

    config_data = {k.lower(): v for k, v in data.items()}
    return Config(**config_data)


config = load_config()


def set_config(new_config: Config) -> None:
    global config
    config = new_config


def get_config() -> Config:
    """Return the active configuration (honours `set_config`)."""
    return config


__all__ = ["config", "get_config", "set_config", "load_config", "Config"]

if __name__ == "__main__":
    print(config)
