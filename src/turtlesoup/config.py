"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel

DEFAULT_CONFIG_PATH = "configs/turtlesoup.json"


class CanvasConfig(BaseModel):
    width: int = 500
    height: int = 500
    scale: float = 1.0
    background: str = "#f0f0f0"
    stroke_width: int = 2


class PenConfig(BaseModel):
    color: str = "black"


class OutputConfig(BaseModel):
    filename: str = "output.html"
    title: str = "Turtle Graphics Output"


class Config(BaseModel):
    canvas: CanvasConfig = CanvasConfig()
    pen: PenConfig = PenConfig()
    output: OutputConfig = OutputConfig()

    @classmethod
    def load(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = DEFAULT_CONFIG_PATH):
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
