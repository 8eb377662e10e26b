"""Configuration loader for the task board service."""

import os
from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, model_validator


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False


class LoggingConfig(BaseModel):
    level: str = "info"


class CorsConfig(BaseModel):
    # Front-end dev servers
    allow_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]


class ColumnConfig(BaseModel):
    id: str
    title: str


class BoardConfig(BaseModel):
    """Static column layout of the board and its startup content."""
    columns: list[ColumnConfig] = [
        ColumnConfig(id="todo", title="To-Do"),
        ColumnConfig(id="in-progress", title="In Progress"),
        ColumnConfig(id="done", title="Done"),
    ]
    # Column that receives new tasks when the caller does not name one
    default_column: str = "todo"
    # Load the demo tasks at startup
    seed_tasks: bool = True

    @model_validator(mode="after")
    def _check_columns(self) -> "BoardConfig":
        ids = [c.id for c in self.columns]
        if len(set(ids)) != len(ids):
            raise ValueError("Column ids must be unique")
        if self.default_column not in ids:
            raise ValueError(f"Default column '{self.default_column}' is not a configured column")
        return self


class Config(BaseModel):
    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()
    cors: CorsConfig = CorsConfig()
    board: BoardConfig = BoardConfig()


_config: Optional[Config] = None


def _env_flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file and environment variables."""
    global _config

    if _config is not None:
        return _config

    # Determine config path
    if config_path is None:
        config_path = os.environ.get("TASKBOARD_CONFIG", "/app/config.yml")

    config_data = {}

    # Load from file if exists
    if Path(config_path).exists():
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}

    # Create config object
    config = Config(**config_data)

    # Override with environment variables
    if os.environ.get("TASKBOARD_LOG_LEVEL"):
        config.logging.level = os.environ["TASKBOARD_LOG_LEVEL"]

    if os.environ.get("TASKBOARD_HOST"):
        config.server.host = os.environ["TASKBOARD_HOST"]

    if os.environ.get("TASKBOARD_PORT"):
        config.server.port = int(os.environ["TASKBOARD_PORT"])

    if os.environ.get("TASKBOARD_DEBUG"):
        config.server.debug = _env_flag(os.environ["TASKBOARD_DEBUG"])

    if os.environ.get("TASKBOARD_SEED_TASKS"):
        config.board.seed_tasks = _env_flag(os.environ["TASKBOARD_SEED_TASKS"])

    _config = config
    return config


def get_config() -> Config:
    """Get the loaded configuration."""
    global _config
    if _config is None:
        return load_config()
    return _config
