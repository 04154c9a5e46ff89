"""Configuration for the team date planner."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field


class PlannerConfig(BaseModel):
    """Planner configuration with Pydantic validation."""

    # Storage paths
    data_file: Path = Field(default=Path("data/availability.json"))
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    log_filename: str = Field(default="team_planner.log")

    # API server
    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=5000, ge=1, le=65535)

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Storage paths
        if "PLANNER_DATA_FILE" in os.environ:
            config_dict["data_file"] = Path(os.environ["PLANNER_DATA_FILE"])
        if "PLANNER_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["PLANNER_LOG_DIR"])

        # File naming
        if "PLANNER_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["PLANNER_LOG_FILENAME"]

        # API server
        if "PLANNER_API_HOST" in os.environ:
            config_dict["api_host"] = os.environ["PLANNER_API_HOST"]
        if "PLANNER_API_PORT" in os.environ:
            try:
                port = int(os.environ["PLANNER_API_PORT"])
                if 1 <= port <= 65535:
                    config_dict["api_port"] = port
            except ValueError:
                pass  # Keep default if invalid

        return cls(**config_dict)
