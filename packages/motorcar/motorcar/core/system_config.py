"""motorcar: System Configuration Models
---------------------------------------------------------
Defines the Pydantic models for system-level configuration (``system.yaml``):
which engine variants the demo car starts with and switches to, and how the
shared logger is set up.

Public API
----------
``SystemConfig`` : Root configuration model with car and logging sections
``CarConfig`` : Initial and replacement engine names
``LoggingConfig`` : Verbosity, log file and JSON formatting

Notes
-----
- Supports multi-level override: package defaults → user config → environment
  → explicit file (see ``config_loader``)

"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["SystemConfig", "CarConfig", "LoggingConfig"]


class CarConfig(BaseModel):
    """Engine selection for the demo car.

    Names refer to registry keys (e.g. ``petrol``, ``electric``, ``hybrid``).
    """

    model_config = ConfigDict(extra="forbid")

    engine: str = Field(
        default="petrol", description="Engine the car is constructed with."
    )
    replacement: str = Field(
        default="electric", description="Engine swapped in halfway through."
    )

    @field_validator("engine", "replacement")
    @classmethod
    def normalize_engine_name(cls, v: str) -> str:
        """Strip and lower-case engine names, rejecting empty ones."""
        if not v or not v.strip():
            raise ValueError("Engine name cannot be empty")
        return v.strip().lower()


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    verbose: bool = Field(default=False, description="Log at DEBUG level.")
    log_file: str | None = Field(
        default=None, description="Optional file to append log records to."
    )
    as_json: bool = Field(default=False, description="Emit JSON log lines.")


class SystemConfig(BaseModel):
    """System-wide configuration parameters.

    Attributes
    ----------
    car : CarConfig
        Engine names used by ``motorcar demo`` when no option overrides them
    logging : LoggingConfig
        Defaults for the shared logger

    """

    model_config = ConfigDict(extra="forbid")

    car: CarConfig = Field(default_factory=CarConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
