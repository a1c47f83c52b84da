"""Scenario (run inputs) and report (run outputs) models."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import ScenarioFileError
from .distribution import DistributionParameters, PercentileBand
from .inequality import InequalityResult
from .population import SalarySummary, SimulationResult

DEFAULT_BAND_EDGES = (0.0, 0.25, 0.5, 0.75, 0.9, 1.0)


class SalaryScenario(BaseModel):
    """Inputs for one salary simulation run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(default="scenario", description="Human readable run name")
    total_budget: float = Field(gt=0, allow_inf_nan=False, description="Total monthly pay budget")
    headcount: int = Field(gt=0, description="Number of employees to simulate")
    coefficient_of_variation: float = Field(
        default=0.5, gt=0, allow_inf_nan=False, description="Assumed salary std / mean"
    )
    mean_salary: float | None = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Mean monthly salary; defaults to total_budget / headcount",
    )
    seed: int | None = Field(default=None, ge=0, description="Random seed for reproducibility")
    band_edges: tuple[float, ...] = Field(default=DEFAULT_BAND_EDGES)

    @field_validator("band_edges")
    @classmethod
    def _check_edges(cls, edges: tuple[float, ...]) -> tuple[float, ...]:
        if len(edges) < 2:
            raise ValueError("band_edges needs at least two values")
        if any(e < 0 or e > 1 for e in edges):
            raise ValueError("band_edges must lie in [0, 1]")
        if any(b <= a for a, b in zip(edges, edges[1:])):
            raise ValueError("band_edges must be strictly increasing")
        return edges

    @property
    def effective_mean_salary(self) -> float:
        if self.mean_salary is not None:
            return self.mean_salary
        return self.total_budget / self.headcount

    @classmethod
    def from_yaml(cls, path: Path | str) -> "SalaryScenario":
        """Load a scenario from a YAML file.

        Raises:
            ScenarioFileError: If the file is missing, is not valid YAML, or
                does not describe a valid scenario
        """
        path = Path(path)
        if not path.exists():
            raise ScenarioFileError(f"Scenario file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ScenarioFileError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ScenarioFileError(f"{path} must contain a YAML mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ScenarioFileError(f"Invalid scenario in {path}:\n{e}") from e

    def to_yaml(self, path: Path | str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(mode="json", exclude_none=True)
        data["band_edges"] = list(self.band_edges)
        with open(path, "w") as f:
            yaml.safe_dump(data, f, sort_keys=False)


class SalaryReport(BaseModel):
    """Everything one pipeline run produces."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    scenario: SalaryScenario
    parameters: DistributionParameters
    bands: tuple[PercentileBand, ...]
    simulation: SimulationResult
    inequality: InequalityResult

    @property
    def summary(self) -> SalarySummary:
        return self.simulation.summary()

    def to_json(self, path: Path | str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
