"""Global fixtures for salarysim tests."""

import pytest

from salarysim.core.models import (
    DistributionParameters,
    SalaryScenario,
    SimulatedEmployee,
)
from salarysim.population import derive_parameters


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path, monkeypatch):
    """Point the config directory at a temp dir so tests never touch ~/.salarysim."""
    home = tmp_path / "salarysim_home"
    monkeypatch.setenv("SALARYSIM_HOME", str(home))
    return home


@pytest.fixture
def payroll_scenario():
    """70 employees sharing a 461,000 monthly budget, cv=0.5, seed 123."""
    return SalaryScenario(
        name="payroll",
        total_budget=461000.0,
        headcount=70,
        coefficient_of_variation=0.5,
        mean_salary=6585.71,
        seed=123,
    )


@pytest.fixture
def payroll_params(payroll_scenario) -> DistributionParameters:
    return derive_parameters(
        payroll_scenario.mean_salary, payroll_scenario.coefficient_of_variation
    )


@pytest.fixture
def sample_employees():
    """Small hand-built population with distinct salaries."""
    return [
        SimulatedEmployee(id=1, monthly_salary=3000.0),
        SimulatedEmployee(id=2, monthly_salary=1000.0),
        SimulatedEmployee(id=3, monthly_salary=4000.0),
        SimulatedEmployee(id=4, monthly_salary=2000.0),
    ]
