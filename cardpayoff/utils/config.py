"""YAML configuration loader and dataclasses for payoff planning."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from cardpayoff.exceptions import ConfigurationError


def _resolve_config_path(path: str | Path) -> Path:
    """Resolve a config path, anchoring relative paths to the project root.

    The project root is identified as the nearest ancestor directory that
    contains ``pyproject.toml``.  If the file exists as-is (e.g. an absolute
    path or the CWD happens to be the project root already), it is returned
    unchanged.
    """
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p

    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "pyproject.toml").exists():
            # Returned even when missing so open() reports the anchored path
            return parent / p

    return p


def _read_yaml(path: str | Path) -> dict[str, Any]:
    path = _resolve_config_path(path)
    try:
        with open(path, "r") as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Config file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return raw


@dataclass
class PlannerConfig:
    """Policy constants shared by the builder, simulator and goal solver."""

    max_months: int = 600                   # Hard simulation ceiling (50 years)
    default_min_payment_rate: float = 0.02  # Fallback minimum: 2% of balance...
    default_min_payment_floor: float = 25.0  # ...but never below this floor
    paid_off_threshold: float = 0.01        # Sub-cent balances count as paid off
    rollover_freed_minimums: bool = True    # Paid-off cards' minimums join the extra pool
    solver_tolerance: float = 0.01          # Stop bisecting below one cent
    solver_max_iterations: int = 50
    solver_max_expansions: int = 20         # Upper-bound doublings before giving up

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "PlannerConfig":
        """Build a config from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown planner config keys: {', '.join(unknown)}"
            )
        cfg = cls(**raw)
        if cfg.max_months <= 0:
            raise ConfigurationError("max_months must be positive")
        if cfg.solver_tolerance <= 0:
            raise ConfigurationError("solver_tolerance must be positive")
        return cfg


@dataclass
class PortfolioConfig:
    """A portfolio file: raw account records plus planning inputs."""

    accounts: list[dict[str, Any]] = field(default_factory=list)
    currency: str | None = None
    strategy: str = "avalanche"
    extra_payment: float = 0.0
    target_months: int | None = None
    planner: PlannerConfig = field(default_factory=PlannerConfig)


def load_planner_config(path: str | Path) -> PlannerConfig:
    """Load a PlannerConfig from a YAML file.

    Args:
        path: Path to a YAML config file (e.g., configs/planner/default.yaml).

    Returns:
        Populated PlannerConfig; keys absent from the file keep their defaults.
    """
    return PlannerConfig.from_dict(_read_yaml(path))


def load_portfolio(path: str | Path) -> PortfolioConfig:
    """Load account records and planning inputs from a YAML portfolio file.

    Expected shape::

        currency: USD
        strategy: avalanche
        extra_payment: 150
        target_months: 24        # optional
        planner: {...}           # optional PlannerConfig overrides
        accounts:
          - id: visa-1
            name: Visa
            account_type: Credit
            ...
    """
    raw = _read_yaml(path)

    accounts = raw.get("accounts", [])
    if not isinstance(accounts, list) or not all(isinstance(a, dict) for a in accounts):
        raise ConfigurationError("'accounts' must be a list of mappings")

    target = raw.get("target_months")
    return PortfolioConfig(
        accounts=accounts,
        currency=raw.get("currency"),
        strategy=str(raw.get("strategy", "avalanche")),
        extra_payment=float(raw.get("extra_payment", 0.0)),
        target_months=int(target) if target is not None else None,
        planner=PlannerConfig.from_dict(raw.get("planner") or {}),
    )
