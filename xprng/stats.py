"""Uniformity spot-checks over saved sampling reports."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List


def chi_square_uniform(values: Iterable[int], min_value: int, max_value: int) -> float:
    """Pearson chi-square of ``values`` against a uniform [min, max] histogram."""

    observed = Counter(values)
    total = sum(observed.values())
    buckets = max_value - min_value + 1
    if total == 0 or buckets <= 0:
        return 0.0
    expected = total / buckets
    return sum(
        (observed.get(value, 0) - expected) ** 2 / expected
        for value in range(min_value, max_value + 1)
    )


@dataclass
class RunSummary:
    name: str
    seed: str
    count: int
    min_value: int
    max_value: int
    observed_min: int
    observed_max: int
    mean: float
    distinct: int
    chi_square: float
    final_state: int

    @classmethod
    def from_payload(cls, name: str, payload: dict) -> "RunSummary":
        config = payload["config"]
        draws = payload["draws"]
        if not draws:
            raise ValueError(f"Report '{name}' holds no draws to summarise.")

        return cls(
            name=name,
            seed=str(config["seed"]),
            count=len(draws),
            min_value=config["min_value"],
            max_value=config["max_value"],
            observed_min=min(draws),
            observed_max=max(draws),
            mean=sum(draws) / len(draws),
            distinct=len(set(draws)),
            chi_square=chi_square_uniform(draws, config["min_value"], config["max_value"]),
            final_state=payload["final"]["state"],
        )

    def as_csv_row(self) -> List[str]:
        return [
            self.name,
            self.seed,
            str(self.count),
            str(self.min_value),
            str(self.max_value),
            str(self.observed_min),
            str(self.observed_max),
            f"{self.mean:.3f}",
            str(self.distinct),
            f"{self.chi_square:.3f}",
            str(self.final_state),
        ]


CSV_HEADER = [
    "run_name",
    "seed",
    "count",
    "min_value",
    "max_value",
    "observed_min",
    "observed_max",
    "mean",
    "distinct",
    "chi_square",
    "final_state",
]
