"""Body Fat Index estimator.

A person's body fat percentage is the total weight of their fat divided by
their weight. It is estimated here from tape measurements with the
Hodgdon-Beckett lean body weight formulas, which are defined in pounds and
inches; other configured units are converted first.
"""

import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional, Union

from .categories import classify
from .exceptions import InvalidConfig, InvalidInput, PreconditionError
from .units import LENGTH_UNITS, WEIGHT_UNITS, to_inches, to_pounds

logger = logging.getLogger(__name__)

SEX_ALIASES = {
    "m": "male",
    "male": "male",
    "f": "female",
    "female": "female",
}


def normalize_sex(value: Any) -> str:
    """Return 'male' or 'female' for m/male/f/female in any case."""
    if isinstance(value, str) and value.lower() in SEX_ALIASES:
        return SEX_ALIASES[value.lower()]
    raise InvalidInput(f"Invalid value for sex: {value!r}")


@dataclass(frozen=True)
class EstimatorConfig:
    """Units the measurements are given in."""

    weight_unit: str = "lb"  # lb, kg or st
    length_unit: str = "in"  # in, m or ft

    def __post_init__(self):
        for name, allowed in (
            ("weight_unit", WEIGHT_UNITS),
            ("length_unit", LENGTH_UNITS),
        ):
            value = getattr(self, name)
            if not isinstance(value, str) or value.lower() not in allowed:
                raise InvalidConfig(
                    f"Invalid value for {name}: {value!r} "
                    f"(expected one of {', '.join(allowed)})"
                )
            object.__setattr__(self, name, value.lower())

    @classmethod
    def from_dict(cls, param: Optional[Mapping[str, Any]]) -> "EstimatorConfig":
        """Build config from a mapping with optional weight_unit/length_unit."""
        if param is None:
            return cls()
        if not isinstance(param, Mapping):
            raise InvalidConfig("Config has to be a mapping")

        unknown = set(param) - {f.name for f in fields(cls)}
        if unknown:
            raise InvalidConfig(f"Unknown config keys: {', '.join(sorted(unknown))}")

        return cls(**param)


@dataclass
class Measurements:
    """Tape measurements of one person, in the estimator's configured units."""

    sex: str  # m/male or f/female
    weight: float
    waist: float
    # Only used for women
    wrist: Optional[float] = None
    hips: Optional[float] = None
    forearm: Optional[float] = None

    @classmethod
    def from_dict(cls, param: Mapping[str, Any]) -> "Measurements":
        if not isinstance(param, Mapping):
            raise InvalidInput("Measurements have to be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = set(param) - known
        if unknown:
            raise InvalidInput(
                f"Unknown measurement keys: {', '.join(sorted(unknown))}"
            )
        for key in ("sex", "weight", "waist"):
            if key not in param:
                raise InvalidInput(f"Missing key {key}")

        return cls(**param)


@dataclass(frozen=True)
class BodyFatResult:
    """Outcome of one body fat calculation."""

    index: float  # percent, rounded to 2 decimals
    category: str
    sex: str  # 'male' or 'female'
    weight_lb: float
    lean_body_weight_lb: float
    body_fat_weight_lb: float

    @property
    def formatted_index(self) -> str:
        return f"{self.index:.2f}"

    def as_dict(self) -> dict:
        return asdict(self)


def _positive(name: str, value: Any) -> float:
    if value is None:
        raise InvalidInput(f"Missing measurement {name}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"Measurement {name} has to be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInput(
            f"Measurement {name} has to be a finite number, got {value!r}"
        )
    if value <= 0:
        raise InvalidInput(f"Measurement {name} has to be positive, got {value}")
    return value


class BodyFatEstimator:
    """
    Estimate body fat percentage and its category.

    Usage:
        bfi = BodyFatEstimator({"weight_unit": "kg", "length_unit": "m"})
        result = bfi.compute({"sex": "m", "weight": 80, "waist": 0.9})
        result.formatted_index, result.category

    `compute_index()` followed by `category_of()` gives the same answer in
    two steps; the last result is kept on the instance for that.
    """

    def __init__(
        self, config: Union[EstimatorConfig, Mapping[str, Any], None] = None
    ):
        if isinstance(config, EstimatorConfig):
            self.config = config
        else:
            self.config = EstimatorConfig.from_dict(config)
        self.last_result: Optional[BodyFatResult] = None

    @property
    def index(self) -> Optional[float]:
        return self.last_result.index if self.last_result else None

    @property
    def sex(self) -> Optional[str]:
        return self.last_result.sex if self.last_result else None

    def _weight(self, value: Any) -> float:
        return to_pounds(_positive("weight", value), self.config.weight_unit)

    def _length(self, name: str, value: Any) -> float:
        return to_inches(_positive(name, value), self.config.length_unit)

    def compute(
        self, measurements: Union[Measurements, Mapping[str, Any]]
    ) -> BodyFatResult:
        """
        Calculate body fat index and category.

        Args:
            measurements: Measurements or a mapping with the same keys

        Returns:
            BodyFatResult, also kept as `last_result`

        Raises:
            InvalidInput: Unknown sex, missing or non-positive measurement
        """
        if not isinstance(measurements, Measurements):
            measurements = Measurements.from_dict(measurements)

        sex = normalize_sex(measurements.sex)
        weight = self._weight(measurements.weight)
        waist = self._length("waist", measurements.waist)

        if sex == "male":
            lean_body_weight = (weight * 1.082 + 94.42) - (waist * 4.15)
        else:
            wrist = self._length("wrist", measurements.wrist)
            hips = self._length("hips", measurements.hips)
            forearm = self._length("forearm", measurements.forearm)
            lean_body_weight = (
                (weight * 0.732 + 8.987)
                + (wrist / 3.140)
                - (waist * 0.157)
                - (hips * 0.249)
                + (forearm * 0.434)
            )

        body_fat_weight = weight - lean_body_weight
        index = round(body_fat_weight * 100 / weight, 2)

        result = BodyFatResult(
            index=index,
            category=classify(index, sex),
            sex=sex,
            weight_lb=weight,
            lean_body_weight_lb=lean_body_weight,
            body_fat_weight_lb=body_fat_weight,
        )
        logger.debug(
            f"BFI for {sex}: weight={weight:.2f}lb, lean={lean_body_weight:.2f}lb, "
            f"index={result.formatted_index}% ({result.category})"
        )

        self.last_result = result
        return result

    def compute_index(
        self, measurements: Union[Measurements, Mapping[str, Any]]
    ) -> str:
        """Calculate body fat index, returned with exactly 2 decimals."""
        return self.compute(measurements).formatted_index

    def category_of(self) -> str:
        """Category of the last computed index."""
        if self.last_result is None:
            raise PreconditionError("Please calculate body fat index first")
        return classify(self.last_result.index, self.last_result.sex)
