"""Body Fat Index calculation module."""

from typing import Optional

from .categories import CATEGORIES, classify
from .estimator import BodyFatEstimator, BodyFatResult, EstimatorConfig, Measurements
from .exceptions import BodyFatIndexError, InvalidConfig, InvalidInput, PreconditionError


def calculate_body_fat(
    sex: str,  # 'm'/'male' or 'f'/'female'
    weight: float,
    waist: float,
    wrist: Optional[float] = None,
    hips: Optional[float] = None,
    forearm: Optional[float] = None,
    weight_unit: str = "lb",
    length_unit: str = "in",
) -> dict:
    """
    Calculate body fat index from tape measurements.

    Args:
        sex: 'm'/'male' or 'f'/'female'
        weight: Weight in weight_unit
        waist: Waist circumference in length_unit
        wrist: Wrist circumference (women only)
        hips: Hip circumference (women only)
        forearm: Forearm circumference (women only)
        weight_unit: lb, kg or st
        length_unit: in, m or ft

    Returns:
        dict with keys: index, category, sex, weight_lb,
                        lean_body_weight_lb, body_fat_weight_lb
    """
    estimator = BodyFatEstimator(
        EstimatorConfig(weight_unit=weight_unit, length_unit=length_unit)
    )
    result = estimator.compute(
        Measurements(
            sex=sex,
            weight=weight,
            waist=waist,
            wrist=wrist,
            hips=hips,
            forearm=forearm,
        )
    )
    return result.as_dict()


__all__ = [
    "BodyFatEstimator",
    "BodyFatIndexError",
    "BodyFatResult",
    "CATEGORIES",
    "EstimatorConfig",
    "InvalidConfig",
    "InvalidInput",
    "Measurements",
    "PreconditionError",
    "calculate_body_fat",
    "classify",
]
