"""Body fat categories by sex.

    +---------------+--------+--------+
    | Category      | Women  | Men    |
    +---------------+--------+--------+
    | Essential Fat | <=13%  | <=5%   |
    | Athletes      | 14-20% | 6-13%  |
    | Fitness       | 21-24% | 14-17% |
    | Average       | 25-31% | 18-24% |
    | Obese         | 32%+   | 25%+   |
    +---------------+--------+--------+

Values between the top of "Average" and the start of "Obese" (e.g. 24.5%
for men) are reported as "Average".
"""

ESSENTIAL_FAT = "Essential Fat"
ATHLETES = "Athletes"
FITNESS = "Fitness"
AVERAGE = "Average"
OBESE = "Obese"

CATEGORIES = (ESSENTIAL_FAT, ATHLETES, FITNESS, AVERAGE, OBESE)

# (inclusive upper bound, category), checked in order
UPPER_BOUNDS = {
    "male": [(5, ESSENTIAL_FAT), (13, ATHLETES), (17, FITNESS)],
    "female": [(13, ESSENTIAL_FAT), (20, ATHLETES), (24, FITNESS)],
}

# inclusive lower bound of "Obese"
OBESE_FROM = {
    "male": 25,
    "female": 32,
}


def classify(index: float, sex: str) -> str:
    """
    Return the category name for a body fat index.

    Args:
        index: Body fat percentage
        sex: 'male' or 'female' (already normalised)
    """
    if index >= OBESE_FROM[sex]:
        return OBESE

    for upper, category in UPPER_BOUNDS[sex]:
        if index <= upper:
            return category

    return AVERAGE
