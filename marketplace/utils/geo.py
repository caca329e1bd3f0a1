import math

# порог в "милях"; координаты считаются плоскими, так что это условная единица
MAX_DISTANCE = 30


def distance(lat1: float, long1: float, lat2: float, long2: float) -> float:
    """Евклидово расстояние между двумя парами (широта, долгота).

    Широта и долгота рассматриваются как обычные декартовы координаты,
    это не расстояние по дуге большого круга.
    """
    return math.sqrt((lat1 - lat2) ** 2 + (long1 - long2) ** 2)


def within_range(value: float, limit: float = MAX_DISTANCE) -> bool:
    return value < limit


def is_too_far(value: float, limit: float = MAX_DISTANCE) -> bool:
    """Граница для оформления заказа: отказ только если строго дальше порога"""
    return value > limit
