import re

_DECIMAL_RE = re.compile(r"^-?[0-9]+(\.[0-9]+)?$")


def validate_required(value: str, field_name: str) -> str:
    """
    Проверяет, что строковое значение не пустое.

    Args:
        value: Введенная строка
        field_name: Название поля для сообщения об ошибке

    Returns:
        str: Строка без пробелов по краям

    Raises:
        ValueError: Если строка пустая
    """
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{field_name} must not be empty")
    return value


def validate_identifier(value: str, field_name: str = "ID") -> int:
    """
    Валидирует идентификатор записи (магазина, склада).

    Raises:
        ValueError: Если строка не является целым числом
    """
    value = validate_required(value, field_name)
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{field_name} must be an integer, got {value!r}")


def validate_units(value: str, allow_zero: bool = False) -> int:
    """
    Валидирует количество единиц товара.

    Args:
        value: Введенная строка
        allow_zero: Разрешить ноль (для установки остатка)

    Raises:
        ValueError: Если значение не целое или меньше допустимого
    """
    units = validate_identifier(value, "Number of units")
    if units < 0 or (units == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise ValueError(f"Number of units must be {bound}, got {units}")
    return units


def validate_decimal(value: str, field_name: str) -> float:
    """
    Валидирует число с плавающей точкой; запятая допускается как разделитель.

    Raises:
        ValueError: Если строка имеет неправильный формат
    """
    value = validate_required(value, field_name).replace(",", ".")
    if not _DECIMAL_RE.match(value):
        raise ValueError(f"{field_name} must be a number, got {value!r}")
    return float(value)


def validate_price(value: str) -> float:
    price = validate_decimal(value, "Price")
    if price < 0:
        raise ValueError("Price must not be negative")
    return price


def validate_coordinate(value: str, field_name: str) -> float:
    # диапазон [0, 100] только рекомендуется при вводе и не проверяется
    return validate_decimal(value, field_name)


def is_yes(answer: str) -> bool:
    return (answer or "").strip().lower() == "y"
