"""
Errors — таксономия ошибок polycalc

Все ошибки поднимаются немедленно на границе операции, которая нарушила бы
инвариант (при конструировании значения или при вызове). Ничего не
коэрсится молча: отрицательный exponent никогда не clamp-ится к нулю.

Ошибки НЕ наследуются от ValueError: pydantic-валидаторы оборачивают
ValueError в ValidationError, а эти исключения должны доходить до вызывающего
кода как есть, чтобы по ним можно было ветвиться.
"""


class PolycalcError(Exception):
    """Базовый класс для всех ошибок polycalc."""
    pass


class InvalidExponent(PolycalcError):
    """
    Отрицательный exponent при конструировании Monomial.

    Monomial определён только для exponent >= 0.
    """
    pass


class InvalidDegree(PolycalcError):
    """
    Некорректный порядок производной n (отрицательный или не целый).
    """
    pass


class InvalidInterval(PolycalcError):
    """
    Вырожденный или перевёрнутый интервал: a >= b, либо NaN/Inf в границах.
    """
    pass


class IncompatibleTerms(PolycalcError):
    """Сложение monomials с разными степенями x."""
    pass
