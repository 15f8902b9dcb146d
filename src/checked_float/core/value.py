"""
CheckedFloat — Float с проверяемой политикой валидности

Value type, хранящий ровно один raw float (NumPy scalar разрядности width)
и связанный на уровне класса с политикой checker. Конкретные типы задаются
подклассами:

    class N64(CheckedFloat):
        width = FLOAT64
        checker = NumChecker

Пути конструирования:
- Cls(x) / Cls.new(x): checked-panicking (FloatInvariantViolation при нарушении)
- Cls.try_new(x): checked-fallible (None при нарушении)
- Cls.try_from(x): checked-fallible (IllegalFloatValue при нарушении)
- Cls.unchecked_new(x): без проверки — ответственность вызывающего кода

Сравнение, равенство и hash вычисляются по raw значению:
- a == b ⟺ raw(a) == raw(b) численно (+0.0 == -0.0); raw числа сравниваются точно
- порядок — нативные операторы сравнения на raw (total order при выполненном инварианте)
- hash — hash raw значения как Python float (+0.0 и -0.0 → 0, согласован с int/float)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый экземпляр, созданный safe-путём, удовлетворяет checker.check(raw)
2. Экземпляры immutable; +=, -= и т.д. создают новое проверенное значение
3. a == b ⟹ hash(a) == hash(b), в том числе для raw операндов
4. NaN в unchecked-значении не обрабатывается специально (порядок не определён)
"""

import logging
import math
import numbers
import string
from collections.abc import Iterable
from fractions import Fraction
from typing import Any, ClassVar, Final

import numpy as np
from pydantic_core import core_schema

from checked_float.core.arithmetic import ArithmeticMixin
from checked_float.core.checkers import FloatChecker
from checked_float.core.widths import FloatWidth
from checked_float.errors import FloatInvariantViolation, IllegalFloatValue

logger = logging.getLogger(__name__)


# =============================================================================
# ИМЕНОВАННЫЕ КОНСТАНТЫ
# =============================================================================

FLOAT_CONSTANTS: Final[dict[str, float]] = {
    "pi": math.pi,
    "e": math.e,
    "tau": math.tau,
    "ln_2": math.log(2.0),
    "ln_10": math.log(10.0),
    "log2_e": math.log2(math.e),
    "log10_e": math.log10(math.e),
    "sqrt_2": math.sqrt(2.0),
    "frac_1_sqrt_2": math.sqrt(0.5),
    "frac_1_pi": 1.0 / math.pi,
    "frac_2_pi": 2.0 / math.pi,
    "frac_2_sqrt_pi": 2.0 / math.sqrt(math.pi),
    "frac_pi_2": math.pi / 2.0,
    "frac_pi_3": math.pi / 3.0,
    "frac_pi_4": math.pi / 4.0,
    "frac_pi_6": math.pi / 6.0,
    "frac_pi_8": math.pi / 8.0,
}


# =============================================================================
# CHECKED FLOAT
# =============================================================================


class CheckedFloat(ArithmeticMixin):
    """
    Базовый класс checked float.

    Не используется напрямую: конкретный тип задаёт width и checker
    (см. checked_float.core.floats: N32, N64, R32, R64).
    """

    __slots__ = ("_value",)

    width: ClassVar[FloatWidth]
    checker: ClassVar[type[FloatChecker]]

    _value: np.floating

    def __new__(cls, value: Any) -> "CheckedFloat":
        return cls._checked(cls._coerce(value))

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def _coerce(cls, value: Any) -> np.floating:
        if getattr(cls, "checker", None) is None or getattr(cls, "width", None) is None:
            raise TypeError(f"{cls.__name__} does not define width and checker")
        if isinstance(value, CheckedFloat):
            if type(value) is cls:
                return value._value
            raise TypeError(
                f"cannot build {cls.__name__} from {type(value).__name__}, use from_checked()"
            )
        if not isinstance(value, numbers.Real):
            raise TypeError(f"{cls.__name__} expects a real number, got {type(value).__name__}")
        return cls.width.coerce(value)

    @classmethod
    def _wrap(cls, raw: np.floating) -> "CheckedFloat":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_value", raw)
        return instance

    @classmethod
    def _checked(cls, raw: Any) -> "CheckedFloat":
        raw = cls.width.coerce(raw)
        cls.checker.assert_valid(raw)
        return cls._wrap(raw)

    @classmethod
    def new(cls, value: Any) -> "CheckedFloat":
        """
        Checked-panicking конструктор (эквивалент Cls(value)).

        Raises:
            FloatInvariantViolation: если значение нарушает политику
                (только при включённой верификации)
        """
        return cls._checked(cls._coerce(value))

    @classmethod
    def try_new(cls, value: Any) -> "CheckedFloat | None":
        """
        Checked-fallible конструктор для данных из внешних источников.

        Returns:
            Экземпляр или None, если check(value) == False

        Examples:
            >>> N64.try_new(float("nan")) is None
            True
        """
        raw = cls._coerce(value)
        if not cls.checker.check(raw):
            return None
        return cls._wrap(raw)

    @classmethod
    def try_from(cls, value: Any) -> "CheckedFloat":
        """
        Fallible конверсия raw → checked с явной ошибкой.

        Raises:
            IllegalFloatValue: если значение нарушает политику
        """
        result = cls.try_new(value)
        if result is None:
            raise IllegalFloatValue("illegal value", value=value, checker=cls.checker)
        return result

    @classmethod
    def unchecked_new(cls, value: Any) -> "CheckedFloat":
        """
        Конструирование БЕЗ проверки политики.

        Вызывающий код обязан гарантировать валидность значения
        (например, значение взято из другого валидного экземпляра).
        Нарушение этого условия молча ломает инвариант типа.
        """
        return cls._wrap(cls._coerce(value))

    @classmethod
    def from_int(cls, value: int) -> "CheckedFloat":
        """
        Lossless конверсия целого числа.

        Raises:
            IllegalFloatValue: если value не представимо точно в разрядности
                или результат не проходит политику
        """
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"from_int expects an integer, got {type(value).__name__}")
        exact = int(value)
        try:
            raw = cls.width.coerce(float(exact))
        except OverflowError as err:
            raise IllegalFloatValue("illegal value", value=exact, checker=cls.checker) from err
        if not math.isfinite(raw) or int(raw) != exact:
            raise IllegalFloatValue("illegal value", value=exact, checker=cls.checker)
        return cls.try_from(raw)

    @classmethod
    def from_str(cls, text: str) -> "CheckedFloat":
        """
        Разбор строки в синтаксисе Python float.

        Raises:
            ValueError: если строка не является числом
            IllegalFloatValue: если число не проходит политику
        """
        return cls.try_from(float(text))

    @classmethod
    def from_str_radix(cls, text: str, radix: int) -> "CheckedFloat":
        """
        Разбор числа в системе счисления radix (2..36): знак, целая и дробная часть.

        Экспонента поддерживается только для radix=10. "inf"/"infinity"
        распознаются при любом radix.

        Raises:
            ValueError: если radix вне диапазона или строка не является числом
            IllegalFloatValue: если число не проходит политику

        Examples:
            >>> N64.from_str_radix("-ff.8", 16)
            N64(-255.5)
        """
        if not 2 <= radix <= 36:
            raise ValueError(f"radix must be in [2, 36], got {radix}")
        if radix == 10:
            return cls.from_str(text)
        body = text.strip()
        sign = 1
        if body[:1] in ("+", "-"):
            sign = -1 if body[0] == "-" else 1
            body = body[1:]
        if body.lower() in ("inf", "infinity"):
            return cls.try_from(sign * math.inf)
        whole, _, fraction = body.partition(".")
        digits = set((string.digits + string.ascii_lowercase)[:radix])
        if not (whole or fraction) or not set((whole + fraction).lower()) <= digits:
            raise ValueError(f"invalid literal for radix {radix}: {text!r}")
        value = Fraction(int(whole or "0", radix))
        if fraction:
            value += Fraction(int(fraction, radix), radix ** len(fraction))
        try:
            raw = float(value)
        except OverflowError:
            raw = math.inf
        return cls.try_from(math.copysign(raw, sign))

    @classmethod
    def from_checked(cls, other: "CheckedFloat") -> "CheckedFloat":
        """
        Конверсия между политиками и разрядностями.

        Расширяющая конверсия (политика other — подмножество cls.checker,
        разрядность не шире) выполняется без проверки и не может упасть.
        Остальные конверсии проходят fallible-путь.

        Raises:
            IllegalFloatValue: если сужающая конверсия отклонена политикой

        Examples:
            >>> N64.from_checked(R64(1.5))
            N64(1.5)
            >>> R64.from_checked(N64(float("inf")))  # doctest: +SKIP
            Traceback (most recent call last):
                ...
            IllegalFloatValue: illegal value
        """
        if not isinstance(other, CheckedFloat):
            raise TypeError(f"from_checked expects a checked float, got {type(other).__name__}")
        if type(other) is cls:
            return other
        if cls.checker.accepts_all_of(other.checker) and other.width.bits <= cls.width.bits:
            return cls.unchecked_new(other._value)
        result = cls.try_new(other._value)
        if result is None:
            logger.debug(f"{cls.__name__}.from_checked rejected {other!r}")
            raise IllegalFloatValue("illegal value", value=other.raw(), checker=cls.checker)
        return result

    # -------------------------------------------------------------------------
    # Raw доступ
    # -------------------------------------------------------------------------

    def raw(self) -> float:
        """Raw значение как Python float (точно для обеих разрядностей)."""
        return float(self._value)

    def raw_scalar(self) -> np.floating:
        """Raw значение как NumPy scalar разрядности width."""
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "CheckedFloat":
        return self

    def __deepcopy__(self, memo: dict) -> "CheckedFloat":
        return self

    def __reduce__(self) -> tuple:
        return (type(self), (float(self._value),))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(float(self._value), format_spec)

    # -------------------------------------------------------------------------
    # Операнды
    # -------------------------------------------------------------------------

    def _raw_operand(self, other: Any) -> Any:
        """Raw значение операнда или NotImplemented для неподдерживаемых типов."""
        if type(other) is type(self):
            return other._value
        if isinstance(other, CheckedFloat) or not isinstance(other, numbers.Real):
            return NotImplemented
        return self.width.coerce(other)

    def _checked_result(self, raw: Any) -> "CheckedFloat":
        return type(self)._checked(raw)

    # -------------------------------------------------------------------------
    # Равенство, порядок, hash
    # -------------------------------------------------------------------------

    def _compare_operand(self, other: Any) -> Any:
        """
        Операнд сравнения или NotImplemented.

        Raw числа не приводятся к разрядности: сравнение точное численное,
        как у Python float (N32(0.1) != 0.1, N64(1.0) < 10**400).
        """
        if type(other) is type(self):
            return float(other._value)
        if isinstance(other, CheckedFloat) or not isinstance(other, numbers.Real):
            return NotImplemented
        return other

    def __eq__(self, other: Any) -> bool:
        raw = self._compare_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        return bool(float(self._value) == raw)

    def __lt__(self, other: Any) -> bool:
        raw = self._compare_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        return bool(float(self._value) < raw)

    def __le__(self, other: Any) -> bool:
        raw = self._compare_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        return bool(float(self._value) <= raw)

    def __gt__(self, other: Any) -> bool:
        raw = self._compare_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        return bool(float(self._value) > raw)

    def __ge__(self, other: Any) -> bool:
        raw = self._compare_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        return bool(float(self._value) >= raw)

    def __hash__(self) -> int:
        # hash(-0.0) == hash(0.0) == 0; совпадает с hash равного int/float
        return hash(float(self._value))

    def cmp(self, other: Any) -> int:
        """
        Трёхзначное сравнение: -1, 0 или 1.

        Raises:
            TypeError: если other — checked float другого типа или не число
        """
        raw = self._compare_operand(other)
        if raw is NotImplemented:
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        value = float(self._value)
        if value < raw:
            return -1
        if value == raw:
            return 0
        return 1

    # -------------------------------------------------------------------------
    # Python number protocol
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        return float(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __bool__(self) -> bool:
        return bool(self._value != 0.0)

    def __complex__(self) -> complex:
        return complex(float(self._value))

    def __trunc__(self) -> int:
        return math.trunc(float(self._value))

    def __floor__(self) -> int:
        return math.floor(float(self._value))

    def __ceil__(self) -> int:
        return math.ceil(float(self._value))

    def __round__(self, ndigits: int | None = None) -> "int | CheckedFloat":
        if ndigits is None:
            return round(float(self._value))
        return self._checked_result(round(float(self._value), ndigits))

    @property
    def real(self) -> "CheckedFloat":
        return self

    @property
    def imag(self) -> int:
        return 0

    def conjugate(self) -> "CheckedFloat":
        return self

    def to_int(self) -> int | None:
        """Усечение к целому; None для ±inf (и NaN в unchecked-значении)."""
        if not math.isfinite(self._value):
            return None
        return int(self._value)

    def to_f32(self) -> np.float32:
        with np.errstate(all="ignore"):
            return np.float32(self._value)

    def to_f64(self) -> np.float64:
        return np.float64(self._value)

    # -------------------------------------------------------------------------
    # Тождества, пределы, специальные значения
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "CheckedFloat":
        return cls(0.0)

    @classmethod
    def one(cls) -> "CheckedFloat":
        return cls(1.0)

    def is_zero(self) -> bool:
        return bool(self._value == 0.0)

    @classmethod
    def min_value(cls) -> "CheckedFloat":
        """Наименьшее конечное значение (-max)."""
        return cls(cls.width.finfo.min)

    @classmethod
    def max_value(cls) -> "CheckedFloat":
        return cls(cls.width.finfo.max)

    @classmethod
    def min_positive_value(cls) -> "CheckedFloat":
        """Наименьшее положительное нормализованное значение."""
        return cls(cls.width.finfo.tiny)

    @classmethod
    def epsilon(cls) -> "CheckedFloat":
        return cls(cls.width.finfo.eps)

    @classmethod
    def infinity(cls) -> "CheckedFloat":
        return cls(math.inf)

    @classmethod
    def neg_infinity(cls) -> "CheckedFloat":
        return cls(-math.inf)

    @classmethod
    def neg_zero(cls) -> "CheckedFloat":
        return cls(-0.0)

    @classmethod
    def nan(cls) -> "CheckedFloat":
        """Всегда FloatInvariantViolation: NaN не допускается ни одной стандартной политикой."""
        raise FloatInvariantViolation("unexpected NaN", value=math.nan, checker=cls.checker)

    @classmethod
    def constant(cls, name: str) -> "CheckedFloat":
        """
        Именованная математическая константа.

        Args:
            name: Имя из FLOAT_CONSTANTS ("pi", "e", "ln_2", "frac_pi_2", ...)

        Raises:
            ValueError: если константа неизвестна
        """
        try:
            return cls(FLOAT_CONSTANTS[name])
        except KeyError:
            raise ValueError(f"Unknown float constant: {name!r}") from None

    @classmethod
    def pi(cls) -> "CheckedFloat":
        return cls.constant("pi")

    @classmethod
    def e(cls) -> "CheckedFloat":
        return cls.constant("e")

    # -------------------------------------------------------------------------
    # Свёртки
    # -------------------------------------------------------------------------

    @classmethod
    def sum_of(cls, values: Iterable[Any]) -> "CheckedFloat":
        """
        Сумма с единственной проверкой результата.

        Examples:
            >>> N64.sum_of([N64(1.0), N64(2.5)])
            N64(3.5)
        """
        total = cls.width.coerce(0.0)
        with np.errstate(all="ignore"):
            for value in values:
                total = total + cls._coerce(value)
        return cls._checked(total)

    @classmethod
    def product_of(cls, values: Iterable[Any]) -> "CheckedFloat":
        """Произведение с единственной проверкой результата."""
        total = cls.width.coerce(1.0)
        with np.errstate(all="ignore"):
            for value in values:
                total = total * cls._coerce(value)
        return cls._checked(total)

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        from_float = core_schema.no_info_after_validator_function(
            cls._validate_field, core_schema.float_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_float,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(cls),
                    core_schema.no_info_before_validator_function(cls._reject_foreign, from_float),
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.raw(),
                return_schema=core_schema.float_schema(),
            ),
        )

    @classmethod
    def _reject_foreign(cls, value: Any) -> Any:
        # Другой checked тип иначе прошёл бы через float(): нужна явная from_checked()
        if isinstance(value, CheckedFloat):
            raise ValueError(
                f"{cls.__name__}: expected {cls.__name__}, got {type(value).__name__}, "
                "use from_checked()"
            )
        return value

    @classmethod
    def _validate_field(cls, value: float) -> "CheckedFloat":
        result = cls.try_new(value)
        if result is None:
            raise ValueError(f"{cls.__name__}: {cls.checker.violation_message} ({value})")
        return result


numbers.Real.register(CheckedFloat)
