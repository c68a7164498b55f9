"""Value Objects for the domain layer.

Every validated value has a ``create`` factory that returns
``Success(value)`` or ``Failure(ValidationError)``. Constructing a value
directly re-runs the same check and raises ``ValueError``, so an
instance always satisfies its invariant for its whole lifetime.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, Self

from returns.result import Failure, Result, Success

from order_taking.domain.base import ValueObject
from order_taking.domain.errors import ValidationError


def _require(problem: str | None) -> None:
    """Raise if a check reported a problem."""
    if problem is not None:
        raise ValueError(problem)


# ============================================================================
# Constrained Strings
# ============================================================================


def _check_string50(value: object) -> str | None:
    if not isinstance(value, str) or not value:
        return "Must not be empty"
    if len(value) > String50.MAX_LENGTH:
        return f"Must not be more than {String50.MAX_LENGTH} chars"
    return None


@dataclass(frozen=True)
class String50(ValueObject):
    """A non-empty string of at most 50 characters."""

    value: str

    MAX_LENGTH: ClassVar[int] = 50

    def __post_init__(self) -> None:
        _require(_check_string50(self.value))

    @classmethod
    def create(cls, value: str, field_name: str = "value") -> Result[Self, ValidationError]:
        """Create a String50.

        Args:
            value: Raw string.
            field_name: Field name reported on failure.

        Returns:
            Success with the value, or Failure naming the field.
        """
        problem = _check_string50(value)
        if problem is not None:
            return Failure(ValidationError(field_name, problem))
        return Success(cls(value))

    @classmethod
    def create_option(
        cls, value: str | None, field_name: str = "value"
    ) -> Result[Self | None, ValidationError]:
        """Create an optional String50.

        Missing or empty input means "absent" and yields ``Success(None)``.
        Anything else must satisfy the normal String50 rule.

        Args:
            value: Raw string or None.
            field_name: Field name reported on failure.

        Returns:
            Success with the value or None, or Failure naming the field.
        """
        if not value:
            return Success(None)
        return cls.create(value, field_name)

    def __str__(self) -> str:
        return self.value


def _check_email(value: object) -> str | None:
    if not isinstance(value, str) or not value:
        return "Email address must not be empty"
    return None


@dataclass(frozen=True)
class EmailAddress(ValueObject):
    """Customer email address. Only emptiness is checked."""

    value: str

    def __post_init__(self) -> None:
        _require(_check_email(self.value))

    @classmethod
    def create(
        cls, value: str, field_name: str = "email_address"
    ) -> Result[Self, ValidationError]:
        problem = _check_email(value)
        if problem is not None:
            return Failure(ValidationError(field_name, problem))
        return Success(cls(value))

    def __str__(self) -> str:
        return self.value


def _check_zip_code(value: object) -> str | None:
    if not isinstance(value, str) or not value:
        return "Zip code must not be empty"
    if len(value) not in (5, 9):
        return "Zip code must be either 5 or 9 characters long"
    return None


@dataclass(frozen=True)
class ZipCode(ValueObject):
    """A zip code of exactly 5 or 9 characters."""

    value: str

    def __post_init__(self) -> None:
        _require(_check_zip_code(self.value))

    @classmethod
    def create(cls, value: str, field_name: str = "zip_code") -> Result[Self, ValidationError]:
        problem = _check_zip_code(value)
        if problem is not None:
            return Failure(ValidationError(field_name, problem))
        return Success(cls(value))

    def __str__(self) -> str:
        return self.value


# ============================================================================
# Typed Identifiers
# ============================================================================


@dataclass(frozen=True)
class OrderId(ValueObject):
    """Strongly-typed order identifier (1 to 50 characters)."""

    value: str

    def __post_init__(self) -> None:
        _require(_check_string50(self.value))

    @classmethod
    def create(cls, value: str, field_name: str = "order_id") -> Result[Self, ValidationError]:
        return String50.create(value, field_name).map(lambda s: cls(s.value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrderLineId(ValueObject):
    """Strongly-typed order line identifier (1 to 50 characters)."""

    value: str

    def __post_init__(self) -> None:
        _require(_check_string50(self.value))

    @classmethod
    def create(
        cls, value: str, field_name: str = "order_line_id"
    ) -> Result[Self, ValidationError]:
        return String50.create(value, field_name).map(lambda s: cls(s.value))

    def __str__(self) -> str:
        return self.value


# ============================================================================
# Product Codes
# ============================================================================


@dataclass(frozen=True)
class WidgetCode(ValueObject):
    """Product code for widgets, sold by unit. Starts with "W"."""

    value: str

    PREFIX: ClassVar[str] = "W"

    def __post_init__(self) -> None:
        if not self.value.startswith(self.PREFIX):
            raise ValueError(f"Widget code must start with '{self.PREFIX}'")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GizmoCode(ValueObject):
    """Product code for gizmos, sold by weight. Starts with "G"."""

    value: str

    PREFIX: ClassVar[str] = "G"

    def __post_init__(self) -> None:
        if not self.value.startswith(self.PREFIX):
            raise ValueError(f"Gizmo code must start with '{self.PREFIX}'")

    def __str__(self) -> str:
        return self.value


ProductCode = WidgetCode | GizmoCode


def create_product_code(
    value: str, field_name: str = "product_code"
) -> Result[ProductCode, ValidationError]:
    """Parse a raw product code into its variant by prefix.

    Args:
        value: Raw product code.
        field_name: Field name reported on failure.

    Returns:
        Success with a WidgetCode or GizmoCode, or Failure.
    """
    if not isinstance(value, str) or not value:
        return Failure(ValidationError(field_name, "Product code must not be empty"))
    if value.startswith(WidgetCode.PREFIX):
        return Success(WidgetCode(value))
    if value.startswith(GizmoCode.PREFIX):
        return Success(GizmoCode(value))
    return Failure(ValidationError(field_name, f"Invalid product code format: {value!r}"))


# ============================================================================
# Quantities
# ============================================================================


def _check_unit_quantity(value: object) -> str | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return "Unit quantity must be a whole number"
    if value < UnitQuantity.MIN:
        return f"Quantity must be at least {UnitQuantity.MIN}"
    if value > UnitQuantity.MAX:
        return f"Quantity must be at most {UnitQuantity.MAX}"
    return None


@dataclass(frozen=True)
class UnitQuantity(ValueObject):
    """A count of units between 1 and 1000 inclusive."""

    value: int

    MIN: ClassVar[int] = 1
    MAX: ClassVar[int] = 1000

    def __post_init__(self) -> None:
        _require(_check_unit_quantity(self.value))

    @classmethod
    def create(cls, value: int, field_name: str = "quantity") -> Result[Self, ValidationError]:
        problem = _check_unit_quantity(value)
        if problem is not None:
            return Failure(ValidationError(field_name, problem))
        return Success(cls(value))


@dataclass(frozen=True)
class KilogramQuantity(ValueObject):
    """A weight in kilograms. No range is enforced."""

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueError("Kilogram quantity must be a number")

    @classmethod
    def create(cls, value: float, field_name: str = "quantity") -> Result[Self, ValidationError]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return Failure(ValidationError(field_name, "Kilogram quantity must be a number"))
        try:
            kilograms = float(value)
        except OverflowError:
            return Failure(ValidationError(field_name, "Kilogram quantity is out of range"))
        return Success(cls(kilograms))


OrderQuantity = UnitQuantity | KilogramQuantity


def to_float(quantity: OrderQuantity) -> float:
    """Get the numeric value of either quantity variant."""
    match quantity:
        case UnitQuantity(value=units):
            return float(units)
        case KilogramQuantity(value=kilograms):
            return kilograms


# ============================================================================
# Money
# ============================================================================


def _check_amount(value: object) -> str | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return "Amount must be a whole number of minor currency units"
    if value < 0:
        return f"Amount cannot be negative: {value}"
    return None


@dataclass(frozen=True)
class Price(ValueObject):
    """Price in the smallest currency unit (e.g., cents).

    Attributes:
        amount: Non-negative integer amount in minor units.
    """

    amount: int

    def __post_init__(self) -> None:
        _require(_check_amount(self.amount))

    @classmethod
    def create(cls, amount: int, field_name: str = "price") -> Result[Self, ValidationError]:
        problem = _check_amount(amount)
        if problem is not None:
            return Failure(ValidationError(field_name, problem))
        return Success(cls(amount))

    def multiply(self, quantity: int) -> Result["Price", ValidationError]:
        """Multiply by a quantity, re-applying the amount rule.

        Args:
            quantity: Integer multiplier.

        Returns:
            Success with the new Price, or Failure if the product is invalid.
        """
        return Price.create(self.amount * quantity)

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class BillingAmount(ValueObject):
    """Total amount to bill for an order, in minor units."""

    amount: int

    def __post_init__(self) -> None:
        _require(_check_amount(self.amount))

    @classmethod
    def create(
        cls, amount: int, field_name: str = "amount_to_bill"
    ) -> Result[Self, ValidationError]:
        problem = _check_amount(amount)
        if problem is not None:
            return Failure(ValidationError(field_name, problem))
        return Success(cls(amount))

    @classmethod
    def sum_prices(cls, prices: Iterable[Price]) -> Result[Self, ValidationError]:
        """Sum prices into a billing amount.

        Args:
            prices: Line prices.

        Returns:
            Success with the total, or Failure if the total is invalid.
        """
        return cls.create(sum(price.amount for price in prices))

    def is_billable(self) -> bool:
        """Check whether there is anything to bill."""
        return self.amount > 0

    def __str__(self) -> str:
        return str(self.amount)


# ============================================================================
# Customer and Address
# ============================================================================


@dataclass(frozen=True)
class PersonName(ValueObject):
    """Customer name."""

    first_name: String50
    last_name: String50

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class CustomerInfo(ValueObject):
    """Validated customer information for an order."""

    name: PersonName
    email_address: EmailAddress


@dataclass(frozen=True)
class Address(ValueObject):
    """Validated shipping or billing address.

    Attributes:
        address_line1: Primary address line.
        address_line2: Optional extra line.
        address_line3: Optional extra line.
        address_line4: Optional extra line.
        city: City name.
        zip_code: 5 or 9 character zip code.
    """

    address_line1: String50
    city: String50
    zip_code: ZipCode
    address_line2: String50 | None = None
    address_line3: String50 | None = None
    address_line4: String50 | None = None

    def lines(self) -> list[str]:
        """Get the populated address lines in order."""
        optional = [self.address_line2, self.address_line3, self.address_line4]
        return [str(self.address_line1)] + [str(line) for line in optional if line]

    def format_single_line(self) -> str:
        """Format address as single line.

        Returns:
            Formatted address string.
        """
        return ", ".join([*self.lines(), str(self.city), str(self.zip_code)])
