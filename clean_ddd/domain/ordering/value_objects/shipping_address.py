"""ShippingAddress value object - куди доставляти order."""

from dataclasses import dataclass

from clean_ddd.domain.shared import ValueObject, validate_value_object


@dataclass(frozen=True)
class ShippingAddress(ValueObject):
    """Destination of an order.

    Всі поля обов'язкові; country - ISO 3166 alpha-2 код (upper-case).
    """

    recipient: str
    street: str
    city: str
    postal_code: str
    country: str

    def __post_init__(self) -> None:
        for name in ("recipient", "street", "city", "postal_code", "country"):
            value = getattr(self, name)
            validate_value_object(
                isinstance(value, str) and bool(value.strip()),
                f"Shipping address {name} cannot be empty",
                field=name,
            )
            object.__setattr__(self, name, value.strip())

        validate_value_object(
            len(self.country) == 2 and self.country.isalpha(),
            "Country must be a 2-letter code",
            country=self.country,
        )
        object.__setattr__(self, "country", self.country.upper())
