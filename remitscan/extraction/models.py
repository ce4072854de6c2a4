from dataclasses import dataclass, fields


@dataclass(frozen=True)
class StructuredRecord:
    """Beneficiary details extracted from one document.

    Every field is either None or a non-empty string once the field rules have run.
    """

    beneficiary_name: str | None = None
    account_number: str | None = None
    swift_code: str | None = None
    bank_name: str | None = None
    country: str | None = None
    province: str | None = None
    city: str | None = None
    address: str | None = None
    goods_description: str | None = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


REQUIRED_FIELDS: tuple[str, ...] = (
    "beneficiary_name",
    "account_number",
    "swift_code",
    "bank_name",
    "country",
)
