from uuid import UUID

import pytest

from payments_reporting.domain.exceptions import InvalidPaymentIdError
from payments_reporting.domain.value_objects.payment_id import PaymentId


class TestPaymentIdGenerate:
    def test_generate_creates_valid_payment_id(self) -> None:
        payment_id = PaymentId.generate()

        assert isinstance(payment_id, PaymentId)
        assert isinstance(payment_id.value, UUID)

    def test_generate_creates_unique_ids(self) -> None:
        assert PaymentId.generate() != PaymentId.generate()


class TestPaymentIdFromString:
    def test_from_string_parses_valid_uuid(self) -> None:
        uuid_str = "550e8400-e29b-41d4-a716-446655440000"

        payment_id = PaymentId.from_string(uuid_str)

        assert payment_id.value == UUID(uuid_str)

    def test_from_string_parses_uuid_without_hyphens(self) -> None:
        payment_id = PaymentId.from_string("550e8400e29b41d4a716446655440000")

        assert payment_id.value == UUID("550e8400-e29b-41d4-a716-446655440000")

    @pytest.mark.parametrize("bad", ["not-a-valid-uuid", "", "550e8400-e29b-41d4-a716"])
    def test_from_string_raises_for_invalid_input(self, bad: str) -> None:
        with pytest.raises(InvalidPaymentIdError, match="Invalid payment ID"):
            PaymentId.from_string(bad)


class TestPaymentIdEquality:
    def test_equal_by_value(self) -> None:
        uuid_str = "550e8400-e29b-41d4-a716-446655440000"

        assert PaymentId.from_string(uuid_str) == PaymentId.from_string(uuid_str)
        assert hash(PaymentId.from_string(uuid_str)) == hash(PaymentId.from_string(uuid_str))

    def test_payment_id_is_frozen(self) -> None:
        payment_id = PaymentId.generate()

        with pytest.raises(AttributeError):
            payment_id.value = UUID(int=0)  # type: ignore[misc]
