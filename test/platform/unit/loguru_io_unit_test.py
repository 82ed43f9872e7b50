import pytest

from drivent.platform.exception.exceptions import NotFoundError
from drivent.platform.logging.generator_wrapper import GeneratorWrapper
from drivent.platform.logging.loguru_io import Logger
from drivent.platform.logging.loguru_io_config import call_depth_var
from drivent.platform.logging.loguru_io_utils import (
    mask_sensitive,
    normalize_args_kwargs,
    truncate_content,
)
from drivent.service.ticketing.driving_adapter.http_controller.schema.payment_schema import (
    ProcessPaymentRequest,
)


@Logger.io
def add(a: int, b: int = 1) -> int:
    return a + b


@Logger.io
async def async_add(a: int, *, b: int) -> int:
    return a + b


@Logger.io
def countdown(start: int):
    while start:
        yield start
        start -= 1


@Logger.io
async def missing_room(room_id: int) -> None:
    raise NotFoundError(f'Room {room_id} not found')


@Logger.io(reraise=False)
def swallowed() -> int:
    raise ValueError('boom')


@pytest.mark.unit
class TestLoggerIO:
    def test_sync_function_returns_value(self):
        assert add(1, b=2) == 3
        assert call_depth_var.get() == 0

    @pytest.mark.asyncio
    async def test_async_function_returns_value(self):
        assert await async_add(1, b=4) == 5

    def test_generator_is_wrapped(self):
        gen = countdown(3)

        assert isinstance(gen, GeneratorWrapper)
        assert list(gen) == [3, 2, 1]

    @pytest.mark.asyncio
    async def test_custom_error_is_reraised_once_logged(self):
        with pytest.raises(NotFoundError) as exc_info:
            await missing_room(9)

        assert exc_info.value.status_code == 404
        assert getattr(exc_info.value, '_has_logged', False) is True

    def test_reraise_false_returns_none(self):
        assert swallowed() is None

    def test_wrapped_function_keeps_metadata(self):
        assert add.__name__ == 'add'
        assert async_add.__wrapped__.__name__ == 'async_add'  # type: ignore[attr-defined]


@pytest.mark.unit
class TestMasking:
    def test_masks_keyword_assignments_in_repr(self):
        masked = mask_sensitive("UserIn(email='ada@drivent.com', password='s3cret')")

        assert 's3cret' not in masked
        assert "password='********'" in masked
        assert 'ada@drivent.com' in masked

    def test_masks_dict_repr(self):
        masked = mask_sensitive({'card_number': '4111111111111111', 'cvv': '123'})

        assert '4111111111111111' not in masked
        assert '123' not in masked

    def test_keeps_address_house_number(self):
        masked = mask_sensitive("AddressRequest(cep='90830-563', number='120', city='Porto Alegre')")

        assert masked == "AddressRequest(cep='90830-563', number='120', city='Porto Alegre')"

    def test_card_number_stays_out_of_request_repr(self):
        request = ProcessPaymentRequest.model_validate(
            {
                'ticketId': 1,
                'cardData': {
                    'issuer': 'VISA',
                    'number': '4111111111111111',
                    'name': 'ADA LOVELACE',
                    'expirationDate': '12/29',
                    'cvv': '123',
                },
            }
        )

        masked = Logger.io().mask_sensitive({'request': request})

        assert '4111111111111111' not in str(masked)
        assert "issuer='VISA'" in str(masked)

    def test_leaves_plain_values_untouched(self):
        assert mask_sensitive(42) == 42
        assert mask_sensitive(None) is None
        assert mask_sensitive('hello') == 'hello'

    def test_masks_sensitive_kwargs(self):
        logger_io = Logger.io()

        masked = logger_io.mask_sensitive({'email': 'ada@drivent.com', 'password': 's3cret'})

        assert masked == {'email': 'ada@drivent.com', 'password': '********'}

    def test_truncates_long_content(self):
        result = truncate_content('x' * 1500)

        assert result.startswith('x' * 1000)
        assert result.endswith('(+500 chars)')


@pytest.mark.unit
class TestNormalizeArgsKwargs:
    def test_drops_unknown_kwargs(self):
        def target(a, *, b):
            return a, b

        args, kwargs = normalize_args_kwargs(target, 1, b=2, extra=3)

        assert args == (1,)
        assert kwargs == {'b': 2}
