# users_api/api/converters.py

from werkzeug.routing import IntegerConverter

BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


class BigIntConverter(IntegerConverter):
    """Inteiro com sinal na faixa de um BIGINT; fora da faixa a rota não casa (404)."""

    def __init__(self, map, *args, **kwargs) -> None:
        kwargs.setdefault("signed", True)
        kwargs.setdefault("min", BIGINT_MIN)
        kwargs.setdefault("max", BIGINT_MAX)
        super().__init__(map, *args, **kwargs)
