"""Exceptions raised by the finance engine."""


class FinanceCalcError(Exception):
    """Base class for engine failures."""


class NonAmortizingPaymentError(FinanceCalcError, ValueError):
    """The payment schedule can never bring the balance to zero."""

    def __init__(self, message: str, months_computed: int = 0):
        super().__init__(message)
        self.months_computed = months_computed


class AmortizationError(FinanceCalcError, RuntimeError):
    """Table generation produced no usable rows."""
