class InvalidParameter(ValueError):
    """
    Raised when a simulation parameter is malformed or out of its domain.
    """

    def __init__(self, name: str, value, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid parameter {name}={value!r}: {reason}")


class NumericOverflow(ArithmeticError):
    """
    Raised when a simulated price is not finite.

    ``step`` and ``path`` locate the first offending cell of the grid. When the
    drift or diffusion term itself is not finite, ``term`` names it and
    ``path`` is None: every path of ``step`` would be affected.
    """

    def __init__(self, step: int, path: int | None, value: float, term: str | None = None):
        self.step = step
        self.path = path
        self.value = value
        self.term = term
        if term is None:
            where = f"price {value!r} at step {step}, path {path}"
        else:
            where = f"{term} term {value!r} for step {step}"
        super().__init__(
            f"Non-finite {where}; reduce horizon, volatility or risk-free rate"
        )
