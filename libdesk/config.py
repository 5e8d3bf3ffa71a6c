"""Policy defaults shared by the facade and the demo."""

# loan length used when checkout is called without an explicit due date
DEFAULT_LOAN_DAYS = 14
