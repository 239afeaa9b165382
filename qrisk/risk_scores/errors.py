class QRiskError(Exception):
    """Base class for all errors raised by the QRISK2 engine."""


class UnsupportedModel(QRiskError, ValueError):
    """No coefficient table is registered for the requested (version, gender)."""


class InvalidFollowUpYear(QRiskError, ValueError):
    """The follow-up year is outside the survival table's valid index range."""


class DomainError(QRiskError, ValueError):
    """An input lies outside the domain of the model formulas."""


class UnsupportedRiskFactor(DomainError):
    """A risk factor is set that the selected model version does not include."""
