"""
Exception hierarchy for the LogicBoxes SDK.

All custom exceptions inherit from LogicBoxesError base class.
"""

from typing import Optional


class LogicBoxesError(Exception):
    """Base exception for all LogicBoxes SDK errors."""
    pass


# Codec Errors
class CodecError(LogicBoxesError):
    """Base exception for request/response codec errors."""
    pass


class ValidationError(CodecError):
    """
    Raised when a criteria or form record violates one of its field rules.

    Only the first violation is reported.

    Attributes:
        field: Attribute name of the offending field
        rule: Name of the rule that failed (e.g. "required", "email")
        param: Rule parameter, if the rule takes one (e.g. "2" for len=2)
    """

    def __init__(self, field: str, rule: str, param: Optional[str] = None, record: str = ""):
        self.field = field
        self.rule = rule
        self.param = param
        self.record = record
        qualified = f"{record}.{field}" if record else field
        tag = f"{rule}={param}" if param else rule
        super().__init__(
            f"Field validation for '{qualified}' failed on the '{tag}' rule"
        )


class ValidationRuleError(CodecError):
    """Raised when a rule is unknown, malformed, or registered twice."""
    pass


class FormatError(CodecError, ValueError):
    """
    Raised when wire text cannot be parsed as the declared scalar kind.

    Also a ValueError so pydantic reports it against the field being decoded.
    """
    pass


# SDK Errors
class SDKError(LogicBoxesError):
    """Base exception for SDK-related errors."""
    pass


class UnsupportedMethodError(SDKError):
    """Raised when an API call uses an HTTP method other than GET or POST."""
    pass


class RemoteOperationError(SDKError):
    """
    Raised when the API responds with a non-success status.

    The message is the lower-cased text of the service's own status envelope.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ConnectionError(SDKError):
    """Raised when the SDK cannot reach the reseller API."""
    pass


class SDKConfigurationError(SDKError):
    """Raised when SDK configuration is invalid."""
    pass


# Configuration Errors
class ConfigurationError(LogicBoxesError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass
