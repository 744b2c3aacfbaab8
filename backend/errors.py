"""
Error taxonomy for the name generation service.

InvalidInput        - rejected request, nothing was sent upstream
UpstreamUnavailable - model or registry call failed; always recovered locally
GenerationFailed    - nothing usable could be produced for the request
"""


class NameServiceError(Exception):
    """Base class for all service errors"""


class InvalidInput(NameServiceError):
    pass


class UpstreamUnavailable(NameServiceError):
    pass


class GenerationFailed(NameServiceError):
    # Message is deliberately generic, upstream details only go to the logs
    def __init__(self, message: str = "Failed to generate names"):
        super().__init__(message)
