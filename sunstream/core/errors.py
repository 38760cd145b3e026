class SunstreamError(Exception):
    """Base exception for sunstream."""
    pass


class EngineContractError(SunstreamError):
    """Raised when the engine is driven in a way its contract forbids.

    None of these can be triggered by external input; they indicate a
    programming error in the caller or in the engine itself.
    """
    pass
