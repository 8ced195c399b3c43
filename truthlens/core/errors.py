class TruthLensError(Exception):
    """Base class for errors raised by the TruthLens services."""


class AnalysisNotFoundError(TruthLensError):
    def __init__(self, analysis_id: str):
        self.analysis_id = analysis_id
        super().__init__(f"Analysis result not found: {analysis_id}")


class ResultAlreadyStoredError(TruthLensError):
    def __init__(self, analysis_id: str):
        self.analysis_id = analysis_id
        super().__init__(f"Analysis result already stored: {analysis_id}")


class StoreUnavailableError(TruthLensError):
    """The result store backend could not be reached."""
