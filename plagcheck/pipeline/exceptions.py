class PipelineInputError(Exception):
    """Raised when the pipeline input is missing or ambiguous."""
