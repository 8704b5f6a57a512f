"""
Error taxonomy for the recommender.

Fatal errors (LoadError, EndOfInputError, ClassifierError, ConfigError) propagate
to the entry point. InputValidationError is recoverable and handled by the
preference reader, which re-prompts.
"""


class RecommenderError(Exception):
    """Base class for all recommender errors."""


class LoadError(RecommenderError):
    """Catalog could not be read or a record could not be parsed."""


class InputValidationError(RecommenderError):
    """User input is malformed (bad OS name or non-numeric charging time)."""


class EndOfInputError(RecommenderError):
    """Input stream closed while a prompt was waiting for a line."""


class ClassifierError(RecommenderError):
    """Classifier could not be trained or could not score a query."""


class ConfigError(RecommenderError):
    """Invalid environment value or recommender settings file."""
