"""
Recommender configuration — classifier hyperparameters and session policy.

RecommenderConfig defaults are defined here. The entry point may pass a dict
(e.g. from a JSON settings file named by RECOMMENDER_CONFIG_PATH); from_dict()
merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, model_validator


class RecommenderConfig(BaseModel):
    """Configuration for the classifier and the recommendation session."""

    # -------------------------------------------------------------------------
    # Classifier: gradient boosted trees (scikit-learn GradientBoostingClassifier)
    # -------------------------------------------------------------------------

    # Number of boosting stages. More stages fit the catalog more tightly.
    n_estimators: int = Field(default=100, ge=1)

    # Shrinkage applied to each tree's contribution.
    learning_rate: float = Field(default=0.1, gt=0.0)

    # Max depth of each regression tree.
    max_depth: int = Field(default=3, ge=1)

    # Seed for the estimator. Fixed so a catalog always trains the same model.
    random_state: int = 0

    # -------------------------------------------------------------------------
    # Session policy
    # -------------------------------------------------------------------------

    # Verdict token that accepts a recommendation (compared trimmed, case-insensitive).
    affirmative_token: str = "yes"

    # Consecutive duplicate predictions tolerated for one query before the session
    # gives up and asks for new preferences. None = keep re-predicting indefinitely.
    max_duplicate_predictions: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def affirmative_token_not_blank(self):
        if not self.affirmative_token.strip():
            raise ValueError("affirmative_token must not be blank")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RecommenderConfig":
        """
        Create config from dictionary (e.g., loaded from JSON).

        Raises:
            TypeError: If config_dict or its "classifier"/"session" section is not a dict
            ValidationError: If a value is out of range
        """
        if not isinstance(config_dict, dict):
            raise TypeError(f"Recommender settings must be an object, got {type(config_dict).__name__}")
        for section in ("classifier", "session"):
            if section in config_dict and not isinstance(config_dict[section], dict):
                raise TypeError(
                    f"Section {section!r} must be an object, got {type(config_dict[section]).__name__}"
                )
        allowed = set(cls.model_fields)
        flat = {k: v for k, v in config_dict.items() if k in allowed}
        if "classifier" in config_dict:
            flat.update(config_dict["classifier"])
        if "session" in config_dict:
            session = config_dict["session"]
            if "affirmative_token" in session:
                flat["affirmative_token"] = session["affirmative_token"]
            if "max_duplicate_predictions" in session:
                flat["max_duplicate_predictions"] = session["max_duplicate_predictions"]
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RecommenderConfig()


def resolve_config(config: Optional["RecommenderConfig"]) -> "RecommenderConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
