from .dataset import (
    DATASET_TYPES,
    FEATURES,
    Point,
    feature_vector,
    generate_data,
    resolve_dataset_type,
    split_data,
    validate_features,
)
from .training_record import TrainingRecord

__all__ = [
    "DATASET_TYPES",
    "FEATURES",
    "Point",
    "feature_vector",
    "generate_data",
    "resolve_dataset_type",
    "split_data",
    "validate_features",
    "TrainingRecord",
]
