"""Default parameters for clustering runs and sample generation."""

DEFAULT_CLUSTER_COUNT = 3
DEFAULT_MAX_ITERATIONS = 100
DEFAULT_SEED = 0

DEFAULT_SAMPLE_SIZE = 50
DEFAULT_SPACE_SIZE = 5.0
DEFAULT_BOX_MIN_SIZE = 0.1
DEFAULT_BOX_MAX_SIZE = 1.0

SAMPLE_KINDS = ["vector2", "vector3", "bounds"]
