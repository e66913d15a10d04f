"""Domain models - comparison subjects and sample pairs."""

from .subject import ComparisonSubject
from .samples import SAMPLES, Sample, build_sample, get_sample, sample_names

__all__ = ["ComparisonSubject", "SAMPLES", "Sample", "build_sample", "get_sample", "sample_names"]
