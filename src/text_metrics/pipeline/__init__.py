"""Metric composition: builder, step model and assembled metrics."""

from .builder import MetricBuilder, with_metric
from .metric import AssembledDistance, AssembledMetric
from .steps import Step, StepKind

__all__ = ["MetricBuilder", "with_metric", "AssembledMetric", "AssembledDistance", "Step", "StepKind"]
