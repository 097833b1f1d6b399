from .loader import load_metrics, load_yaml, metric_from_config, metrics_from_config

__all__ = ["load_yaml", "load_metrics", "metric_from_config", "metrics_from_config"]
